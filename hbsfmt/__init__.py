"""Format Handlebars/Glimmer templates.

Feed a syntax tree (see [ast], or [ast.load] for Glimmer's JSON) to a
[printer.Printer] to get a document, and lay that out with [layout] to get
text. [printer.format_tree] does both.
"""
from . import ast
from . import doc
from . import layout
from . import printer

from .errors import FieldNotFound, FormatError, UnsupportedNodeKind
from .options import Options
from .printer import Printer, format_tree

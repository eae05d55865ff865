import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class Options:
    """The formatting configuration the printer and layout engine read.

    Only `single_quote` matters to the printer itself; the rest is for the
    layout engine.
    """

    single_quote: bool = False
    print_width: int = 80
    tab_width: int = 2
    use_tabs: bool = False

    def indent_unit(self) -> str:
        if self.use_tabs:
            return "\t"
        return " " * self.tab_width

    @classmethod
    def from_dict(cls, values: typing.Mapping[str, typing.Any]) -> "Options":
        """Options from a prettier-style mapping.

        Keys may be camelCase (`printWidth`) or snake_case (`print_width`).
        Missing or None values take the defaults.
        """
        fields = {f.name: f for f in dataclasses.fields(cls)}
        aliases = {_camel(name): name for name in fields}

        kwargs: dict[str, typing.Any] = {}
        for key, value in values.items():
            name = aliases.get(key, key)
            field = fields.get(name)
            if field is None:
                raise ValueError(f"Unknown option '{key}'")
            if value is None:
                continue

            expected = type(field.default)
            # bool is an int, but an int width of True is nonsense.
            if type(value) is not expected:
                raise ValueError(
                    f"Option '{key}' should be {expected.__name__}, got {type(value).__name__}"
                )
            if expected is int and value < 0:
                raise ValueError(f"Option '{key}' must not be negative, got {value}")
            kwargs[name] = value

        return cls(**kwargs)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)

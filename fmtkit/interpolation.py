"""
Composition of literals and formatted fields into a single string.

Each field record pairs a value with the formatter to apply. format_field()
dispatches over the records explicitly, so the formatter is chosen by the field
type rather than by the shape of the call site.

Examples:
    >>> interpolate("Reg ", IntegerField(10, IntegerFormatConfig.byte("hex", uses_prefix=True)),
    ...             " = ", TextField("on", PaddingConfig.left(4)), "|")
    'Reg 0x0A = on  |'

    >>> line = Interpolation()
    >>> _ = line.append_literal("There's ").append(OptionalField(23)).append_literal(" and ")
    >>> str(line.append(OptionalField(None)))
    "There's 23 and nil"
"""

# Standard library -----------------------------------------------------------------------------------------------------
import datetime
import numbers
from dataclasses import dataclass
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .conditional import format_if
from .delegates import format_date, format_number
from .integers import IntegerFormatConfig, format_int
from .optionals import OptionalFormatConfig, describe, format_optional, format_or_default
from .padding import PaddingConfig, format_text
from .sentinels import UNSET, UnsetType
from .tools import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class IntegerField:
    """Integer rendered by format_int()."""
    value: int
    config: IntegerFormatConfig = IntegerFormatConfig()


@dataclass(frozen=True)
class TextField:
    """Any value rendered as padded text by format_text()."""
    value: Any
    config: PaddingConfig = PaddingConfig()
    width: int | UnsetType = UNSET


@dataclass(frozen=True)
class OptionalField:
    """Optional value rendered by format_optional()."""
    value: Any
    config: OptionalFormatConfig = OptionalFormatConfig()


@dataclass(frozen=True)
class DefaultField:
    """Optional value rendered as is, or the default text when absent."""
    value: Any
    default: str


@dataclass(frozen=True)
class ConditionalField:
    """Literal included only when the predicate holds."""
    predicate: bool | Callable[[], bool]
    literal: str


@dataclass(frozen=True)
class NumberField:
    """Number rendered by a delegate formatter."""
    value: numbers.Number
    formatter: str | Callable[[Any], str | None]


@dataclass(frozen=True)
class DateField:
    """Date rendered by a delegate formatter."""
    value: datetime.date
    formatter: str | Callable[[Any], str | None]


Field = IntegerField | TextField | OptionalField | DefaultField | ConditionalField | NumberField | DateField


class Interpolation:
    """
    Incremental builder of an interpolated string.

    Literals are appended verbatim, fields through format_field() and any other
    value through describe(). Methods return the builder for chaining.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append_literal(self, literal: str) -> "Interpolation":
        if not isinstance(literal, str):
            raise TypeError(f"literal must be str, but got {fmt_type(literal)}")
        self._parts.append(literal)
        return self

    def append(self, part: Any) -> "Interpolation":
        self._parts.append(_render_part(part))
        return self

    def render(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Interpolation({self.render()!r})"


# Methods --------------------------------------------------------------------------------------------------------------

def format_field(field: Field) -> str:
    """
    Render a single field record with its matching formatter.

    Raises:
        TypeError: If field is not one of the field record types.
    """
    if isinstance(field, IntegerField):
        return format_int(field.value, field.config)
    if isinstance(field, TextField):
        return format_text(field.value, field.config, width=field.width)
    if isinstance(field, OptionalField):
        return format_optional(field.value, field.config)
    if isinstance(field, DefaultField):
        return format_or_default(field.value, field.default)
    if isinstance(field, ConditionalField):
        return format_if(field.predicate, field.literal)
    if isinstance(field, NumberField):
        return format_number(field.value, field.formatter)
    if isinstance(field, DateField):
        return format_date(field.value, field.formatter)
    raise TypeError(f"field record expected, but got {fmt_type(field)}")


def interpolate(*parts: Any) -> str:
    """
    Concatenate literals, rendered fields and described values into one string.

    Examples:
        >>> interpolate("Cheese Sandwich", ConditionalField(True, " (*)"))
        'Cheese Sandwich (*)'
        >>> interpolate("x=", 42)
        'x=42'
    """
    return "".join(_render_part(p) for p in parts)


# Private Methods ------------------------------------------------------------------------------------------------------

_FIELD_TYPES = (IntegerField, TextField, OptionalField, DefaultField, ConditionalField, NumberField, DateField)


def _render_part(part: Any) -> str:
    if isinstance(part, str):
        return part
    if isinstance(part, _FIELD_TYPES):
        return format_field(part)
    return describe(part)

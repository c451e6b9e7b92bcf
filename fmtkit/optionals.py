"""
Presentation of optional values and the Describable capability.

An optional value is either present (any object) or absent (None). Three
styles decide whether the word 'Optional' wraps the output:

    style            present          absent
    ---------------  ---------------  ----------------
    descriptive      Optional(23)     Optional(nil)
    stripped         23               nil
    system_default   Optional(23)     nil

The system_default row mirrors common platform behaviour, where only present
values are wrapped. The asymmetry is kept as is.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any, Protocol, Self, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNSET, UnsetType
from .tools import fmt_type, fmt_value
from .utils import safe_str


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class Describable(Protocol):
    """Protocol for types providing their own display text."""

    def describe(self) -> str: ...


@unique
class OptionalStyle(StrEnum):
    """
    Optional presentation styles.

    Attributes:
        DESCRIPTIVE: Includes the word 'Optional' for both present and absent values
        STRIPPED: Omits the word 'Optional' for both present and absent values
        SYSTEM_DEFAULT: Includes 'Optional' for present values but not for absent ones
    """
    DESCRIPTIVE = "descriptive"
    STRIPPED = "stripped"
    SYSTEM_DEFAULT = "system_default"


@dataclass(frozen=True)
class OptionalFormatConfig:
    """
    Style and fallback text for format_optional().

    Attributes:
        style: OptionalStyle or its value ('descriptive', 'stripped', 'system_default').
        fallback: Text shown for an absent value.

    Raises:
        TypeError: If fallback is not str.
        ValueError: If style is unknown.
    """
    style: OptionalStyle = OptionalStyle.STRIPPED
    fallback: str = "nil"

    def __post_init__(self):
        """Validate and coerce fields"""
        try:
            object.__setattr__(self, 'style', OptionalStyle(self.style))
        except ValueError:
            raise ValueError(f"style expected one of 'descriptive', 'stripped', 'system_default' "
                             f"but found {fmt_value(self.style)}") from None
        if not isinstance(self.fallback, str):
            raise TypeError(f"fallback must be str, but got {fmt_type(self.fallback)}")

    @classmethod
    def descriptive(cls, fallback: str = "nil") -> Self:
        return cls(style=OptionalStyle.DESCRIPTIVE, fallback=fallback)

    @classmethod
    def stripped(cls, fallback: str = "nil") -> Self:
        return cls(style=OptionalStyle.STRIPPED, fallback=fallback)

    @classmethod
    def system_default(cls, fallback: str = "nil") -> Self:
        return cls(style=OptionalStyle.SYSTEM_DEFAULT, fallback=fallback)

    def merge(self,
              style: OptionalStyle | str | UnsetType = UNSET,
              fallback: str | UnsetType = UNSET,
              ) -> "OptionalFormatConfig":
        """
        Create a new OptionalFormatConfig with merged options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        style = self.style if style is UNSET else style
        fallback = self.fallback if fallback is UNSET else fallback
        return OptionalFormatConfig(style=style, fallback=fallback)


# Methods --------------------------------------------------------------------------------------------------------------

def describe(value: Any) -> str:
    """
    Return the plain display text of a value.

    Describable instances render themselves, strings are returned unchanged and
    everything else goes through str(). Classes are never asked to describe
    themselves. Never raises on a broken __str__ or describe().

    Examples:
        >>> describe(23)
        '23'
        >>> describe("abc")
        'abc'
    """
    if isinstance(value, str):
        return value
    text = _self_description(value)
    if text is not None:
        return text
    return safe_str(value)


def debug_describe(value: Any) -> str:
    """
    Return the debug display text of a value.

    Describable instances render themselves, everything else goes through repr().
    Never raises on a broken __repr__ or describe().

    Examples:
        >>> debug_describe(23)
        '23'
        >>> debug_describe("abc")
        "'abc'"
    """
    text = _self_description(value)
    if text is not None:
        return text
    return safe_str(value, use_repr=True)


def format_optional(value: Any, config: OptionalFormatConfig = OptionalFormatConfig()) -> str:
    """
    Format an optional value, where None means absent.

    Args:
        value: Any value, or None.
        config: Presentation style and fallback text.

    Returns:
        Formatted string; see the module docstring table for each style.

    Examples:
        >>> format_optional(23)
        '23'
        >>> format_optional(None)
        'nil'
        >>> format_optional(None, OptionalFormatConfig.descriptive())
        'Optional(nil)'
        >>> format_optional(23, OptionalFormatConfig.system_default(fallback="-"))
        'Optional(23)'
    """
    if not isinstance(config, OptionalFormatConfig):
        raise TypeError(f"config must be OptionalFormatConfig, but got {fmt_type(config)}")

    style = config.style
    if style is OptionalStyle.DESCRIPTIVE:
        if value is None:
            return f"Optional({config.fallback})"
        return _describe_present(value)

    if style is OptionalStyle.STRIPPED:
        if value is None:
            return config.fallback
        return describe(value)

    # OptionalStyle.SYSTEM_DEFAULT
    if value is None:
        return config.fallback
    return _describe_present(value)


def format_or_default(value: Any, default: str) -> str:
    """
    Return describe(value), or default when value is None.

    Examples:
        >>> format_or_default(None, default="n/a")
        'n/a'
        >>> format_or_default(3.5, default="n/a")
        '3.5'
    """
    if not isinstance(default, str):
        raise TypeError(f"default must be str, but got {fmt_type(default)}")
    return default if value is None else describe(value)


# Private Methods ------------------------------------------------------------------------------------------------------

def _describe_present(value: Any) -> str:
    """Generic rendering of a present optional, e.g. Optional(23) or Optional('a')."""
    return f"Optional({debug_describe(value)})"


def _self_description(value: Any) -> str | None:
    """Text from value.describe(), or None if value is a class, not Describable, or describe() fails."""
    if isinstance(value, type) or not isinstance(value, Describable):
        return None
    try:
        text = value.describe()
    except Exception:
        return None
    return text if isinstance(text, str) else None

"""
Radix encoding of integers for display.

Converts arbitrary-precision integers into unprefixed, uppercase digit strings
in one of the four standard bases: binary, octal, decimal and hex.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from enum import IntEnum, unique
from typing import Any, Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Radix(IntEnum):
    """
    Numeric base used to render an integer's digits.

    Members are int subclasses, so Radix.HEX == 16.

    Attributes:
        BINARY: base 2, prefix "0b", 8 digits per byte
        OCTAL: base 8, prefix "0o", 4 digits per byte
        DECIMAL: base 10, no prefix, no standard byte width
        HEX: base 16, prefix "0x", 2 digits per byte
    """
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16

    @property
    def prefix(self) -> str:
        """Lowercase literal prefix of the radix, empty for decimal."""
        return _PREFIXES[self]

    @property
    def byte_width(self) -> int | None:
        """Number of digits needed to show one full byte, None for decimal."""
        return _BYTE_WIDTHS[self]

    @classmethod
    def parse(cls, radix: Any) -> Self:
        """
        Coerce a Radix, an int base or a member name into a Radix.

        Examples:
            >>> Radix.parse(16)
            <Radix.HEX: 16>
            >>> Radix.parse("binary")
            <Radix.BINARY: 2>

        Raises:
            TypeError: If radix is neither int nor str.
            ValueError: If radix is not one of 2, 8, 10, 16 or a known name.
        """
        if isinstance(radix, cls):
            return radix
        if isinstance(radix, bool) or not isinstance(radix, (int, str)):
            raise TypeError(f"radix must be Radix | int | str, but got {fmt_type(radix)}")
        if isinstance(radix, str):
            try:
                return cls[radix.strip().upper()]
            except KeyError:
                raise ValueError(f"radix name expected one of 'binary', 'octal', 'decimal', 'hex', "
                                 f"but found {fmt_value(radix)}") from None
        try:
            return cls(radix)
        except ValueError:
            raise ValueError(f"radix expected one of 2, 8, 10, 16, but found {fmt_value(radix)}") from None


_PREFIXES = frozendict({
    Radix.BINARY: "0b",
    Radix.OCTAL: "0o",
    Radix.DECIMAL: "",
    Radix.HEX: "0x",
})

_BYTE_WIDTHS = frozendict({
    Radix.BINARY: 8,
    Radix.OCTAL: 4,
    Radix.DECIMAL: None,
    Radix.HEX: 2,
})

# Format spec per radix; 'X' keeps hex digits uppercase
_SPECS = frozendict({
    Radix.BINARY: "b",
    Radix.OCTAL: "o",
    Radix.DECIMAL: "d",
    Radix.HEX: "X",
})


# Methods --------------------------------------------------------------------------------------------------------------

def encode(value: int, radix: Radix | int | str = Radix.DECIMAL) -> str:
    """
    Encode an integer as an unprefixed, uppercase digit string in the given radix.

    Args:
        value: Any integer, including arbitrary-precision and negative values.
            Objects implementing __index__ (e.g. NumPy integers) are accepted.
        radix: A Radix, an int base (2, 8, 10, 16) or a radix name.

    Returns:
        Digit string; negative values carry a leading '-'.

    Raises:
        TypeError: If value is not an integer, or is a bool.
        ValueError: If radix is unsupported.

    Examples:
        >>> encode(255, Radix.HEX)
        'FF'
        >>> encode(-5, Radix.BINARY)
        '-101'
        >>> encode(2**70, 8)
        '200000000000000000000000'
    """
    n = as_integer(value)
    radix = Radix.parse(radix)
    digits = format(abs(n), _SPECS[radix])
    return "-" + digits if n < 0 else digits


def as_integer(value: Any) -> int:
    """
    Return value as a plain Python int.

    Accepts int and any type implementing __index__. Rejects bool, although
    bool is a subclass of int, since it is almost always a caller bug here.

    Raises:
        TypeError: If value is a bool or has no integer conversion.
    """
    if isinstance(value, bool):
        raise TypeError(f"integer value expected, but got {fmt_type(value)}")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"integer value expected, but got {fmt_type(value)}") from None

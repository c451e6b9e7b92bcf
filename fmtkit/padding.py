"""
Width padding and alignment of text for tables, logs and terminal output.

Provides the low-level pad() and the config-driven format_text() which pads the
textual rendering of any value.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .optionals import describe
from .sentinels import UNSET, UnsetType, ifnotunset
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Alignment(StrEnum):
    """
    Side of the text that floats against the edge when padding to a width.

    Attributes:
        START: text first, fill appended ("abc  "), aliased as "left"
        END: fill prepended, text last ("  abc"), aliased as "right"
        CENTER: fill on both sides, the extra fill character goes right (" abc  ")
    """
    START = "start"
    END = "end"
    CENTER = "center"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            value = {"left": "start", "right": "end", "centre": "center"}.get(value, value)
            for member in cls:
                if member.value == value:
                    return member
        return None


@dataclass(frozen=True)
class PaddingConfig:
    """
    Padding controls for format_text().

    Attributes:
        alignment: Alignment or its name ('start', 'end', 'center', 'left', 'right').
        fill: Single fill character.
        width: Minimum width of the result, 0 means no minimum.

    Examples:
        >>> format_text(23, PaddingConfig(width=5))
        '   23'
        >>> format_text(23, PaddingConfig.left(5, fill="."))
        '23...'

    Raises:
        TypeError: If fill is not str or width is not int.
        ValueError: If alignment is unknown, fill is not exactly one character or width is negative.
    """
    alignment: Alignment = Alignment.END
    fill: str = " "
    width: int = 0

    def __post_init__(self):
        """Validate and coerce fields"""
        try:
            object.__setattr__(self, 'alignment', Alignment(self.alignment))
        except ValueError:
            raise ValueError(f"alignment expected one of 'start', 'end', 'center' "
                             f"but found {fmt_value(self.alignment)}") from None
        _validate_fill(self.fill)
        _validate_width(self.width)

    @classmethod
    def left(cls, width: int = 0, fill: str = " ") -> Self:
        """Left-aligned text, padded on the right."""
        return cls(alignment=Alignment.START, fill=fill, width=width)

    @classmethod
    def right(cls, width: int = 0, fill: str = " ") -> Self:
        """Right-aligned text, padded on the left."""
        return cls(alignment=Alignment.END, fill=fill, width=width)

    @classmethod
    def center(cls, width: int = 0, fill: str = " ") -> Self:
        """Centered text, the odd fill character goes right."""
        return cls(alignment=Alignment.CENTER, fill=fill, width=width)

    def merge(self,
              alignment: Alignment | str | UnsetType = UNSET,
              fill: str | UnsetType = UNSET,
              width: int | UnsetType = UNSET,
              ) -> "PaddingConfig":
        """
        Create a new PaddingConfig with merged options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        alignment = self.alignment if alignment is UNSET else alignment
        fill = self.fill if fill is UNSET else fill
        width = self.width if width is UNSET else width
        return PaddingConfig(alignment=alignment, fill=fill, width=width)


# Methods --------------------------------------------------------------------------------------------------------------

def pad(text: str, width: int, alignment: Alignment | str = Alignment.END, fill: str = " ") -> str:
    """
    Pad text with fill characters up to a minimum width.

    Text already at least width characters long is returned unchanged, it is
    never truncated. Center alignment splits the deficit as floor on the left
    and ceiling on the right.

    Args:
        text: The text to pad.
        width: Minimum length of the result; 0 is a no-op.
        alignment: Which side of the text receives padding.
        fill: Single fill character.

    Returns:
        Padded string of length max(width, len(text)).

    Examples:
        >>> pad("abc", 5)
        '  abc'
        >>> pad("abc", 5, "start", ".")
        'abc..'
        >>> pad("abc", 6, Alignment.CENTER)
        ' abc  '
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but got {fmt_type(text)}")
    _validate_fill(fill)
    _validate_width(width)
    alignment = Alignment(alignment)

    deficit = width - len(text)
    if deficit <= 0:
        return text

    if alignment is Alignment.END:
        # "abc" to width 5 -> "  abc"
        return fill * deficit + text
    if alignment is Alignment.START:
        # "abc" to width 5 -> "abc  "
        return text + fill * deficit

    # "abc" to width 6 -> " abc  "
    left = deficit // 2
    return fill * left + text + fill * (deficit - left)


def format_text(value: Any, config: PaddingConfig | None = None, *, width: int | UnsetType = UNSET) -> str:
    """
    Pad the textual rendering of any value according to a PaddingConfig.

    Strings are used as is, other values are rendered with describe().
    A config of None means PaddingConfig(), i.e. no padding.
    A non-zero width overrides config.width for this call only; the config
    itself is left untouched.

    Examples:
        >>> format_text(23, PaddingConfig(width=5))
        '   23'
        >>> format_text("ab", PaddingConfig.center(3), width=6)
        '  ab  '
    """
    config = PaddingConfig() if config is None else config
    if not isinstance(config, PaddingConfig):
        raise TypeError(f"config must be PaddingConfig, but got {fmt_type(config)}")

    width = ifnotunset(width, default=0)
    _validate_width(width)
    width = width or config.width
    return pad(describe(value), width, config.alignment, config.fill)


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_fill(fill: Any):
    if not isinstance(fill, str):
        raise TypeError(f"fill must be str, but got {fmt_type(fill)}")
    if len(fill) != 1:
        raise ValueError(f"fill must be exactly one character, but got {fmt_value(fill)}")


def _validate_width(width: Any):
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f"width must be int, but got {fmt_type(width)}")
    if width < 0:
        raise ValueError(f"width must be int >= 0, but got {fmt_value(width)}")

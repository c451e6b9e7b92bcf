"""
Integer formatting with radix, zero-padding and radix prefix.

Examples:
    >>> format_int(15, IntegerFormatConfig.hex())
    'F'
    >>> format_int(15, IntegerFormatConfig.byte(Radix.HEX))
    '0F'
    >>> format_int(15, IntegerFormatConfig.byte(Radix.HEX, uses_prefix=True))
    '0x0F'
    >>> format_int(42, IntegerFormatConfig.byte(Radix.BINARY))
    '00101010'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import inspect
import warnings
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .padding import Alignment, pad
from .radix import Radix, encode
from .sentinels import UNSET, UnsetType
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class IntegerFormatConfig:
    """
    Radix, prefix and width controls for format_int().

    Attributes:
        radix: Radix, int base (2, 8, 10, 16) or radix name.
        uses_prefix: Prepend the lowercase radix prefix ('0b', '0o', '0x'; none for decimal).
        is_bytewise: Zero-pad to one full byte of digits (8 binary, 4 octal, 2 hex).
            Decimal has no byte width, so the explicit width applies instead.
        width: Minimum digit count, left padded with zeros. Ignored when a byte width applies.

    Warns:
        UserWarning: If is_bytewise is combined with the decimal radix, or with a
            non-zero width that the byte width overrides.

    Raises:
        TypeError: If flags are not bool or width is not int.
        ValueError: If radix is unsupported or width is negative.
    """
    radix: Radix = Radix.DECIMAL
    uses_prefix: bool = False
    is_bytewise: bool = False
    width: int = 0

    def __post_init__(self):
        """Validate and coerce fields"""
        object.__setattr__(self, 'radix', Radix.parse(self.radix))

        if not isinstance(self.uses_prefix, bool):
            raise TypeError(f"uses_prefix must be bool, but got {fmt_type(self.uses_prefix)}")
        if not isinstance(self.is_bytewise, bool):
            raise TypeError(f"is_bytewise must be bool, but got {fmt_type(self.is_bytewise)}")
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise TypeError(f"width must be int, but got {fmt_type(self.width)}")
        if self.width < 0:
            raise ValueError(f"width must be int >= 0, but got {fmt_value(self.width)}")

        if self.is_bytewise:
            if self.radix.byte_width is None:
                warnings.warn(
                    f"is_bytewise has no effect for {self.radix.name.lower()} radix, width={self.width} is used",
                    UserWarning,
                    stacklevel=_caller_stacklevel()
                )
            elif self.width:
                warnings.warn(
                    f"width={self.width} is ignored, is_bytewise pads {self.radix.name.lower()} "
                    f"to {self.radix.byte_width} digits",
                    UserWarning,
                    stacklevel=_caller_stacklevel()
                )

    @property
    def effective_width(self) -> int:
        """Minimum digit count actually applied: the byte width when bytewise, else width."""
        if self.is_bytewise and self.radix.byte_width is not None:
            return self.radix.byte_width
        return self.width

    @classmethod
    def binary(cls, *, uses_prefix: bool = False, is_bytewise: bool = False, width: int = 0) -> Self:
        return cls(radix=Radix.BINARY, uses_prefix=uses_prefix, is_bytewise=is_bytewise, width=width)

    @classmethod
    def octal(cls, *, uses_prefix: bool = False, is_bytewise: bool = False, width: int = 0) -> Self:
        return cls(radix=Radix.OCTAL, uses_prefix=uses_prefix, is_bytewise=is_bytewise, width=width)

    @classmethod
    def decimal(cls, *, width: int = 0) -> Self:
        return cls(radix=Radix.DECIMAL, width=width)

    @classmethod
    def hex(cls, *, uses_prefix: bool = False, is_bytewise: bool = False, width: int = 0) -> Self:
        return cls(radix=Radix.HEX, uses_prefix=uses_prefix, is_bytewise=is_bytewise, width=width)

    @classmethod
    def byte(cls, radix: Radix | int | str, *, uses_prefix: bool = False) -> Self:
        """
        One full byte of digits in the given radix.

        Examples:
            >>> format_int(5, IntegerFormatConfig.byte("octal", uses_prefix=True))
            '0o0005'
        """
        return cls(radix=radix, uses_prefix=uses_prefix, is_bytewise=True)

    def merge(self,
              radix: Radix | int | str | UnsetType = UNSET,
              uses_prefix: bool | UnsetType = UNSET,
              is_bytewise: bool | UnsetType = UNSET,
              width: int | UnsetType = UNSET,
              ) -> "IntegerFormatConfig":
        """
        Create a new IntegerFormatConfig with merged options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        radix = self.radix if radix is UNSET else radix
        uses_prefix = self.uses_prefix if uses_prefix is UNSET else uses_prefix
        is_bytewise = self.is_bytewise if is_bytewise is UNSET else is_bytewise
        width = self.width if width is UNSET else width
        return IntegerFormatConfig(radix=radix, uses_prefix=uses_prefix, is_bytewise=is_bytewise, width=width)


# Methods --------------------------------------------------------------------------------------------------------------

def format_int(value: int, config: IntegerFormatConfig = IntegerFormatConfig()) -> str:
    """
    Format an integer using radix, zero-padding and optional prefix.

    Steps: encode digits in config.radix (uppercase), left pad with '0' to
    config.effective_width, then prepend the radix prefix if requested. The
    prefix is added after padding so zeros never separate it from the digits.

    Padding applies to the whole encoded text, so zeros go before the sign
    of a negative value: format_int(-15, IntegerFormatConfig.hex(width=4)) is '00-F'.

    Args:
        value: Any integer or object implementing __index__, bool excluded.
        config: Formatting options. It is read only, never modified.

    Returns:
        Formatted string.

    Raises:
        TypeError: If value is not an integer or config is not IntegerFormatConfig.
    """
    if not isinstance(config, IntegerFormatConfig):
        raise TypeError(f"config must be IntegerFormatConfig, but got {fmt_type(config)}")

    digits = encode(value, config.radix)
    text = pad(digits, config.effective_width, Alignment.END, "0")

    if config.uses_prefix:
        text = config.radix.prefix + text
    return text


# Private Methods ------------------------------------------------------------------------------------------------------

def _caller_stacklevel() -> int:
    """
    Stack level of the first frame outside this module, for warnings.warn().

    Level 1 is the function calling _caller_stacklevel(). Frames of this module's
    presets and merge(), and the generated dataclass __init__, are skipped.
    """
    frame = inspect.currentframe().f_back
    level = 1
    while frame.f_back is not None and (
            frame.f_globals.get("__name__") == __name__
            or (frame.f_code.co_name == "__init__" and frame.f_code.co_filename.startswith("<"))):
        frame = frame.f_back
        level += 1
    return level

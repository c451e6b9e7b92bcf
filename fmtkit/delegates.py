"""
Number and date formatting delegated to an external formatter.

No formatting logic lives here: numbers go through built-in format() with a
format spec or through a caller-supplied callable, dates through strftime() or
a callable. Any locale behaviour comes from the platform. What this module adds
is a placeholder text, 'Unformattable<value>', for when the delegate fails.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import datetime
import numbers
from typing import Any, Callable

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .optionals import describe
from .tools import fmt_type, fmt_value

DATE_STYLES = frozendict({
    "none": "",
    "short": "%x",
    "medium": "%b %d, %Y",
    "long": "%B %d, %Y",
    "full": "%A, %B %d, %Y",
})

TIME_STYLES = frozendict({
    "none": "",
    "short": "%H:%M",
    "medium": "%H:%M:%S",
    "long": "%H:%M:%S %Z",
    "full": "%H:%M:%S %z",
})


# Methods --------------------------------------------------------------------------------------------------------------

def format_number(number: numbers.Number, formatter: str | Callable[[Any], str | None]) -> str:
    """
    Format a number with a format spec or a formatter callable.

    Args:
        number: int, float, Decimal, Fraction or any numbers.Number, bool excluded.
        formatter: Format spec for built-in format() (e.g. '08.3f', ',d') or a
            callable returning the formatted str, or None if it cannot format.

    Returns:
        The formatted string, or 'Unformattable<number>' when the delegate
        raises ValueError/TypeError or returns None.

    Examples:
        >>> format_number(3.14159, ".2f")
        '3.14'
        >>> format_number(1234567, ",d")
        '1,234,567'
        >>> format_number(3.5, "d")
        'Unformattable<3.5>'
    """
    if isinstance(number, bool) or not isinstance(number, numbers.Number):
        raise TypeError(f"number must be numbers.Number, but got {fmt_type(number)}")
    return _delegate(number, formatter, format)


def format_date(value: datetime.date, formatter: str | Callable[[Any], str | None]) -> str:
    """
    Format a date or datetime with an strftime pattern or a formatter callable.

    Args:
        value: datetime.date, datetime.datetime or datetime.time.
        formatter: strftime pattern, see date_format() for named styles, or a callable.

    Returns:
        The formatted string, or 'Unformattable<value>' when the delegate fails.

    Examples:
        >>> format_date(datetime.date(2024, 3, 1), date_format("medium"))
        'Mar 01, 2024'
        >>> format_date(datetime.date(2024, 3, 1), "%Y-%m-%d")
        '2024-03-01'
    """
    if not isinstance(value, (datetime.date, datetime.time)):
        raise TypeError(f"value must be datetime.date | datetime.time, but got {fmt_type(value)}")
    return _delegate(value, formatter, lambda v, pattern: v.strftime(pattern))


def date_format(date: str = "medium", time: str = "none") -> str:
    """
    Build an strftime pattern from named date and time styles.

    Styles are 'none', 'short', 'medium', 'long' and 'full'.
    Date and time parts are joined with ', '.

    Examples:
        >>> date_format("long")
        '%B %d, %Y'
        >>> date_format("medium", "short")
        '%b %d, %Y, %H:%M'

    Raises:
        ValueError: If a style name is unknown.
    """
    if date not in DATE_STYLES:
        raise ValueError(f"date style expected one of {', '.join(DATE_STYLES)}, but found {fmt_value(date)}")
    if time not in TIME_STYLES:
        raise ValueError(f"time style expected one of {', '.join(TIME_STYLES)}, but found {fmt_value(time)}")

    parts = [p for p in (DATE_STYLES[date], TIME_STYLES[time]) if p]
    return ", ".join(parts)


# Private Methods ------------------------------------------------------------------------------------------------------

def _delegate(value: Any, formatter: Any, apply_pattern: Callable[[Any, str], str]) -> str:
    """Run the delegate formatter, falling back to the Unformattable placeholder."""
    if not (isinstance(formatter, str) or callable(formatter)):
        raise TypeError(f"formatter must be str or callable, but got {fmt_type(formatter)}")

    try:
        if isinstance(formatter, str):
            text = apply_pattern(value, formatter)
        else:
            text = formatter(value)
    except (ValueError, TypeError):
        text = None

    if not isinstance(text, str):
        return f"Unformattable<{describe(value)}>"
    return text

#
# FmtKit Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name, safe_str


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """
    Format type information of an object or a type for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(str)
        '<str>'
    """
    return f"<{class_name(obj)}>"


def fmt_value(obj: Any, *, max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    The repr is truncated to max_repr characters with a trailing '...'.
    Broken __repr__ methods are handled gracefully.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("abc")
        "<str: 'abc'>"
    """
    repr_ = safe_str(obj, use_repr=True)
    if max_repr > 0 and len(repr_) > max_repr:
        repr_ = repr_[:max_repr] + "..."
    return f"<{class_name(obj)}: {repr_}>"

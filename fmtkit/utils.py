"""
FmtKit utilities shared across the package.

Contains helpers used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(None)
        'NoneType'
        >>> class_name(str)
        'str'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    return cls.__name__


def safe_str(obj: Any, *, use_repr: bool = False) -> str:
    """
    Call str() or repr() on obj, never raising.

    A broken __str__ or __repr__ is replaced by a placeholder naming the type and
    the exception, e.g. '<Broken object (str failed: RuntimeError)>'.
    """
    try:
        return repr(obj) if use_repr else str(obj)
    except Exception as e:
        kind = "repr" if use_repr else "str"
        return f"<{class_name(obj)} object ({kind} failed: {type(e).__name__})>"

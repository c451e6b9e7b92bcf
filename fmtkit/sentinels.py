"""
Sentinel object for distinguishing an omitted argument from None or zero.

Sentinels:
    UNSET: Represents an unprovided optional argument

Helper Functions:
    ifnotunset: Return default if value is UNSET, otherwise return value

Example:
    >>> def format_text(value, config, *, width: int | UnsetType = UNSET) -> str:
    ...     width = ifnotunset(width, default=0)
    ...     width = width or config.width
"""

from typing import Any, Callable, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifnotunset',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton optimized for identity checks, falsy, and pickled back to the same instance.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an optional argument that was not provided.

Use with identity check: `if arg is UNSET:`
"""


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any = None, default_factory: Callable[[], Any] | None = None) -> Any:
    """
    Return value if it's not UNSET, otherwise return default.

    Args:
        value: The value to check. If not UNSET, this value is returned.
        default: The fallback value when value is UNSET.
        default_factory: Callable returning the fallback value.

    Raises:
        ValueError: If both default and default_factory are provided.
    """
    if value is not UNSET:
        return value

    if default_factory is not None and default is not None:
        raise ValueError("Cannot specify both default and default_factory")

    if default_factory is not None:
        return default_factory()

    return default

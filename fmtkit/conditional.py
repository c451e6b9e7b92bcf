#
# FmtKit Conditional Text
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type


# Methods --------------------------------------------------------------------------------------------------------------

def format_if(predicate: bool | Callable[[], bool], literal: str) -> str:
    """
    Return literal when predicate holds, otherwise an empty string.

    A callable predicate is called exactly once, before the decision.

    Examples:
        >>> "Cheese Sandwich" + format_if(True, " (*)")
        'Cheese Sandwich (*)'
        >>> format_if(lambda: False, " (*)")
        ''
    """
    if not isinstance(literal, str):
        raise TypeError(f"literal must be str, but got {fmt_type(literal)}")

    condition = predicate() if callable(predicate) else predicate
    return literal if condition else ""

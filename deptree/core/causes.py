"""
Rendering of exception cause chains for node-level diagnostics.
"""

from typing import Optional


def _next_cause(error: BaseException) -> Optional[BaseException]:
    if error.__cause__ is not None:
        return error.__cause__
    if not error.__suppress_context__:
        return error.__context__
    return None


def format_causes(error: BaseException) -> str:
    """
    Format an exception and every exception it wraps.

    The result reads "Kind: message" for the top-level failure, followed by one
    "\\nCaused by: Kind: message" line per wrapped cause. Explicit causes
    (``raise ... from``) win over implicit context.
    """
    result = f"{type(error).__name__}: {error}"

    seen = {id(error)}
    cause = _next_cause(error)
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        result += f"\nCaused by: {type(cause).__name__}: {cause}"
        cause = _next_cause(cause)

    return result

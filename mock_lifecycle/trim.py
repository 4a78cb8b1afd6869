"""Whitespace trimming of a supplied value."""

from typing import Callable, Optional


def trim_supplied(supplier: Callable[[], Optional[str]]) -> str:
    """
    Call supplier once and trim what it returns.

    Args:
        supplier: Zero-argument callable returning a string or None.

    Returns:
        "" when the supplier returns None, otherwise the value with
        leading and trailing whitespace removed.
    """
    value = supplier()
    return "" if value is None else value.strip()

"""Argument checks used by every public graph operation.

Each helper returns its input unchanged when it is acceptable, so checks can be
inlined at the call site:

    >>> start = reject_if_none(start, "start")
"""

from __future__ import annotations

from typing import Optional, TypeVar

from tripgraph.errors import InvalidArgumentError

T = TypeVar("T")


def reject_if_none(value: Optional[T], name: str) -> T:
    """Return ``value`` if it is not ``None``.

    Args:
        value: Object to check.
        name: Argument name used in the error message.

    Returns:
        The unchanged ``value``.

    Raises:
        InvalidArgumentError: If ``value`` is ``None``.
    """
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None.")
    return value


def reject_if_not_positive(value: int, name: str) -> int:
    """Return ``value`` if it is strictly greater than zero.

    Args:
        value: Integer to check.
        name: Argument name used in the error message.

    Returns:
        The unchanged ``value``.

    Raises:
        InvalidArgumentError: If ``value`` is ``None`` or ``<= 0``.
    """
    reject_if_none(value, name)
    if value <= 0:
        raise InvalidArgumentError(f"{name} cannot be less than or equal to zero.")
    return value

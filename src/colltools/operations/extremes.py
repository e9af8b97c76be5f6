"""Minimum and maximum elements"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, TypeVar

from ..pyutils import assert_callable, assert_iterable

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..pyutils import SupportsGreaterThan, SupportsLessThan

__all__ = ["max_of", "min_of"]

T = TypeVar("T")


def min_of(
    elements: Iterable[T],
    transform: Callable[[T], SupportsLessThan] | None = None,
    default: Optional[T] = None,
) -> Optional[T]:
    """Get the element with the smallest value.

    The elements are compared by their natural order, or by the values the
    transform produces for them. If several elements share the smallest value,
    the first one of them is returned. An empty input yields the default.
    """
    assert_iterable(elements)
    assert_callable(transform)
    # the built-in only replaces the current minimum if an element is smaller
    return min(elements, key=transform, default=default)


def max_of(
    elements: Iterable[T],
    transform: Callable[[T], SupportsGreaterThan] | None = None,
    default: Optional[T] = None,
) -> Optional[T]:
    """Get the element with the largest value.

    The elements are compared by their natural order, or by the values the
    transform produces for them. If several elements share the largest value,
    the first one of them is returned. An empty input yields the default.
    """
    assert_iterable(elements)
    assert_callable(transform)
    return max(elements, key=transform, default=default)

"""Stable sorting by a transform"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from ..pyutils import assert_callable, assert_iterable

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..pyutils import SupportsLessThan

__all__ = ["sorted_by", "sorted_by_descending"]

T = TypeVar("T")


def sorted_by(
    elements: Iterable[T], transform: Callable[[T], SupportsLessThan]
) -> list[T]:
    """Sort the elements ascending by the values of the transform.

    The sort is stable: elements with equal values keep their relative order.
    """
    assert_iterable(elements)
    assert_callable(transform, optional=False)
    return sorted(elements, key=transform)


def sorted_by_descending(
    elements: Iterable[T], transform: Callable[[T], SupportsLessThan]
) -> list[T]:
    """Sort the elements descending by the values of the transform.

    The sort is stable: elements with equal values keep their relative order,
    they are not reversed like the rest of the elements.
    """
    assert_iterable(elements)
    assert_callable(transform, optional=False)
    return sorted(elements, key=transform, reverse=True)

"""Distinct values"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from ..pyutils import assert_callable, assert_iterable

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable

__all__ = ["count_distinct", "distinct"]

T = TypeVar("T")


def distinct(
    elements: Iterable[T], transform: Callable[[T], Hashable] | None = None
) -> list[Any]:
    """Get the distinct elements, or the distinct values of the transform.

    Duplicates are removed and the values are returned in the order of their
    first occurrence.
    """
    assert_iterable(elements)
    assert_callable(transform)
    values = elements if transform is None else map(transform, elements)
    return list(dict.fromkeys(values))


def count_distinct(
    elements: Iterable[T], transform: Callable[[T], Hashable] | None = None
) -> int:
    """Count the distinct elements, or the distinct values of the transform."""
    assert_iterable(elements)
    assert_callable(transform)
    values = elements if transform is None else map(transform, elements)
    return len(set(values))

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from ..pyutils import assert_callable, assert_iterable

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = ["count_where"]

T = TypeVar("T")


def count_where(elements: Iterable[T], predicate: Callable[[T], Any]) -> int:
    """Count the elements satisfying the given predicate."""
    assert_iterable(elements)
    assert_callable(predicate, "predicate", optional=False)
    return sum(1 for element in elements if predicate(element))

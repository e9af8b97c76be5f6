"""Chainable sequence"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple, TypeVar

from .operations import (
    count_distinct,
    count_where,
    distinct,
    group_by,
    max_of,
    min_of,
    sorted_by,
    sorted_by_descending,
    sum_of,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable

    from .group import Group

__all__ = ["Seq"]


K = TypeVar("K")
T = TypeVar("T", covariant=True)


class Seq(Tuple[T, ...]):
    """Immutable sequence offering all operations as methods.

    Operations that produce sequences return a new ``Seq``, so that they can be
    chained, e.g. ``Seq(values).group_by(parity).sorted_by(len)``. Slices and
    concatenations are returned as ``Seq`` as well.
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"

    def __getitem__(self, index: Any) -> Any:
        item = tuple.__getitem__(self, index)
        return Seq(item) if isinstance(index, slice) else item

    def __add__(self, other: Any) -> Any:
        return Seq(tuple.__add__(self, other))

    def sum_of(
        self, transform: Callable[[T], Any] | None = None, start: Any = 0
    ) -> Any:
        return sum_of(self, transform, start)

    def min_of(
        self, transform: Callable[[T], Any] | None = None, default: Any = None
    ) -> Optional[T]:
        return min_of(self, transform, default)

    def max_of(
        self, transform: Callable[[T], Any] | None = None, default: Any = None
    ) -> Optional[T]:
        return max_of(self, transform, default)

    def distinct(self, transform: Callable[[T], Hashable] | None = None) -> Seq:
        return Seq(distinct(self, transform))

    def count_distinct(self, transform: Callable[[T], Hashable] | None = None) -> int:
        return count_distinct(self, transform)

    def count_where(self, predicate: Callable[[T], Any]) -> int:
        return count_where(self, predicate)

    def group_by(self, transform: Callable[[T], K]) -> Seq[Group[K, T]]:
        return Seq(group_by(self, transform))

    def sorted_by(self, transform: Callable[[T], Any]) -> Seq[T]:
        return Seq(sorted_by(self, transform))

    def sorted_by_descending(self, transform: Callable[[T], Any]) -> Seq[T]:
        return Seq(sorted_by_descending(self, transform))

"""Grouping function"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, TypeVar

from ..group import Group
from ..pyutils import assert_callable, assert_iterable

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = ["group_by"]

K = TypeVar("K")
T = TypeVar("T")


def group_by(elements: Iterable[T], transform: Callable[[T], K]) -> list[Group[K, T]]:
    """Group elements by a key derived via a transform.

    Every group keeps its elements in the order they have been encountered.
    The groups themselves are returned in the order in which their keys first
    appeared, but callers that need a particular order should sort them.
    """
    assert_iterable(elements)
    assert_callable(transform, optional=False)
    members: dict[K, list[T]] = defaultdict(list)
    for element in elements:
        members[transform(element)].append(element)
    return [Group(key, group) for key, group in members.items()]

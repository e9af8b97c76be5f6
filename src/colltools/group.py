"""Keyed group of elements"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Tuple, TypeVar

__all__ = ["Group"]


K = TypeVar("K")
T = TypeVar("T", covariant=True)


class Group(Tuple[T, ...], Generic[K, T]):
    """Tuple of elements that all share the same key.

    Groups are created by :func:`~colltools.group_by`, one for every key the
    transform produced. The elements are kept in the order in which they have
    been encountered in the input.

    A group compares equal to another group with the same key and elements,
    and also to a plain tuple with the same elements. Note that this makes
    equality non-transitive: two groups with different keys can both be equal
    to the same tuple, so a set containing that tuple and both groups will only
    keep one of them.

    Neither the key nor the elements of a group can be changed.
    """

    key: K

    def __new__(cls, key: K, elements: Iterable[T] = ()) -> Group[K, T]:
        group = tuple.__new__(cls, elements)
        object.__setattr__(group, "key", key)
        return group

    def __getnewargs__(self) -> Tuple[K, Tuple[T, ...]]:  # type: ignore
        return self.key, tuple(self)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"Cannot set attribute {name!r} of a group."
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"Cannot delete attribute {name!r} of a group."
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.key!r}, {list(self)!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Group) and self.key != other.key:
            return False
        return tuple.__eq__(self, other)

    def __ne__(self, other: Any) -> bool:
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal

    # only the elements are hashed, since groups can be equal to plain tuples
    __hash__ = tuple.__hash__

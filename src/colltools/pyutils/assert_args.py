"""Assertions for operation arguments"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from .inspect import inspect

__all__ = ["assert_iterable", "assert_callable"]


def assert_iterable(elements: Any) -> Iterable:
    """Make sure the elements can be iterated over.

    Everything that ``iter()`` accepts is considered iterable, including objects
    that only implement the old sequence protocol with ``__getitem__``.
    """
    try:
        iter(elements)
    except TypeError:
        msg = f"Expected an iterable of elements, but got {inspect(elements)}."
        raise TypeError(msg) from None
    return elements


def assert_callable(
    func: Optional[Callable], name: str = "transform", optional: bool = True
) -> Optional[Callable]:
    """Make sure a transform or predicate is callable if it has been given."""
    if func is None:
        if optional:
            return None
        msg = f"Must provide {name}."
        raise TypeError(msg)
    if not callable(func):
        msg = f"Expected {name} to be a callable, but got {inspect(func)}."
        raise TypeError(msg)
    return func

"""Summation"""

from __future__ import annotations

from functools import reduce
from operator import add
from typing import TYPE_CHECKING, Any

from ..pyutils import assert_callable, assert_iterable

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..pyutils import SupportsAdd

__all__ = ["sum_of"]


def sum_of(
    elements: Iterable[Any],
    transform: Callable[[Any], SupportsAdd] | None = None,
    start: Any = 0,
) -> Any:
    """Sum the elements, or the values the transform produces for them.

    The values are added strictly from left to right, starting with ``start``.
    Unlike the built-in ``sum()``, no compensated summation is applied to
    floats, so the result is always the same as with a plain loop.

    An empty input sums up to ``start``.
    """
    assert_iterable(elements)
    assert_callable(transform)
    values = elements if transform is None else map(transform, elements)
    return reduce(add, values, start)

"""Sequence Operations

This package contains the generic operations on iterables and collections.

Each operation (or pair of closely related operations) belongs in its own file.
All of them are pure: the input is never changed and exceptions raised by the
transform or predicate are passed through to the caller unchanged.
"""

from .count_where import count_where
from .distinct import count_distinct, distinct
from .extremes import max_of, min_of
from .group_by import group_by
from .sorted_by import sorted_by, sorted_by_descending
from .sum_of import sum_of

__all__ = [
    "count_distinct",
    "count_where",
    "distinct",
    "group_by",
    "max_of",
    "min_of",
    "sorted_by",
    "sorted_by_descending",
    "sum_of",
]

"""colltools

Generic operations on iterables and collections, parameterized by transform
functions: sum, minimum and maximum, distinct values, counting, grouping and
stable sorting.

All operations are pure functions that can be imported from this package::

    >>> from colltools import group_by, sorted_by
    >>> groups = group_by([0, 5, 10, 11, 13], lambda n: n % 2 == 0)
    >>> [group.key for group in sorted_by(groups, len)]
    [True, False]

The same operations are also available as chainable methods of ``Seq``::

    >>> from colltools import Seq
    >>> Seq(["pear", "fig", "apple", "kiwi"]).sorted_by(len)
    Seq(['fig', 'pear', 'kiwi', 'apple'])
"""

# The version of this package
from .version import version, version_info

# Containers
from .group import Group
from .seq import Seq

# Operations
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

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "__version__",
    "__version_info__",
    "Group",
    "Seq",
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

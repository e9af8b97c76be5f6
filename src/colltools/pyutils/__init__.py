"""Python Utils

This package contains dependency-free Python utility functions used by the
operations.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .assert_args import assert_callable, assert_iterable
from .identity_func import identity_func
from .inspect import inspect
from .protocols import SupportsAdd, SupportsGreaterThan, SupportsLessThan

__all__ = [
    "assert_callable",
    "assert_iterable",
    "identity_func",
    "inspect",
    "SupportsAdd",
    "SupportsGreaterThan",
    "SupportsLessThan",
]

"""Structural types for the values the operations work with"""

from __future__ import annotations

from typing import Any, Protocol

__all__ = ["SupportsAdd", "SupportsLessThan", "SupportsGreaterThan"]


class SupportsAdd(Protocol):
    def __add__(self, other: Any) -> Any: ...


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


class SupportsGreaterThan(Protocol):
    def __gt__(self, other: Any) -> bool: ...

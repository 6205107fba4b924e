"""Exceptions raised by the union-find controller."""

from __future__ import annotations

from typing import Any


class UnionFindError(Exception):
    """Base class for union-find errors."""


class InvalidIndexError(UnionFindError, IndexError):
    """An element or set identifier outside ``[0, size)``."""

    def __init__(self, index: Any, size: int) -> None:
        super().__init__(f"index {index!r} out of range for universe of size {size}")
        self.index = index
        self.size = size


class AllocationError(UnionFindError, MemoryError):
    """The element or set arrays could not be allocated."""

    def __init__(self, size: int) -> None:
        super().__init__(f"unable to allocate union-find storage for {size} elements")
        self.size = size

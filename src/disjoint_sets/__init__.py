"""Disjoint sets library initialization."""

from .errors import AllocationError, InvalidIndexError, UnionFindError
from .frames import partition_frame, set_frame
from .structures import EMPTY, ILLEGAL_VALUE, INITIAL, NO_PARENT, Node, SetRecord
from .union_find import UnionFind, UnionFindConfig, UnionResult

__all__ = [
    "UnionFind",
    "UnionFindConfig",
    "UnionResult",
    "Node",
    "SetRecord",
    "EMPTY",
    "INITIAL",
    "ILLEGAL_VALUE",
    "NO_PARENT",
    "UnionFindError",
    "InvalidIndexError",
    "AllocationError",
    "partition_frame",
    "set_frame",
]

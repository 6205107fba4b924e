"""Union-find controller over a fixed universe of elements."""

from __future__ import annotations

import enum
import logging
import operator
import os
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, TypeVar

import numpy as np

from .errors import AllocationError, InvalidIndexError
from .structures import EMPTY, ILLEGAL_VALUE, INITIAL, NO_PARENT, Node, SetRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")

_TRUTHY = {"1", "true", "yes", "on"}
_MAX_ELEMENTS = np.iinfo(np.intp).max // np.dtype(np.intp).itemsize


class UnionResult(enum.Enum):
    """Outcome of :meth:`UnionFind.union`."""

    SUCCESS = "success"
    FAIL = "fail"

    def __bool__(self) -> bool:
        return self is UnionResult.SUCCESS


@dataclass
class UnionFindConfig:
    """Configuration parameters for :class:UnionFind."""

    compress_paths: bool | None = None
    payload_factory: Callable[[int], Any] | None = None
    department_factory: Callable[[int], Any] | None = None

    def __post_init__(self) -> None:
        if self.compress_paths is None:
            flag = os.getenv("UNION_FIND_COMPRESS_PATHS", "")
            self.compress_paths = flag.strip().lower() in _TRUTHY


class UnionFind(Generic[T, D]):
    """Disjoint sets over the elements ``0 .. n-1`` using union by size.

    Every element starts as its own set, identified by the element's index.
    When two sets merge, the identifier of the first argument's set survives
    and the other identifier is retired for good. Each element carries a
    payload and each identifier carries a department; neither is interpreted
    here.
    """

    def __init__(self, n: int, config: UnionFindConfig | None = None) -> None:
        if isinstance(n, bool):
            raise ValueError(f"size must be an integer, got {n!r}")
        try:
            n = operator.index(n)
        except TypeError:
            raise ValueError(f"size must be an integer, got {n!r}") from None
        if n < 0:
            raise ValueError("size must be non-negative")

        self.config = config or UnionFindConfig()
        if n > _MAX_ELEMENTS:
            logger.error("Union-find size %d exceeds the largest allocatable array (%d)", n, _MAX_ELEMENTS)
            raise AllocationError(n)
        try:
            self._parent = np.full(n, NO_PARENT, dtype=np.intp)
            self._set_id = np.arange(n, dtype=np.intp)
            self._size = np.full(n, INITIAL, dtype=np.intp)
            self._payloads: List[Any] = _fill(n, self.config.payload_factory)
            self._departments: List[Any] = _fill(n, self.config.department_factory)
        except MemoryError as exc:
            logger.error("Could not allocate union-find storage for %d elements", n)
            raise AllocationError(n) from exc

        self._n = n
        self._unions = 0
        self._destroyed = False
        logger.debug("Created union-find over %d elements (compress_paths=%s)", n, self.config.compress_paths)

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        if self._destroyed:
            return "UnionFind(destroyed)"
        return f"UnionFind(size={self._n}, sets={self.set_count})"

    def __enter__(self) -> UnionFind[T, D]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def set_count(self) -> int:
        """Number of live set identifiers."""

        return int(np.count_nonzero(self._size))

    @property
    def union_count(self) -> int:
        """Number of successful unions so far."""

        return self._unions

    def find(self, element: int) -> int:
        """Return the identifier of the set containing `element`."""

        index = self._index(element)
        root = self._root(index)
        if self.config.compress_paths:
            self._compress(index, root)
        return int(self._set_id[root])

    def connected(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    def union(self, ele1: int, ele2: int) -> UnionResult:
        """Merge the sets containing `ele1` and `ele2`.

        Returns ``FAIL`` without touching any state when either index is out
        of range or both elements already share a set.
        """

        try:
            index1 = self._index(ele1)
            index2 = self._index(ele2)
        except InvalidIndexError as exc:
            logger.debug("union(%r, %r) failed: %s", ele1, ele2, exc)
            return UnionResult.FAIL

        root1 = self._root(index1)
        root2 = self._root(index2)
        if root1 == root2:
            logger.debug("union(%d, %d) failed: already in set %d", index1, index2, self._set_id[root1])
            return UnionResult.FAIL

        survivor = int(self._set_id[root1])
        retired = int(self._set_id[root2])
        size1 = int(self._size[survivor])
        size2 = int(self._size[retired])
        self._size[survivor] = size1 + size2
        self._size[retired] = EMPTY

        # Both roots must carry the survivor before either is attached.
        self._set_id[root1] = survivor
        self._set_id[root2] = survivor
        if size1 <= size2:
            self._parent[root1] = root2
        else:
            self._parent[root2] = root1

        self._unions += 1
        logger.debug("Merged set %d into set %d (size %d)", retired, survivor, size1 + size2)
        return UnionResult.SUCCESS

    def destroy(self) -> None:
        """Release all storage; calling it again is a no-op."""

        if self._destroyed:
            return
        self._parent = np.empty(0, dtype=np.intp)
        self._set_id = np.empty(0, dtype=np.intp)
        self._size = np.empty(0, dtype=np.intp)
        self._payloads = []
        self._departments = []
        logger.debug("Destroyed union-find over %d elements", self._n)
        self._n = 0
        self._destroyed = True

    def payload(self, element: int) -> T:
        return self._payloads[self._index(element)]

    def set_payload(self, element: int, value: T) -> None:
        self._payloads[self._index(element)] = value

    def department(self, set_id: int) -> D:
        return self._departments[self._index(set_id)]

    def set_department(self, set_id: int, value: D) -> None:
        self._departments[self._index(set_id)] = value

    def department_of(self, element: int) -> D:
        return self._departments[self.find(element)]

    def set_size(self, set_id: int) -> int:
        """Size recorded for `set_id`; 0 once the identifier is retired."""

        return int(self._size[self._index(set_id)])

    def size_of(self, element: int) -> int:
        return int(self._size[self.find(element)])

    def depth(self, element: int) -> int:
        """Number of parent links between `element` and its root."""

        index = self._index(element)
        hops = 0
        while self._parent[index] != NO_PARENT:
            index = int(self._parent[index])
            hops += 1
        return hops

    def node(self, element: int) -> Node:
        index = self._index(element)
        parent = int(self._parent[index])
        if parent == NO_PARENT:
            return Node(payload=self._payloads[index], parent=None, set_id=int(self._set_id[index]))
        return Node(payload=self._payloads[index], parent=parent, set_id=ILLEGAL_VALUE)

    def nodes(self) -> List[Node]:
        return [self.node(index) for index in range(self._n)]

    def set_record(self, set_id: int) -> SetRecord:
        index = self._index(set_id)
        return SetRecord(size=int(self._size[index]), department=self._departments[index])

    def set_records(self) -> List[SetRecord]:
        return [self.set_record(index) for index in range(self._n)]

    def live_set_ids(self) -> List[int]:
        return [int(index) for index in np.flatnonzero(self._size)]

    def groups(self) -> Dict[int, List[int]]:
        """Map each live set identifier to its elements in ascending order."""

        members: Dict[int, List[int]] = defaultdict(list)
        for index in range(self._n):
            members[int(self._set_id[self._root(index)])].append(index)
        return dict(members)

    def _index(self, value: Any) -> int:
        if isinstance(value, bool):
            raise InvalidIndexError(value, self._n)
        try:
            index = operator.index(value)
        except TypeError:
            raise InvalidIndexError(value, self._n) from None
        if not 0 <= index < self._n:
            raise InvalidIndexError(index, self._n)
        return index

    def _root(self, index: int) -> int:
        parent = self._parent
        while parent[index] != NO_PARENT:
            index = int(parent[index])
        return index

    def _compress(self, index: int, root: int) -> None:
        parent = self._parent
        while index != root:
            next_index = int(parent[index])
            parent[index] = root
            index = next_index


def _fill(n: int, factory: Callable[[int], Any] | None) -> List[Any]:
    if factory is None:
        return [None] * n
    return [factory(index) for index in range(n)]

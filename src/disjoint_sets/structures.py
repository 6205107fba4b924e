"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


EMPTY = 0
INITIAL = 1
ILLEGAL_VALUE = -1
NO_PARENT = -1


@dataclass(frozen=True)
class Node:
    """Snapshot of one element of the universe.

    `parent` is an index into the owning controller's element array, or
    ``None`` when the element is the root of its up-tree. `set_id` only
    carries meaning on roots.
    """

    payload: Any = None
    parent: Optional[int] = None
    set_id: int = ILLEGAL_VALUE

    @property
    def is_root(self) -> bool:
        return self.parent is None


@dataclass(frozen=True)
class SetRecord:
    """Snapshot of one set identifier slot."""

    size: int = EMPTY
    department: Any = None

    @property
    def is_live(self) -> bool:
        return self.size > EMPTY

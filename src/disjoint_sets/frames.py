"""Tabular views of a union-find partition."""

from __future__ import annotations

import pandas as pd

from .union_find import UnionFind


def partition_frame(union_find: UnionFind) -> pd.DataFrame:
    """One row per element with the identifier of the set it belongs to."""

    count = len(union_find)
    return pd.DataFrame(
        {
            "element": list(range(count)),
            "set_id": [union_find.find(index) for index in range(count)],
            "payload": [union_find.payload(index) for index in range(count)],
        }
    )


def set_frame(union_find: UnionFind) -> pd.DataFrame:
    """One row per live set identifier, largest sets first."""

    live = union_find.live_set_ids()
    df = pd.DataFrame(
        {
            "set_id": live,
            "size": [union_find.set_size(set_id) for set_id in live],
            "department": [union_find.department(set_id) for set_id in live],
        }
    )
    return df.sort_values(["size", "set_id"], ascending=[False, True], ignore_index=True)

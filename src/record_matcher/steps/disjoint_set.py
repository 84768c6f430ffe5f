from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable
from typing import Generic, TypeVar

KeyT = TypeVar("KeyT", bound=Hashable)


class DisjointSet(Generic[KeyT]):
    """Union-find forest over opaque keys.

    ``find`` inserts unknown keys as their own root and compresses the whole
    visited path onto the root. ``union`` always re-parents the left root
    under the right root; no rank or size balancing is applied.
    """

    def __init__(self) -> None:
        self._parent: dict[KeyT, KeyT] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, key: KeyT) -> KeyT:
        parent = self._parent.setdefault(key, key)
        if parent == key:
            return key

        root = parent
        while self._parent[root] != root:
            root = self._parent[root]

        node = key
        while node != root:
            next_node = self._parent[node]
            self._parent[node] = root
            node = next_node
        return root

    def union(self, left: KeyT, right: KeyT) -> None:
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left != root_right:
            self._parent[root_left] = root_right

    def groups(self) -> list[set[KeyT]]:
        grouped: dict[KeyT, set[KeyT]] = defaultdict(set)
        for key in list(self._parent):
            grouped[self.find(key)].add(key)
        return list(grouped.values())

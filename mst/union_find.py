"""
Disjoint-set forest with union by rank.
"""

from typing import List


class DisjointSet:
    """
    One entry per element, each holding a parent index and a rank.

    find() walks parents iteratively. Path compression is optional: it only
    changes how fast roots are found, never which elements are connected.
    """

    def __init__(self, size: int, path_compression: bool = False):
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        self._parent: List[int] = list(range(size))
        self._rank: List[int] = [0] * size
        self._components = size
        self.path_compression = path_compression

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, i: int) -> int:
        root = i
        while self._parent[root] != root:
            root = self._parent[root]

        if self.path_compression:
            while self._parent[i] != root:
                self._parent[i], i = root, self._parent[i]

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets holding x and y.
        Returns False when they were already in the same set.
        """
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False

        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1

        self._components -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    @property
    def component_count(self) -> int:
        return self._components

    @property
    def parent(self) -> List[int]:
        return list(self._parent)

    @property
    def rank(self) -> List[int]:
        return list(self._rank)

    def __repr__(self) -> str:
        return f"DisjointSet(size={len(self)}, components={self._components})"

from typing import List

from .exceptions import IndexOutOfRange


class DisjointSets:

    """Union-find over the elements `0..n-1`.
    Uses union by size and path compression, so `find` and `union` take amortized almost constant time.
    """

    __slots__ = ("parent", "sizes", "count")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")

        self.parent = list(range(n))
        self.sizes = [1] * n
        self.count = n

    def __len__(self) -> int:
        """Returns the number of disjoint sets."""

        return self.count

    def __repr__(self) -> str:
        return f"<DisjointSets {self.sets()!r}>"

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self.parent):
            raise IndexOutOfRange(u, len(self.parent))

    def find(self, u: int) -> int:
        """Returns the representative of the set containing `u`."""

        self._check(u)

        root = u
        while self.parent[root] != root:
            root = self.parent[root]

        # path compression
        while self.parent[u] != root:
            self.parent[u], u = root, self.parent[u]

        return root

    def union(self, u: int, v: int) -> bool:
        """Merges the sets containing `u` and `v`.
        Returns `False` if they were already in the same set.
        """

        a = self.find(u)
        b = self.find(v)

        if a == b:
            return False

        if self.sizes[a] > self.sizes[b]:
            a, b = b, a

        self.parent[a] = b
        self.sizes[b] += self.sizes[a]
        self.count -= 1
        return True

    def connected(self, u: int, v: int) -> bool:
        return self.find(u) == self.find(v)

    def size(self, u: int) -> int:
        """Returns the size of the set containing `u`."""

        return self.sizes[self.find(u)]

    def sets(self) -> List[List[int]]:
        """Returns all sets as sorted lists, ordered by their smallest element."""

        groups = {}
        for u in range(len(self.parent)):
            groups.setdefault(self.find(u), []).append(u)

        return list(groups.values())


def union_find(n: int) -> DisjointSets:
    return DisjointSets(n)

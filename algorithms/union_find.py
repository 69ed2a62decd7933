"""
union_find.py - Disjoint-Set Union
===================================
Helper for Kruskal: which component is a node in, and merge two
components.

Union by rank keeps the trees shallow; `find` compresses the path it
walks.  `find` is iterative (two passes: locate the root, then repoint
every node on the way at it) so long chains never touch the recursion
limit.
"""

from typing import Dict, Hashable, Iterable


class UnionFind:
    """
    Attributes:
        parent : {node: parent node}; a root is its own parent.
        rank   : {node: upper bound on tree height}.
    """

    def __init__(self, nodes: Iterable[Hashable]):
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank:   Dict[Hashable, int]      = {}
        for node in nodes:
            self.parent[node] = node
            self.rank[node]   = 0

    def find(self, node: Hashable) -> Hashable:
        root = node
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[node] != root:
            self.parent[node], node = root, self.parent[node]

        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the components of a and b.  False if they were already one."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def component_count(self) -> int:
        return sum(1 for node in self.parent if self.find(node) == node)

    def snapshot(self) -> Dict[Hashable, Hashable]:
        return dict(self.parent)

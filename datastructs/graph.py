import heapq
import math
from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass(frozen=True, order=True)
class Edge:
    to: int
    weight: Any = 1


class Graph:
    """Adjacency-list graph on nodes 0..size-1 with optional node weights."""

    def __init__(self, size: int, directed: bool = True):
        self.directed = directed
        self.nodes = [None] * size
        self.edges: List[List[Edge]] = [[] for _ in range(size)]
        # reverse adjacency, kept for directed graphs only
        self.inv: List[List[Edge]] = [[] for _ in range(size)] if directed else []

    @classmethod
    def undirected(cls, size: int) -> "Graph":
        return cls(size, directed=False)

    def add_edge(self, frm: int, to: int, weight=1):
        self.edges[frm].append(Edge(to, weight))
        if self.directed:
            self.inv[to].append(Edge(frm, weight))
        else:
            self.edges[to].append(Edge(frm, weight))

    def node_weight(self, idx: int):
        return self.nodes[idx]

    def set_node_weight(self, idx: int, weight):
        self.nodes[idx] = weight

    def __getitem__(self, idx: int) -> List[Edge]:
        return self.edges[idx]

    def __len__(self):
        return len(self.edges)


class Dijkstra:
    """Single-source shortest paths for non-negative edge weights."""

    def __init__(self, graph: Graph):
        self.graph = graph
        self.dists = [math.inf] * len(graph)
        self.backs: List[Optional[int]] = [None] * len(graph)

    def build(self, start: int) -> List:
        self.dists = [math.inf] * len(self.graph)
        self.backs = [None] * len(self.graph)
        self.dists[start] = 0
        heap = [(0, start)]
        while heap:
            d, v = heapq.heappop(heap)
            if self.dists[v] < d:
                continue
            for e in self.graph[v]:
                nd = d + e.weight
                if nd < self.dists[e.to]:
                    self.dists[e.to] = nd
                    self.backs[e.to] = v
                    heapq.heappush(heap, (nd, e.to))
        return self.dists

    def restore(self, goal: int) -> List[int]:
        """Path start..goal, or [] when goal has no predecessor."""
        if self.backs[goal] is None:
            return []
        path = [goal]
        cur = self.backs[goal]
        while cur is not None:
            path.append(cur)
            cur = self.backs[cur]
        path.reverse()
        return path

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/graph.py

from collections import deque
from typing import Iterable, List, Tuple


class SimilarityGraph:
    """Undirected graph over vertex ids 0..n-1, built fresh per validation."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.adjacency: List[List[int]] = [[] for _ in range(size)]

    @classmethod
    def from_edges(cls, size: int, edges: Iterable[Tuple[int, int]]) -> "SimilarityGraph":
        graph = cls(size)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    def add_edge(self, u: int, v: int) -> None:
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)

    def degree(self, vertex: int) -> int:
        return len(self.adjacency[vertex])

    def connected_components(self, min_size: int = 1) -> List[List[int]]:
        """
        Breadth-first connected components.

        Components come out ordered by their lowest vertex id, members in
        visit order. Components smaller than min_size are dropped.
        """
        visited = [False] * self.size
        components = []

        for start in range(self.size):
            if visited[start]:
                continue
            visited[start] = True
            component = []
            queue = deque([start])
            while queue:
                current = queue.popleft()
                component.append(current)
                for neighbor in self.adjacency[current]:
                    if not visited[neighbor]:
                        visited[neighbor] = True
                        queue.append(neighbor)
            if len(component) >= min_size:
                components.append(component)

        return components

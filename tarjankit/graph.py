"""Directed graphs stored as adjacency maps."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Mapping
from typing import Optional, TextIO


class Graph(ABC):
    """A directed graph keyed by vertex.

    Every vertex known to the graph maps to its outgoing neighbours. A cached
    vertex list is kept for fast repeated access and is refreshed only by
    :meth:`update_vertex_list`.
    """

    def __init__(self) -> None:
        self._edges: dict = {}
        self._vertex_list: list = []

    @abstractmethod
    def insert_vertex(self, vertex: Hashable) -> None:
        """Add a vertex with no neighbours if it is not already present."""

    @abstractmethod
    def insert_edge(self, source: Hashable, target: Hashable) -> None:
        """Add an edge from ``source`` to ``target``."""

    @abstractmethod
    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        """Remove the edge from ``source`` to ``target``."""

    @abstractmethod
    def edge_exists(self, source: Hashable, target: Hashable) -> bool:
        """Return whether an edge from ``source`` to ``target`` exists."""

    @abstractmethod
    def neighbors(self, vertex: Hashable):
        """Return the outgoing neighbours of ``vertex``; KeyError if unknown."""

    def vertices(self) -> set:
        """Return a new set of all vertices."""
        return set(self._edges)

    def vertex_list(self) -> list:
        """Return the cached vertex list as of the last update."""
        return list(self._vertex_list)

    def update_vertex_list(self) -> None:
        """Refresh the cached vertex list from the current vertices."""
        self._vertex_list = list(self._edges)

    def shuffled_vertices(self, rng: Optional[random.Random] = None) -> list:
        """Return all vertices in a random order."""
        items = list(self._edges)
        (rng if rng is not None else random.Random()).shuffle(items)
        return items

    def __len__(self) -> int:
        return len(self._edges)

    def remove_vertex(self, vertex: Hashable) -> None:
        """Remove a vertex and its outgoing edges; unknown vertices are ignored."""
        self._edges.pop(vertex, None)

    def bulk_insert_edges(self, edges: Iterable[tuple]) -> None:
        """Insert every ``(source, target)`` pair in order."""
        for source, target in edges:
            self.insert_edge(source, target)

    def print_graph(self, file: Optional[TextIO] = None) -> None:
        """Write each vertex's outgoing edges on one line."""
        out = file if file is not None else sys.stdout
        for source in self.vertices():
            targets = self.neighbors(source)
            if not targets:
                continue
            out.write("".join(f"{source}--->{target}, " for target in targets))
            out.write("\n")


class DirectedHashGraph(Graph):
    """Graph whose neighbours are stored as sets; edges add both endpoints."""

    def __init__(self, edges: Optional[Mapping[Hashable, Iterable]] = None) -> None:
        super().__init__()
        if edges is not None:
            self._edges = {vertex: set(targets) for vertex, targets in edges.items()}
            self.update_vertex_list()

    def insert_vertex(self, vertex: Hashable) -> None:
        self._edges.setdefault(vertex, set())

    def insert_edge(self, source: Hashable, target: Hashable) -> None:
        self._edges.setdefault(source, set())
        self._edges.setdefault(target, set())
        self._edges[source].add(target)

    def neighbors(self, vertex: Hashable) -> frozenset:
        return frozenset(self._edges[vertex])

    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        self._edges[source].discard(target)

    def edge_exists(self, source: Hashable, target: Hashable) -> bool:
        return target in self._edges[source]


class AdjacencyListGraph(Graph):
    """Graph whose neighbours are stored as ordered lists.

    Inserting an edge registers only its source vertex, and parallel edges are
    kept.
    """

    def __init__(self, edges: Optional[Mapping[Hashable, Iterable]] = None) -> None:
        super().__init__()
        if edges is not None:
            self._edges = {vertex: list(targets) for vertex, targets in edges.items()}
            self.update_vertex_list()

    def insert_vertex(self, vertex: Hashable) -> None:
        self._edges.setdefault(vertex, [])

    def insert_edge(self, source: Hashable, target: Hashable) -> None:
        self._edges.setdefault(source, []).append(target)

    def neighbors(self, vertex: Hashable) -> tuple:
        return tuple(self._edges[vertex])

    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        targets = self._edges.setdefault(source, [])
        targets[:] = [item for item in targets if item != target]

    def edge_exists(self, source: Hashable, target: Hashable) -> bool:
        return target in self._edges.get(source, ())
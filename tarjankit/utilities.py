"""Graph generators, graph import and helpers for comparing component sets."""

from __future__ import annotations

import math
import random
import re
from collections.abc import Iterable, MutableSequence
from os import PathLike
from typing import Optional, Union

from .graph import AdjacencyListGraph, DirectedHashGraph, Graph

_VERTEX = re.compile(r"\s*\+?(\d+)")
_SEPARATOR = re.compile(r"\s*\S")
_NUMBER = re.compile(r"\+?\d+")


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def generate_random_graph(
    edge_prob: float, cardinality: int, rng: Optional[random.Random] = None
) -> DirectedHashGraph:
    """Build a graph on vertices ``0..cardinality-1`` with independent edges.

    Each ordered pair (self-loops included) gets an edge with probability
    ``edge_prob``. Only vertices that touch an edge appear in the graph.
    """
    rng = _rng(rng)
    graph = DirectedHashGraph()
    for source in range(cardinality):
        for target in range(cardinality):
            if rng.random() < edge_prob:
                graph.insert_edge(source, target)
    graph.update_vertex_list()
    return graph


def geo_generate_random_graph(
    edge_prob: float,
    corr: float,
    cardinality: int,
    rng: Optional[random.Random] = None,
) -> AdjacencyListGraph:
    """Build a clustered random graph on vertices ``0..cardinality-1``.

    Every vertex gets a random point in the unit square. An edge from ``v1``
    to ``v2`` (never a self-loop) is added with probability
    ``edge_prob * (1 - corr * d ** (1/8))`` where ``d`` is the Euclidean
    distance between their points, so nearby vertices connect more often.
    Negative probabilities act as zero.
    """
    rng = _rng(rng)
    graph = AdjacencyListGraph()
    points = [(rng.random(), rng.random()) for _ in range(cardinality)]
    for source, (x1, y1) in enumerate(points):
        graph.insert_vertex(source)
        for target, (x2, y2) in enumerate(points):
            if source == target:
                continue
            dx = abs(x1 - x2)
            dy = abs(y1 - y2)
            distance = (dx * dx + dy * dy) ** (1 / 16)
            if rng.random() < edge_prob * (1 - corr * distance):
                graph.insert_edge(source, target)
    graph.update_vertex_list()
    return graph


def mismatches(first: Iterable[Iterable], second: Iterable[Iterable]) -> set:
    """Return the vertices whose components differ between two partitions.

    A component of ``first`` that overlaps a component of ``second`` without
    being equal to it contributes the vertices of both. A component of
    ``first`` that matches none in ``second`` contributes its own vertices.
    """
    second_sets = [set(component) for component in second]
    misses: set = set()
    for component in first:
        x = set(component)
        matched = False
        for y in second_sets:
            common = any(element in y for element in x)
            uncommon = any(element not in y for element in x)
            if common and (uncommon or len(x) != len(y)):
                misses |= x
                misses |= y
            elif common:
                matched = True
        if not matched:
            misses |= x
    return misses


def _biggest(components: Iterable[Iterable]) -> set:
    best: set = set()
    for component in components:
        candidate = set(component)
        if len(candidate) > len(best):
            best = candidate
    return best


def big_difference(first: Iterable[Iterable], second: Iterable[Iterable]) -> set:
    """Return the symmetric difference of the largest component of each set.

    An empty result is returned if either collection has no components.
    """
    first = list(first)
    second = list(second)
    if not first or not second:
        return set()
    return _biggest(first) ^ _biggest(second)


def random_int(lo: int, hi: int, rng: Optional[random.Random] = None) -> int:
    """Return a random integer in ``[lo, hi)``."""
    return math.floor((hi - lo) * _rng(rng).random() + lo)


def shuffle_array(items: MutableSequence, rng: Optional[random.Random] = None) -> None:
    """Shuffle ``items`` in place."""
    _rng(rng).shuffle(items)


def clusters(
    num_clusters: int,
    cluster_size: int,
    num_neighbors: int,
    inter_cluster_connections: int,
    rng: Optional[random.Random] = None,
) -> AdjacencyListGraph:
    """Build a graph of densely connected clusters joined by a few edges.

    Vertex ``cluster + i * num_clusters`` is the ``i``-th member of
    ``cluster``. Each member gets ``num_neighbors`` random edges inside its
    cluster, and every cluster but the last sends
    ``inter_cluster_connections`` edges to random members of later clusters.
    """
    rng = _rng(rng)
    graph = AdjacencyListGraph()
    for cluster in range(num_clusters):
        for member in range(cluster_size):
            vertex = cluster + member * num_clusters
            graph.insert_vertex(vertex)
            for _ in range(num_neighbors):
                other = random_int(0, cluster_size, rng)
                graph.insert_edge(vertex, cluster + other * num_clusters)

        if cluster == num_clusters - 1:
            continue

        for j in range(inter_cluster_connections):
            target_cluster = random_int(cluster + 1, num_clusters, rng)
            neighbor = random_int(0, cluster_size, rng) * num_clusters + target_cluster
            graph.insert_edge((j % cluster_size) * num_clusters + cluster, neighbor)

    graph.update_vertex_list()
    return graph


def _parse_neighbors(text: str) -> list[int]:
    neighbors = []
    for token in text.split():
        match = _NUMBER.match(token)
        if match is None:
            break
        neighbors.append(int(match.group()))
        if match.end() != len(token):
            break
    return neighbors


def import_graph_from_csp(path: Union[str, PathLike]) -> AdjacencyListGraph:
    """Read a graph from an adjacency file.

    The first line is ignored. Every other line has the form
    ``vertex: neighbor1 neighbor2 ...``; repeated vertices accumulate their
    neighbours. Lines that do not start with a vertex number are skipped.
    """
    edges: dict[int, list[int]] = {}
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            head = _VERTEX.match(line)
            if head is None:
                continue
            neighbors = edges.setdefault(int(head.group(1)), [])
            separator = _SEPARATOR.match(line, head.end())
            if separator is None:
                continue
            neighbors.extend(_parse_neighbors(line[separator.end():]))
    return AdjacencyListGraph(edges)


__all__ = [
    "Graph",
    "generate_random_graph",
    "geo_generate_random_graph",
    "mismatches",
    "big_difference",
    "random_int",
    "shuffle_array",
    "clusters",
    "import_graph_from_csp",
]
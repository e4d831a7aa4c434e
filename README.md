# tarjankit

Building blocks for finding strongly connected components (SCCs) in
directed graphs, tools to generate, load and compare test graphs, and a
small perfect-number search.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `tarjankit.graph` | `Graph`, with two implementations: `DirectedHashGraph` (neighbour sets) and `AdjacencyListGraph` (neighbour lists) |
| `tarjankit.dictionary` | Thread-safe insert-once maps: `Dictionary`, `MutexDict`, `ShardedMap` |
| `tarjankit.blocked_list` | `BlockedList`, an append-only list stored in geometrically growing blocks |
| `tarjankit.pending` | `PendingQueue`, a locked FIFO of searches waiting to be resumed |
| `tarjankit.clock` | `SimpleClock`, a stopwatch with an accumulating timer |
| `tarjankit.status` | `ConquerResult` and `CellState` |
| `tarjankit.cell` | `Cell`, the per-vertex state a search claims, ranks and completes |
| `tarjankit.utilities` | Random graph generators, a graph file reader and tools to compare SCC results |
| `tarjankit.perfect` | `is_perfect`, `SharedState`, `ProcessStats` and the `tarjankit-perfect` command |

## Graphs

```python
import random

from tarjankit.utilities import generate_random_graph

rng = random.Random(1)
graph = generate_random_graph(0.1, 50, rng)

print(len(graph))
for vertex in graph.vertex_list():
    print(vertex, graph.neighbors(vertex))
```

Edges are added with `insert_edge(source, target)` or many at once with
`bulk_insert_edges(edges)`; `edge_exists`, `remove_edge` and
`remove_vertex` do what their names say. `vertex_list()` returns the
cached vertex list, which `update_vertex_list()` refreshes;
`vertices()` always reflects the current graph. `print_graph(file)`
writes one line per vertex with outgoing edges, in the form `v1--->v2, `.

The two implementations differ in detail: `DirectedHashGraph` keeps
neighbours in sets and registers both endpoints of an inserted edge,
while `AdjacencyListGraph` keeps neighbours in ordered lists, allows
parallel edges and registers only the source vertex.

Other generators in `tarjankit.utilities`:

- `geo_generate_random_graph(edge_prob, corr, cardinality, rng)` places
  vertices on the unit square and favours edges between close vertices;
  `corr` between 0 and 1 sets how strongly.
- `clusters(num_clusters, cluster_size, num_neighbors,
  inter_cluster_connections, rng)` builds dense clusters joined by a few
  edges that only run from a cluster to later ones.
- `import_graph_from_csp(path)` reads a file whose first line is skipped
  and whose other lines look like `10: 13 14 19`.

`random_int(lo, hi, rng)` and `shuffle_array(items, rng)` are small
random helpers used alongside them.

## Comparing SCC results

An SCC result is a collection of vertex sets. `mismatches(first, second)`
returns every vertex that the two results place differently, and
`big_difference(first, second)` returns the symmetric difference of the
largest component of each.

## Concurrent maps

```python
from tarjankit.dictionary import MutexDict

cells = MutexDict()
value, inserted = cells.put(7, "first")    # ("first", True)
value, inserted = cells.put(7, "second")   # ("first", False)
```

`put` only inserts when the key is new and always reports the value the
key holds afterwards, so several threads can race to create the same
entry and all end up sharing one. `ShardedMap(bits)` does the same for
integer keys with `2 << bits` shards, each with its own lock, chosen by
the low bits of the key.

## Cells

A `Cell` holds one vertex's index, rank, neighbour queue and owner.
`conquer(search)` claims a new cell and returns a `ConquerResult`
(`CONQUERED`, `OCCUPIED` or `COMPLETE`); searches that must wait can be
recorded with `add_to_blocked_list` or `block_search` and collected with
`remove_blocked_list`. `best_neighbor()` hands out queued neighbours,
preferring ones no other search owns.

## Perfect numbers

```python
from tarjankit.perfect import is_perfect

[n for n in range(2, 10_000) if is_perfect(n)]   # [6, 28, 496, 8128]
```

The command checks a single number when given `-i`:

```
tarjankit-perfect 28 -i
```

which prints `28 is perfect!`, and prints nothing for a number that is
not. Given only a starting number:

```
tarjankit-perfect 2
```

it registers its process id in a fresh `SharedState`, then tests every
number upward from there, marking each in the state's bitmap and printing
`found N` for each perfect number. It stops when 20 perfect numbers have
been recorded or the count passes 2**25. A starting number of 0 or one
that is not a number prints `Invalid starting number` and exits with
status 1.

## What this package does not do

- It provides the pieces an SCC search is built from (graphs, cells,
  insert-once maps, pending queues, blocked lists) but no function that
  runs a complete SCC search over a graph.
- `SharedState` lives in the memory of a single Python process. Nothing
  is shared between processes, so several `tarjankit-perfect` commands
  run side by side do not divide the work between them.
# frontierbfs

Breadth-first search over directed graphs stored in compressed adjacency
form: one start offset per vertex and one flat list of edge targets. The
incoming edges are derived from the outgoing ones when a graph is built.

Three searches are provided, all starting at vertex 0:

- `bfs_top_down`: every frontier vertex follows its outgoing edges;
- `bfs_bottom_up`: every unvisited vertex looks for a parent in the frontier
  among its incoming edges;
- `bfs_hybrid`: starts top-down, switches to bottom-up once the frontier holds
  more than 15% of the vertices, and back to top-down when it drops under 7%.

Each returns a list with one distance per vertex, `-1` where a vertex cannot
be reached. Searching a graph with no vertices raises `ValueError`. The single
steps, `top_down_step` and `bottom_up_step`, are public too: they take the
graph, the current frontier and the distance list, update the distances in
place and return the next frontier.

## Installing

```
pip install .
```

## Using the library

```python
from frontierbfs.graph import Graph, load_graph_binary, store_graph_binary
from frontierbfs.bfs import bfs_top_down, bfs_bottom_up, bfs_hybrid

# 0 -> 1, 0 -> 2, 1 -> 3
g = Graph.from_outgoing([0, 2, 3, 3], [1, 2, 3])
print(bfs_top_down(g))                   # [0, 1, 1, 2]
print(bfs_hybrid(g) == bfs_bottom_up(g)) # True

print(g.outgoing(0), g.incoming(3))      # (1, 2) (1,)

store_graph_binary("small.graph", g)
same = load_graph_binary("small.graph")
```

`Graph` is a frozen dataclass with `outgoing_starts`, `outgoing_edges`,
`incoming_starts` and `incoming_edges`, the properties `num_nodes` and
`num_edges`, and the methods `outgoing`, `incoming`, `outgoing_size` and
`incoming_size`; these raise `IndexError` for a vertex out of range.
`Graph.from_outgoing` raises `GraphFormatError` when an offset or an edge
target is out of range. `format_graph` renders every vertex with its outgoing
and incoming neighbours.

### File formats

`load_graph` reads the text format: a first line `AdjacencyGraph`, then the
vertex count and the edge count (blank lines and lines starting with `#` are
skipped before each), then whitespace-separated integers: the outgoing start
offsets followed by the edge targets. Lines starting with `#` are skipped;
reading a line stops at its first token that is not an integer. Exactly
vertex count plus edge count integers must follow the header.

`load_graph_binary` and `store_graph_binary` use the binary format: the header
token `0xDEADBEEF`, the vertex count and the edge count, then the offsets and
the edge targets, all as little-endian signed 32-bit integers.

Any malformed file raises `GraphFormatError`, a subclass of `ValueError`.

### Comparing results

`frontierbfs.compare` checks a candidate array against a reference of the same
length (otherwise `ValueError`):

- `find_mismatch` returns the first `Mismatch` (`index`, `expected`, `found`)
  or `None`;
- `compare_arrays` returns whether the arrays are equal, printing the first
  difference to stderr;
- `compare_approx` does the same with a tolerance of `1e-11`;
- `compare_radii_estimate` reports every difference and also whether the
  maximum values differ;
- `format_grid` lays values out in the largest square grid that fits, two
  digits per value.

### Scoring

`frontierbfs.grading` turns a correctness flag and two times into a score:

- `compute_score(correct, ref_time, stu_time)` gives 0.2 for a correct result
  plus up to 0.8 that grows linearly with `ref_time / stu_time` (nothing at a
  ratio of 0.3, full at 0.7); an incorrect result scores 0;
- `max_scores_for(graph_name)` gives the points for top-down, bottom-up and
  hybrid: `(2, 3, 3)` for the graphs named in the first three entries of
  `GRADE_GRAPHS`, `(7, 8, 8)` otherwise;
- `format_score_table(graph_names, scores)` renders the weighted scores per
  graph and their total out of 70.

## Command line

```
graphtools text2bin input.txt output.graph
graphtools info graph.bin
graphtools print graph.bin
graphtools noout graph.bin
graphtools noin graph.bin
graphtools edgestats graph.bin
```

- `text2bin` converts a text graph into the binary format;
- `info` prints the vertex and edge counts;
- `print` prints every vertex with its outgoing and incoming edges;
- `noout` / `noin` list vertices with no outgoing / incoming edges and the
  share of vertices they make up;
- `edgestats` prints totals, averages, minima and maxima of edges per vertex,
  and whether every edge has a reverse edge.

`graphtools` alone prints the list of commands and exits with status 1; a
command given too few arguments prints its usage and exits with status 1; an
unknown command prints the list of commands. Unreadable or malformed files
are reported on stderr with status 1. The same statistics are available from
Python through `nodes_without_outgoing`, `nodes_without_incoming` and
`edge_stats` (which returns an `EdgeStats`) in `frontierbfs.tools`.

## What the package does not do

There is no command that runs or times the searches, and no reference
implementation to check them against: `frontierbfs.grading` only computes
scores from times and correctness flags that you supply, and
`frontierbfs.compare` only compares arrays you give it. The searches run
sequentially in a single thread.
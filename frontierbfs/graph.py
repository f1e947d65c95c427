"""Compressed adjacency graphs with outgoing and incoming edge lists."""

from __future__ import annotations

import os
import re
import struct
from dataclasses import dataclass
from itertools import accumulate
from typing import BinaryIO, Iterable, Iterator, Sequence

# 0xDEADBEEF reinterpreted as a signed 32-bit integer.
GRAPH_MAGIC = 0xDEADBEEF - (1 << 32)
TEXT_HEADER = "AdjacencyGraph"

_INT = struct.Struct("<i")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PathLike = str | os.PathLike


class GraphFormatError(ValueError):
    """Raised when a graph file or edge list is malformed."""


def _span(starts: Sequence[int], edges: Sequence[int], vertex: int) -> range:
    begin = starts[vertex]
    end = len(edges) if vertex == len(starts) - 1 else starts[vertex + 1]
    return range(begin, end)


@dataclass(frozen=True)
class Graph:
    """A directed graph stored as start offsets into flat edge lists."""

    outgoing_starts: tuple[int, ...]
    outgoing_edges: tuple[int, ...]
    incoming_starts: tuple[int, ...]
    incoming_edges: tuple[int, ...]

    @classmethod
    def from_outgoing(
        cls, outgoing_starts: Iterable[int], outgoing_edges: Iterable[int]
    ) -> Graph:
        """Build a graph from its outgoing representation, deriving incoming edges."""
        starts = tuple(outgoing_starts)
        edges = tuple(outgoing_edges)
        num_nodes = len(starts)
        for position, start in enumerate(starts):
            if not 0 <= start <= len(edges):
                raise GraphFormatError(
                    f"start offset {start} of vertex {position} is out of range"
                )
        for target in edges:
            if not 0 <= target < num_nodes:
                raise GraphFormatError(f"edge target {target} is not a vertex")

        sources: list[list[int]] = [[] for _ in range(num_nodes)]
        for source in range(num_nodes):
            for index in _span(starts, edges, source):
                sources[edges[index]].append(source)

        counts = [len(group) for group in sources]
        incoming_starts = tuple(accumulate(counts[:-1], initial=0)) if counts else ()
        incoming_edges = tuple(src for group in sources for src in group)
        return cls(starts, edges, incoming_starts, incoming_edges)

    @property
    def num_nodes(self) -> int:
        return len(self.outgoing_starts)

    @property
    def num_edges(self) -> int:
        return len(self.outgoing_edges)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_nodes:
            raise IndexError(f"vertex {vertex} out of range 0..{self.num_nodes - 1}")

    def outgoing(self, vertex: int) -> tuple[int, ...]:
        """Targets of the edges leaving ``vertex``."""
        self._check_vertex(vertex)
        span = _span(self.outgoing_starts, self.outgoing_edges, vertex)
        return self.outgoing_edges[span.start:span.stop]

    def incoming(self, vertex: int) -> tuple[int, ...]:
        """Sources of the edges arriving at ``vertex``."""
        self._check_vertex(vertex)
        span = _span(self.incoming_starts, self.incoming_edges, vertex)
        return self.incoming_edges[span.start:span.stop]

    def outgoing_size(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return len(_span(self.outgoing_starts, self.outgoing_edges, vertex))

    def incoming_size(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return len(_span(self.incoming_starts, self.incoming_edges, vertex))


def _meaningful_lines(lines: Iterator[str]) -> Iterator[str]:
    for line in lines:
        if line and not line.startswith("#"):
            yield line


def _parse_count(line: str, what: str) -> int:
    match = _LEADING_INT.match(line)
    if match is None:
        raise GraphFormatError(f"expected {what}, found {line!r}")
    value = int(match.group(1))
    if value < 0:
        raise GraphFormatError(f"{what} must not be negative, found {value}")
    return value


def _line_integers(line: str) -> Iterator[int]:
    for item in line.split():
        try:
            yield int(item)
        except ValueError:
            return


def load_graph(path: PathLike) -> Graph:
    """Load a graph from the text adjacency format."""
    with open(path, encoding="utf-8") as handle:
        lines = iter(handle.read().splitlines())

    first = next(lines, "")
    if first != TEXT_HEADER:
        raise GraphFormatError(f"invalid input file header {first!r}")

    meta = _meaningful_lines(lines)
    try:
        num_nodes = _parse_count(next(meta), "node count")
        num_edges = _parse_count(next(meta), "edge count")
    except StopIteration:
        raise GraphFormatError("missing node or edge count") from None

    values = [
        value
        for line in lines
        if not line.startswith("#")
        for value in _line_integers(line)
    ]
    expected = num_nodes + num_edges
    if len(values) != expected:
        raise GraphFormatError(
            f"expected {expected} integers after the header, found {len(values)}"
        )
    return Graph.from_outgoing(values[:num_nodes], values[num_nodes:])


def _read_ints(stream: BinaryIO, count: int, what: str) -> tuple[int, ...]:
    size = _INT.size * count
    data = stream.read(size)
    if len(data) != size:
        raise GraphFormatError(f"Error reading {what}.")
    return struct.unpack(f"<{count}i", data)


def load_graph_binary(path: PathLike) -> Graph:
    """Load a graph from the binary format written by :func:`store_graph_binary`."""
    with open(path, "rb") as stream:
        magic, num_nodes, num_edges = _read_ints(stream, 3, "header")
        if magic != GRAPH_MAGIC:
            raise GraphFormatError("Invalid graph file header. File may be corrupt.")
        if num_nodes < 0 or num_edges < 0:
            raise GraphFormatError("Invalid graph file header. File may be corrupt.")
        starts = _read_ints(stream, num_nodes, "nodes")
        edges = _read_ints(stream, num_edges, "edges")
    return Graph.from_outgoing(starts, edges)


def store_graph_binary(path: PathLike, graph: Graph) -> None:
    """Write the outgoing representation of ``graph`` in binary form."""
    with open(path, "wb") as stream:
        stream.write(struct.pack("<3i", GRAPH_MAGIC, graph.num_nodes, graph.num_edges))
        stream.write(struct.pack(f"<{graph.num_nodes}i", *graph.outgoing_starts))
        stream.write(struct.pack(f"<{graph.num_edges}i", *graph.outgoing_edges))


def format_graph(graph: Graph) -> str:
    """Render every vertex with its outgoing and incoming neighbours."""
    parts = [
        "Graph pretty print:\n",
        f"num_nodes={graph.num_nodes}\n",
        f"num_edges={graph.num_edges}\n",
    ]
    for vertex in range(graph.num_nodes):
        out = graph.outgoing(vertex)
        inc = graph.incoming(vertex)
        parts.append(f"node {vertex:02d}: out={len(out)}: ")
        parts.append("".join(f"{target} " for target in out))
        parts.append("\n")
        parts.append(f"         in={len(inc)}: ")
        parts.append("".join(f"{source} " for source in inc))
        parts.append("\n")
    return "".join(parts)
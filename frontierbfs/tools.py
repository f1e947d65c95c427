"""Command-line tools for converting and inspecting graph files."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence

from frontierbfs.graph import (
    Graph,
    GraphFormatError,
    format_graph,
    load_graph,
    load_graph_binary,
    store_graph_binary,
)

PROG = "graphtools"
INT_MAX = 2**31 - 1

CMD_TEXT2BIN = "text2bin"
CMD_INFO = "info"
CMD_PRINT = "print"
CMD_NOOUTEDGES = "noout"
CMD_NOINEDGES = "noin"
CMD_EDGESTATS = "edgestats"

_COMMAND_USAGE = {
    CMD_TEXT2BIN: (
        "textfilename binfilename",
        "Converts a graph from text file format to binary file format",
    ),
    CMD_INFO: ("filename", "Pretty-prints graph info (num vertices, num edges)"),
    CMD_PRINT: (
        "filename",
        "Pretty-prints graph, including edge information (be careful with large graphs)",
    ),
    CMD_NOOUTEDGES: ("filename", "Lists all vertices without outgoing edges."),
    CMD_NOINEDGES: ("filename", "Lists all edges without incoming edges."),
    CMD_EDGESTATS: ("filename", "Print basic stats about edges."),
}


@dataclass(frozen=True)
class EdgeStats:
    """Per-vertex edge count statistics for a graph."""

    total_outgoing: int
    total_incoming: int
    min_outgoing: int
    max_outgoing: int
    min_incoming: int
    max_incoming: int
    avg_outgoing: float
    avg_incoming: float
    is_symmetric: bool


def nodes_without_outgoing(graph: Graph) -> list[int]:
    """Vertices that have no outgoing edges, in increasing order."""
    return [v for v in range(graph.num_nodes) if graph.outgoing_size(v) == 0]


def nodes_without_incoming(graph: Graph) -> list[int]:
    """Vertices that have no incoming edges, in increasing order."""
    return [v for v in range(graph.num_nodes) if graph.incoming_size(v) == 0]


def edge_stats(graph: Graph) -> EdgeStats:
    """Gather edge statistics and test whether every edge has a reverse edge.

    Raises GraphFormatError if an outgoing edge has no matching incoming entry.
    """
    out_sizes = [graph.outgoing_size(v) for v in range(graph.num_nodes)]
    in_sizes = [graph.incoming_size(v) for v in range(graph.num_nodes)]
    is_symmetric = True

    for vertex in range(graph.num_nodes):
        incoming_here = set(graph.incoming(vertex))
        for target in graph.outgoing(vertex):
            if vertex not in graph.incoming(target):
                raise GraphFormatError(
                    "GRAPH DID NOT PASS SANITY CHECK:\n"
                    f"vertex {vertex} has outgoing edge to {target},\n but "
                    f"vertex {target} has no incoming edge from {vertex}"
                )
            if target not in incoming_here:
                is_symmetric = False

    total_out = sum(out_sizes)
    total_in = sum(in_sizes)
    nodes = graph.num_nodes
    return EdgeStats(
        total_outgoing=total_out,
        total_incoming=total_in,
        min_outgoing=min(out_sizes, default=INT_MAX),
        max_outgoing=max(out_sizes, default=0),
        min_incoming=min(in_sizes, default=INT_MAX),
        max_incoming=max(in_sizes, default=0),
        avg_outgoing=total_out / nodes if nodes else float("nan"),
        avg_incoming=total_in / nodes if nodes else float("nan"),
        is_symmetric=is_symmetric,
    )


def _print_help() -> None:
    descriptions = {
        CMD_TEXT2BIN: "text file to binary file conversion",
        CMD_INFO: "print graph metadata",
        CMD_PRINT: "print graph topology (careful with big graphs)",
        CMD_NOOUTEDGES: "detect vertices with no outgoing edges",
        CMD_NOINEDGES: "detect vertices with no incoming edges",
        CMD_EDGESTATS: "print stats on graph edges: e.g., min/max edges per node, etc.",
    }
    text = (
        f"Usage: {PROG} cmd args\n"
        f"Use '{PROG} cmd' to get command-specific help.\n"
        "\n"
        "Valid cmds are:\n\n"
        + "".join(f"{cmd}: {desc}\n" for cmd, desc in descriptions.items())
    )
    sys.stderr.write(text)


def _percent(count: int, total: int) -> str:
    value = 100.0 * count / total if total else float("nan")
    return f"{value:.2g}"


def _report_missing(vertices: list[int], total: int, kind: str) -> None:
    print(f"Nodes with no {kind} edges:")
    print("".join(f"{v} " for v in vertices))
    print(
        f"{len(vertices)} of {total} nodes have zero {kind} edges "
        f"({_percent(len(vertices), total)}%)."
    )


def _load_binary(path: str) -> Graph:
    print(f"Loading graph: {path}")
    graph = load_graph_binary(path)
    return graph


def _run(cmd: str, args: Sequence[str]) -> None:
    if cmd == CMD_TEXT2BIN:
        source, target = args[0], args[1]
        print(f"Loading graph: {source}")
        graph = load_graph(source)
        print("Done loading.")
        store_graph_binary(target, graph)
        return

    graph = _load_binary(args[0])
    if cmd == CMD_EDGESTATS:
        print("Done loading. Now analyzing graph...")
        stats = edge_stats(graph)
        banner = "=" * 57
        print(banner)
        print("Edge statistics for this graph:")
        print(banner)
        print(f"The graph {'IS ' if stats.is_symmetric else 'IS NOT '}symmetric.")
        print(
            f"Outgoing edges: total={stats.total_outgoing} avg={stats.avg_outgoing:g}"
            f" min={stats.min_outgoing} max={stats.max_outgoing}"
        )
        print(
            f"Incoming edges: total={stats.total_incoming} avg={stats.avg_incoming:g}"
            f" min={stats.min_incoming} max={stats.max_incoming}"
        )
        return

    print("Done loading.")
    if cmd == CMD_INFO:
        print(f"Num vertices: {graph.num_nodes}")
        print(f"Num edges:    {graph.num_edges}")
    elif cmd == CMD_PRINT:
        sys.stdout.write(format_graph(graph))
    elif cmd == CMD_NOOUTEDGES:
        _report_missing(nodes_without_outgoing(graph), graph.num_nodes, "outgoing")
    elif cmd == CMD_NOINEDGES:
        _report_missing(nodes_without_incoming(graph), graph.num_nodes, "incoming")


def main(argv: Sequence[str] | None = None) -> int:
    """Run a graph tool command; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _print_help()
        return 1

    cmd, rest = args[0], args[1:]
    if cmd not in _COMMAND_USAGE:
        _print_help()
        return 0

    usage, description = _COMMAND_USAGE[cmd]
    if len(rest) < len(usage.split()):
        sys.stderr.write(f"Usage: {PROG} {cmd} {usage}\n{description}\n")
        return 1

    try:
        _run(cmd, rest)
    except (GraphFormatError, OSError) as error:
        sys.stderr.write(f"{error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
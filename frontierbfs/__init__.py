"""Breadth-first search over compressed adjacency graphs, with result checks, scoring and graph file tools."""

__version__ = "0.1.0"
__all__ = ["graph", "bfs", "compare", "grading", "tools"]
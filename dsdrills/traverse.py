"""Breadth-first and depth-first traversal with an explicit queue and stack."""

from __future__ import annotations

import argparse
import sys
from collections import deque

from dsdrills.simplegraph import Node, SimpleGraph, read_graph

__all__ = ["bfs", "dfs", "main"]

START_NAME = "Portland"


def bfs(start: Node) -> list[str]:
    """Return node names in breadth-first order from start."""
    pending: deque[Node] = deque([start])
    visited: set[int] = set()
    order: list[str] = []
    while pending:
        node = pending.popleft()
        if id(node) in visited:
            continue
        order.append(node.name)
        visited.add(id(node))
        pending.extend(arc.finish for arc in node.arcs)
    return order


def dfs(start: Node) -> list[str]:
    """Return node names in depth-first order from start."""
    stack: list[Node] = [start]
    visited: set[int] = set()
    order: list[str] = []
    while stack:
        node = stack.pop()
        if id(node) not in visited:
            order.append(node.name)
            visited.add(id(node))
        stack.extend(arc.finish for arc in node.arcs if id(arc.finish) not in visited)
    return order


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and print both traversals from Portland."""
    parser = argparse.ArgumentParser(
        prog="traverse",
        description="Print depth-first and breadth-first orders of a graph.",
    )
    parser.parse_args(argv)
    graph = read_graph(SimpleGraph(), sys.stdin)
    start = graph.node_map[START_NAME]
    lines = [f"DFS at {START_NAME} ...."]
    lines.extend(dfs(start))
    lines.append(f"BFS at {START_NAME} ....")
    lines.extend(bfs(start))
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
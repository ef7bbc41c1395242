"""Structure-based graph with a simple line-oriented text format."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

from dsdrills.strlib import string_to_real, trim

__all__ = ["Node", "Arc", "SimpleGraph", "read_graph", "write_graph"]


@dataclass(eq=False)
class Node:
    """A named node with the arcs that leave it."""

    name: str
    arcs: list[Arc] = field(default_factory=list)


@dataclass(eq=False)
class Arc:
    """A directed arc between two nodes with a traversal cost."""

    start: Node
    finish: Node
    cost: float = 0.0


class SimpleGraph:
    """A set of nodes, a set of arcs and a map from names to nodes."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self.arcs: list[Arc] = []
        self.node_map: dict[str, Node] = {}

    def add_node(self, name: str) -> Node:
        """Return the node called name, creating it if it does not exist."""
        node = self.node_map.get(name)
        if node is None:
            node = Node(name)
            self.nodes.append(node)
            self.node_map[name] = node
        return node

    def add_arc(self, start: Node, finish: Node, cost: float = 0.0) -> Arc:
        """Create an arc from start to finish and record it."""
        arc = Arc(start, finish, cost)
        self.arcs.append(arc)
        start.arcs.append(arc)
        return arc


def _read_line(graph: SimpleGraph, line: str) -> None:
    arrow = line.find("-")
    if arrow < 0:
        graph.add_node(trim(line))
        return
    start = arrow + 1
    finish = arrow - 1
    bidirectional = True
    if start < len(line) and line[start] == ">":
        start += 1
        if finish >= 0 and line[finish] == "<":
            finish -= 1
        else:
            bidirectional = False
    name1 = trim(line[: finish + 1])
    cost = 0.0
    lp = line.find("(", start)
    if lp < 0:
        name2 = trim(line[start:])
    else:
        name2 = trim(line[start:lp])
        rp = line.find(")", lp)
        if rp < 0:
            raise ValueError("Mismatched parentheses")
        cost = string_to_real(trim(line[lp + 1: rp]))
    n1 = graph.add_node(name1)
    n2 = graph.add_node(name2)
    graph.add_arc(n1, n2, cost)
    if bidirectional:
        graph.add_arc(n2, n1, cost)


def read_graph(graph: SimpleGraph, lines: Iterable[str]) -> SimpleGraph:
    """Add nodes and arcs described by lines to graph, stopping at a blank line.

    A line is a node name, or "A -> B", "A - B" or "A <-> B", optionally
    followed by a cost in parentheses.  Returns the graph.
    """
    for raw in lines:
        line = raw.removesuffix("\n")
        if not line:
            break
        _read_line(graph, line)
    return graph


def write_graph(graph: SimpleGraph, stream: TextIO) -> None:
    """Write graph to stream in the format read_graph accepts."""
    connected: set[str] = set()
    for arc in graph.arcs:
        connected.add(arc.start.name)
        connected.add(arc.finish.name)
        text = f"{arc.start.name} -> {arc.finish.name}"
        if arc.cost != 0:
            text += f" ({arc.cost:g})"
        stream.write(text + "\n")
    for node in graph.nodes:
        if node.name not in connected:
            stream.write(node.name + "\n")
import io

import pytest

from dsdrills.simplegraph import SimpleGraph, read_graph, write_graph
from dsdrills.strlib import StrlibError


def load(text):
    return read_graph(SimpleGraph(), io.StringIO(text))


def dump(graph):
    out = io.StringIO()
    write_graph(graph, out)
    return out.getvalue()


def test_add_node_returns_existing():
    g = SimpleGraph()
    first = g.add_node("A")
    second = g.add_node("A")
    assert first is second
    assert len(g.nodes) == 1
    assert g.node_map["A"] is first


def test_add_arc_links_start_node():
    g = SimpleGraph()
    a = g.add_node("A")
    b = g.add_node("B")
    arc = g.add_arc(a, b, 2.0)
    assert arc.start is a and arc.finish is b
    assert a.arcs == [arc]
    assert b.arcs == []
    assert g.arcs == [arc]


def test_one_way_arc():
    g = load("A -> B\n")
    assert len(g.arcs) == 1
    assert g.arcs[0].start.name == "A"
    assert g.arcs[0].finish.name == "B"


def test_bidirectional_forms():
    for text in ("A - B\n", "A <-> B\n"):
        g = load(text)
        pairs = [(arc.start.name, arc.finish.name) for arc in g.arcs]
        assert pairs == [("A", "B"), ("B", "A")]


def test_cost_is_parsed():
    g = load("A -> B (3.5)\n")
    assert g.arcs[0].cost == 3.5


def test_isolated_node_and_blank_line_stops_reading():
    g = load("Solo\nA -> B\n\nC -> D\n")
    assert sorted(g.node_map) == ["A", "B", "Solo"]


def test_write_round_trip():
    text = "A -> B (3)\nB -> C\nC\n"
    g = load("A -> B (3)\nB -> C\n")
    g.add_node("D")
    assert dump(g) == "A -> B (3)\nB -> C\nD\n"
    again = load(dump(g))
    assert dump(again) == dump(g)
    assert text.splitlines()[0] == dump(g).splitlines()[0]


def test_write_bidirectional():
    assert dump(load("A - B\n")) == "A -> B\nB -> A\n"


def test_mismatched_parentheses():
    with pytest.raises(ValueError, match="Mismatched parentheses"):
        load("A -> B (3\n")


def test_bad_cost():
    with pytest.raises(StrlibError):
        load("A -> B (cheap)\n")
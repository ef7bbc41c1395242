import io

import pytest

from dsdrills.simplegraph import SimpleGraph, read_graph
from dsdrills.traverse import bfs, dfs, main

DIAMOND = "A -> B\nA -> C\nB -> D\nC -> D\n"


def start_of(text, name="A"):
    graph = read_graph(SimpleGraph(), io.StringIO(text))
    return graph.node_map[name]


def test_bfs_diamond():
    assert bfs(start_of(DIAMOND)) == ["A", "B", "C", "D"]


def test_dfs_diamond():
    assert dfs(start_of(DIAMOND)) == ["A", "C", "D", "B"]


def test_bidirectional_cycle_visits_each_once():
    text = "A - B\nB - C\nC - A\n"
    for walk in (bfs, dfs):
        order = walk(start_of(text))
        assert sorted(order) == ["A", "B", "C"]
        assert order[0] == "A"


def test_unreachable_nodes_are_skipped():
    text = "A -> B\nC -> A\n"
    assert bfs(start_of(text)) == ["A", "B"]
    assert dfs(start_of(text)) == ["A", "B"]


def test_single_node():
    assert bfs(start_of("A\n")) == ["A"]
    assert dfs(start_of("A\n")) == ["A"]


def test_main_prints_both_orders(monkeypatch, capsys):
    text = "Portland -> Seattle\nPortland -> Denver\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "DFS at Portland ....\nPortland\nDenver\nSeattle\n"
        "BFS at Portland ....\nPortland\nSeattle\nDenver\n"
    )


def test_main_requires_portland(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("A -> B\n"))
    with pytest.raises(KeyError):
        main([])
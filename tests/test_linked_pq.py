import io

import pytest

from dsdrills.linked_pq import LinkedPriorityQueue, format_session, main
from dsdrills.strlib import StrlibError


def drain(pq):
    out = []
    while not pq.is_empty():
        out.append(pq.dequeue())
    return out


def test_values_come_out_by_priority():
    pq = LinkedPriorityQueue()
    pq.enqueue("b", 2)
    pq.enqueue("a", 1)
    pq.enqueue("c", 3)
    assert len(pq) == 3
    assert drain(pq) == ["a", "b", "c"]


def test_equal_priority_goes_after_first_entry_of_that_priority():
    pq = LinkedPriorityQueue()
    pq.enqueue("a", 1)
    pq.enqueue("b", 1)
    pq.enqueue("c", 1)
    assert drain(pq) == ["a", "c", "b"]


def test_equal_priority_skips_run_of_identical_values():
    pq = LinkedPriorityQueue()
    pq.enqueue("x", 1)
    pq.enqueue("x", 1)
    pq.enqueue("y", 1)
    assert drain(pq) == ["x", "x", "y"]


def test_zero_and_negative_priorities():
    pq = LinkedPriorityQueue()
    pq.enqueue("a", -1)
    pq.enqueue("b", 0)
    pq.enqueue("c", 1)
    assert drain(pq) == ["a", "b", "c"]


def test_default_priority_is_zero():
    pq = LinkedPriorityQueue()
    pq.enqueue("later", 5)
    pq.enqueue("first")
    assert pq.peek() == "first"


def test_peek_does_not_remove():
    pq = LinkedPriorityQueue()
    pq.enqueue("only", 4)
    assert pq.peek() == "only"
    assert len(pq) == 1


def test_empty_queue_errors():
    pq = LinkedPriorityQueue()
    assert pq.is_empty()
    with pytest.raises(IndexError):
        pq.dequeue()
    with pytest.raises(IndexError):
        pq.peek()


def test_clear_empties_queue():
    pq = LinkedPriorityQueue()
    for name, prio in [("a", 1), ("b", 2)]:
        pq.enqueue(name, prio)
    pq.clear()
    assert len(pq) == 0
    assert pq.is_empty()


def test_copy_is_independent():
    pq = LinkedPriorityQueue()
    pq.enqueue("a", 1)
    pq.enqueue("b", 2)
    dup = pq.copy()
    pq.dequeue()
    assert len(dup) == 2
    assert drain(dup) == ["a", "b"]
    assert drain(pq) == ["b"]


def test_format_session_output():
    text = format_session(["apple 2\n", "pear 1\n"])
    assert text == (
        "pq.size() = 2\n"
        "i=0: pq.peek() = pear\n"
        "i=0: pq.dequeue() = pear\n"
        "i=1: pq.peek() = apple\n"
        "i=1: pq.dequeue() = apple\n"
        "pq.isEmpty(): true\n"
    )


def test_format_session_empty_input():
    assert format_session([]) == "pq.size() = 0\npq.isEmpty(): true\n"


def test_format_session_bad_priority():
    with pytest.raises(StrlibError):
        format_session(["apple pie"])


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("z 3\ny 1.5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "pq.size() = 2"
    assert lines[1] == "i=0: pq.peek() = y"
    assert lines[-1] == "pq.isEmpty(): true"
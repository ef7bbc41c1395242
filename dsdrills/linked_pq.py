"""Priority queue kept as an ordered list of entries, with a line-oriented driver."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Any

from dsdrills.strlib import string_to_real

__all__ = ["LinkedPriorityQueue", "format_session", "main"]


class LinkedPriorityQueue:
    """Queue whose values come out in order of priority, lowest number first.

    Entries are kept sorted by priority.  A value whose priority equals that
    of an existing entry is placed after the first entry of that priority,
    past any run of identical values that immediately follows it.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[Any, float]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._entries

    def clear(self) -> None:
        """Remove every value from the queue."""
        self._entries.clear()

    def _insertion_index(self, priority: float) -> int:
        entries = self._entries
        if not entries:
            return 0
        i = 0
        while True:
            this_priority = entries[i][1]
            has_next = i + 1 < len(entries)
            if this_priority > priority:
                return 0
            if has_next and this_priority < priority:
                next_priority = entries[i + 1][1]
                if next_priority <= priority:
                    i += 1
                    continue
                if next_priority > priority:
                    return i + 1
            if this_priority == priority:
                last = i
                while last + 1 < len(entries) and entries[last + 1][0] == entries[last][0]:
                    last += 1
                return last + 1
            if not has_next:
                return len(entries)
            i += 1

    def enqueue(self, value: Any, priority: float = 0) -> None:
        """Add value with the given priority."""
        self._entries.insert(self._insertion_index(priority), (value, priority))

    def dequeue(self) -> Any:
        """Remove and return the first value; raise IndexError if empty."""
        if not self._entries:
            raise IndexError("dequeue: Attempting to dequeue an empty queue")
        return self._entries.pop(0)[0]

    def peek(self) -> Any:
        """Return the first value without removing it; raise IndexError if empty."""
        if not self._entries:
            raise IndexError("peek: Attempting to peek at an empty queue")
        return self._entries[0][0]

    def copy(self) -> LinkedPriorityQueue:
        """Return an independent queue holding the same entries."""
        duplicate = LinkedPriorityQueue()
        duplicate._entries = list(self._entries)
        return duplicate


def _parse_pair(line: str) -> tuple[str, float]:
    space = line.find(" ")
    if space < 0:
        return line, string_to_real(line)
    return line[:space], string_to_real(line[space + 1:])


def format_session(lines: Iterable[str]) -> str:
    """Enqueue "value priority" lines, then drain the queue and report each step."""
    pq = LinkedPriorityQueue()
    for raw in lines:
        value, priority = _parse_pair(raw.removesuffix("\n"))
        pq.enqueue(value, priority)
    out = [f"pq.size() = {len(pq)}"]
    for i in range(len(pq)):
        out.append(f"i={i}: pq.peek() = {pq.peek()}")
        out.append(f"i={i}: pq.dequeue() = {pq.dequeue()}")
    out.append(f"pq.isEmpty(): {'true' if pq.is_empty() else 'false'}")
    return "\n".join(out) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read value/priority lines from standard input and print the drained queue."""
    parser = argparse.ArgumentParser(
        prog="linked-pq",
        description="Read 'value priority' lines and print them in priority order.",
    )
    parser.parse_args(argv)
    sys.stdout.write(format_session(sys.stdin))
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""String-to-string hash map using open addressing, with a command interpreter."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

from dsdrills.strlib import string_to_integer
from dsdrills.tokenscanner import TokenScanner

__all__ = [
    "StringMap",
    "QuitCommand",
    "hash_code",
    "help_text",
    "execute_command",
    "main",
]

INITIAL_BUCKET_COUNT = 13
REHASH_THRESHOLD = 0.7

HASH_SEED = 5381
HASH_MULTIPLIER = 33
HASH_MASK = 0x7FFFFFFF
_WORD_MASK = 0xFFFFFFFF


def hash_code(key: str) -> int:
    """Return the non-negative djb2 hash of key, computed over its UTF-8 bytes."""
    value = HASH_SEED
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (HASH_MULTIPLIER * value + signed) & _WORD_MASK
    return value & HASH_MASK


class QuitCommand(Exception):
    """Raised by execute_command when the quit command is read."""


class StringMap:
    """Map from strings to strings held in a linearly probed hash table.

    Missing keys read as the empty string.  Before each put, the table grows
    to 2n + 1 buckets once the load factor exceeds 0.7.
    """

    def __init__(self) -> None:
        self._slots: list[tuple[str, str] | None] = [None] * INITIAL_BUCKET_COUNT
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        return (entry[0] for entry in self._slots if entry is not None)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in (e for e in self._slots if e))
        return f"{type(self).__name__}({{{pairs}}})"

    def _probe(self, key: str) -> Iterator[int]:
        n = len(self._slots)
        home = hash_code(key) % n
        return ((home + step) % n for step in range(n))

    def _find(self, key: str) -> int | None:
        for index in self._probe(key):
            entry = self._slots[index]
            if entry is None:
                return None
            if entry[0] == key:
                return index
        return None

    def _place(self, key: str, value: str) -> None:
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = (key, value)
                self._count += 1
                return
        raise ValueError("Insufficient space in hash table")

    def get(self, key: str) -> str:
        """Return the value bound to key, or the empty string if there is none."""
        index = self._find(key)
        return "" if index is None else self._slots[index][1]

    def put(self, key: str, value: str) -> None:
        """Bind key to value, replacing any earlier value."""
        if self._count / len(self._slots) > REHASH_THRESHOLD:
            self.rehash(2 * len(self._slots) + 1)
        index = self._find(key)
        if index is None:
            self._place(key, value)
        else:
            self._slots[index] = (key, value)

    def is_empty(self) -> bool:
        """Return True if the map holds no pairs."""
        return self._count == 0

    def contains_key(self, key: str) -> bool:
        """Return True if key is bound."""
        return self._find(key) is not None

    def remove(self, key: str) -> None:
        """Remove key if it is bound, keeping every other key reachable."""
        hole = self._find(key)
        if hole is None:
            return
        slots = self._slots
        n = len(slots)
        slots[hole] = None
        self._count -= 1
        current = hole
        while True:
            current = (current + 1) % n
            entry = slots[current]
            if entry is None:
                return
            home = hash_code(entry[0]) % n
            if hole <= current:
                stays = hole < home <= current
            else:
                stays = home > hole or home <= current
            if not stays:
                slots[hole] = entry
                slots[current] = None
                hole = current

    def clear(self) -> None:
        """Remove every pair, keeping the current number of buckets."""
        self._slots = [None] * len(self._slots)
        self._count = 0

    def bucket_count(self) -> int:
        """Return the number of buckets in the table."""
        return len(self._slots)

    def rehash(self, n_buckets: int) -> None:
        """Move every pair into a new table of n_buckets buckets."""
        if n_buckets < 1 or n_buckets < self._count:
            raise ValueError("Insufficient space in hash table")
        old = [entry for entry in self._slots if entry is not None]
        self._slots = [None] * n_buckets
        self._count = 0
        for key, value in old:
            self._place(key, value)


_HELP_LINES = (
    "Available commands:",
    "  size         -- Prints the size of the map",
    "  isEmpty      -- Prints whether the map is empty",
    "  get key      -- Returns the value associated with key",
    "  set key str  -- Sets the entry for key to str",
    "  contains key -- Indicates whether the map contains key",
    "  remove key   -- Removes the key from the table",
    "  clear        -- Clears the map",
    "  buckets      -- Prints the number of buckets",
    "  rehash       -- Rehashes the map to have n buckets",
    "  help         -- List these commands",
    "  quit         -- Quits the program",
)


def help_text() -> str:
    """Return the list of available commands."""
    return "\n".join(_HELP_LINES)


def _bool_text(flag: bool) -> str:
    return "true" if flag else "false"


def execute_command(scanner: TokenScanner, string_map: StringMap) -> str | None:
    """Run the command read from scanner against string_map.

    Returns the text the command prints, or None if it prints nothing.
    Raises QuitCommand for the quit command.
    """
    cmd = scanner.next_token()

    def argument() -> str:
        return scanner.get_string_value(scanner.next_token())

    if cmd == "size":
        return str(len(string_map))
    if cmd == "isEmpty":
        return _bool_text(string_map.is_empty())
    if cmd == "clear":
        string_map.clear()
        return None
    if cmd == "get":
        return string_map.get(argument())
    if cmd == "set":
        key = argument()
        string_map.put(key, argument())
        return None
    if cmd == "contains":
        return _bool_text(string_map.contains_key(argument()))
    if cmd == "remove":
        string_map.remove(argument())
        return None
    if cmd == "buckets":
        return str(string_map.bucket_count())
    if cmd == "rehash":
        string_map.rehash(string_to_integer(scanner.next_token()))
        return None
    if cmd == "help":
        return help_text()
    if cmd == "quit":
        raise QuitCommand()
    if cmd != "":
        return f"Unrecognized command: {cmd}"
    return None


def _command_scanner() -> TokenScanner:
    scanner = TokenScanner()
    scanner.ignore_whitespace()
    scanner.scan_numbers()
    scanner.scan_strings()
    return scanner


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input, one per line, until quit or end of input."""
    parser = argparse.ArgumentParser(
        prog="stringmap",
        description="Interactive test of a string-to-string hash map.",
    )
    parser.parse_args(argv)
    string_map = StringMap()
    scanner = _command_scanner()
    for line in sys.stdin:
        scanner.set_input(line.removesuffix("\n"))
        try:
            output = execute_command(scanner, string_map)
        except QuitCommand:
            break
        except ValueError as exc:
            output = f"ERROR: {exc}"
        if output is not None:
            print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
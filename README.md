# dsdrills

A small collection of classic data structures, plus the command-line drills
that exercise them. Everything is pure Python with no runtime dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsdrills.strlib` | String helpers: `to_upper_case`, `to_lower_case`, `integer_to_string`, `string_to_real`, `string_to_integer`, `starts_with`, `string_needs_quoting`, `quote_string`, `write_quoted_string`, `ltrim`, `rtrim`, `trim`. Conversion failures raise `StrlibError`. |
| `dsdrills.linked_pq` | `LinkedPriorityQueue`, a priority queue kept as a sorted list, and `format_session` |
| `dsdrills.simplegraph` | `SimpleGraph`, `Node`, `Arc`, plus `read_graph` and `write_graph` for a plain-text graph format |
| `dsdrills.traverse` | Breadth-first (`bfs`) and depth-first (`dfs`) traversal of a `SimpleGraph`, each returning node names in visiting order |
| `dsdrills.bigint` | `BigInt`, non-negative arbitrary-size integers stored digit by digit, and `factorial` |
| `dsdrills.tokenscanner` | `TokenScanner`, a configurable tokenizer for words, numbers, strings and operators, with `TokenType` and `TokenScannerError` |
| `dsdrills.stringmap` | `StringMap`, an open-addressing hash map from strings to strings, `hash_code`, and a command interpreter (`execute_command`, `help_text`, `QuitCommand`) |

Lower priority numbers come first in the priority queue.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dsdrills.linked_pq import LinkedPriorityQueue
from dsdrills.bigint import BigInt, factorial
from dsdrills.stringmap import StringMap

pq = LinkedPriorityQueue()
pq.enqueue("write", 2)
pq.enqueue("read", 1)
pq.dequeue()          # "read"

str(factorial(20))    # "2432902008176640000"
str(BigInt("99") + BigInt("1"))   # "100"

m = StringMap()
m.put("colour", "blue")
m.get("colour")       # "blue"
m.get("missing")      # ""
```

Dequeuing or peeking at an empty queue raises `IndexError`.

Graphs are read from lines such as:

```
Portland -> Seattle
Seattle <-> Boise (3)
Boise - Denver
Lonely
```

`->` is one-way, `-` and `<->` are two-way, an optional cost sits in
parentheses, and a line with no dash adds an isolated node. Reading stops at
the first empty line.

## Commands

Each command reads standard input and writes standard output.

`dsdrills-linked-pq` reads lines of the form `value priority`, then prints
the queue size and each value as it is peeked and dequeued.

```
printf 'a 3\nb 1\nc 2\n' | dsdrills-linked-pq
```

`dsdrills-traverse` reads a graph in the format above and prints its
depth-first and breadth-first visiting order starting at the node `Portland`.

`dsdrills-bigint` reads two integers `d1 d2` and prints `d1!`, `d2!` and their
sum.

```
echo "10 5" | dsdrills-bigint
```

`dsdrills-stringmap` reads commands over a `StringMap`, one per line, until
`quit` or the end of input. Type `help` to see its commands (`size`,
`isEmpty`, `get`, `set`, `contains`, `remove`, `clear`, `buckets`, `rehash`,
`quit`).

## Limits

There is only the list-based priority queue; no heap-based priority queue is
provided.
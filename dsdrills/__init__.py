"""Classic data structures: a priority queue, big integers, a string map, a token scanner and graphs."""

__version__ = "0.1.0"
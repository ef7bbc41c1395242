"""Small string helpers: case mapping, numeric conversion, quoting and trimming."""

from __future__ import annotations

import math
import re
from typing import TextIO

__all__ = [
    "StrlibError",
    "to_upper_case",
    "to_lower_case",
    "integer_to_string",
    "string_to_real",
    "string_to_integer",
    "starts_with",
    "string_needs_quoting",
    "quote_string",
    "write_quoted_string",
    "ltrim",
    "rtrim",
    "trim",
]

WHITESPACE = " \n\r\t\f\v"
STRING_DELIMITERS = ",:)}]\n"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_UPPER_TABLE = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LOWER_TABLE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*")
_REAL = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?P<hex>[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"(?:[pP][+-]?[0-9]+)?)?"
    r"(?(hex)|(?P<dec>[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[iI][nN][fF](?:[iI][nN][iI][tT][yY])?|[nN][aA][nN])))"
)

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
}


class StrlibError(ValueError):
    """Raised when a string cannot be converted as requested."""


def to_upper_case(text: str) -> str:
    """Return text with ASCII lowercase letters made uppercase."""
    return text.translate(_UPPER_TABLE)


def to_lower_case(text: str) -> str:
    """Return text with ASCII uppercase letters made lowercase."""
    return text.translate(_LOWER_TABLE)


def integer_to_string(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def string_to_real(text: str) -> float:
    """Parse the leading floating-point number of text; trailing text is ignored."""
    match = _REAL.match(text)
    if match is None or not (match.group("hex") or match.group("dec")):
        raise StrlibError(f"stringToReal: Illegal floating-point format ({text})")
    if match.group("hex"):
        value = float.fromhex(match.group("hex"))
        literal_is_infinite = False
    else:
        literal = match.group("dec")
        value = float(literal)
        literal_is_infinite = "n" in literal.lower() and "nan" not in literal.lower()
    if math.isinf(value) and not literal_is_infinite:
        raise StrlibError(f"stringToReal: Value out of range ({text})")
    return value


def string_to_integer(text: str) -> int:
    """Parse text as a 32-bit integer, allowing surrounding whitespace only."""
    match = _INTEGER.fullmatch(text)
    if match is None:
        raise StrlibError(f"stringToInteger: Illegal integer format ({text})")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise StrlibError(f"stringToInteger: Illegal integer format ({text})")
    return value


def starts_with(text: str, prefix: str) -> bool:
    """Return True if text begins with prefix (a string or a single character)."""
    return text.startswith(prefix)


def string_needs_quoting(text: str) -> bool:
    """Return True if text holds a delimiter before any whitespace."""
    for ch in text:
        if ch in WHITESPACE:
            return False
        if ch in STRING_DELIMITERS:
            return True
    return False


def _escape_byte(byte: int) -> str:
    ch = chr(byte)
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if 0x20 <= byte <= 0x7E and ch != '"':
        return ch
    return f"\\{byte:03o}"


def quote_string(text: str, force_quotes: bool = True) -> str:
    """Return text with special characters escaped, quoted when forced or needed."""
    quoted = force_quotes or string_needs_quoting(text)
    body = "".join(_escape_byte(b) for b in text.encode("utf-8"))
    return f'"{body}"' if quoted else body


def write_quoted_string(stream: TextIO, text: str, force_quotes: bool = True) -> None:
    """Write the escaped, possibly quoted form of text to stream."""
    stream.write(quote_string(text, force_quotes))


def ltrim(text: str) -> str:
    """Strip leading whitespace."""
    return text.lstrip(WHITESPACE)


def rtrim(text: str) -> str:
    """Strip trailing whitespace."""
    return text.rstrip(WHITESPACE)


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return rtrim(ltrim(text))
"""Split text into words, numbers, quoted strings and operators."""

from __future__ import annotations

import enum
from typing import TextIO, Union

__all__ = ["TokenType", "TokenScannerError", "TokenScanner"]

Source = Union[str, TextIO]

_SPACE = " \t\n\v\f\r"

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "'": "'",
    "\\": "\\",
}


def _is_digit(ch: str | None) -> bool:
    return ch is not None and "0" <= ch <= "9"


def _is_space(ch: str | None) -> bool:
    return ch is not None and ch != "" and ch in _SPACE


class TokenType(enum.Enum):
    """Kinds of token the scanner distinguishes."""

    EOF = "eof"
    SEPARATOR = "separator"
    WORD = "word"
    NUMBER = "number"
    STRING = "string"
    OPERATOR = "operator"


class TokenScannerError(ValueError):
    """Raised when the input cannot be scanned as requested."""


class TokenScanner:
    """Reads tokens one at a time from a string or a text stream.

    By default every character that is not part of a word is returned as a
    one-character token, whitespace included.  The ignore_* and scan_*
    methods switch on whitespace skipping, comment skipping, and scanning of
    numbers and quoted strings; add_operator registers multi-character
    operators.  An empty string signals the end of the input.
    """

    def __init__(self, source: Source = "") -> None:
        self._ignore_whitespace = False
        self._ignore_comments = False
        self._scan_numbers = False
        self._scan_strings = False
        self._word_chars = ""
        self._operators: list[str] = []
        self._buffer = ""
        self._pos = 0
        self._saved: list[str] = []
        self.set_input(source)

    def set_input(self, source: Source) -> None:
        """Replace the input with a string or the remaining contents of a stream."""
        self._buffer = source if isinstance(source, str) else source.read()
        self._pos = 0
        self._saved = []

    def has_more_tokens(self) -> bool:
        """Return True if another token remains, without consuming it."""
        token = self.next_token()
        self.save_token(token)
        return token != ""

    def next_token(self) -> str:
        """Return the next token, or the empty string at the end of the input."""
        if self._saved:
            return self._saved.pop()
        while True:
            if self._ignore_whitespace:
                self._skip_spaces()
            ch = self.get_char()
            if ch == "/" and self._ignore_comments:
                ch = self.get_char()
                if ch == "/":
                    while ch not in ("\n", "\r", None):
                        ch = self.get_char()
                    continue
                if ch == "*":
                    prev = None
                    while True:
                        ch = self.get_char()
                        if ch is None or (prev == "*" and ch == "/"):
                            break
                        prev = ch
                    continue
                if ch is not None:
                    self.unget_char()
                ch = "/"
            if ch is None:
                return ""
            if ch in ('"', "'") and self._scan_strings:
                self.unget_char()
                return self._scan_string()
            if _is_digit(ch) and self._scan_numbers:
                self.unget_char()
                return self._scan_number()
            if self.is_word_character(ch):
                self.unget_char()
                return self._scan_word()
            return self._scan_operator(ch)

    def save_token(self, token: str) -> None:
        """Push token back so that the next call to next_token returns it."""
        self._saved.append(token)

    def ignore_whitespace(self) -> None:
        """Skip whitespace between tokens instead of returning it."""
        self._ignore_whitespace = True

    def ignore_comments(self) -> None:
        """Skip // and /* */ comments."""
        self._ignore_comments = True

    def scan_numbers(self) -> None:
        """Return numbers, with fraction and exponent, as single tokens."""
        self._scan_numbers = True

    def scan_strings(self) -> None:
        """Return quoted strings, quotes included, as single tokens."""
        self._scan_strings = True

    def add_word_characters(self, chars: str) -> None:
        """Treat each character of chars as part of a word."""
        self._word_chars += chars

    def add_operator(self, op: str) -> None:
        """Register a multi-character operator."""
        self._operators.insert(0, op)

    def position(self) -> int:
        """Return the offset in the input of the next token to be returned."""
        if not self._saved:
            return self._pos
        return self._pos - len(self._saved[-1])

    def is_word_character(self, ch: str) -> bool:
        """Return True if ch is an ASCII letter or digit or an added word character."""
        if not ch:
            return False
        return (ch.isascii() and ch.isalnum()) or ch in self._word_chars

    def verify_token(self, expected: str) -> None:
        """Read the next token and raise TokenScannerError unless it equals expected."""
        token = self.next_token()
        if token != expected:
            raise TokenScannerError(
                f'TokenScanner::verifyToken: Found "{token}" when expecting "{expected}"'
            )

    def get_token_type(self, token: str) -> TokenType:
        """Classify token by its first character."""
        if token == "":
            return TokenType.EOF
        ch = token[0]
        if _is_space(ch):
            return TokenType.SEPARATOR
        if ch == '"' or (ch == "'" and len(token) > 1):
            return TokenType.STRING
        if _is_digit(ch):
            return TokenType.NUMBER
        if self.is_word_character(ch):
            return TokenType.WORD
        return TokenType.OPERATOR

    def get_string_value(self, token: str) -> str:
        """Return token with surrounding quotes removed and escape sequences decoded."""
        start, finish = 0, len(token)
        if finish > 1 and token[0] in ('"', "'"):
            start, finish = 1, finish - 1
        chars: list[str] = []
        i = start
        while i < finish:
            ch = token[i]
            if ch == "\\":
                i += 1
                ch = token[i] if i < len(token) else "\0"
                if _is_digit(ch) or ch == "x":
                    base = 8
                    if ch == "x":
                        base = 16
                        i += 1
                    result = 0
                    while i < finish:
                        c = token[i]
                        if _is_digit(c):
                            digit = ord(c) - ord("0")
                        elif c.isascii() and c.isalpha():
                            digit = ord(c.upper()) - ord("A") + 10
                        else:
                            digit = base
                        if digit >= base:
                            break
                        result = base * result + digit
                        i += 1
                    ch = chr(result & 0xFF)
                    i -= 1
                else:
                    ch = _SIMPLE_ESCAPES.get(ch, ch)
            chars.append(ch)
            i += 1
        return "".join(chars)

    def get_char(self) -> str | None:
        """Read one character of input; return None at the end."""
        if self._pos >= len(self._buffer):
            return None
        ch = self._buffer[self._pos]
        self._pos += 1
        return ch

    def unget_char(self) -> None:
        """Step back over the last character read."""
        if self._pos > 0:
            self._pos -= 1

    def _peek(self, offset: int = 0) -> str | None:
        index = self._pos + offset
        return self._buffer[index] if index < len(self._buffer) else None

    def _skip_spaces(self) -> None:
        while _is_space(self._peek()):
            self._pos += 1

    def _scan_word(self) -> str:
        start = self._pos
        while True:
            ch = self._peek()
            if ch is None or not self.is_word_character(ch):
                break
            self._pos += 1
        return self._buffer[start:self._pos]

    def _scan_number(self) -> str:
        buf = self._buffer
        start = self._pos
        i = start
        n = len(buf)
        while i < n and _is_digit(buf[i]):
            i += 1
        if i < n and buf[i] == ".":
            i += 1
            while i < n and _is_digit(buf[i]):
                i += 1
        if i < n and buf[i] in "eE":
            j = i + 1
            if j < n and buf[j] in "+-":
                j += 1
            if j < n and _is_digit(buf[j]):
                while j < n and _is_digit(buf[j]):
                    j += 1
                i = j
        self._pos = i
        return buf[start:i]

    def _scan_string(self) -> str:
        delim = self.get_char()
        chars = [delim]
        escape = False
        while True:
            ch = self.get_char()
            if ch is None:
                raise TokenScannerError(
                    "TokenScanner::scanString: found unterminated string"
                )
            if ch == delim and not escape:
                break
            escape = ch == "\\" and not escape
            chars.append(ch)
        chars.append(delim)
        return "".join(chars)

    def _scan_operator(self, first: str) -> str:
        op = first
        while self._is_operator_prefix(op):
            ch = self.get_char()
            if ch is None:
                break
            op += ch
        while len(op) > 1 and op not in self._operators:
            self.unget_char()
            op = op[:-1]
        return op

    def _is_operator_prefix(self, op: str) -> bool:
        return any(candidate.startswith(op) for candidate in self._operators)
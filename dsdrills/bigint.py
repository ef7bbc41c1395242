"""Arbitrary-size non-negative integers held as a sequence of decimal digits."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

__all__ = ["BigInt", "factorial", "main"]


class BigInt:
    """A non-negative integer stored as decimal digits, least significant first.

    Leading zeros are dropped on construction, so "00042" and "42" compare
    equal; zero is held as the single digit 0.
    """

    __slots__ = ("_digits",)

    def __init__(self, text: str) -> None:
        text = str(text)
        if not text:
            raise ValueError("BigInt - illegal format")
        if not all("0" <= ch <= "9" for ch in text):
            raise ValueError("BigInt - illegal format")
        stripped = text.lstrip("0") or "0"
        self._digits: tuple[int, ...] = tuple(int(ch) for ch in reversed(stripped))

    @classmethod
    def _from_digits(cls, digits: Sequence[int]) -> BigInt:
        trimmed = list(digits)
        while len(trimmed) > 1 and trimmed[-1] == 0:
            trimmed.pop()
        if not trimmed:
            trimmed = [0]
        result = cls.__new__(cls)
        result._digits = tuple(trimmed)
        return result

    def __str__(self) -> str:
        return "".join(str(d) for d in reversed(self._digits))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self) -> int:
        return hash(self._digits)

    def __add__(self, other: object) -> BigInt:
        if not isinstance(other, BigInt):
            return NotImplemented
        longer, shorter = self._digits, other._digits
        if len(shorter) > len(longer):
            longer, shorter = shorter, longer
        result: list[int] = []
        carry = 0
        for position, digit in enumerate(longer):
            total = digit + carry
            if position < len(shorter):
                total += shorter[position]
            carry, remainder = divmod(total, 10)
            result.append(remainder)
        if carry:
            result.append(carry)
        return BigInt._from_digits(result)

    def __mul__(self, other: object) -> BigInt:
        if not isinstance(other, BigInt):
            return NotImplemented
        result = [0] * (len(self._digits) + len(other._digits))
        for i, a in enumerate(self._digits):
            if a == 0:
                continue
            carry = 0
            for j, b in enumerate(other._digits):
                carry, result[i + j] = divmod(result[i + j] + a * b + carry, 10)
            k = i + len(other._digits)
            while carry:
                carry, result[k] = divmod(result[k] + carry, 10)
                k += 1
        return BigInt._from_digits(result)


def factorial(n: int) -> BigInt:
    """Return n! as a BigInt; values of n below 1 give 1."""
    result = BigInt("1")
    for i in range(1, n + 1):
        result = result * BigInt(str(i))
    return result


def main(argv: list[str] | None = None) -> int:
    """Read two integers from standard input and print their factorials and sum."""
    parser = argparse.ArgumentParser(
        prog="bigint",
        description="Print d1!, d2! and their sum for two integers read from input.",
    )
    parser.parse_args(argv)
    try:
        BigInt("N")
    except ValueError as exc:
        print(f"ERROR: {exc}")
    words = sys.stdin.read().split()
    if len(words) < 2:
        raise SystemExit("bigint: expected two integers on standard input")
    d1, d2 = int(words[0]), int(words[1])
    res1 = factorial(d1)
    res2 = factorial(d2)
    summation = res2 + res1
    print(f"{d1}! = {res1}")
    print(f"{d2}! = {res2}")
    print(f"{d1}! + {d2}! = {summation}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
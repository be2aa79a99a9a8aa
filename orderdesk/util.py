"""Parsing and console-prompt helpers for command-driven order entry."""

from __future__ import annotations

import re
import sys

WHITESPACE = " \t\n\v\f\r"
DEFAULT_DELIMITERS = " \t\v\n\r"
MARKET_ORDER_PRICE = 0

UINT32_MAX = 2**32 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")


def split(text: str, delimiters: str = DEFAULT_DELIMITERS) -> list[str]:
    """Split ``text`` on any of ``delimiters``.

    Adjacent delimiters yield empty tokens; a trailing delimiter does not.
    """
    tokens = []
    start = 0
    for index, char in enumerate(text):
        if char in delimiters:
            tokens.append(text[start:index])
            start = index + 1
    if start < len(text):
        tokens.append(text[start:])
    return tokens


def _parse_integer(text: str, low: int, high: int, kind: str) -> int:
    if text == "":
        return 0
    body = text.lstrip(WHITESPACE)
    if not _NUMBER.fullmatch(body):
        raise ValueError(f"not a valid {kind}: {text!r}")
    value = int(body)
    if not low <= value <= high:
        raise ValueError(f"{kind} out of range: {text!r}")
    return value


def to_uint32(text: str) -> int:
    """Convert decimal text to an unsigned 32-bit value.

    Leading whitespace is allowed and an empty string yields 0.
    Raises ValueError for ill-formed or out-of-range text.
    """
    return _parse_integer(text, 0, UINT32_MAX, "uint32")


def to_int32(text: str) -> int:
    """Convert decimal text to a signed 32-bit value.

    Leading whitespace is allowed and an empty string yields 0.
    Raises ValueError for ill-formed or out-of-range text.
    """
    return _parse_integer(text, INT32_MIN, INT32_MAX, "int32")


def string_to_price(text: str) -> int:
    """Convert a price; ``MARKET`` or ``MKT`` give the market price 0."""
    if text in ("MARKET", "MKT"):
        return MARKET_ORDER_PRICE
    return to_uint32(text)


def _ask(prompt: str) -> str | None:
    sys.stdout.write(f"\n{prompt}: ")
    sys.stdout.flush()
    line = sys.stdin.readline()
    if line == "":
        return None
    return line[:-1] if line.endswith("\n") else line


def prompt_for_string(prompt: str, uppercase: bool = True) -> str:
    """Show ``prompt`` and return the line typed (empty at end of input)."""
    line = _ask(prompt) or ""
    return line.upper() if uppercase else line


def prompt_for_price(prompt: str) -> int:
    """Prompt for a price; see :func:`string_to_price`."""
    return string_to_price(prompt_for_string(prompt))


def prompt_for_uint32(prompt: str) -> int:
    """Prompt for an unsigned 32-bit number."""
    return to_uint32(prompt_for_string(prompt, uppercase=False))


def prompt_for_int32(prompt: str) -> int:
    """Prompt for a signed 32-bit number."""
    return to_int32(prompt_for_string(prompt, uppercase=False))


def prompt_for_yes_no(prompt: str) -> bool:
    """Prompt until the answer is yes or no.

    Raises EOFError if input ends before a valid answer.
    """
    while True:
        line = _ask(prompt)
        if line is None:
            raise EOFError("input ended before a yes/no answer")
        answer = line.upper()
        if answer in ("Y", "YES", "T", "TRUE"):
            return True
        if answer in ("N", "NO", "F", "FALSE"):
            return False


def ltrimmed(text: str) -> str:
    """Return ``text`` without leading whitespace."""
    return text.lstrip(WHITESPACE)


def rtrimmed(text: str) -> str:
    """Return ``text`` without trailing whitespace."""
    return text.rstrip(WHITESPACE)


def trimmed(text: str) -> str:
    """Return ``text`` without surrounding whitespace."""
    return text.strip(WHITESPACE)
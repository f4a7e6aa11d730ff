"""String helpers: number conversion, splitting, trimming, searching and mapping."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Callable, Optional

_C_WHITESPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"([+-]?)([0-9]*)")


def _require_char(ch: str) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    Parsing stops at the first non-digit; a text without digits gives 0.
    """
    match = _LEADING_INT.match(text.lstrip(_C_WHITESPACE))
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if sep == "" or sep == "\0":
        return [text] if text else []
    _require_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the result's sign orders the strings.

    The end of a string compares as code point 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(first[:n], second[:n], fillvalue=""):
        if a != b:
            return (ord(a) if a else 0) - (ord(b) if b else 0)
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for each character of ``text``."""
    for index, ch in enumerate(text):
        func(index, ch)


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of ``first`` and ``second``."""
    return first + second


def strchr(text: str, ch: str) -> Optional[int]:
    """Index of the first ``ch`` in ``text``, or None.

    Searching for the NUL character gives the length of the text.
    """
    _require_char(ch)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return index if index >= 0 else None


def strrchr(text: str, ch: str) -> Optional[int]:
    """Index of the last ``ch`` in ``text``, or None.

    Searching for the NUL character gives the length of the text.
    """
    _require_char(ch)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None
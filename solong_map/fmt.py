"""Minimal printf-style formatting and simple writers for text streams."""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, Optional, TextIO

_DIRECTIVE = re.compile(r"%[ ]*(.?)", re.S)


def _wrap_signed(value: int, bits: int = 32) -> int:
    modulus = 1 << bits
    value = int(value) % modulus
    return value - modulus if value >= modulus >> 1 else value


def _wrap_unsigned(value: int, bits: int) -> int:
    return int(value) % (1 << bits)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_wrap_unsigned(value, 8))


def _format_string(value: Optional[str]) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Optional[int]) -> str:
    address = 0 if value is None else _wrap_unsigned(value, 64)
    return "0x" + format(address, "x")


def _format_signed(value: int) -> str:
    return str(_wrap_signed(value))


def _format_unsigned(value: int) -> str:
    return str(_wrap_unsigned(value, 32))


def _format_hex_lower(value: int) -> str:
    return format(_wrap_unsigned(value, 64), "x")


def _format_hex_upper(value: int) -> str:
    return format(_wrap_unsigned(value, 32), "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Supported conversions are ``c s p d i u x X %``; spaces between ``%``
    and the conversion are skipped and unknown conversions produce nothing.
    """
    pieces: list[str] = []
    remaining = iter(args)
    position = 0
    for match in _DIRECTIVE.finditer(fmt):
        pieces.append(fmt[position:match.start()])
        position = match.end()
        spec = match.group(1)
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            try:
                argument = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            pieces.append(_CONVERSIONS[spec](argument))
    pieces.append(fmt[position:])
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    (file if file is not None else sys.stdout).write(text)
    return len(text)


def putstr(text: str, file: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``file`` (stdout by default)."""
    if text is None:
        raise TypeError("text must be a string")
    (file if file is not None else sys.stdout).write(text)


def putendl(text: str, file: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    putstr(text, file)
    putstr("\n", file)


def putnbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write the decimal form of the 32-bit signed integer ``n``."""
    putstr(str(_wrap_signed(n)), file)
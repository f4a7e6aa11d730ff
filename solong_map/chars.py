"""ASCII character classification and case conversion.

Each function takes either a one-character string or an integer code.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(ch: CharLike) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, int) and not isinstance(ch, bool):
        return ch
    raise TypeError(f"expected a character or an integer code, got {type(ch).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(ch: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(ch)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(ch: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(ch) <= ord("9")


def is_alnum(ch: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(ch) or is_digit(ch)


def is_ascii(ch: CharLike) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(ch) <= 127


def is_print(ch: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(ch) <= 126


def to_lower(ch: CharLike) -> CharLike:
    """Lower-case an ASCII capital letter; anything else is returned unchanged."""
    code = _code(ch)
    if _is_upper_code(code):
        code += 32
    return _same_kind(ch, code)


def to_upper(ch: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(ch)
    if _is_lower_code(code):
        code -= 32
    return _same_kind(ch, code)
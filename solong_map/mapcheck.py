"""Reading and validating tile maps made of walls, floor, a player, an exit and collectibles."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ALLOWED = frozenset({WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE, "\n"})

EMPTY_MAP = "El mapa esta vacio"
INVALID_CHAR = "Caracter no válido en el mapa"
BAD_SIDE_BORDER = "bordes invalidos lados"
BAD_TOP_BOTTOM_BORDER = "bordes invalidos arriba/abajo"
BAD_SHAPE = "Mapa invalido"
BAD_COUNTS = "Faltan/sobran characteres"


class MapError(ValueError):
    """Raised when a map is empty, malformed or has the wrong pieces."""


def _at(row: str, index: int) -> str:
    return row[index] if 0 <= index < len(row) else ""


def parse_rows(lines: Iterable[str]) -> list[str]:
    """Collect the map rows, each keeping its newline, rejecting unknown characters."""
    rows: list[str] = []
    for line in lines:
        if any(ch not in ALLOWED for ch in line):
            raise MapError(INVALID_CHAR)
        rows.append(line)
    if not rows or rows[0] == "":
        raise MapError(EMPTY_MAP)
    return rows


def check_border(rows: list[str]) -> None:
    """Require walls down both sides and along the top and bottom rows."""
    if not rows:
        raise MapError(EMPTY_MAP)
    last = len(rows[0]) - 2
    for row in rows:
        if _at(row, 0) != WALL or _at(row, last) != WALL:
            raise MapError(BAD_SIDE_BORDER)
    top = rows[0].split("\n", 1)[0]
    bottom = rows[-1]
    for index, ch in enumerate(top):
        if ch != WALL or _at(bottom, index) != WALL:
            raise MapError(BAD_TOP_BOTTOM_BORDER)


def map_len(rows: list[str]) -> None:
    """Require a rectangle: every row as long as the first, the last lacking its newline."""
    if not rows:
        return
    width = len(rows[0])
    last_index = len(rows) - 1
    for index, row in enumerate(rows):
        expected = width - 1 if index == last_index else width
        if len(row) != expected:
            raise MapError(BAD_SHAPE)


def check_chars(collectibles: int, players: int, exits: int) -> None:
    """Require at least one collectible, exactly one player and exactly one exit."""
    if collectibles < 1 or players != 1 or exits != 1:
        raise MapError(BAD_COUNTS)


def map_chars(rows: list[str]) -> tuple[int, int, int]:
    """Count collectibles, players and exits, validate them and return the counts."""
    counts = Counter("".join(rows))
    result = (counts[COLLECTIBLE], counts[PLAYER], counts[EXIT])
    check_chars(*result)
    return result


def clone_map(rows: list[str]) -> list[str]:
    """Return an independent copy of the rows."""
    return list(rows)


def validate_map(lines: Iterable[str]) -> list[str]:
    """Parse and fully validate a map, returning its rows."""
    rows = parse_rows(lines)
    check_border(rows)
    map_len(rows)
    map_chars(rows)
    return rows
"""Command that reads a map file, validates it and prints it."""

from __future__ import annotations

import argparse
from typing import Iterable, Optional, Sequence, TextIO

from .fmt import printf, putstr
from .lines import read_lines
from .mapcheck import INVALID_CHAR, MapError, validate_map

DEFAULT_MAP = "map.txt"
_READ_SIZE = 4096


def print_map(rows: Iterable[str], file: Optional[TextIO] = None) -> None:
    """Write every row as it is, newlines included."""
    for row in rows:
        putstr(row, file)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate a tile map and print it.")
    parser.add_argument("map", nargs="?", default=DEFAULT_MAP, help="map file to read")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the map file and print it, or print the reason it is invalid."""
    args = _build_parser().parse_args(argv)
    try:
        with open(args.map, encoding="latin-1", newline="") as stream:
            rows = validate_map(read_lines(stream, _READ_SIZE))
    except OSError:
        printf("Error: No se pudo abrir el archivo\n")
        return 0
    except UnicodeDecodeError:
        printf("Error: %s\n", INVALID_CHAR)
        return 0
    except MapError as exc:
        printf("Error: %s\n", str(exc))
        return 0
    print_map(rows)
    return 0
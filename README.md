# solong_map

Reads and checks tile maps for a small "collect everything, then reach the
exit" puzzle game. A map is a rectangle of characters:

| Char | Meaning     |
|------|-------------|
| `1`  | wall        |
| `0`  | floor       |
| `C`  | collectible |
| `P`  | player      |
| `E`  | exit        |

A map is valid when:

- it is not empty and uses only the characters above (plus newlines),
- every row is as wide as the first, and the last row has no trailing
  newline,
- the first and last column of every row are walls, and the first and last
  rows are walls all the way across,
- it holds exactly one `P`, exactly one `E` and at least one `C`.

## Install

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
solong-map [MAP]
```

`MAP` defaults to `map.txt` in the current directory. If the map is valid,
it is printed exactly as it is in the file. If not, a single line starting
with `Error:` is printed instead, one of:

- `Error: No se pudo abrir el archivo` (the file cannot be opened)
- `Error: El mapa esta vacio` (the map is empty)
- `Error: Caracter no válido en el mapa` (a character that is not allowed)
- `Error: bordes invalidos lados` (a side border is not a wall)
- `Error: bordes invalidos arriba/abajo` (the top or bottom border is not a wall)
- `Error: Mapa invalido` (the rows are not all the same width)
- `Error: Faltan/sobran characteres` (wrong number of `P`, `E` or `C`)

Everything goes to standard output and the exit status is 0 in every case.

## Library

```python
from solong_map.mapcheck import MapError, validate_map

with open("map.txt", newline="") as handle:
    try:
        rows = validate_map(handle)
    except MapError as err:
        print(err)
```

`validate_map` takes any iterable of lines that keep their `\n`, runs the
same checks as the command and returns the rows. Every failure raises
`MapError` (a `ValueError`) whose message is one of the texts listed above.
The checks are also available one at a time:

- `parse_rows(lines)` collects the rows and rejects unknown characters and
  empty maps,
- `check_border(rows)` checks the walls around the map,
- `map_len(rows)` checks that the map is a rectangle,
- `map_chars(rows)` counts collectibles, players and exits, checks them and
  returns the three counts,
- `check_chars(collectibles, players, exits)` checks the counts alone.

`clone_map(rows)` returns an independent copy of the rows.

`solong_map.cli.print_map(rows, file=None)` writes rows unchanged to a
stream (standard output by default).

### Supporting modules

- `solong_map.lines` has `LineReader` (with `next_line()` and iteration) and
  `read_lines`. They read a text or binary stream through reads of a fixed
  `buffer_size` (1 by default) and give back lines that keep their `\n`; the
  last line may lack one.
- `solong_map.fmt` has `sprintf` and `printf` for the conversions `%c`, `%s`,
  `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`. Spaces between `%` and the
  conversion letter are skipped, unknown conversions produce nothing, and
  integers wrap to 32 bits (64 bits for `%p` and `%x`). `printf` returns the
  number of characters written. It also has `putstr`, `putendl` and
  `putnbr`, each writing to standard output unless given a `file`.
- `solong_map.strutil` has `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `strmapi`, `striteri`, `strjoin`, `strchr` and
  `strrchr`. Search functions return an index, or `None` when nothing is
  found.
- `solong_map.chars` has `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower` and `to_upper`. They take a one-character string or
  an integer code, look at ASCII only, and the case functions return the same
  kind of value they were given.

## What it does not do

The package only reads and checks maps. It does not draw them, open a game
window or play the game, and it does not check that the player can actually
reach every collectible and the exit.
from __future__ import annotations

from typing import Iterable, List, Tuple

from .cells import CHAR_TO_CELL, START_CHAR, CellKind, Coord

Grid = List[List[CellKind]]


class LevelError(Exception):
    """Base class for problems with a level map."""


class LevelFileError(LevelError, OSError):
    """The level file could not be opened or read."""


class UnmappedCharacterError(LevelError, ValueError):
    def __init__(self, char: str, row: int, col: int) -> None:
        super().__init__(f"unmapped character {char!r} at ({row}, {col})")
        self.char = char
        self.row = row
        self.col = col


class StartMarkerError(LevelError, ValueError):
    def __init__(self, markers: List[Coord]) -> None:
        if not markers:
            msg = f"level has no start marker '{START_CHAR}'"
        else:
            msg = f"level has {len(markers)} start markers '{START_CHAR}' at {markers}; expected exactly one"
        super().__init__(msg)
        self.markers = markers


def parse_level(lines: Iterable[str]) -> Tuple[Grid, Coord]:
    """Maps each character of each line to a CellKind and locates the start marker.

    Only line terminators are stripped; every other character is taken literally,
    so rows may end up with different widths.
    """
    grid: Grid = []
    markers: List[Coord] = []
    for r, line in enumerate(lines):
        row: List[CellKind] = []
        for c, ch in enumerate(line.rstrip('\r\n')):
            kind = CHAR_TO_CELL.get(ch)
            if kind is None:
                raise UnmappedCharacterError(ch, r, c)
            if ch == START_CHAR:
                markers.append((r, c))
            row.append(kind)
        grid.append(row)
    if len(markers) != 1:
        raise StartMarkerError(markers)
    return grid, markers[0]


def load_level(path: str) -> Tuple[Grid, Coord]:
    """Reads a level file and returns (grid, start)."""
    try:
        with open(path, 'r', encoding='utf-8') as fh:
            lines = fh.readlines()
    except OSError as e:
        raise LevelFileError(f"cannot open level file {path!r}: {e.strerror or e}") from e
    return parse_level(lines)

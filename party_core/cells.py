from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

Coord = Tuple[int, int]  # (row, col)


class CellKind(Enum):
    EMPTY = 0
    PATH = 1
    INVISIBLE = 2
    WIN_COIN = 3
    LOST_COIN = 4
    STAR = 5
    PLAYER = 6


START_CHAR = '&'

CHAR_TO_CELL: Dict[str, CellKind] = {
    '#': CellKind.PATH,
    '.': CellKind.INVISIBLE,
    '+': CellKind.WIN_COIN,
    '-': CellKind.LOST_COIN,
    '*': CellKind.STAR,
    START_CHAR: CellKind.PATH,  # start cell is a regular path cell
}

# Every glyph occupies two terminal columns so rows line up.
CELL_GLYPHS: Dict[CellKind, str] = {
    CellKind.EMPTY: '  ',
    CellKind.PATH: '\U0001F535',
    CellKind.INVISIBLE: '  ',
    CellKind.WIN_COIN: '\U0001F7E2',
    CellKind.LOST_COIN: '\U0001F534',
    CellKind.STAR: '⭐',
    CellKind.PLAYER: '\U0001F47E',
}


def is_walkable(kind: CellKind) -> bool:
    return kind is not CellKind.INVISIBLE

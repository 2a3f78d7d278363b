from __future__ import annotations

import sys
from collections import deque
from typing import Deque, List, Optional, Sequence, Tuple

from .cells import CELL_GLYPHS, CellKind, Coord, is_walkable
from .paths import PathConstructionFailure, PathStrategy, build_reachability_path


class EmptyPathError(RuntimeError):
    """next_pos() was called on a board whose path holds no cells."""


class Board:
    """The level grid plus the circular path players are moved along."""

    def __init__(
        self,
        grid: Sequence[Sequence[CellKind]],
        start: Coord,
        strategy: Optional[PathStrategy] = None,
    ) -> None:
        self.grid: Tuple[Tuple[CellKind, ...], ...] = tuple(tuple(row) for row in grid)
        self.start = start
        build = strategy or build_reachability_path
        try:
            cells = build(self, start)
        except PathConstructionFailure as e:
            # Degraded but playable: keep whatever the walk produced.
            print(f"[board] {e}; keeping partial path of {len(e.partial)} cells", file=sys.stderr)
            cells = e.partial
        self._path: Deque[Coord] = deque(cells)

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        """Width of the first row; use row_width() for ragged grids."""
        return len(self.grid[0]) if self.grid else 0

    def row_width(self, r: int) -> int:
        return len(self.grid[r])

    def cell(self, r: int, c: int) -> CellKind:
        if r < 0 or c < 0:
            raise IndexError(f"cell ({r}, {c}) is out of bounds")
        return self.grid[r][c]

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < len(self.grid) and 0 <= c < len(self.grid[r])

    def is_walkable(self, coord: Coord) -> bool:
        return self.in_bounds(coord) and is_walkable(self.grid[coord[0]][coord[1]])

    @property
    def path(self) -> Tuple[Coord, ...]:
        """Current path order, front first."""
        return tuple(self._path)

    @property
    def path_length(self) -> int:
        return len(self._path)

    def next_pos(self) -> Coord:
        """Returns the front of the path and rotates it to the back."""
        if not self._path:
            raise EmptyPathError('board has no path to move along')
        nxt = self._path.popleft()
        self._path.append(nxt)
        return nxt

    def pretty(self, player_pos: Optional[Coord] = None) -> str:
        """Generates the textual board dump, marking player_pos with the player glyph."""
        lines: List[str] = []
        for r, row in enumerate(self.grid):
            out: List[str] = []
            for c, kind in enumerate(row):
                if player_pos == (r, c):
                    out.append(CELL_GLYPHS[CellKind.PLAYER])
                else:
                    out.append(CELL_GLYPHS[kind])
            lines.append(''.join(out))
        return '\n'.join(lines)

from __future__ import annotations

# Facade module that re-exports Partyboard core functionality.
# Tests and tools import from here; single-responsibility modules live under party_core/*.

import sys

from party_core.cells import CELL_GLYPHS, CHAR_TO_CELL, START_CHAR, CellKind, Coord, is_walkable
from party_core.loader import (
    LevelError,
    LevelFileError,
    StartMarkerError,
    UnmappedCharacterError,
    load_level,
    parse_level,
)
from party_core.paths import (
    PATH_STRATEGIES,
    PathConstructionFailure,
    build_boundary_path,
    build_reachability_path,
    resolve_strategy,
)
from party_core.board import Board, EmptyPathError
from party_core.player import Player
from party_core.state import GameState, next_state
from party_core.controller import (
    DEFAULT_TICKS,
    GameSession,
    TurnRecord,
    apply_cell_effect,
    new_session,
)


def board_from_text(text: str, strategy=None) -> Board:
    """Builds a Board straight from level text (handy in tests and tools)."""
    grid, start = parse_level(text.splitlines())
    return Board(grid, start, strategy=strategy)


def main() -> None:
    # CLI driver delegated to party_core.cli
    from party_core.cli import main as _main
    sys.exit(_main())


if __name__ == '__main__':
    main()

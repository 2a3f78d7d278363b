from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from .board import Board
from .controller import MOVEMENTS, new_session
from .loader import LevelError, load_level
from .paths import DEFAULT_STRATEGY, resolve_strategy


def _env_flag(name: str) -> bool:
    return os.getenv(name, '0').lower() in ('1', 'true', 'yes', 'on')


def _env_seed() -> Optional[int]:
    raw = os.getenv('PARTY_SEED')
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PARTY_SEED must be an integer, got {raw!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Partyboard: a two-player console board game')
    parser.add_argument('level', help='Path to the level map (.txt)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs one game on the given level.
    Settings come from the environment:
      PARTY_SEED           integer seed for reproducible rolls
      PARTY_PATH_STRATEGY  'reachability' (default) or 'boundary'
      PARTY_MOVEMENT       'path' (default) or 'walk'
      PARTY_DEBUG=1        print the resolved settings and derived path
    """
    args = build_parser().parse_args(argv)
    debug = _env_flag('PARTY_DEBUG')
    strategy_name = os.getenv('PARTY_PATH_STRATEGY', DEFAULT_STRATEGY)
    movement = os.getenv('PARTY_MOVEMENT', 'path')

    try:
        seed = _env_seed()
        strategy = resolve_strategy(strategy_name)
        if movement not in MOVEMENTS:
            raise ValueError(f"PARTY_MOVEMENT must be one of {', '.join(MOVEMENTS)}, got {movement!r}")
        grid, start = load_level(args.level)
    except (LevelError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    board = Board(grid, start, strategy=strategy)
    if debug:
        print(f"[party] level={args.level} strategy={strategy_name} movement={movement} seed={seed}", file=sys.stderr)
        print(f"[party] start={start} path({board.path_length})={list(board.path)}", file=sys.stderr)

    session = new_session(board, seed=seed, movement=movement)
    session.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())

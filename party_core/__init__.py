"""
Partyboard core Python package.

This package contains the board, player and turn-loop logic behind game.py,
split into small modules to keep each piece testable on its own.
Modules:
- cells.py: CellKind, Coord, character and glyph tables
- loader.py: level file parsing
- paths.py: path-construction strategies
- board.py: Board
- player.py: Player
- state.py: GameState
- controller.py: GameSession (process/update/render loop)
- cli.py: command line entry point
"""

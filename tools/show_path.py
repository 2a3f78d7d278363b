#!/usr/bin/env python3
"""
Quick inspector for level maps: prints the board and the path each strategy derives,
numbering cells in the order players will visit them.
Usage: python tools/show_path.py levels/ring.txt [strategy]
"""
import os, sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from game import PATH_STRATEGIES, Board, load_level  # noqa: E402

PATH = sys.argv[1] if len(sys.argv) > 1 else os.path.join("levels", "ring.txt")
names = [sys.argv[2]] if len(sys.argv) > 2 else sorted(PATH_STRATEGIES)

grid, start = load_level(PATH)
print(f"File: {PATH} rows={len(grid)} start={start}")

for name in names:
    board = Board(grid, start, strategy=PATH_STRATEGIES[name])
    order = {coord: i for i, coord in enumerate(board.path)}
    print(f"\n[{name}] {board.path_length} cells")
    for r, row in enumerate(board.grid):
        print(" ".join(f"{order[(r, c)]:>2}" if (r, c) in order else " ." for c in range(len(row))))

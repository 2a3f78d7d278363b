import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr

from game import (
    CellKind,
    EmptyPathError,
    LevelFileError,
    PathConstructionFailure,
    StartMarkerError,
    UnmappedCharacterError,
    board_from_text,
    build_boundary_path,
    build_reachability_path,
    load_level,
    parse_level,
    resolve_strategy,
)

LINE = "&#+#-#"

RING = "\n".join([
    "&#+#",
    "#..*",
    "#..#",
    "-###",
])


class TestLevelLoading(unittest.TestCase):
    def test_given_line_level_when_parsing_then_kinds_and_start_recorded(self):
        grid, start = parse_level([LINE])
        self.assertEqual(start, (0, 0))
        self.assertEqual(grid[0], [
            CellKind.PATH, CellKind.PATH, CellKind.WIN_COIN,
            CellKind.PATH, CellKind.LOST_COIN, CellKind.PATH,
        ])

    def test_given_ragged_rows_when_parsing_then_widths_preserved(self):
        grid, start = parse_level(["#&*\n", "#\n", ".+-.\n"])
        self.assertEqual([len(r) for r in grid], [3, 1, 4])
        self.assertEqual(start, (0, 1))
        self.assertEqual(grid[0][2], CellKind.STAR)
        self.assertEqual(grid[2][0], CellKind.INVISIBLE)

    def test_given_unknown_character_when_parsing_then_unmapped_error_with_location(self):
        with self.assertRaises(UnmappedCharacterError) as ctx:
            parse_level(["&##", "#x#"])
        self.assertEqual(ctx.exception.char, "x")
        self.assertEqual((ctx.exception.row, ctx.exception.col), (1, 1))

    def test_given_trailing_space_when_parsing_then_taken_literally_and_rejected(self):
        with self.assertRaises(UnmappedCharacterError):
            parse_level(["&## "])

    def test_given_no_or_many_start_markers_when_parsing_then_start_marker_error(self):
        with self.assertRaises(StartMarkerError) as ctx:
            parse_level(["###"])
        self.assertEqual(ctx.exception.markers, [])
        with self.assertRaises(StartMarkerError) as ctx2:
            parse_level(["&#&", "#&#"])
        self.assertEqual(ctx2.exception.markers, [(0, 0), (0, 2), (1, 1)])

    def test_given_missing_file_when_loading_then_level_file_error(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(LevelFileError):
                load_level(os.path.join(d, "nope.txt"))

    def test_given_file_on_disk_when_loading_then_same_as_parse(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "ring.txt")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write(RING + "\n")
            grid, start = load_level(path)
        self.assertEqual((grid, start), parse_level(RING.splitlines()))


class TestPathStrategies(unittest.TestCase):
    def test_given_line_level_when_reachability_then_discovery_order(self):
        board = board_from_text(LINE)
        self.assertEqual(board.path, tuple((0, c) for c in range(6)))

    def test_given_ring_level_when_reachability_then_bfs_order_covers_all_walkable(self):
        board = board_from_text(RING)
        self.assertEqual(board.path, (
            (0, 0), (1, 0), (0, 1), (2, 0), (0, 2), (3, 0),
            (3, 1), (0, 3), (1, 3), (3, 2), (2, 3), (3, 3),
        ))

    def test_given_diagonal_only_link_when_reachability_then_cell_included(self):
        board = board_from_text("&.\n.#")
        self.assertEqual(board.path, ((0, 0), (1, 1)))

    def test_given_unreachable_island_when_reachability_then_excluded(self):
        board = board_from_text("&#..#")
        self.assertEqual(board.path, ((0, 0), (0, 1)))

    def test_given_ring_level_when_boundary_walk_then_clockwise_loop(self):
        board = board_from_text(RING, strategy=build_boundary_path)
        self.assertEqual(board.path, (
            (0, 0), (0, 1), (0, 2), (0, 3), (1, 3), (2, 3),
            (3, 3), (3, 2), (3, 1), (3, 0), (2, 0), (1, 0),
        ))

    def test_given_dead_end_when_boundary_walk_then_failure_carries_partial_path(self):
        board = board_from_text(LINE)
        with self.assertRaises(PathConstructionFailure) as ctx:
            build_boundary_path(board, board.start)
        self.assertEqual(ctx.exception.partial, [(0, c) for c in range(6)])
        self.assertEqual(ctx.exception.at, (0, 5))

    def test_given_dead_end_when_board_built_with_boundary_then_degraded_partial_path(self):
        err = io.StringIO()
        with redirect_stderr(err):
            board = board_from_text(LINE, strategy=build_boundary_path)
        self.assertIn("[board] no circular path", err.getvalue())
        self.assertEqual(board.path_length, 6)
        self.assertEqual(board.next_pos(), (0, 0))

    def test_given_strategy_names_when_resolving_then_known_or_value_error(self):
        self.assertIs(resolve_strategy("reachability"), build_reachability_path)
        self.assertIs(resolve_strategy("boundary"), build_boundary_path)
        with self.assertRaises(ValueError):
            resolve_strategy("spiral")

    def test_given_any_strategy_when_building_then_every_cell_walkable_and_unique(self):
        for text in (LINE, RING, "&#\n.#\n##"):
            for strategy in (build_reachability_path, build_boundary_path):
                with redirect_stderr(io.StringIO()):
                    board = board_from_text(text, strategy=strategy)
                self.assertEqual(len(set(board.path)), board.path_length)
                for coord in board.path:
                    self.assertTrue(board.in_bounds(coord))
                    self.assertNotEqual(board.cell(*coord), CellKind.INVISIBLE)


class TestBoard(unittest.TestCase):
    def test_given_line_path_when_next_six_times_then_each_once_and_seventh_repeats(self):
        board = board_from_text(LINE)
        original = board.path
        got = [board.next_pos() for _ in range(6)]
        self.assertEqual(tuple(got), original)
        self.assertEqual(board.path, original)
        self.assertEqual(board.next_pos(), got[0])

    def test_given_partial_rotation_when_next_then_returned_cell_moves_to_back(self):
        board = board_from_text(RING)
        first = board.path[0]
        self.assertEqual(board.next_pos(), first)
        self.assertEqual(board.path[-1], first)

    def test_given_empty_path_when_next_then_empty_path_error(self):
        board = board_from_text(LINE, strategy=lambda b, s: [])
        self.assertEqual(board.path_length, 0)
        with self.assertRaises(EmptyPathError):
            board.next_pos()

    def test_given_ragged_grid_when_checking_bounds_then_per_row_width_used(self):
        board = board_from_text("&##\n#\n###")
        self.assertEqual((board.rows, board.cols), (3, 3))
        self.assertEqual(board.row_width(1), 1)
        self.assertTrue(board.in_bounds((1, 0)))
        self.assertFalse(board.in_bounds((1, 1)))
        self.assertFalse(board.is_walkable((1, 2)))
        self.assertFalse(board.is_walkable((-1, 0)))
        with self.assertRaises(IndexError):
            board.cell(1, 2)
        with self.assertRaises(IndexError):
            board.cell(-1, 0)

    def test_given_player_position_when_pretty_then_player_glyph_overrides_cell(self):
        board = board_from_text("&+\n.*")
        txt = board.pretty((0, 1))
        lines = txt.split("\n")
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0], "\U0001F535\U0001F47E")
        self.assertEqual(lines[1], "  ⭐")
        self.assertNotIn("\U0001F47E", board.pretty())


if __name__ == "__main__":
    unittest.main(verbosity=2)

"""Board construction from a player map."""

import unittest

from arena.board import Board, build_board
from arena.core.types import Facing, Position
from arena.snapshot import PlayerState


def player(x: int, y: int, facing: Facing = Facing.NORTH) -> PlayerState:
    return PlayerState(x=x, y=y, facing=facing)


class TestBuildBoard(unittest.TestCase):
    def setUp(self) -> None:
        self.players = {
            "me": player(2, 2),
            "a": player(0, 0),
            "b": player(4, 1),
            "c": player(1, 3),
        }

    def test_self_is_captured_not_placed(self) -> None:
        board, myself = build_board(self.players, 5, 4, "me")

        self.assertEqual(myself, Position(2, 2))
        self.assertIsNone(board.occupant(2, 2))
        self.assertNotIn("me", board.cells)

    def test_every_other_player_occupies_exactly_one_cell(self) -> None:
        board, _ = build_board(self.players, 5, 4, "me")

        occupied = dict((name, pos) for pos, name in board.occupied())
        self.assertEqual(len(occupied), len(self.players) - 1)
        self.assertEqual(sum(1 for cell in board.cells if cell is not None), len(self.players) - 1)
        self.assertEqual(occupied["a"], Position(0, 0))
        self.assertEqual(occupied["b"], Position(4, 1))
        self.assertEqual(occupied["c"], Position(1, 3))

    def test_dimensions_are_row_major(self) -> None:
        board, _ = build_board(self.players, 5, 4, "me")

        self.assertEqual((board.width, board.height), (5, 4))
        rows = board.rows()
        self.assertEqual(len(rows), 4)
        self.assertTrue(all(len(row) == 5 for row in rows))
        self.assertEqual(rows[1][4], "b")
        self.assertEqual(rows[3][1], "c")

    def test_missing_self_yields_no_position(self) -> None:
        board, myself = build_board(self.players, 5, 4, "ghost")

        self.assertIsNone(myself)
        self.assertEqual(sum(1 for _ in board.occupied()), len(self.players))

    def test_non_positive_dimensions_give_empty_board(self) -> None:
        for width, height in ((0, 4), (5, 0), (-1, 3)):
            with self.subTest(width=width, height=height):
                board, _ = build_board(self.players, width, height, "me")
                self.assertEqual(board, Board.empty())
                self.assertEqual(board.size, 0)

    def test_occupant_outside_board_is_none(self) -> None:
        board, _ = build_board(self.players, 5, 4, "me")

        self.assertIsNone(board.occupant(-1, 0))
        self.assertIsNone(board.occupant(5, 0))
        self.assertIsNone(board.occupant(0, 4))

    def test_board_is_immutable(self) -> None:
        board, _ = build_board(self.players, 5, 4, "me")

        with self.assertRaises(Exception):
            board.width = 10  # type: ignore[misc]
        self.assertIsInstance(board.cells, tuple)

    def test_str_marks_occupied_cells(self) -> None:
        board, _ = build_board(self.players, 5, 4, "me")
        self.assertEqual(str(board), "#....\n....#\n.....\n.#...")


if __name__ == "__main__":
    unittest.main()

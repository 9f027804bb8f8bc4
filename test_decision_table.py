"""Geometry decision table."""

import unittest

from arena.core.actions import Action
from arena.core.types import Facing, Position
from agents.greedy_agent.decision_table import (
    Bearing,
    DECISION_TABLE,
    bearing_of,
    lookup,
    take_action,
)

F, L, R, T = Action.MOVE_FORWARD, Action.TURN_LEFT, Action.TURN_RIGHT, Action.THROW
N, E, S, W = Facing.NORTH, Facing.EAST, Facing.SOUTH, Facing.WEST

TARGET = Position(2, 2)

# attacker position, facings N/E/S/W -> expected actions
EXPECTED = {
    "same column, below": (Position(2, 4), (T, L, R, R)),
    "same column, above": (Position(2, 0), (R, R, T, L)),
    "same row, right": (Position(4, 2), (L, L, R, T)),
    "same row, left": (Position(0, 2), (R, T, L, L)),
    "bottom right": (Position(4, 4), (F, L, R, F)),
    "top right": (Position(3, 0), (L, R, F, F)),
    "bottom left": (Position(1, 3), (F, F, L, R)),
    "top left": (Position(0, 1), (R, F, F, L)),
}


def _no_fallback() -> Action:
    raise AssertionError("fallback should not be used")


class TestBearing(unittest.TestCase):
    def test_column_alignment_checked_first(self) -> None:
        self.assertEqual(bearing_of(Position(2, 5), TARGET), Bearing.BELOW)
        self.assertEqual(bearing_of(Position(2, 1), TARGET), Bearing.ABOVE)

    def test_row_alignment(self) -> None:
        self.assertEqual(bearing_of(Position(3, 2), TARGET), Bearing.RIGHT)
        self.assertEqual(bearing_of(Position(1, 2), TARGET), Bearing.LEFT)

    def test_quadrants(self) -> None:
        self.assertEqual(bearing_of(Position(3, 3), TARGET), Bearing.BOTTOM_RIGHT)
        self.assertEqual(bearing_of(Position(3, 1), TARGET), Bearing.TOP_RIGHT)
        self.assertEqual(bearing_of(Position(1, 3), TARGET), Bearing.BOTTOM_LEFT)
        self.assertEqual(bearing_of(Position(1, 1), TARGET), Bearing.TOP_LEFT)

    def test_coincident_positions_have_no_bearing(self) -> None:
        self.assertIsNone(bearing_of(TARGET, TARGET))


class TestDecisionTable(unittest.TestCase):
    def test_table_is_complete(self) -> None:
        self.assertEqual(set(DECISION_TABLE), set(Bearing))
        for bearing, row in DECISION_TABLE.items():
            with self.subTest(bearing=bearing):
                self.assertEqual(set(row), set(Facing))

    def test_every_entry(self) -> None:
        for label, (attacker, actions) in EXPECTED.items():
            for facing, expected in zip((N, E, S, W), actions):
                with self.subTest(case=label, facing=facing.name):
                    self.assertEqual(take_action(attacker, facing, TARGET, _no_fallback), expected)

    def test_facing_north_below_target_throws(self) -> None:
        self.assertEqual(lookup(Position(5, 9), N, Position(5, 1)), T)

    def test_facing_east_left_of_target_throws(self) -> None:
        self.assertEqual(lookup(Position(0, 3), E, Position(7, 3)), T)

    def test_diagonal_never_throws(self) -> None:
        for bearing in (Bearing.BOTTOM_RIGHT, Bearing.TOP_RIGHT, Bearing.BOTTOM_LEFT, Bearing.TOP_LEFT):
            with self.subTest(bearing=bearing):
                self.assertNotIn(T, DECISION_TABLE[bearing].values())

    def test_coincident_positions_use_fallback(self) -> None:
        calls = []

        def fallback() -> Action:
            calls.append(1)
            return R

        self.assertIsNone(lookup(TARGET, N, TARGET))
        self.assertEqual(take_action(TARGET, N, TARGET, fallback), R)
        self.assertEqual(len(calls), 1)


if __name__ == "__main__":
    unittest.main()

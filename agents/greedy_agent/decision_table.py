"""
Geometry decision table.

Maps where the target sits relative to the attacker (its bearing) and the
attacker's facing to one of the four actions. The table is written out by
hand; the grouping of ties matters (e.g. "at or above" falls into the
upper branch), so it is not derived from symmetry.

Coordinates: x grows east, y grows south.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional

from arena.core.actions import Action
from arena.core.types import Facing, Position

F = Action.MOVE_FORWARD
L = Action.TURN_LEFT
R = Action.TURN_RIGHT
T = Action.THROW

N, E, S, W = Facing.NORTH, Facing.EAST, Facing.SOUTH, Facing.WEST


class Bearing(Enum):
    """Where the attacker stands relative to the target."""

    # Same column
    BELOW = "below"
    ABOVE = "above"
    # Same row
    RIGHT = "right"
    LEFT = "left"
    # Diagonal quadrants
    BOTTOM_RIGHT = "bottom_right"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    TOP_LEFT = "top_left"


DECISION_TABLE: Dict[Bearing, Dict[Facing, Action]] = {
    Bearing.BELOW: {N: T, E: L, S: R, W: R},
    Bearing.ABOVE: {N: R, E: R, S: T, W: L},
    Bearing.RIGHT: {N: L, E: L, S: R, W: T},
    Bearing.LEFT: {N: R, E: T, S: L, W: L},
    Bearing.BOTTOM_RIGHT: {N: F, E: L, S: R, W: F},
    Bearing.TOP_RIGHT: {N: L, E: R, S: F, W: F},
    Bearing.BOTTOM_LEFT: {N: F, E: F, S: L, W: R},
    Bearing.TOP_LEFT: {N: R, E: F, S: F, W: L},
}


def bearing_of(attacker: Position, target: Position) -> Optional[Bearing]:
    """
    Classify the attacker's position relative to the target.

    Column alignment is checked before row alignment. Returns None when the
    two positions coincide.
    """
    dx = attacker.x - target.x
    dy = attacker.y - target.y

    if dx == 0 and dy == 0:
        return None
    if dx == 0:
        return Bearing.BELOW if dy > 0 else Bearing.ABOVE
    if dy == 0:
        return Bearing.RIGHT if dx > 0 else Bearing.LEFT
    if dx > 0:
        return Bearing.BOTTOM_RIGHT if dy > 0 else Bearing.TOP_RIGHT
    return Bearing.BOTTOM_LEFT if dy > 0 else Bearing.TOP_LEFT


def lookup(attacker: Position, facing: Facing, target: Position) -> Optional[Action]:
    """Table entry for the situation, or None if there is none."""
    bearing = bearing_of(attacker, target)
    if bearing is None:
        return None
    return DECISION_TABLE[bearing].get(facing)


def take_action(
    attacker: Position,
    facing: Facing,
    target: Position,
    fallback: Callable[[], Action],
) -> Action:
    """
    Decide how to act against ``target``.

    Args:
        attacker: Our position
        facing: Our facing
        target: Target position
        fallback: Called when the table has no entry

    Returns:
        The table's action, otherwise whatever ``fallback`` returns
    """
    action = lookup(attacker, facing, target)
    if action is None:
        return fallback()
    return action

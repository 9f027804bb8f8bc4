"""
Target selection.

This module handles:
- The line-of-fire scan: is an enemy close enough in my row or column to
  throw at right now?
- The nearest-enemy search: breadth-first search for the closest occupant
  when nothing is in the line of fire.

Both searches return ``None`` when nothing is found. That is an expected
outcome that drives the next stage, not an error.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional, Tuple

from infra.logger import get_logger
from ..board import Board
from ..core.types import Position, SCAN_DIRECTIONS

logger = get_logger(__name__)

# Throw range of a player, in cells.
DEFAULT_SCAN_RADIUS = 3

LINE_OF_FIRE = "line_of_fire"
NEAREST = "nearest"


@dataclass(frozen=True)
class TargetSelection:
    """
    Result of target selection.

    Attributes:
        name: Identifier of the chosen enemy
        position: Where the enemy stands
        source: Which stage found it (``LINE_OF_FIRE`` or ``NEAREST``)
    """

    name: str
    position: Position
    source: str


def find_attackable_enemy(
    board: Board,
    myself: Position,
    radius: int = DEFAULT_SCAN_RADIUS,
) -> Optional[str]:
    """
    Find an enemy sharing my row or column within ``radius`` cells.

    Closer cells win. At equal distance the probe order is north, south,
    west, east.

    Args:
        board: Occupancy board (ourselves excluded)
        myself: Our own position
        radius: Maximum distance to probe

    Returns:
        The occupant's identifier, or None if no enemy is in line of fire
    """
    hit = _scan_line_of_fire(board, myself, radius)
    return hit[1] if hit is not None else None


def _scan_line_of_fire(
    board: Board,
    myself: Position,
    radius: int,
) -> Optional[Tuple[Position, str]]:
    for i in range(1, radius + 1):
        for dx, dy in SCAN_DIRECTIONS:
            probe = myself.offset(dx * i, dy * i)
            name = board.occupant(probe.x, probe.y)
            if name is not None:
                return probe, name
    return None


def find_nearest_enemy(board: Board, myself: Position) -> Optional[Position]:
    """
    Breadth-first search for the closest occupied cell.

    Every cell is traversable, occupied or not. Neighbours are expanded
    north, south, west, east, and each cell is enqueued at most once.

    Args:
        board: Occupancy board (ourselves excluded)
        myself: Starting position

    Returns:
        Position of the first occupied cell reached, or None if the board
        has no occupant (or ``myself`` lies outside it)
    """
    if not board.in_bounds(myself.x, myself.y):
        return None

    visited = bytearray(board.size)
    start = board.index(myself.x, myself.y)
    queue = deque([start])
    visited[start] = 1

    while queue:
        current = queue.popleft()
        if board.cells[current] is not None:
            return board.position(current)

        x, y = current % board.width, current // board.width
        for dx, dy in SCAN_DIRECTIONS:
            nx, ny = x + dx, y + dy
            if not board.in_bounds(nx, ny):
                continue
            neighbour = board.index(nx, ny)
            if not visited[neighbour]:
                visited[neighbour] = 1
                queue.append(neighbour)

    return None


def select_target(
    board: Board,
    myself: Position,
    radius: int = DEFAULT_SCAN_RADIUS,
) -> Optional[TargetSelection]:
    """
    Pick the enemy to act against this turn.

    Prefers an enemy in the line of fire; otherwise the nearest one by BFS.

    Returns:
        The selection, or None when the board holds no enemy at all
    """
    logger.debug("Board %dx%d around %s:\n%s", board.width, board.height, myself, board)
    hit = _scan_line_of_fire(board, myself, radius)
    if hit is not None:
        position, name = hit
        logger.debug("Enemy %s in line of fire at %s", name, position)
        return TargetSelection(name=name, position=position, source=LINE_OF_FIRE)

    position = find_nearest_enemy(board, myself)
    if position is None:
        logger.debug("No enemy on the board")
        return None

    name = board.occupant(position.x, position.y)
    logger.debug("Nearest enemy %s at %s", name, position)
    return TargetSelection(name=name, position=position, source=NEAREST)

"""
Arena - board model and targeting for the grid battle game.

This package turns a per-turn snapshot into the spatial view the agents
decide on.

Quick Start:
    from arena import ArenaSnapshot, build_board, select_target

    snapshot = ArenaSnapshot.from_dict(update["arena"])
    board, myself = build_board(snapshot.players, snapshot.width, snapshot.height, my_id)
    target = select_target(board, myself)
"""

__version__ = "1.0.0"

from .core import Action, Facing, Position, ALL_ACTIONS
from .snapshot import ArenaSnapshot, PlayerState, SnapshotError
from .board import Board, build_board
from .mechanics import (
    TargetSelection,
    find_attackable_enemy,
    find_nearest_enemy,
    select_target,
)

__all__ = [
    # Core types
    "Action",
    "Facing",
    "Position",
    "ALL_ACTIONS",

    # Snapshot
    "ArenaSnapshot",
    "PlayerState",
    "SnapshotError",

    # Board
    "Board",
    "build_board",

    # Targeting
    "TargetSelection",
    "find_attackable_enemy",
    "find_nearest_enemy",
    "select_target",
]

"""
Per-turn arena snapshot.

A snapshot is everything the engine gets for one decision: the arena
dimensions and the state of every player. It is rebuilt for every request
and never kept between turns.

Example:
    snapshot = ArenaSnapshot.from_dict({
        "dimensions": [5, 5],
        "state": {
            "me": {"x": 2, "y": 2, "direction": "N"},
            "them": {"x": 2, "y": 0, "direction": "S"},
        },
    })
    snapshot.validate("me")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .core.types import Facing, Position


class SnapshotError(ValueError):
    """Raised when a snapshot violates the preconditions of a decision."""


@dataclass(frozen=True)
class PlayerState:
    """
    One player as reported by the game server.

    Attributes:
        x: Column, 0 <= x < width
        y: Row, 0 <= y < height (y grows southward)
        facing: Direction the player looks at
        was_hit: Whether the player was hit last turn (informational)
        score: Current score (informational)
    """

    x: int
    y: int
    facing: Facing
    was_hit: bool = False
    score: int = 0

    @property
    def pos(self) -> Position:
        return Position(self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "direction": self.facing.code,
            "wasHit": self.was_hit,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PlayerState:
        return cls(
            x=int(data["x"]),
            y=int(data["y"]),
            facing=Facing.from_code(data["direction"]),
            was_hit=bool(data.get("wasHit", False)),
            score=int(data.get("score", 0)),
        )


@dataclass(frozen=True)
class ArenaSnapshot:
    """
    Arena dimensions plus every player's state for a single turn.

    Attributes:
        width: Number of columns
        height: Number of rows
        players: Mapping from player identifier to its state
    """

    width: int
    height: int
    players: Dict[str, PlayerState] = field(default_factory=dict)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def validate(self, self_id: str) -> None:
        """
        Check the preconditions the decision engine relies on.

        Args:
            self_id: Identifier of the player we are deciding for

        Raises:
            SnapshotError: On non-positive dimensions, players outside the
                arena, two players sharing a cell, or a missing self entry
        """
        if self.width <= 0 or self.height <= 0:
            raise SnapshotError(
                f"Arena dimensions must be positive, got {self.width}x{self.height}"
            )

        occupied: Dict[Position, str] = {}
        for player_id, state in self.players.items():
            if not self.in_bounds(state.x, state.y):
                raise SnapshotError(
                    f"Player {player_id!r} at ({state.x}, {state.y}) is outside "
                    f"the {self.width}x{self.height} arena"
                )
            other = occupied.get(state.pos)
            if other is not None:
                raise SnapshotError(
                    f"Players {other!r} and {player_id!r} share cell ({state.x}, {state.y})"
                )
            occupied[state.pos] = player_id

        if self_id not in self.players:
            raise SnapshotError(f"Own identifier {self_id!r} is not in the arena state")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire ``arena`` object shape."""
        return {
            "dimensions": [self.width, self.height],
            "state": {pid: p.to_dict() for pid, p in self.players.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ArenaSnapshot:
        """
        Build a snapshot from the wire ``arena`` object.

        Args:
            data: ``{"dimensions": [width, height], "state": {id: {...}}}``

        Returns:
            Parsed snapshot (not yet validated)
        """
        width, height = data["dimensions"]
        players = {
            player_id: PlayerState.from_dict(state)
            for player_id, state in data.get("state", {}).items()
        }
        return cls(width=int(width), height=int(height), players=players)

    def __str__(self) -> str:
        return f"ArenaSnapshot({self.width}x{self.height}, players={len(self.players)})"

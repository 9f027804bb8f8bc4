"""
Action definitions.

An action is one of four symbolic moves, each serialized to a fixed
single-character wire code.
"""

from __future__ import annotations

from enum import Enum


class Action(Enum):
    """The four actions a player can take on its turn."""

    MOVE_FORWARD = "F"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"
    THROW = "T"

    @property
    def code(self) -> str:
        """Wire code written back to the game server."""
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Action:
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown action code: {code!r}") from None

    def __str__(self) -> str:
        return self.value


ALL_ACTIONS = tuple(Action)

"""
Core value types shared by the board, targeting and agents.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Facing(Enum):
    """Compass direction a player is oriented toward."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @classmethod
    def from_code(cls, code: str) -> Facing:
        """
        Parse a single-letter wire code.

        Raises:
            ValueError: If the code is not one of N/E/S/W
        """
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown facing code: {code!r}") from None

    @property
    def code(self) -> str:
        return self.value


class Position(NamedTuple):
    """Plain (x, y) cell coordinate. y grows downward (north is y - 1)."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)


# Probe order used by both the line-of-fire scan and the BFS expansion.
# (dx, dy) for north, south, west, east.
SCAN_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))

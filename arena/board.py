"""
Occupancy board built from a sparse player map.

The board is a height x width grid stored flat in row-major order
(``index = y * width + x``). Each cell holds the identifier of the player
standing on it, or ``None``. Our own player is never stored on the board;
its position is returned separately by ``build_board``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional, Tuple

from .core.types import Position
from .snapshot import PlayerState


@dataclass(frozen=True)
class Board:
    """
    Immutable occupancy grid for one turn.

    Attributes:
        width: Number of columns
        height: Number of rows
        cells: Flat row-major list of occupants (``None`` = empty)
    """

    width: int
    height: int
    cells: Tuple[Optional[str], ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> Board:
        return cls(width=0, height=0, cells=())

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def position(self, index: int) -> Position:
        return Position(index % self.width, index // self.width)

    def occupant(self, x: int, y: int) -> Optional[str]:
        """Name of the player at (x, y), or None if empty or out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[self.index(x, y)]

    def occupied(self) -> Iterator[Tuple[Position, str]]:
        """Yield (position, occupant) for every non-empty cell."""
        for index, name in enumerate(self.cells):
            if name is not None:
                yield self.position(index), name

    def rows(self) -> List[List[Optional[str]]]:
        """Nested row-major view, mostly for debugging and tests."""
        return [
            list(self.cells[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    def __str__(self) -> str:
        lines = []
        for row in self.rows():
            lines.append("".join("." if name is None else "#" for name in row))
        return "\n".join(lines)


def build_board(
    players: Mapping[str, PlayerState],
    width: int,
    height: int,
    self_id: str,
) -> Tuple[Board, Optional[Position]]:
    """
    Place every player except ourselves on a fresh board.

    Args:
        players: Player identifier -> state
        width: Arena width (columns)
        height: Arena height (rows)
        self_id: Our own identifier; captured as ``myself`` instead of placed

    Returns:
        Tuple of (board, myself). ``myself`` is None when ``self_id`` is not
        in ``players``. Non-positive dimensions yield an empty board.
    """
    if width <= 0 or height <= 0:
        myself = players[self_id].pos if self_id in players else None
        return Board.empty(), myself

    cells: List[Optional[str]] = [None] * (width * height)
    myself: Optional[Position] = None

    for name, state in players.items():
        if name == self_id:
            myself = state.pos
        else:
            cells[state.y * width + state.x] = name

    return Board(width=width, height=height, cells=tuple(cells)), myself

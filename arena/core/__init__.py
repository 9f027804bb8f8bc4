"""Core types for the arena: facings, positions and actions."""

from .types import Facing, Position, SCAN_DIRECTIONS
from .actions import Action, ALL_ACTIONS

__all__ = [
    "Facing",
    "Position",
    "SCAN_DIRECTIONS",
    "Action",
    "ALL_ACTIONS",
]

"""
Stateless per-turn mechanics.

- targeting: line-of-fire scan and nearest-enemy search
"""

from .targeting import (
    DEFAULT_SCAN_RADIUS,
    LINE_OF_FIRE,
    NEAREST,
    TargetSelection,
    find_attackable_enemy,
    find_nearest_enemy,
    select_target,
)

__all__ = [
    "DEFAULT_SCAN_RADIUS",
    "LINE_OF_FIRE",
    "NEAREST",
    "TargetSelection",
    "find_attackable_enemy",
    "find_nearest_enemy",
    "select_target",
]

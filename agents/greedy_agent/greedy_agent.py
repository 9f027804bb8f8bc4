"""
Greedy agent: act against the best target visible this turn.

Decision process:
1. Build the occupancy board from the snapshot.
2. Throw-range scan of my row and column; if nothing is there, BFS for
   the nearest enemy.
3. Turn, move or throw according to the geometry decision table.
4. Fall back to a uniformly random action when there is no target or the
   table has no entry.
"""

from typing import Any, Dict, Optional

from arena.board import build_board
from arena.core.actions import Action
from arena.mechanics.targeting import DEFAULT_SCAN_RADIUS, select_target
from arena.snapshot import ArenaSnapshot
from infra.logger import get_logger
from ..base_agent import BaseAgent
from ..random_agent.random_agent import RandomAgent
from ..registry import register_agent
from .decision_table import take_action

logger = get_logger(__name__)


@register_agent("greedy")
class GreedyAgent(BaseAgent):
    """
    Picks the locally best action against a single target.

    Holds no game state between turns; the only member that changes is the
    fallback's random generator.
    """

    def __init__(
        self,
        name: str | None = None,
        seed: Optional[int] = None,
        scan_radius: int = DEFAULT_SCAN_RADIUS,
        **_: Any,
    ):
        """
        Initialize the greedy agent.

        Args:
            name: Optional agent name (default: "GreedyAgent")
            seed: Seed for the random fallback (None = random)
            scan_radius: How far the line-of-fire scan looks, in cells
        """
        super().__init__(name)
        self.scan_radius = scan_radius
        self.fallback = RandomAgent(name=f"{self.name}.fallback", seed=seed)

    def get_action(
        self,
        snapshot: ArenaSnapshot,
        self_id: str,
    ) -> tuple[Action, Dict[str, Any]]:
        me = snapshot.players[self_id]
        board, myself = build_board(snapshot.players, snapshot.width, snapshot.height, self_id)

        metadata: Dict[str, Any] = {
            "policy": "greedy",
            "target": None,
            "target_source": None,
            "fallback": False,
        }

        target = select_target(board, myself, self.scan_radius)
        if target is None:
            logger.debug("No target for %s; falling back to random", self_id)
            metadata["fallback"] = True
            return self.fallback.choose(), metadata

        metadata["target"] = target.name
        metadata["target_source"] = target.source

        def _fallback() -> Action:
            logger.debug("No table entry for %s vs %s; falling back to random", self_id, target.name)
            metadata["fallback"] = True
            return self.fallback.choose()

        action = take_action(myself, me.facing, target.position, _fallback)
        return action, metadata

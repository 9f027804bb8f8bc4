"""
Random agent implementation.

Picks one of the four actions uniformly at random. Used on its own as a
baseline, and by the greedy agent as the fallback whenever its decision
table has no entry for the situation.
"""

import random
from typing import Any, Dict, Optional

from arena.core.actions import Action, ALL_ACTIONS
from arena.snapshot import ArenaSnapshot
from ..base_agent import BaseAgent
from ..registry import register_agent


@register_agent("random")
class RandomAgent(BaseAgent):
    """
    Agent that takes random actions.

    Decision process:
    - Sample uniformly from the four actions, ignoring the board.
    """

    def __init__(
        self,
        name: str = None,
        seed: Optional[int] = None,
        **_: Any,
    ):
        """
        Initialize random agent.

        Args:
            name: Agent name (default: "RandomAgent")
            seed: Random seed for reproducibility (None = random)
        """
        super().__init__(name)
        self.rng = random.Random(seed)

    def choose(self) -> Action:
        """Return one of the four actions, uniformly."""
        return self.rng.choice(ALL_ACTIONS)

    def get_action(
        self,
        snapshot: ArenaSnapshot,
        self_id: str,
    ) -> tuple[Action, Dict[str, Any]]:
        action = self.choose()
        metadata = {
            "policy": "random",
            "target": None,
            "target_source": None,
            "fallback": True,
        }
        return action, metadata

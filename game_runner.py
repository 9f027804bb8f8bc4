from __future__ import annotations

from typing import Any, Dict, Optional

from agents import BaseAgent, GreedyAgent, create_agent
from arena.core.actions import Action
from arena.snapshot import ArenaSnapshot
from infra.logger import get_logger
from infra.settings import Settings

logger = get_logger(__name__)


def decide(
    snapshot: ArenaSnapshot,
    self_id: str,
    agent: Optional[BaseAgent] = None,
) -> Action:
    """
    Pick this turn's action for ``self_id``.

    Args:
        snapshot: Current arena snapshot
        self_id: Our own identifier (explicit, never global)
        agent: Agent to decide with (default: a fresh GreedyAgent)

    Returns:
        One of the four actions

    Raises:
        SnapshotError: If the snapshot violates the engine's preconditions
    """
    action, _metadata = TurnRunner(agent or GreedyAgent()).decide(snapshot, self_id)
    return action


class TurnRunner:
    """
    Validates a snapshot and asks the configured agent for an action.

    The runner keeps no per-turn state, so one instance can serve concurrent
    requests.
    """

    def __init__(self, agent: BaseAgent):
        self.agent = agent

    @classmethod
    def from_settings(cls, settings: Settings) -> TurnRunner:
        agent = create_agent(
            settings.agent,
            seed=settings.agent_seed,
            scan_radius=settings.scan_radius,
        )
        return cls(agent)

    def decide(self, snapshot: ArenaSnapshot, self_id: str) -> tuple[Action, Dict[str, Any]]:
        snapshot.validate(self_id)
        action, metadata = self.agent.get_action(snapshot, self_id)
        logger.info(
            "OUT: %s (agent=%s target=%s source=%s fallback=%s)",
            action.code,
            self.agent.name,
            metadata.get("target"),
            metadata.get("target_source"),
            metadata.get("fallback"),
        )
        return action, metadata

    def play(self, snapshot: ArenaSnapshot, self_id: str) -> str:
        """Decide and return the action's wire code."""
        action, _metadata = self.decide(snapshot, self_id)
        return action.code

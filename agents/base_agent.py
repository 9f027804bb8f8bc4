"""
Base agent interface for the arena.

All agents must implement this interface to be used by the turn runner.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from arena.core.actions import Action
from arena.snapshot import ArenaSnapshot


class BaseAgent(ABC):
    """
    Abstract base class for all agents.

    An agent looks at one turn's snapshot and picks the action for a single
    player. Agents keep no game state between turns.

    Subclasses must implement:
    - get_action(): Produce the action for the given player

    Attributes:
        name: Agent name for logging/identification
    """

    def __init__(self, name: str = None):
        """
        Initialize the agent.

        Args:
            name: Optional name for the agent (defaults to class name)
        """
        self.name = name or self.__class__.__name__

    @abstractmethod
    def get_action(
        self,
        snapshot: ArenaSnapshot,
        self_id: str,
    ) -> tuple[Action, Dict[str, Any]]:
        """
        Decide this turn's action for ``self_id``.

        The snapshot has already been validated by the caller: dimensions are
        positive, ``self_id`` is present and no two players share a cell.

        Args:
            snapshot: Current arena snapshot
            self_id: Identifier of the player to act for

        Returns:
            Tuple of:
                - The chosen Action (always one of the four)
                - Metadata dict describing how it was chosen
        """
        pass

    def __str__(self) -> str:
        """String representation."""
        return self.name

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"{self.__class__.__name__}(name='{self.name}')"

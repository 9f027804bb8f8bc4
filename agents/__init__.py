"""
Agent interface and implementations for the arena.

This module provides:
- BaseAgent: Abstract interface for all agents
- GreedyAgent: Line-of-fire / nearest-enemy agent driven by the decision table
- RandomAgent: Uniform random actions (baseline and fallback)
"""

from .base_agent import BaseAgent
from .registry import create_agent, register_agent, registered_agents, resolve_agent_class
from .random_agent import RandomAgent
from .greedy_agent import GreedyAgent

__all__ = [
    "BaseAgent",
    "create_agent",
    "register_agent",
    "registered_agents",
    "resolve_agent_class",
    "RandomAgent",
    "GreedyAgent",
]

"""
Name -> agent class registry so agents can be picked from configuration.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Type, TYPE_CHECKING

if TYPE_CHECKING:
    from .base_agent import BaseAgent

_REGISTRY: Dict[str, Type["BaseAgent"]] = {}


def register_agent(name: str) -> Callable[[Type["BaseAgent"]], Type["BaseAgent"]]:
    """Class decorator registering an agent under ``name``."""

    def decorator(cls: Type["BaseAgent"]) -> Type["BaseAgent"]:
        existing = _REGISTRY.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(f"Agent name {name!r} already registered to {existing.__name__}")
        _REGISTRY[name] = cls
        return cls

    return decorator


def resolve_agent_class(name: str) -> Type["BaseAgent"]:
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY)) or "<none>"
        raise KeyError(f"Unknown agent {name!r}. Available: {available}") from None


def registered_agents() -> list[str]:
    return sorted(_REGISTRY)


def create_agent(name: str, **kwargs: Any) -> "BaseAgent":
    """Instantiate the agent registered under ``name``."""
    return resolve_agent_class(name)(**kwargs)

"""Runtime settings read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from arena.mechanics import DEFAULT_SCAN_RADIUS

_TRUE = {"1", "true", "yes", "on"}


def _int(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """
    Service configuration.

    Attributes:
        host: Interface the HTTP server binds to
        port: HTTP port (Cloud Run style ``PORT`` variable)
        agent: Registered agent name used to decide moves
        agent_seed: Seed for the agent's random fallback (None = random)
        scan_radius: How far the line-of-fire scan looks, in cells
        log_level: Logging level name
        log_json: Emit JSON log lines
    """

    host: str = "0.0.0.0"
    port: int = 8080
    agent: str = "greedy"
    agent_seed: Optional[int] = None
    scan_radius: int = DEFAULT_SCAN_RADIUS
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self):
        if self.scan_radius < 1:
            raise ValueError(f"SCAN_RADIUS must be at least 1, got {self.scan_radius}")
        if not 0 < self.port < 65536:
            raise ValueError(f"PORT out of range: {self.port}")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read instead of ``os.environ`` (a ``.env`` file is
                only loaded when reading the real environment)
        """
        if env is None:
            load_dotenv()
            env = os.environ

        return cls(
            host=env.get("HOST", cls.host),
            port=_int(env, "PORT", cls.port),
            agent=env.get("AGENT", cls.agent),
            agent_seed=_int(env, "AGENT_SEED", None),
            scan_radius=_int(env, "SCAN_RADIUS", cls.scan_radius),
            log_level=env.get("LOG_LEVEL", cls.log_level).upper(),
            log_json=env.get("LOG_JSON", "").strip().lower() in _TRUE,
        )

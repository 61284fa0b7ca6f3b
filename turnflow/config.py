"""
Engine settings, read from the environment.

    TURNFLOW_DEFAULT_PLAYERS   player count when none is given (default 2)
    TURNFLOW_ALLOW_UNWIN       let the default flow clear a winner (default false)
    TURNFLOW_LOG_LEVEL         log level used by the CLI (default WARNING)
"""

from __future__ import annotations
from dataclasses import dataclass
import os


_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineSettings:
    default_num_players: int = 2
    allow_unwin: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> EngineSettings:
        """Build settings from TURNFLOW_* environment variables."""
        players = int(os.getenv("TURNFLOW_DEFAULT_PLAYERS", "2"))
        if players < 1:
            raise ValueError(f"TURNFLOW_DEFAULT_PLAYERS must be positive, got {players}")
        return cls(
            default_num_players=players,
            allow_unwin=os.getenv("TURNFLOW_ALLOW_UNWIN", "false").strip().lower() in _TRUTHY,
            log_level=os.getenv("TURNFLOW_LOG_LEVEL", "WARNING").upper(),
        )


DEFAULT_SETTINGS = EngineSettings()

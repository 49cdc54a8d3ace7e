from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator


DEFAULT_STATIC_DIR = Path(__file__).parent / "web" / "static"


class Settings(BaseModel):
    """Runtime settings for the server and the terminal game.

    Values come from the environment (see ``from_env``); CLI flags override
    them at the boundary.
    """

    host: str = "0.0.0.0"
    port: int = Field(default=3001, ge=1, le=65535)
    static_dir: Path = DEFAULT_STATIC_DIR
    agent_delay_ms: int = Field(default=1500, ge=0)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @property
    def agent_delay_s(self) -> float:
        return self.agent_delay_ms / 1000

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``env`` (defaults to ``os.environ``).

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        env = os.environ if env is None else env
        values = {}
        for key, var in (
            ("host", "CHESS_AI_HOST"),
            ("port", "PORT"),
            ("static_dir", "CHESS_AI_STATIC_DIR"),
            ("agent_delay_ms", "AGENT_DELAY_MS"),
            ("log_level", "CHESS_AI_LOG_LEVEL"),
        ):
            if env.get(var):
                values[key] = env[var]
        return cls(**values)

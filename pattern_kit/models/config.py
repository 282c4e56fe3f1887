"""Logging configuration."""

import os
from enum import Enum

from pydantic import BaseModel, field_validator


class LogRenderer(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class LoggingConfig(BaseModel):
    """How pattern_kit log events are rendered and filtered."""

    level: str = "INFO"
    renderer: LogRenderer = LogRenderer.CONSOLE

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Build a config from PATTERN_KIT_LOG_LEVEL / PATTERN_KIT_LOG_RENDERER."""
        return cls(
            level=os.environ.get("PATTERN_KIT_LOG_LEVEL", "INFO"),
            renderer=os.environ.get("PATTERN_KIT_LOG_RENDERER", "console"),
        )

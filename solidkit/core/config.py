"""
Configuration for solidkit demos.

Values come from keyword arguments, then SOLIDKIT_* environment variables,
then the defaults below.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


ENV_PREFIX = "SOLIDKIT_"


class SolidKitConfig(BaseModel):
    """Settings shared by the demo drivers."""

    journal_path: Path = Field(
        default=Path("diary.txt"),
        description="Where the single responsibility demo saves its journal"
    )
    research_subject: str = Field(
        default="John",
        description="Whose children the dependency inversion demo reports"
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    model_config = {"extra": "forbid"}

    @field_validator("research_subject")
    @classmethod
    def validate_research_subject(cls, v: str) -> str:
        """Ensure research subject is not empty."""
        if not v or not v.strip():
            raise ValueError("research_subject cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is a known logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, **overrides: Optional[object]) -> SolidKitConfig:
        """
        Build a config from the environment.

        Args:
            **overrides: Explicit values; None means "not given"

        Returns:
            Config with overrides applied over environment values
        """
        values: dict[str, object] = {}
        for name in cls.model_fields:
            env_value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if env_value:
                values[name] = env_value

        for name, value in overrides.items():
            if value is not None:
                values[name] = value

        return cls(**values)

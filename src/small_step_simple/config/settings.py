"""Application settings."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MachineSettings(BaseSettings):
    """Machine run settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SIMPLE_",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    trace: bool = Field(default=True)
    max_steps: int | None = Field(default=None, ge=1)


def load_settings(**overrides: Any) -> MachineSettings:
    """Load settings, letting explicitly given overrides win over the environment."""
    given = {key: value for key, value in overrides.items() if value is not None}
    return MachineSettings(**given)

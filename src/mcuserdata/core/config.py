"""Library configuration.

Settings are read from environment variables (prefix ``MCUSERDATA_``) and from
``.env`` files, first in the working directory and then in the per-user
config directory. Every adapter receives an ``AppSettings`` instance, so
tests and embedding applications can pass their own values.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "mcuserdata"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "mcuserdata"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "mcuserdata"
    return Path.home() / ".config" / "mcuserdata"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central settings for HTTP transport and upstream endpoints."""

    model_config = SettingsConfigDict(
        env_prefix="MCUSERDATA_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user-level one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="mcuserdata/0.1",
        min_length=1,
        description="User-Agent sent to every upstream service.",
    )

    api_base_url: str = Field(
        default="https://api.mojang.com",
        min_length=8,
        description="Identity lookup service (username -> id).",
    )
    session_base_url: str = Field(
        default="https://sessionserver.mojang.com",
        min_length=8,
        description="Session profile service (id -> textures).",
    )
    render_base_url: str = Field(
        default="https://crafatar.com",
        min_length=8,
        description="Image/render service used for derived URLs.",
    )

    @field_validator("api_base_url", "session_base_url", "render_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

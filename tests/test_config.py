from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from mcuserdata.core.config import AppSettings, get_user_config_dir, get_user_env_file


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == "https://api.mojang.com"
    assert settings.session_base_url == "https://sessionserver.mojang.com"
    assert settings.render_base_url == "https://crafatar.com"
    assert settings.http_timeout_seconds == 10.0


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MCUSERDATA_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("MCUSERDATA_RENDER_BASE_URL", "https://mc-heads.example/")

    settings = AppSettings(_env_file=None)

    assert settings.http_timeout_seconds == 2.5
    assert settings.render_base_url == "https://mc-heads.example"


def test_env_file_is_read(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("MCUSERDATA_USER_AGENT=bot/2.0\n", encoding="utf-8")

    assert AppSettings(_env_file=env_file).user_agent == "bot/2.0"


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, http_timeout_seconds=0)


def test_user_config_dir_honours_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "mcuserdata"
    assert get_user_env_file() == tmp_path / "mcuserdata" / ".env"

# tests/test_config.py

from __future__ import annotations

import pytest

from yatl.config import DEFAULT_FILENAME, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("YATL_FILENAME", "YATL_LOG_LEVEL", "YATL_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings.from_env()
    assert settings.filename == DEFAULT_FILENAME
    assert settings.log_level == "WARNING"
    assert settings.color is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YATL_FILENAME", ".todo")
    monkeypatch.setenv("YATL_LOG_LEVEL", "debug")
    monkeypatch.setenv("YATL_COLOR", "off")

    settings = Settings.from_env()
    assert settings.filename == ".todo"
    assert settings.log_level == "DEBUG"
    assert settings.color is False


def test_no_color_convention(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert Settings.from_env().color is False

    monkeypatch.setenv("YATL_COLOR", "yes")
    assert Settings.from_env().color is True


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YATL_FILENAME", "   ")
    assert Settings.from_env().filename == DEFAULT_FILENAME

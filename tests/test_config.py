from __future__ import annotations

import time

import pytest
from pydantic import ValidationError

from timebenchy.config import Settings, load_settings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("TIMEBENCHY_DECIMALS", "TIMEBENCHY_OUTPUT_FORMAT", "TIMEBENCHY_CLOCK"):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_defaults():
    settings = Settings()
    assert settings.decimals == 4
    assert settings.output_format == "text"
    assert settings.clock_function() is time.perf_counter


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TIMEBENCHY_DECIMALS", "2")
    monkeypatch.setenv("TIMEBENCHY_OUTPUT_FORMAT", "html")
    monkeypatch.setenv("TIMEBENCHY_CLOCK", "time")

    settings = Settings()
    assert settings.decimals == 2
    assert settings.output_format == "html"
    assert settings.clock_function() is time.time


def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("TIMEBENCHY_DECIMALS=6\n", encoding="utf-8")
    assert Settings().decimals == 6


@pytest.mark.parametrize(
    "name,value",
    [
        ("TIMEBENCHY_DECIMALS", "-1"),
        ("TIMEBENCHY_DECIMALS", "13"),
        ("TIMEBENCHY_OUTPUT_FORMAT", "pdf"),
        ("TIMEBENCHY_CLOCK", "sundial"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()


def test_load_settings_is_cached():
    assert load_settings() is load_settings()

"""Tests for settings model and env aliases."""

import pytest

from postcraft import config
from postcraft.config import DEFAULT_FEED_URL, Settings
from postcraft.llm import DEFAULT_MODEL

KEY_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY", "GEMINI_MODEL", "LLM_MODEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in KEY_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize("env_name", ["GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"])
def test_api_key_aliases(monkeypatch, env_name) -> None:
    """Any of the supported variables should populate gemini_api_key."""
    monkeypatch.setenv(env_name, "alias-key")

    settings = Settings()

    assert settings.gemini_api_key == "alias-key"
    assert settings.has_api_key


def test_missing_api_key_still_loads() -> None:
    """Settings load without a key; generation reports the problem later."""
    settings = Settings(gemini_api_key=None)

    assert settings.gemini_api_key is None
    assert not settings.has_api_key


def test_defaults() -> None:
    settings = Settings(gemini_api_key=None)

    assert settings.gemini_model == DEFAULT_MODEL
    assert str(settings.feed_url) == DEFAULT_FEED_URL
    assert settings.max_description_chars == 200


def test_model_alias(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_MODEL", "gemini-custom")

    assert Settings().gemini_model == "gemini-custom"


def test_get_settings_singleton(monkeypatch) -> None:
    """Singleton loader should cache the first instance."""
    monkeypatch.setenv("GEMINI_API_KEY", "singleton-key")
    monkeypatch.setattr(config, "_settings", None)

    first = config.get_settings()

    assert first.gemini_api_key == "singleton-key"
    assert config.get_settings() is first

"""Common test fixtures."""

import pytest

from aigcw.config.settings import LLMProvider, LLMSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep AIGCW_* variables from the developer's shell out of the tests."""
    for name in ("AIGCW_API_KEY", "AIGCW_MODEL", "AIGCW_URL", "AIGCW_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def llm_settings():
    """Fixture for building enabled LLMSettings."""
    def _create(provider: LLMProvider = LLMProvider.OPENAI, **kwargs):
        values = {"enabled": True, "api_key": "sk-test", "model": "test-model"}
        values.update(kwargs)
        return LLMSettings(provider=provider, **values)
    return _create


@pytest.fixture
def commit_config(tmp_path):
    """Fixture for writing a ``.commitconfig.toml``."""
    def _write(content: str):
        path = tmp_path / ".commitconfig.toml"
        path.write_text(content, encoding="utf-8")
        return path
    return _write

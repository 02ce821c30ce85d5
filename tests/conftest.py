"""Shared test fixtures."""

import pytest

from review_severity.models.config import LLMConfig, ScorerConfig


@pytest.fixture
def scorer_config():
    return ScorerConfig(llm=LLMConfig(api_key="test-key", model="test-model"))


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """A config file in an isolated working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("REVIEW_SEVERITY_API_KEY", raising=False)
    monkeypatch.delenv("REVIEW_SEVERITY_BASE_URL", raising=False)
    path = tmp_path / ".review-severity.toml"
    path.write_text(
        '[llm]\nmodel = "qwen3:8b"\napi_key = "sk-file"\nbase_url = "http://localhost:11434/v1"\n\n'
        '[scorer]\noutput_file = "score.json"\n',
        encoding="utf-8",
    )
    return path

"""Shared test fixtures."""

from pathlib import Path
from typing import Any

import pytest

from slackmd.config import SlackmdConfig
from slackmd.converter import load_document

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Return the sample rich text block, including its expected output."""
    return load_document(FIXTURES / "rich_text_sample.json")


@pytest.fixture
def tmp_config_path(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def default_config() -> SlackmdConfig:
    """Return a default config instance."""
    return SlackmdConfig()


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from the user's real config and env."""
    monkeypatch.setenv("SLACKMD_CONFIG", str(tmp_path / "isolated.toml"))
    for var in ("SLACKMD_DEFAULT_FORMAT", "SLACKMD_OUTPUT_DIR", "SLACKMD_HTML_TITLE"):
        monkeypatch.delenv(var, raising=False)

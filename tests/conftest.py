"""Shared fixtures for the dtdrafts test suite."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from dtdrafts.articles.models import Article  # noqa: E402
from tests.utils import make_article  # noqa: E402


@pytest.fixture(autouse=True)
def dtdrafts_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every test at an isolated ``~/.dtdrafts`` directory."""
    home = tmp_path / "dtdrafts-home"
    monkeypatch.setenv("DTDRAFTS_HOME", str(home))
    return home


@pytest.fixture
def sample_articles() -> list[Article]:
    return [
        make_article(1, "Rust Tips", body="Rust is great for CLI tools.", tags=["rust", "cli"]),
        make_article(
            2,
            "Kotlin Guide",
            body="Kotlin is a modern language.",
            tags=["kotlin", "android"],
            published=True,
        ),
        make_article(3, "CLI Tricks", body="Use Rust or Python for CLI.", tags=["cli", "tools"]),
    ]


@pytest.fixture(autouse=True)
def reset_cli_log_sink() -> Iterator[None]:
    """Drop the stderr sink ``dtdrafts.cli`` installs so it never outlives capsys."""
    yield
    from dtdrafts import cli

    if cli._stderr_sink_id is not None:
        logger.remove(cli._stderr_sink_id)
        cli._stderr_sink_id = None

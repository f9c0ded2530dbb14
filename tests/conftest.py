"""
Shared test fixtures and helpers for the config-pipeline test suite.

Provides a factory for writing configuration source files under tmp_path
and routes structlog output to the (captured) stderr stream, so stdout
only carries what the dispatcher prints.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from config_pipeline.main import configure_structlog


@pytest.fixture(autouse=True)
def _structlog_to_stderr() -> None:
    """Configure structlog at DEBUG level, rendered to the current sys.stderr."""
    configure_structlog("DEBUG")


@pytest.fixture()
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes `content` to tmp_path/`name` and returns the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def missing_source(tmp_path: Path) -> Path:
    """Return a path inside tmp_path that does not exist."""
    return tmp_path / "this_file_should_not_exist.txt"

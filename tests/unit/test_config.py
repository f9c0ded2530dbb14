"""
Unit tests for AppSettings — environment-driven configuration.

The .env file lookup is disabled in every test (_env_file=None) so only the
variables set through monkeypatch are seen.
"""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from config_pipeline.config import AppSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any PIPELINE_* variables inherited from the test runner."""
    for key in list(os.environ):
        if key.startswith("PIPELINE_"):
            monkeypatch.delenv(key)


def _settings() -> AppSettings:
    return AppSettings(_env_file=None)  # type: ignore[call-arg]


class TestDefaults:
    def test_stage_defaults_match_reference_behaviour(self) -> None:
        """
        GIVEN no environment variables
        WHEN AppSettings is created
        THEN the stage settings carry the reference markers, prefix and threshold.
        """
        settings = _settings()

        assert settings.loader.encoding == "utf-8"
        assert settings.loader.malformed_marker == "malformed"
        assert settings.validator.invalid_marker == "invalid_field"
        assert settings.validator.prefix == "Validated: "
        assert settings.processor.min_length == 10

    def test_app_defaults(self) -> None:
        settings = _settings()

        assert settings.sources == []
        assert settings.log_level == "INFO"


class TestEnvironmentOverrides:
    def test_nested_delimiter_maps_to_sections(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN PIPELINE_PROCESSOR__MIN_LENGTH=50 and PIPELINE_VALIDATOR__PREFIX="OK:"
        WHEN AppSettings is created
        THEN the nested sections pick them up.
        """
        monkeypatch.setenv("PIPELINE_PROCESSOR__MIN_LENGTH", "50")
        monkeypatch.setenv("PIPELINE_VALIDATOR__PREFIX", "OK:")

        settings = _settings()

        assert settings.processor.min_length == 50
        assert settings.validator.prefix == "OK:"

    def test_sources_parsed_from_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_SOURCES", '["a.txt", "b.txt"]')

        assert _settings().sources == ["a.txt", "b.txt"]

    def test_log_level_is_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_LOG_LEVEL", "debug")

        assert _settings().log_level == "DEBUG"


class TestValidation:
    def test_rejects_negative_min_length(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_PROCESSOR__MIN_LENGTH", "-1")

        with pytest.raises(ValidationError):
            _settings()

    def test_rejects_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_LOG_LEVEL", "CHATTY")

        with pytest.raises(ValidationError, match="Unknown log level"):
            _settings()

    def test_rejects_unknown_encoding(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_LOADER__ENCODING", "no-such-codec")

        with pytest.raises(ValidationError, match="Unknown encoding"):
            _settings()

    def test_rejects_empty_marker(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_VALIDATOR__INVALID_MARKER", "")

        with pytest.raises(ValidationError):
            _settings()

"""
Unit tests for domain models and the error taxonomy — value objects.

Verifies frozen dataclass behavior, structural equality, and that the
error union and ERROR_KINDS describe the same closed set.
"""

from __future__ import annotations

import typing

import pytest

from config_pipeline.domain.errors import (
    ERROR_KINDS,
    ParseError,
    PipelineError,
    ProcessingError,
    ReadError,
    ValidationError,
)
from config_pipeline.domain.models import Config, Outcome, ValidatedRecord


class TestStageRecords:
    """Verify the records passed between stages."""

    def test_records_hold_their_payload(self) -> None:
        """
        GIVEN each stage record
        WHEN constructed
        THEN its single field is stored as given.
        """
        assert Config(raw_text="abc").raw_text == "abc"
        assert ValidatedRecord(normalized_text="Validated: abc").normalized_text == "Validated: abc"
        assert Outcome(score=14).score == 14

    def test_frozen_prevents_mutation(self) -> None:
        """
        GIVEN a frozen Config
        WHEN attempting to modify a field
        THEN FrozenInstanceError (an AttributeError) is raised.
        """
        config = Config(raw_text="abc")
        with pytest.raises(AttributeError):
            config.raw_text = "changed"  # type: ignore[misc]

    def test_value_equality(self) -> None:
        """
        GIVEN two records built from the same value
        WHEN compared
        THEN they are equal and hash alike.
        """
        assert Outcome(score=3) == Outcome(score=3)
        assert hash(Outcome(score=3)) == hash(Outcome(score=3))
        assert Outcome(score=3) != Outcome(score=4)


class TestErrorTaxonomy:
    """Verify the closed set of pipeline error kinds."""

    def test_error_kinds_match_union(self) -> None:
        """
        GIVEN the PipelineError type alias
        WHEN its members are listed
        THEN they are exactly ERROR_KINDS, in order.
        """
        assert typing.get_args(PipelineError.__value__) == ERROR_KINDS

    def test_errors_are_values_not_exceptions(self) -> None:
        """
        GIVEN every error kind
        WHEN inspected
        THEN none of them is an Exception subclass.
        """
        for kind in ERROR_KINDS:
            assert not issubclass(kind, BaseException)

    def test_errors_compare_structurally(self) -> None:
        """
        GIVEN two errors with the same payload
        WHEN compared
        THEN they are equal; different kinds with similar payloads are not.
        """
        assert ReadError("a.txt") == ReadError(source_identifier="a.txt")
        assert ParseError("malformed", 1) == ParseError(excerpt="malformed", position=1)
        assert ValidationError("f", "v") != ProcessingError("f", "v")

    def test_errors_are_immutable(self) -> None:
        """
        GIVEN a ProcessingError
        WHEN attempting to modify its payload
        THEN AttributeError is raised.
        """
        error = ProcessingError(stage_name="Data Processing", detail="too short")
        with pytest.raises(AttributeError):
            error.detail = "other"  # type: ignore[misc]

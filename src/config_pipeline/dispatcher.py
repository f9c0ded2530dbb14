"""
Dispatcher — the single place where a finished pipeline Result is handled.

A run ends here exactly once. Success is reported on the output stream;
a failure is matched against every PipelineError kind and reported on the
error stream with a kind-specific message.

The match in describe_error ends in `assert_never`. A type checker proves
that branch unreachable while every kind has a case, and flags it as soon
as a new kind joins PipelineError without one. At runtime, an object that
is not a PipelineError raises AssertionError instead of being reported as
a generic failure.
"""

from __future__ import annotations

import sys
from typing import TextIO, assert_never

from railway.result import Failure, Result, Success

from config_pipeline.domain.errors import (
    ParseError,
    PipelineError,
    ProcessingError,
    ReadError,
    ValidationError,
)
from config_pipeline.domain.models import Outcome


def describe_error(error: PipelineError) -> str:
    """Render a human-readable diagnostic for one error, payload embedded verbatim."""
    match error:
        case ReadError(source_identifier=source):
            return f"Configuration Read Error: Could not open file '{source}'"
        case ParseError(excerpt=excerpt, position=position):
            return (
                f"Configuration Parse Error: Malformed content at line {position} "
                f"(Context: '{excerpt}')"
            )
        case ValidationError(field_name=field_name, offending_value=value):
            return f"Data Validation Error: Field '{field_name}' has invalid value '{value}'"
        case ProcessingError(stage_name=stage_name, detail=detail):
            return f"Data Processing Error: Task '{stage_name}' failed. Details: {detail}"
        case _:
            assert_never(error)


def handle_pipeline_result(
    result: Result[Outcome, PipelineError],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """
    Report the terminal Result of a pipeline run.

    Streams default to sys.stdout / sys.stderr, resolved at call time so
    pytest's capsys sees the output.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    match result:
        case Success(outcome):
            print(f"Pipeline Succeeded! Final Result Code: {outcome.score}", file=out)  # noqa: T201
        case Failure(error):
            print(f"Pipeline Failed! Error details: {describe_error(error)}", file=err)  # noqa: T201

"""
Error taxonomy — the closed set of failures a pipeline run can end with.

Each kind is a frozen dataclass carrying its diagnostic payload. They are
values on the failure track of a Result, never raised as exceptions.

PipelineError is the union of all kinds. Code that consumes it matches on
every member and ends with `assert_never`, so adding a kind here makes the
type check fail at every handler that has not been taught about it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReadError:
    """The named source could not be opened or read."""

    source_identifier: str


@dataclass(frozen=True, slots=True)
class ParseError:
    """
    The source was read but its content is unusable.

    `position` is a 1-based line number; the loader does not track lines and
    always reports line 1.
    """

    excerpt: str
    position: int


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A field in the loaded configuration holds a disallowed value."""

    field_name: str
    offending_value: str


@dataclass(frozen=True, slots=True)
class ProcessingError:
    """A precondition of the processing task was not met."""

    stage_name: str
    detail: str


type PipelineError = ReadError | ParseError | ValidationError | ProcessingError

ERROR_KINDS: tuple[type, ...] = (ReadError, ParseError, ValidationError, ProcessingError)

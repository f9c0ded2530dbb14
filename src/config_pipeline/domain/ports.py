"""
Ports — Protocol-based interfaces for the three pipeline stages.

These define WHAT each stage must do without specifying HOW:

  Domain ← Ports (protocols) ← Adapters (implementations)

Each port is a Protocol (structural typing) so adapters, fakes and mocks
satisfy the contract simply by implementing the method.

Every stage returns Result[..., PipelineError] and fails with exactly one
error kind local to its own responsibility:

  ConfigLoader     → ReadError | ParseError
  ConfigValidator  → ValidationError
  RecordProcessor  → ProcessingError
"""

from __future__ import annotations

from os import PathLike
from typing import Protocol, runtime_checkable

from railway.result import Result

from config_pipeline.domain.errors import PipelineError
from config_pipeline.domain.models import Config, Outcome, ValidatedRecord


@runtime_checkable
class ConfigLoader(Protocol):
    """
    Port: acquire the raw content of a named source.

    Fails with ReadError when the source cannot be opened or read, and with
    ParseError when the content is unusable.
    """

    def load(self, source: str | PathLike[str]) -> Result[Config, PipelineError]: ...


@runtime_checkable
class ConfigValidator(Protocol):
    """Port: check a loaded Config and normalize it. Fails with ValidationError."""

    def validate(self, config: Config) -> Result[ValidatedRecord, PipelineError]: ...


@runtime_checkable
class RecordProcessor(Protocol):
    """Port: turn a validated record into the final Outcome. Fails with ProcessingError."""

    def process(self, record: ValidatedRecord) -> Result[Outcome, PipelineError]: ...

"""
Pipeline — the ROP pipeline chaining load, validate and process.

Domain layer — no I/O of its own. The stages are injected via ports
(Protocol interfaces), so tests can swap in fakes or mocks.

The pipeline connects stages via flat_map, forming a railway:

  load(source)
    → validate(config)
      → process(record)

Each stage returns Result[T, PipelineError]. The first failure
short-circuits the rest: later stages are never called and the error
reaches the caller unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike

import structlog
from railway.result import Result

from config_pipeline.domain.errors import PipelineError
from config_pipeline.domain.models import Outcome
from config_pipeline.domain.ports import ConfigLoader, ConfigValidator, RecordProcessor

log = structlog.get_logger()

type PipelineFn = Callable[[str | PathLike[str]], Result[Outcome, PipelineError]]


def run_pipeline(
    source: str | PathLike[str],
    loader: ConfigLoader,
    validator: ConfigValidator,
    processor: RecordProcessor,
) -> Result[Outcome, PipelineError]:
    """
    Execute load → validate → process for a single source.

    Returns Result[Outcome] with the final score on success,
    or the failure from the first failing stage.
    """
    log.debug("pipeline.started", source=str(source))
    return (
        loader.load(source)
        .flat_map(validator.validate)
        .flat_map(processor.process)
        .peek(lambda outcome: log.info("pipeline.completed", source=str(source), score=outcome.score))
        .peek_failure(lambda error: log.info("pipeline.failed", source=str(source), error=repr(error)))
    )

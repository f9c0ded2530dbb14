"""
Application entry point — wires dependencies and runs the pipeline.

Composition root: creates the concrete stage adapters, injects them into
the pipeline and hands every terminal Result to the dispatcher.

This is the ONLY place where concrete adapter classes are instantiated.
Everything else depends on Protocol interfaces.

Responsibilities:
  1. Load and validate configuration from environment
  2. Configure structlog (rendered to stderr)
  3. Create the concrete adapters (loader, validator, processor)
  4. Wire the pipeline (partial application with ports)
  5. Run the given sources, or the demo scenarios when none are given

Pipeline failures are reported by the dispatcher and never change the exit
status. Only a configuration error is fatal.
"""

from __future__ import annotations

import logging
import sys
import tempfile
from collections.abc import Sequence
from functools import partial
from pathlib import Path

import structlog

from config_pipeline import __version__
from config_pipeline.adapters.file_loader import FileConfigLoader
from config_pipeline.adapters.length_processor import LengthProcessor
from config_pipeline.adapters.sentinel_validator import SentinelValidator
from config_pipeline.config import AppSettings
from config_pipeline.dispatcher import handle_pipeline_result
from config_pipeline.pipeline import PipelineFn, run_pipeline
from config_pipeline.scenarios import run_scenarios


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for human-readable console logging on stderr.

    stdout is left to the dispatcher's success report.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


type _Adapters = tuple[FileConfigLoader, SentinelValidator, LengthProcessor]


def _create_adapters(settings: AppSettings) -> _Adapters:
    """Instantiate the three stage adapters from application settings."""
    loader = FileConfigLoader(
        encoding=settings.loader.encoding,
        malformed_marker=settings.loader.malformed_marker,
    )
    validator = SentinelValidator(
        invalid_marker=settings.validator.invalid_marker,
        prefix=settings.validator.prefix,
    )
    processor = LengthProcessor(min_length=settings.processor.min_length)
    return loader, validator, processor


def build_pipeline(settings: AppSettings) -> PipelineFn:
    """Return the pipeline with concrete adapters bound; it takes only the source path."""
    loader, validator, processor = _create_adapters(settings)
    return partial(
        run_pipeline,
        loader=loader,
        validator=validator,
        processor=processor,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Wire dependencies and run the pipeline over the requested sources."""
    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level)
    log = structlog.get_logger()

    sources = list(sys.argv[1:] if argv is None else argv) or settings.sources
    log.info("app.starting", version=__version__, log_level=settings.log_level, sources=len(sources))

    pipeline_fn = build_pipeline(settings)

    if sources:
        for source in sources:
            handle_pipeline_result(pipeline_fn(source))
    else:
        with tempfile.TemporaryDirectory(prefix="config-pipeline-") as workdir:
            run_scenarios(Path(workdir), pipeline_fn, handle_pipeline_result)

    log.info("app.finished")


if __name__ == "__main__":
    main()

"""
Demo scenarios — one run per pipeline outcome.

Writes a small set of configuration files into a working directory, runs
each through the pipeline, hands every terminal Result to the dispatcher
and removes the files again, whatever the outcome.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import structlog
from railway.result import Result

from config_pipeline.domain.errors import PipelineError
from config_pipeline.domain.models import Outcome
from config_pipeline.pipeline import PipelineFn

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class Scenario:
    """A named pipeline run. `content=None` means the file is never created."""

    name: str
    filename: str
    content: str | None


SCENARIOS: tuple[Scenario, ...] = (
    Scenario("Successful Execution", "valid_config.txt", "valid_data_content"),
    Scenario("Config Read Error", "non_existent_config.txt", None),
    Scenario("Config Parse Error", "malformed_config.txt", "malformed content"),
    Scenario("Validation Error", "invalid_data_config.txt", "valid_data\ninvalid_field"),
    Scenario("Processing Error", "short_data_config.txt", "short"),
)


@contextmanager
def _scenario_files(workdir: Path, scenarios: tuple[Scenario, ...]) -> Iterator[None]:
    created: list[Path] = []
    try:
        for scenario in scenarios:
            if scenario.content is None:
                continue
            path = workdir / scenario.filename
            path.write_text(scenario.content, encoding="utf-8")
            created.append(path)
        yield
    finally:
        for path in created:
            path.unlink(missing_ok=True)


def run_scenarios(
    workdir: Path,
    pipeline_fn: PipelineFn,
    dispatch: Callable[[Result[Outcome, PipelineError]], None],
    scenarios: tuple[Scenario, ...] = SCENARIOS,
) -> list[tuple[str, Result[Outcome, PipelineError]]]:
    """
    Run every scenario from `workdir` and dispatch each result.

    Returns (scenario name, Result) pairs in run order.
    """
    results: list[tuple[str, Result[Outcome, PipelineError]]] = []
    with _scenario_files(workdir, scenarios):
        for scenario in scenarios:
            print(f"\n--- Scenario: {scenario.name} ---")  # noqa: T201
            log.debug("scenario.started", scenario=scenario.name, file=scenario.filename)
            result = pipeline_fn(workdir / scenario.filename)
            dispatch(result)
            results.append((scenario.name, result))
    return results

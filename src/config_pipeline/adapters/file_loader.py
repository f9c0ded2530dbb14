"""
File loader adapter — reads a configuration source from the filesystem.

Adapter layer — implements the ConfigLoader port.

The file is opened in a `with` block so the handle is released on every exit
path. OS-level failures are caught at this boundary by Result.from_computation
and become ReadError; everything past that point is plain Result chaining.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

import structlog
from railway.result import Result

from config_pipeline.domain.errors import ParseError, PipelineError, ReadError
from config_pipeline.domain.models import Config

log = structlog.get_logger()

MALFORMED_MARKER = "malformed"

# The loader has no notion of lines; every parse failure points at line 1.
PARSE_ERROR_POSITION = 1


class FileConfigLoader:
    """
    Load a Config from a text file.

    Implements the ConfigLoader port.
    Empty content, or content containing the malformed marker, is rejected
    with ParseError.
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        malformed_marker: str = MALFORMED_MARKER,
    ) -> None:
        self._encoding = encoding
        self._malformed_marker = malformed_marker

    def load(self, source: str | PathLike[str]) -> Result[Config, PipelineError]:
        """
        Read `source` and wrap its text in a Config.

        Returns Result.failure(ReadError) if the file cannot be opened or decoded,
        Result.failure(ParseError) if the content is empty or malformed.
        """
        source_identifier = str(source)
        return (
            Result.from_computation(
                lambda: self._read(Path(source)),
                lambda exc: self._read_failed(source_identifier, exc),
                catching=(OSError, ValueError),
            )
            .flat_map(lambda text: self._parse(source_identifier, text))
        )

    def _read(self, path: Path) -> str:
        with path.open(encoding=self._encoding) as handle:
            return handle.read()

    def _read_failed(self, source_identifier: str, exc: Exception) -> PipelineError:
        log.debug("load.read_failed", source=source_identifier, reason=str(exc))
        return ReadError(source_identifier=source_identifier)

    def _parse(self, source_identifier: str, text: str) -> Result[Config, PipelineError]:
        if not text or self._malformed_marker in text:
            log.debug("load.malformed", source=source_identifier)
            return Result.failure(
                ParseError(excerpt=MALFORMED_MARKER, position=PARSE_ERROR_POSITION)
            )
        log.debug("load.succeeded", source=source_identifier, size=len(text))
        return Result.success(Config(raw_text=text))

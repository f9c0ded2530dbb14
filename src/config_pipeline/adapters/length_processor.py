"""
Length processor adapter — scores a validated record by its text length.

Adapter layer — implements the RecordProcessor port.

The threshold is compared against the full normalized text, validation
prefix included. With the default 11-character prefix and a threshold of
10, records built by SentinelValidator never fall short; the check only
trips for records produced some other way (or with a shorter prefix).
"""

from __future__ import annotations

import structlog
from railway.result import Result

from config_pipeline.domain.errors import PipelineError, ProcessingError
from config_pipeline.domain.models import Outcome, ValidatedRecord

log = structlog.get_logger()

STAGE_NAME = "Data Processing"
TOO_SHORT_DETAIL = "Input data too short for task"
MIN_LENGTH = 10


class LengthProcessor:
    """Implements the RecordProcessor port."""

    def __init__(self, min_length: int = MIN_LENGTH) -> None:
        self._min_length = min_length

    def process(self, record: ValidatedRecord) -> Result[Outcome, PipelineError]:
        length = len(record.normalized_text)
        if length < self._min_length:
            log.debug("process.too_short", length=length, min_length=self._min_length)
            return Result.failure(ProcessingError(stage_name=STAGE_NAME, detail=TOO_SHORT_DETAIL))
        log.debug("process.succeeded", score=length)
        return Result.success(Outcome(score=length))

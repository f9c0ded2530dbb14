"""
Sentinel validator adapter — rejects configs containing a disallowed marker.

Adapter layer — implements the ConfigValidator port. Validation is a plain
substring search; accepted text is normalized by prepending a fixed prefix.
"""

from __future__ import annotations

import structlog
from railway.result import Result

from config_pipeline.domain.errors import PipelineError, ValidationError
from config_pipeline.domain.models import Config, ValidatedRecord

log = structlog.get_logger()

INVALID_FIELD_MARKER = "invalid_field"
DISALLOWED_VALUE = "contains disallowed value"
VALIDATED_PREFIX = "Validated: "


class SentinelValidator:
    """Implements the ConfigValidator port."""

    def __init__(
        self,
        invalid_marker: str = INVALID_FIELD_MARKER,
        prefix: str = VALIDATED_PREFIX,
    ) -> None:
        self._invalid_marker = invalid_marker
        self._prefix = prefix

    def validate(self, config: Config) -> Result[ValidatedRecord, PipelineError]:
        if self._invalid_marker in config.raw_text:
            log.debug("validate.rejected", field=self._invalid_marker)
            return Result.failure(
                ValidationError(
                    field_name=self._invalid_marker,
                    offending_value=DISALLOWED_VALUE,
                )
            )
        log.debug("validate.succeeded")
        return Result.success(ValidatedRecord(normalized_text=self._prefix + config.raw_text))

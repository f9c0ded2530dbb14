"""
Domain models — the immutable records handed from one stage to the next.

  load      → Config
  validate  → ValidatedRecord
  process   → Outcome

Each record is produced by exactly one stage and consumed by exactly the
next. All are frozen dataclasses, so passing one along never aliases
mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Config:
    """Raw text of a loaded configuration source."""

    raw_text: str


@dataclass(frozen=True, slots=True)
class ValidatedRecord:
    """Configuration text that passed validation, with the validation prefix applied."""

    normalized_text: str


@dataclass(frozen=True, slots=True)
class Outcome:
    """Final result of a successful run."""

    score: int

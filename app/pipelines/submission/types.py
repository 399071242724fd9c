"""Typed containers shared across the submission pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass(frozen=True)
class Submission:
    """Validated problem/solution text handed to the background pipeline."""

    message: str
    description: str
    submission_id: str = field(default_factory=lambda: uuid4().hex[:12])


@dataclass(frozen=True)
class PipelineOutcome:
    """Terminal result of one submission; only ever logged."""

    submission_id: str
    succeeded: bool
    card_id: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, submission_id: str, card_id: str | None) -> "PipelineOutcome":
        return cls(submission_id=submission_id, succeeded=True, card_id=card_id)

    @classmethod
    def failure(cls, submission_id: str, error: str) -> "PipelineOutcome":
        return cls(submission_id=submission_id, succeeded=False, error=error)

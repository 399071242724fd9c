"""High-level orchestration map for the submission pipeline.

``POST /api/data`` acknowledges the caller first and then hands the
submission to the background runner, which executes these stages:

1. ``reformat`` and ``extract`` – two independent chat-completion calls
   started together.
2. ``join`` – wait for both; a failure in either aborts the submission.
3. ``card`` – forward the joined result to the configured card sink.
4. ``report`` – log the terminal outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class PipelineStage:
    """Human-readable description of one stage in the submission pipeline."""

    order: int
    name: str
    module: str
    summary: str


class SubmissionPipeline:
    """Utility wrapper for documenting the `/api/data` background flow."""

    _STAGES: List[PipelineStage] = [
        PipelineStage(
            1,
            "Problem Reformatting",
            "app.services.llm_client",
            "Ask the LLM to clean up the pasted problem text as markdown.",
        ),
        PipelineStage(
            1,
            "Solution Extraction",
            "app.services.llm_client",
            "Split the solution write-up into explanation and code with a strict schema.",
        ),
        PipelineStage(
            2,
            "Join",
            "app.pipelines.submission.runner",
            "Wait for both LLM calls; the first failure cancels the other and discards everything.",
        ),
        PipelineStage(
            3,
            "Card Creation",
            "app.services.card_sink",
            "Compose the card document and send it to the configured sink.",
        ),
        PipelineStage(
            4,
            "Outcome Logging",
            "app.services.task_runner",
            "Log and count the terminal outcome; nothing is returned to the caller.",
        ),
    ]

    @classmethod
    def describe(cls) -> Iterable[PipelineStage]:
        """Expose the ordered list of stages for debugging and documentation."""

        return tuple(cls._STAGES)


__all__ = ["PipelineStage", "SubmissionPipeline"]

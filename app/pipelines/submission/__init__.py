"""Submission pipeline package.

`runner` holds the background coroutine started by ``POST /api/data``;
`flow` documents its stages and `types` the containers passed between them.
"""

from .flow import PipelineStage, SubmissionPipeline
from .runner import run_submission_pipeline
from .types import PipelineOutcome, Submission

__all__ = [
    "PipelineOutcome",
    "PipelineStage",
    "Submission",
    "SubmissionPipeline",
    "run_submission_pipeline",
]

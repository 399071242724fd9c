"""Problem/solution submission endpoint.

``POST /api/data`` only validates and acknowledges. The actual work (two LLM
calls joined, then one card creation) runs in the background; see
`app.pipelines.submission.flow.SubmissionPipeline` for the stage map.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.controllers.dependencies import CardSinkDep, LlmClientDep, TaskRunnerDep
from app.pipelines.submission import Submission, run_submission_pipeline
from app.telemetry import increment_submission
from app.views import ErrorResponse, SubmissionAccepted, SubmissionCreate

router = APIRouter(prefix="/api", tags=["submissions"])

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def read_submission(request: Request) -> SubmissionCreate:
    """Parse the submission from a JSON or URL-encoded form body."""

    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPE):
        form = await request.form()
        data: Any = {key: form.get(key) for key in ("message", "description")}
    else:
        try:
            data = await request.json()
        except ValueError as exc:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": str(exc)}]
            ) from exc

    try:
        return SubmissionCreate.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


SubmissionBody = Annotated[SubmissionCreate, Depends(read_submission)]


@router.post(
    "/data",
    response_model=SubmissionAccepted,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def submit_solution(
    payload: SubmissionBody,
    runner: TaskRunnerDep,
    llm: LlmClientDep,
    card_sink: CardSinkDep,
):
    """Acknowledge the submission and process it in the background."""
    if not payload.is_complete():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Message is required"},
        )

    pipeline = None
    scheduled = False
    try:
        submission = Submission(message=payload.message, description=payload.description)
        pipeline = run_submission_pipeline(submission, llm=llm, card_sink=card_sink)
        runner.submit(f"submission-{submission.submission_id}", pipeline)
        scheduled = True
        increment_submission()
    except Exception as exc:
        # Once scheduled, the task owns the coroutine.
        if pipeline is not None and not scheduled:
            pipeline.close()
        logger.exception("Error handling submission request")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Failed to submit request",
                "details": str(exc) or "Unknown error occurred",
            },
        )

    logger.info("Submission %s accepted", submission.submission_id)
    return SubmissionAccepted()

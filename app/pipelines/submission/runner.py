"""Background orchestration of a single submission."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable

from app.services.card_sink import CardSink
from app.services.llm_client import OpenAiLlmClient

from .types import PipelineOutcome, Submission

logger = logging.getLogger("app.pipelines.submission")


def _error_message(exc: BaseException) -> str:
    return str(exc) or "Unknown error occurred"


async def _cancel_all(tasks: list[asyncio.Future[Any]]) -> None:
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


async def join_all_or_nothing(*calls: Awaitable[Any]) -> list[Any]:
    """Run ``calls`` together; the first failure cancels the rest and is re-raised.

    No call outlives the join, so every upstream request belongs to the
    background task that started it.
    """

    tasks = [asyncio.ensure_future(call) for call in calls]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        await _cancel_all(tasks)
        raise

    if pending:
        await _cancel_all(list(pending))

    errors = [task.exception() for task in tasks if task in done and task.exception() is not None]
    if errors:
        raise errors[0]
    return [task.result() for task in tasks]


async def run_submission_pipeline(
    submission: Submission,
    *,
    llm: OpenAiLlmClient,
    card_sink: CardSink,
) -> PipelineOutcome:
    """Reformat + extract concurrently, then create one card from the joined result."""

    sid = submission.submission_id
    logger.info("Processing submission %s", sid)

    try:
        problem, solution = await join_all_or_nothing(
            llm.reformat_problem(submission.description),
            llm.extract_solution(submission.message),
        )

        logger.info("Creating card for submission %s", sid)
        card_id = await card_sink.create_card(problem, solution.explanation, solution.code)
    except Exception as exc:
        message = _error_message(exc)
        logger.error(
            "Error in background processing submission=%s: %s",
            sid,
            message,
            exc_info=exc,
        )
        return PipelineOutcome.failure(sid, message)

    if card_id:
        logger.info("Card created submission=%s card_id=%s", sid, card_id)
    logger.info("Processing completed successfully submission=%s", sid)
    return PipelineOutcome.success(sid, card_id)


__all__ = ["join_all_or_nothing", "run_submission_pipeline"]

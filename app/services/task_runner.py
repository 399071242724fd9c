"""Tracked executor for work that continues after the HTTP response is sent.

Handlers hand a coroutine to :class:`BackgroundTaskRunner` instead of
creating bare tasks. The runner keeps a strong reference to every task until
it finishes and records its terminal outcome in the logs and in Prometheus,
so failures that never reach the caller are still visible to operators.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine

from app.telemetry import record_outcome, set_in_flight

logger = logging.getLogger(__name__)


class TaskRunnerClosedError(RuntimeError):
    """Raised when work is submitted after the runner started draining."""


class BackgroundTaskRunner:
    """Schedule unsupervised background units of work and log how they end."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[Any]] = set()
        self._closed = False

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, name: str, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Start ``coro`` on the running loop without awaiting it."""

        if self._closed:
            coro.close()
            raise TaskRunnerClosedError("Background runner is shutting down.")

        try:
            task = asyncio.create_task(coro, name=name)
        except BaseException:
            coro.close()
            raise
        self._tasks.add(task)
        set_in_flight(len(self._tasks))
        task.add_done_callback(self._on_done)
        logger.debug("Scheduled background task %s", name)
        return task

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        set_in_flight(len(self._tasks))
        name = task.get_name()

        if task.cancelled():
            logger.warning("Background task %s was cancelled", name)
            record_outcome("cancelled")
            return

        exc = task.exception()
        if exc is not None:
            logger.error(
                "Background task %s crashed",
                name,
                exc_info=(type(exc), exc, exc.__traceback__),
            )
            record_outcome("crashed")
            return

        result = task.result()
        outcome = "succeeded" if getattr(result, "succeeded", True) else "failed"
        logger.info("Background task %s finished outcome=%s", name, outcome)
        record_outcome(outcome)

    async def drain(self, timeout: float) -> None:
        """Stop accepting work and wait up to ``timeout`` seconds for pending tasks."""

        self._closed = True
        pending = set(self._tasks)
        if not pending:
            return

        logger.info("Waiting for %d background task(s) to finish", len(pending))
        _, still_pending = await asyncio.wait(pending, timeout=timeout)
        for task in still_pending:
            logger.warning("Cancelling unfinished background task %s", task.get_name())
            task.cancel()
        if still_pending:
            await asyncio.gather(*still_pending, return_exceptions=True)


def get_task_runner() -> BackgroundTaskRunner:
    """Return the process-wide background runner."""

    return _DEFAULT_RUNNER


_DEFAULT_RUNNER = BackgroundTaskRunner()


__all__ = [
    "BackgroundTaskRunner",
    "TaskRunnerClosedError",
    "get_task_runner",
]

"""Tests for the tracked background runner."""

from __future__ import annotations

import asyncio
import inspect
import logging

import pytest

from app.pipelines.submission import PipelineOutcome
from app.services.task_runner import BackgroundTaskRunner, TaskRunnerClosedError


async def _finish(result):
    await asyncio.sleep(0)
    return result


async def _crash():
    await asyncio.sleep(0)
    raise ValueError("boom")


def test_completed_task_is_released_and_logged(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="app.services.task_runner")
    runner = BackgroundTaskRunner()

    async def scenario():
        task = runner.submit("ok-task", _finish(PipelineOutcome.success("s1", "card")))
        assert runner.in_flight == 1
        await task
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert runner.in_flight == 0
    assert "Background task ok-task finished outcome=succeeded" in caplog.text


def test_failed_outcome_is_logged_as_failed(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="app.services.task_runner")
    runner = BackgroundTaskRunner()

    async def scenario():
        await runner.submit("bad-task", _finish(PipelineOutcome.failure("s2", "nope")))
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert "Background task bad-task finished outcome=failed" in caplog.text


def test_crashing_task_is_logged_not_raised(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="app.services.task_runner")
    runner = BackgroundTaskRunner()

    async def scenario():
        task = runner.submit("crash-task", _crash())
        await asyncio.wait({task})
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert runner.in_flight == 0
    assert "Background task crash-task crashed" in caplog.text
    assert "ValueError: boom" in caplog.text


def test_drain_cancels_stragglers_and_rejects_new_work(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="app.services.task_runner")
    runner = BackgroundTaskRunner()

    async def scenario():
        runner.submit("slow-task", asyncio.sleep(3600))
        await runner.drain(timeout=0.01)
        assert runner.in_flight == 0
        with pytest.raises(TaskRunnerClosedError):
            runner.submit("late-task", _finish(None))

    asyncio.run(scenario())

    assert runner.closed
    assert "Background task slow-task was cancelled" in caplog.text


def test_drain_waits_for_quick_tasks():
    runner = BackgroundTaskRunner()
    results = []

    async def work():
        await asyncio.sleep(0.01)
        results.append("done")

    async def scenario():
        runner.submit("quick-task", work())
        await runner.drain(timeout=5)

    asyncio.run(scenario())

    assert results == ["done"]


def test_submit_without_running_loop_closes_the_coroutine():
    runner = BackgroundTaskRunner()
    coro = _finish(None)

    with pytest.raises(RuntimeError):
        runner.submit("no-loop", coro)

    assert inspect.getcoroutinestate(coro) == inspect.CORO_CLOSED
    assert runner.in_flight == 0

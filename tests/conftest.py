"""Shared fakes for the submission tests."""

from __future__ import annotations

import asyncio
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.services import task_runner  # noqa: E402
from app.services.response_contract import StructuredSolution  # noqa: E402


class FakeLlmClient:
    """Stands in for OpenAiLlmClient; records every call."""

    def __init__(
        self,
        *,
        problem: str | None = "**Two Sum**",
        explanation: str = "Use a hash map.",
        code: str = "def two_sum(): ...",
        reformat_error: Exception | None = None,
        extract_error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.problem = problem
        self.explanation = explanation
        self.code = code
        self.reformat_error = reformat_error
        self.extract_error = extract_error
        self.delay = delay
        self.calls: list[tuple[str, str]] = []

    async def reformat_problem(self, text: str) -> str | None:
        self.calls.append(("reformat", text))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.reformat_error is not None:
            raise self.reformat_error
        return self.problem

    async def extract_solution(self, text: str) -> StructuredSolution:
        self.calls.append(("extract", text))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.extract_error is not None:
            raise self.extract_error
        return StructuredSolution(solutionExplanation=self.explanation, code=self.code)


class RecordingCardSink:
    """Card sink that keeps created cards in memory."""

    def __init__(self, *, card_id: str | None = "card-1", error: Exception | None = None) -> None:
        self.card_id = card_id
        self.error = error
        self.cards: list[tuple[str | None, str, str]] = []

    async def create_card(self, problem: str | None, explanation: str, code: str) -> str | None:
        self.cards.append((problem, explanation, code))
        if self.error is not None:
            raise self.error
        return self.card_id


@pytest.fixture(autouse=True)
def fresh_task_runner(monkeypatch: pytest.MonkeyPatch) -> task_runner.BackgroundTaskRunner:
    """Give each test its own runner; app shutdown closes the one it drains."""

    runner = task_runner.BackgroundTaskRunner()
    monkeypatch.setattr(task_runner, "_DEFAULT_RUNNER", runner)
    return runner


@pytest.fixture
def fake_llm() -> FakeLlmClient:
    return FakeLlmClient()


@pytest.fixture
def card_sink() -> RecordingCardSink:
    return RecordingCardSink()

"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.services.card_sink import CardSink, get_card_sink
from app.services.llm_client import OpenAiLlmClient, get_llm_client
from app.services.task_runner import BackgroundTaskRunner, get_task_runner

LlmClientDep = Annotated[OpenAiLlmClient, Depends(get_llm_client)]
CardSinkDep = Annotated[CardSink, Depends(get_card_sink)]
TaskRunnerDep = Annotated[BackgroundTaskRunner, Depends(get_task_runner)]


__all__ = ["CardSinkDep", "LlmClientDep", "TaskRunnerDep"]

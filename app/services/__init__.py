"""Service layer helpers for external integrations."""

from .card_sink import (
    CardSink,
    CardSinkError,
    MochiCardSink,
    NullCardSink,
    build_card_sink,
    compose_card_content,
    get_card_sink,
)
from .llm_client import (
    LlmInvocationError,
    MissingContentError,
    OpenAiLlmClient,
    get_llm_client,
)
from .response_contract import SolutionContractError, StructuredSolution
from .task_runner import BackgroundTaskRunner, TaskRunnerClosedError, get_task_runner

__all__ = [
    "CardSink",
    "CardSinkError",
    "MochiCardSink",
    "NullCardSink",
    "build_card_sink",
    "compose_card_content",
    "get_card_sink",
    "LlmInvocationError",
    "MissingContentError",
    "OpenAiLlmClient",
    "get_llm_client",
    "SolutionContractError",
    "StructuredSolution",
    "BackgroundTaskRunner",
    "TaskRunnerClosedError",
    "get_task_runner",
]

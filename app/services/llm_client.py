"""Thin OpenAI client wrapper for the chat-completion calls of a submission."""

from __future__ import annotations

import logging
from typing import Any, Optional

from openai import AsyncOpenAI, OpenAIError

from app.config.settings import settings
from app.services.prompts import (
    PROBLEM_PROMPT,
    SOLUTION_PROMPT,
    SOLUTION_SCHEMA,
    build_user_message,
)
from app.services.response_contract import StructuredSolution

logger = logging.getLogger(__name__)


class LlmInvocationError(RuntimeError):
    """Raised when the chat-completion invocation fails."""


class MissingContentError(LlmInvocationError):
    """Raised when the chat-completion API returns no content."""


def _first_message_content(response: Any) -> str | None:
    choices = getattr(response, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None)


class OpenAiLlmClient:
    """Invoke the OpenAI chat-completion API with standard configuration."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Any | None = None,
    ) -> None:
        if api_key is None and settings.openai.api_key is not None:
            api_key = settings.openai.api_key.get_secret_value()
        self._api_key = api_key
        self._model = model or settings.openai.model
        self._base_url = base_url or settings.openai.base_url
        self._timeout = timeout or settings.openai.timeout
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            # Retries are disabled: a failed call propagates straight to the pipeline.
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client

    async def _complete(self, messages: list[dict[str, str]], **params: Any) -> str | None:
        try:
            response = await self._get_client().chat.completions.create(
                model=self._model,
                messages=messages,
                **params,
            )
        except OpenAIError as exc:
            raise LlmInvocationError(str(exc)) from exc

        return _first_message_content(response)

    async def extract_solution(self, text: str) -> StructuredSolution:
        """Split a solution write-up into explanation and code."""

        content = await self._complete(
            [build_user_message(SOLUTION_PROMPT, text)],
            response_format={"type": "json_schema", "json_schema": SOLUTION_SCHEMA},
        )
        if not content:
            raise MissingContentError("No content returned")

        return StructuredSolution.from_json(content)

    async def reformat_problem(self, text: str) -> str | None:
        """Return the problem description reformatted as markdown."""

        content = await self._complete([build_user_message(PROBLEM_PROMPT, text)])
        if not content:
            logger.warning("Problem reformatting returned no content")
        return content


def get_llm_client() -> OpenAiLlmClient:
    """Return the default LLM client instance."""

    return _DEFAULT_CLIENT


_DEFAULT_CLIENT = OpenAiLlmClient()


__all__ = [
    "LlmInvocationError",
    "MissingContentError",
    "OpenAiLlmClient",
    "get_llm_client",
]

"""Flashcard sinks that receive the finished problem/solution cards.

The Mochi integration is optional. When no API key is configured the
application is wired with :class:`NullCardSink`, which skips card creation
without touching the network.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import httpx

from app.config.settings import MochiConfig, settings

logger = logging.getLogger(__name__)

CARD_PROMPT_LINE = "What is the key technique to solve this problem?"
CODE_FENCE_LANGUAGE = "python"


class CardSinkError(RuntimeError):
    """Raised when the flashcard API rejects or fails a card creation."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


@dataclass(frozen=True)
class CardPayload:
    """Card content plus the destination deck."""

    content: str
    deck_id: str
    archived: bool = False

    def to_wire(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "deck-id": self.deck_id,
            "archived?": self.archived,
        }


def compose_card_content(problem: str | None, explanation: str, code: str) -> str:
    """Render the card document: problem, separator, explanation, fenced code."""

    return (
        f"{CARD_PROMPT_LINE}\n"
        f"{problem or ''}"
        "\n---\n"
        f"{explanation}\n"
        f"```{CODE_FENCE_LANGUAGE}\n"
        f"{code}"
        "\n```"
    )


class CardSink(Protocol):
    """Destination for finished cards."""

    async def create_card(
        self,
        problem: str | None,
        explanation: str,
        code: str,
    ) -> str | None:
        ...


class NullCardSink:
    """Card sink used when the flashcard integration is not configured."""

    async def create_card(
        self,
        problem: str | None,
        explanation: str,
        code: str,
    ) -> str | None:
        logger.warning("Skipping Mochi card creation: MOCHI_API_KEY is missing.")
        return None


class MochiCardSink:
    """Create cards through the Mochi REST API."""

    def __init__(
        self,
        *,
        api_key: str,
        deck_id: str,
        base_url: str = "https://app.mochi.cards/api",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._deck_id = deck_id
        self._cards_url = f"{base_url.rstrip('/')}/cards/"
        self._timeout = timeout
        self._transport = transport

    def build_payload(self, problem: str | None, explanation: str, code: str) -> CardPayload:
        return CardPayload(
            content=compose_card_content(problem, explanation, code),
            deck_id=self._deck_id,
        )

    async def create_card(
        self,
        problem: str | None,
        explanation: str,
        code: str,
    ) -> str | None:
        """POST one card and return the identifier Mochi assigned to it."""

        payload = self.build_payload(problem, explanation, code)

        # Mochi uses Basic auth with the API key as the username.
        async with httpx.AsyncClient(
            auth=(self._api_key, ""),
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self._cards_url, json=payload.to_wire())
            except httpx.RequestError as exc:
                raise CardSinkError(f"Unable to connect to Mochi API: {exc}") from exc

        if not response.is_success:
            body = response.text
            raise CardSinkError(
                f"Mochi API Error {response.status_code}: {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise CardSinkError(
                f"Invalid response from Mochi API: {exc}",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        card_id = data.get("id") if isinstance(data, dict) else None
        return str(card_id) if card_id is not None else None


def build_card_sink(config: MochiConfig | None = None) -> CardSink:
    """Select the card sink implementation for the given configuration."""

    config = config or settings.mochi
    if not config.is_configured():
        logger.warning("MOCHI_API_KEY is not set; flashcard creation is disabled.")
        return NullCardSink()

    return MochiCardSink(
        api_key=config.api_key.get_secret_value().strip(),
        deck_id=config.deck_id,
        base_url=config.base_url,
        timeout=config.timeout,
    )


def get_card_sink() -> CardSink:
    """Return the card sink selected at startup."""

    return _DEFAULT_SINK


_DEFAULT_SINK = build_card_sink()


__all__ = [
    "CARD_PROMPT_LINE",
    "CardPayload",
    "CardSink",
    "CardSinkError",
    "MochiCardSink",
    "NullCardSink",
    "build_card_sink",
    "compose_card_content",
    "get_card_sink",
]

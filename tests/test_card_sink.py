"""Tests for card composition and the Mochi/no-op sinks."""

from __future__ import annotations

import asyncio
import base64
import json

import httpx
import pytest
from pydantic import SecretStr

from app.config.settings import MochiConfig
from app.services import card_sink as card_sink_module
from app.services.card_sink import (
    CardSinkError,
    MochiCardSink,
    NullCardSink,
    build_card_sink,
    compose_card_content,
)


def test_card_content_follows_fixed_template():
    content = compose_card_content("**Two Sum**", "Use a hash map.", "def f():\n    pass")

    assert content == (
        "What is the key technique to solve this problem?\n"
        "**Two Sum**\n"
        "---\n"
        "Use a hash map.\n"
        "```python\n"
        "def f():\n    pass\n"
        "```"
    )


def test_card_content_tolerates_missing_problem():
    content = compose_card_content(None, "explanation", "code")

    assert content == (
        "What is the key technique to solve this problem?\n"
        "\n---\n"
        "explanation\n```python\ncode\n```"
    )


def test_mochi_sink_posts_card_with_basic_auth():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "card-42", "content": "..."})

    sink = MochiCardSink(
        api_key="secret-key",
        deck_id="DECK1",
        base_url="https://mochi.test/api/",
        transport=httpx.MockTransport(handler),
    )

    card_id = asyncio.run(sink.create_card("problem", "explanation", "code"))

    assert card_id == "card-42"
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://mochi.test/api/cards/"
    expected_auth = base64.b64encode(b"secret-key:").decode("ascii")
    assert request.headers["authorization"] == f"Basic {expected_auth}"
    assert json.loads(request.content) == {
        "content": compose_card_content("problem", "explanation", "code"),
        "deck-id": "DECK1",
        "archived?": False,
    }


def test_mochi_sink_raises_with_upstream_status_and_body():
    transport = httpx.MockTransport(lambda request: httpx.Response(422, text="bad deck"))
    sink = MochiCardSink(api_key="k", deck_id="D", transport=transport)

    with pytest.raises(CardSinkError) as exc_info:
        asyncio.run(sink.create_card("p", "e", "c"))

    assert exc_info.value.status_code == 422
    assert exc_info.value.body == "bad deck"
    assert str(exc_info.value) == "Mochi API Error 422: bad deck"


def test_mochi_sink_wraps_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    sink = MochiCardSink(api_key="k", deck_id="D", transport=httpx.MockTransport(handler))

    with pytest.raises(CardSinkError) as exc_info:
        asyncio.run(sink.create_card("p", "e", "c"))

    assert exc_info.value.status_code is None


def test_null_sink_makes_no_network_call(monkeypatch: pytest.MonkeyPatch):
    def fail(*args, **kwargs):
        raise AssertionError("no HTTP client should be created")

    monkeypatch.setattr(card_sink_module.httpx, "AsyncClient", fail)
    sink = build_card_sink(MochiConfig(api_key=None))

    assert isinstance(sink, NullCardSink)
    assert asyncio.run(sink.create_card("p", "e", "c")) is None


@pytest.mark.parametrize("api_key", [None, "", "   "])
def test_missing_credential_selects_null_sink(api_key):
    config = MochiConfig(api_key=SecretStr(api_key) if api_key is not None else None)

    assert isinstance(build_card_sink(config), NullCardSink)


def test_configured_credential_selects_mochi_sink():
    sink = build_card_sink(MochiConfig(api_key=SecretStr("key"), deck_id="DECK9"))

    assert isinstance(sink, MochiCardSink)
    assert sink.build_payload("p", "e", "c").deck_id == "DECK9"

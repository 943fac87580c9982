"""
Pytest configuration and common fixtures for wacloud tests.

Shared fixtures: a sample webhook and a mocked aiohttp session for the
transport layer. Payload factories live in payloads.py.
"""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from payloads import SENDER, make_message, make_webhook, messages_change


@pytest.fixture
def text_webhook() -> dict[str, Any]:
    """Webhook delivering a single text message."""
    return make_webhook(messages_change(messages=[make_message("text")]))


def _make_response(status: int, body: Any) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=body)
    response.text = AsyncMock(return_value=json.dumps(body))
    return response


def _as_context_manager(response: MagicMock) -> MagicMock:
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


@pytest.fixture
def mock_session_factory() -> Callable[..., MagicMock]:
    """Build a mocked aiohttp session whose post/get/delete return one response."""

    def factory(status: int = 200, body: Any = None) -> MagicMock:
        response = _make_response(status, body if body is not None else {})
        session = MagicMock()
        session.post = MagicMock(return_value=_as_context_manager(response))
        session.get = MagicMock(return_value=_as_context_manager(response))
        session.delete = MagicMock(return_value=_as_context_manager(response))
        session.response = response
        return session

    return factory


@pytest.fixture
def sent_response() -> dict[str, Any]:
    """Successful response of the messages endpoint."""
    return {
        "messaging_product": "whatsapp",
        "contacts": [{"input": SENDER, "wa_id": SENDER}],
        "messages": [{"id": "wamid.sent"}],
    }

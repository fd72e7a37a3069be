"""Manual round trip against the real Gemini API.

Run (example):
  GEMINI_API_KEY='...' \
  RUN_MANUAL=1 \
  python -m pytest -s tests/manual/test_gemini_roundtrip_manual.py

Optional env vars:
- GEMINI_MODEL_NAME: defaults to gemini-2.0-flash-lite
- MESSAGE: the user message to send
"""

from __future__ import annotations

import os

import anyio
import pytest

from gemini_relay.core.settings import get_settings
from gemini_relay.models.chat import ChatTurn
from gemini_relay.services.chat_relay import ChatRelay
from gemini_relay.services.transport import HttpxTransport


async def _run_roundtrip() -> None:
    settings = get_settings()
    relay = ChatRelay(transport=HttpxTransport(timeout=settings.gemini_timeout_seconds))

    history = [
        ChatTurn(sender="user", message="My name is Ada."),
        ChatTurn(sender="bot", message="Nice to meet you, Ada!"),
    ]
    message = os.getenv("MESSAGE", "What is my name?")

    result = await relay.relay(message, history, settings.relay_config())

    print("\n=== relay result ===")
    print(result.model_dump())

    assert result.success, result.error
    assert result.reply


def test_manual_gemini_roundtrip() -> None:
    if os.getenv("RUN_MANUAL") != "1":
        pytest.skip("Manual runner; set RUN_MANUAL=1 to execute")

    anyio.run(_run_roundtrip)

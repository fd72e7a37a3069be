from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from gemini_relay.core.errors import (
    ConfigurationError,
    MessageValidationError,
    RelayError,
    ResponseShapeError,
    UpstreamError,
)
from gemini_relay.core.settings import RelayConfig
from gemini_relay.models.chat import ChatTurn, RelayResult
from gemini_relay.models.gemini import (
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
)
from gemini_relay.services.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

GEMINI_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
MAX_HISTORY_TURNS = 10


def build_contents(message: str, history: Sequence[Any]) -> list[Content]:
    """
    Map the last turns of `history` plus the new message to Gemini contents.

    `history` may hold `ChatTurn`s or raw decoded entries. Only the last
    MAX_HISTORY_TURNS are looked at; entries without a usable sender and
    message are skipped.
    """
    contents: list[Content] = []

    for entry in list(history)[-MAX_HISTORY_TURNS:]:
        turn = ChatTurn.from_entry(entry)
        if turn is None:
            continue
        role = "user" if turn.sender == "user" else "model"
        contents.append(Content.from_text(role, turn.message))

    contents.append(Content.from_text("user", message))
    return contents


def build_generate_url(config: RelayConfig) -> str:
    return (
        f"{GEMINI_API_BASE_URL}/models/{config.model_name}:generateContent"
        f"?key={config.api_key}"
    )


def extract_reply(payload: object) -> str:
    try:
        response = GenerateContentResponse.model_validate(payload)
    except ValidationError as e:
        raise ResponseShapeError("Gemini response failed validation") from e

    text = response.first_text()
    if text is None:
        raise ResponseShapeError("Gemini response has no candidate text")
    return text


class ChatRelay:
    def __init__(self, transport: Transport | None = None):
        self._transport = transport or HttpxTransport()

    async def relay(
        self,
        message: str | None,
        history: Sequence[Any],
        config: RelayConfig,
    ) -> RelayResult:
        """
        Send one chat turn to Gemini and normalize the outcome.

        Args:
            message: The new user message
            history: Prior turns, oldest first
            config: API key and model name for this call

        Returns:
            RelayResult with the reply, or a fixed error message and status.
            Never raises.
        """
        try:
            reply = await self._generate(message, history, config)
            return RelayResult.ok(reply)
        except UpstreamError as e:
            logger.error("Gemini API error: %s %s", e.upstream_status, e.body)
            return RelayResult.failure(e.status_code, e.public_message)
        except RelayError as e:
            logger.warning("Chat relay rejected: %s", e)
            return RelayResult.failure(e.status_code, e.public_message)
        except Exception:
            logger.exception("Chat relay failed")
            return RelayResult.failure(500, "Internal server error")

    async def _generate(
        self,
        message: str | None,
        history: Sequence[Any],
        config: RelayConfig,
    ) -> str:
        if not config.api_key:
            raise ConfigurationError("GEMINI_API_KEY is not configured")

        if not message or not message.strip():
            raise MessageValidationError("Empty chat message")

        request = GenerateContentRequest(contents=build_contents(message, history))

        response = await self._transport.post_json(
            build_generate_url(config), request.to_wire()
        )
        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        reply = extract_reply(response.json())
        logger.info(
            "Gemini reply received (model=%s, turns=%d, chars=%d)",
            config.model_name,
            len(request.contents),
            len(reply),
        )
        return reply

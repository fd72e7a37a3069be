from __future__ import annotations

import logging

from gemini_relay.core.errors import MalformedRequestError
from gemini_relay.core.settings import RelayConfig
from gemini_relay.models.chat import HttpResponse, RelayResult
from gemini_relay.services.chat_relay import ChatRelay
from gemini_relay.services.request_body import RawBody, parse_chat_request
from gemini_relay.services.response_builder import build_response

logger = logging.getLogger(__name__)


async def handle_chat(
    body: RawBody,
    config: RelayConfig,
    relay: ChatRelay,
) -> HttpResponse:
    """
    Platform-neutral entry point: raw body in, finished HTTP response out.

    Serverless wrappers only need to wrap their body in a `RawBody` variant and
    copy the returned status, headers and body into their own response type.
    """
    try:
        request = parse_chat_request(body)
    except MalformedRequestError as e:
        logger.warning("Rejected chat request: %s", e)
        return build_response(
            RelayResult.failure(e.status_code, e.public_message)
        )

    result = await relay.relay(
        message=request.message,
        history=request.chat_history,
        config=config,
    )
    return build_response(result)

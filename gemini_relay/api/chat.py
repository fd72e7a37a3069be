import logging

from fastapi import APIRouter, Depends, Request, Response

from gemini_relay.core.settings import RelayConfig
from gemini_relay.dependencies import get_chat_relay, get_relay_config
from gemini_relay.models.chat import HttpResponse
from gemini_relay.services.chat_relay import ChatRelay
from gemini_relay.services.handler import handle_chat
from gemini_relay.services.request_body import BinaryBody
from gemini_relay.services.response_builder import build_preflight_response

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(http_response: HttpResponse) -> Response:
    return Response(
        content=http_response.body,
        status_code=http_response.status_code,
        headers=http_response.headers,
    )


@router.post("/chat")
async def chat_endpoint(
    request: Request,
    config: RelayConfig = Depends(get_relay_config),
    chat_relay: ChatRelay = Depends(get_chat_relay),
) -> Response:
    """
    Relay a chat message to Gemini.

    The body is read raw and parsed by `handle_chat`, so malformed JSON gets
    the same JSON error envelope as every other failure instead of a FastAPI
    422.
    """
    raw = await request.body()
    http_response = await handle_chat(BinaryBody(raw), config, chat_relay)
    logger.info("Chat request handled with status %d", http_response.status_code)
    return _to_response(http_response)


@router.options("/chat")
async def chat_preflight() -> Response:
    return _to_response(build_preflight_response())

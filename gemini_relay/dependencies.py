from __future__ import annotations

from fastapi import Depends

from gemini_relay.core.settings import RelayConfig, Settings, get_settings
from gemini_relay.services.chat_relay import ChatRelay
from gemini_relay.services.transport import HttpxTransport


def get_relay_config(settings: Settings = Depends(get_settings)) -> RelayConfig:
    return settings.relay_config()


def get_chat_relay(settings: Settings = Depends(get_settings)) -> ChatRelay:
    return ChatRelay(
        transport=HttpxTransport(timeout=settings.gemini_timeout_seconds)
    )

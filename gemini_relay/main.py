from fastapi import FastAPI

from gemini_relay.api import chat, health
from gemini_relay.core.logging import configure_logging
from gemini_relay.core.settings import get_settings

API_VERSION = "0.1.0"


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Relays chat messages and recent history to Gemini generateContent.",
        version=API_VERSION,
    )

    # Chat relay under the versioned prefix, liveness at the root.
    app.include_router(chat.router, prefix="/api/v1", tags=["chat"])
    app.include_router(health.router, tags=["health"])

    return app


app = create_app()

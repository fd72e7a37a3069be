from __future__ import annotations


class RelayError(Exception):
    """Failure that maps to a fixed, caller-safe error message."""

    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.public_message)
        self.detail = detail


class ConfigurationError(RelayError):
    status_code = 500
    public_message = "API key not configured"


class MessageValidationError(RelayError):
    status_code = 400
    public_message = "Message is required"


class UpstreamError(RelayError):
    """Non-2xx answer from the Gemini API. Details are logged, never returned."""

    status_code = 500
    public_message = "AI service unavailable"

    def __init__(self, upstream_status: int, body: str):
        super().__init__(f"Gemini API returned HTTP {upstream_status}")
        self.upstream_status = upstream_status
        self.body = body


class ResponseShapeError(RelayError):
    status_code = 500
    public_message = "Invalid AI response"


class MalformedRequestError(ValueError):
    """Raw request body could not be turned into a chat request."""

    status_code = 400
    public_message = "Invalid request body"

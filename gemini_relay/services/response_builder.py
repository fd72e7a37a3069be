from __future__ import annotations

import json

from gemini_relay.models.chat import HttpResponse, RelayResult

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}


def _dump(payload: dict[str, str | None]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def build_response(result: RelayResult) -> HttpResponse:
    if result.success:
        body = _dump({"reply": result.reply})
    else:
        body = _dump({"error": result.error})

    return HttpResponse(
        status_code=result.status_code,
        headers=dict(CORS_HEADERS),
        body=body,
    )


def build_preflight_response() -> HttpResponse:
    return HttpResponse(status_code=204, headers=dict(CORS_HEADERS), body="")

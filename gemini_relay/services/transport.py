from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol

import httpx


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    text: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text)


class Transport(Protocol):
    async def post_json(self, url: str, payload: dict[str, Any]) -> TransportResponse:
        ...


class HttpxTransport:
    """
    Transport backed by `httpx.AsyncClient`.

    A fresh client is opened per call; nothing is kept between requests.
    `client_transport` is forwarded to the client (tests pass an
    `httpx.MockTransport` there).
    """

    def __init__(
        self,
        timeout: float | None = None,
        client_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout
        self._client_transport = client_transport

    async def post_json(self, url: str, payload: dict[str, Any]) -> TransportResponse:
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._client_transport
        ) as client:
            response = await client.post(url, json=payload)
        return TransportResponse(status_code=response.status_code, text=response.text)

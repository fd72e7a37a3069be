from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from pydantic import ValidationError

from gemini_relay.core.errors import MalformedRequestError
from gemini_relay.models.chat import ChatRequest


@dataclass(frozen=True)
class TextBody:
    text: str


@dataclass(frozen=True)
class BinaryBody:
    data: bytes
    encoding: str = "utf-8"


@dataclass(frozen=True)
class StructuredBody:
    """A body the host already decoded (e.g. a dict from an event payload)."""

    value: Any


RawBody = Union[TextBody, BinaryBody, StructuredBody]


def parse_request_body(body: RawBody) -> Any:
    """
    Normalize a raw request body into a structured value.

    Text and binary bodies are parsed as JSON; structured bodies are returned
    as-is.

    Raises:
        MalformedRequestError: the body is not valid JSON (or not decodable).
    """
    if isinstance(body, StructuredBody):
        return body.value

    if isinstance(body, BinaryBody):
        try:
            text = body.data.decode(body.encoding)
        except UnicodeDecodeError as e:
            raise MalformedRequestError(f"Body is not valid {body.encoding}") from e
    else:
        text = body.text

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedRequestError(f"Body is not valid JSON: {e.msg}") from e


def parse_chat_request(body: RawBody) -> ChatRequest:
    value = parse_request_body(body)
    try:
        return ChatRequest.model_validate(value)
    except ValidationError as e:
        raise MalformedRequestError(
            f"Body does not describe a chat request ({e.error_count()} errors)"
        ) from e

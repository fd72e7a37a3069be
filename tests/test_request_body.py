import pytest

from gemini_relay.core.errors import MalformedRequestError
from gemini_relay.services.request_body import (
    BinaryBody,
    StructuredBody,
    TextBody,
    parse_chat_request,
    parse_request_body,
)


def test_text_body_is_parsed_as_json():
    assert parse_request_body(TextBody('{"message": "hi"}')) == {"message": "hi"}


def test_binary_body_is_decoded_then_parsed():
    body = BinaryBody('{"message": "héllo"}'.encode("utf-8"))

    assert parse_request_body(body) == {"message": "héllo"}


def test_structured_body_is_returned_unchanged():
    value = {"message": "hi", "chatHistory": []}

    assert parse_request_body(StructuredBody(value)) is value


def test_structured_string_is_not_parsed_again():
    assert parse_request_body(StructuredBody('{"a": 1}')) == '{"a": 1}'


@pytest.mark.parametrize(
    "body",
    [
        TextBody("not json"),
        TextBody(""),
        BinaryBody(b"{"),
        BinaryBody(b"\xff\xfe\x00"),
    ],
)
def test_invalid_bodies_raise(body):
    with pytest.raises(MalformedRequestError):
        parse_request_body(body)


def test_chat_request_accepts_history_alias_and_null_history():
    request = parse_chat_request(
        StructuredBody({"message": "hi", "history": [{"sender": "user", "message": "a"}]})
    )
    assert request.chat_history == [{"sender": "user", "message": "a"}]

    request = parse_chat_request(TextBody('{"message": "hi", "chatHistory": null}'))
    assert request.chat_history == []


def test_chat_request_keeps_unusable_history_entries_for_the_relay_to_skip():
    history = [{"sender": "user"}, {"text": "x"}, "nope", None, 7, {"sender": 1, "message": []}]

    request = parse_chat_request(StructuredBody({"message": "hi", "chatHistory": history}))

    assert request.chat_history == history


def test_missing_message_is_left_to_the_relay():
    request = parse_chat_request(StructuredBody({}))

    assert request.message is None


@pytest.mark.parametrize(
    "value",
    [
        ["not", "an", "object"],
        {"message": 42},
        {"message": "hi", "chatHistory": "nope"},
    ],
)
def test_non_chat_documents_are_malformed(value):
    with pytest.raises(MalformedRequestError):
        parse_chat_request(StructuredBody(value))

from __future__ import annotations

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)


class ChatTurn(BaseModel):
    """One prior exchange. Incomplete turns are tolerated and skipped later."""

    model_config = ConfigDict(extra="ignore")

    sender: str | None = None  # "user" or anything else for the model
    message: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.sender) and bool(self.message)

    @classmethod
    def from_entry(cls, entry: Any) -> ChatTurn | None:
        """Build a complete turn from a raw history entry, or None to skip it."""
        if isinstance(entry, ChatTurn):
            turn = entry
        elif isinstance(entry, dict):
            try:
                turn = cls.model_validate(entry)
            except ValidationError:
                return None
        else:
            return None
        return turn if turn.is_complete else None


class ChatRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message: str | None = None
    # Entries stay raw; the relay truncates first, then skips unusable ones.
    chat_history: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("chatHistory", "history"),
    )

    @field_validator("chat_history", mode="before")
    @classmethod
    def _null_history_is_empty(cls, value):
        return [] if value is None else value


class RelayResult(BaseModel):
    """Outcome of one relay call: a reply on success, an error message otherwise."""

    success: bool
    status_code: int
    reply: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _one_of_reply_or_error(self) -> RelayResult:
        if self.success and (self.reply is None or self.error is not None):
            raise ValueError("successful result must carry a reply and no error")
        if not self.success and (self.error is None or self.reply is not None):
            raise ValueError("failed result must carry an error and no reply")
        return self

    @classmethod
    def ok(cls, reply: str) -> RelayResult:
        return cls(success=True, status_code=200, reply=reply)

    @classmethod
    def failure(cls, status_code: int, error: str) -> RelayResult:
        return cls(success=False, status_code=status_code, error=error)


class HttpResponse(BaseModel):
    status_code: int
    headers: dict[str, str]
    body: str

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ContentPart(BaseModel):
    text: str


class Content(BaseModel):
    role: Literal["user", "model"]
    parts: list[ContentPart]

    @classmethod
    def from_text(cls, role: Literal["user", "model"], text: str) -> Content:
        return cls(role=role, parts=[ContentPart(text=text)])


class GenerationConfig(BaseModel):
    max_output_tokens: int = Field(default=1000, serialization_alias="maxOutputTokens")
    temperature: float = 0.7


class GenerateContentRequest(BaseModel):
    """Request body of the Gemini `generateContent` endpoint."""

    contents: list[Content]
    generation_config: GenerationConfig = Field(
        default_factory=GenerationConfig, serialization_alias="generationConfig"
    )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


# Response side: everything optional so that odd payloads still validate and
# the shape check happens in `first_text`.


class ResponsePart(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Non-string text fails validation and becomes "Invalid AI response".
    text: str | None = None


class CandidateContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: list[ResponsePart] = Field(default_factory=list)


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: CandidateContent | None = None


class GenerateContentResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    candidates: list[Candidate] = Field(default_factory=list)

    def first_text(self) -> str | None:
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text

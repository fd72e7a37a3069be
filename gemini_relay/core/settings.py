from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL_NAME = "gemini-2.0-flash-lite"


@dataclass(frozen=True)
class RelayConfig:
    """Per-call settings consumed by ChatRelay."""

    api_key: str | None = None
    model_name: str = DEFAULT_MODEL_NAME


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Gemini Chat Relay", alias="APP_NAME")
    environment: Literal["local", "dev", "staging", "prod"] = Field(
        default="local", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    gemini_api_key: str | None = Field(default=None, alias="GEMINI_API_KEY")
    gemini_model_name: str = Field(
        default=DEFAULT_MODEL_NAME, alias="GEMINI_MODEL_NAME"
    )
    gemini_timeout_seconds: float | None = Field(
        default=30.0, alias="GEMINI_TIMEOUT_SECONDS"
    )

    def relay_config(self) -> RelayConfig:
        # Empty values behave like unset ones.
        return RelayConfig(
            api_key=self.gemini_api_key or None,
            model_name=self.gemini_model_name or DEFAULT_MODEL_NAME,
        )


def get_settings() -> Settings:
    # Not cached: the environment is re-read on every request.
    return Settings()

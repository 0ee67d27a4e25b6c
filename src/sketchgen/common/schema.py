"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

@dataclass(frozen=True)
class ColorConstraints:
    """Color descriptors handed to the code-generation preamble."""
    foreground: str = "#FFFFFF"
    background: str = "#000000"

    @classmethod
    def coerce(cls, value: ColorConstraints | Mapping[str, str] | None) -> ColorConstraints:
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls(
            foreground=str(value.get("foreground", cls.foreground)),
            background=str(value.get("background", cls.background)),
        )

@dataclass(frozen=True)
class GenerationRequest:
    """A single generateContent request, built fresh per call."""
    prompt_text: str
    foreground_color: str | None = None
    background_color: str | None = None
    temperature: float | None = None
    max_output_tokens: int | None = None

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"contents": [{"parts": [{"text": self.prompt_text}]}]}
        config: dict[str, Any] = {}
        if self.temperature is not None:
            config["temperature"] = self.temperature
        if self.max_output_tokens is not None:
            config["maxOutputTokens"] = self.max_output_tokens
        if config:
            body["generationConfig"] = config
        return body


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")

class Part(_Lenient):
    text: str | None = None

class Content(_Lenient):
    parts: list[Part] = []

class Candidate(_Lenient):
    content: Content | None = None

class GenerateContentResponse(_Lenient):
    candidates: list[Candidate] = []

class ErrorDetail(_Lenient):
    message: str | None = None

class ErrorResponse(_Lenient):
    error: ErrorDetail | None = None

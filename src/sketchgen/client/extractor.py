"""Pulls the generated text out of a generateContent response.

The decoded payload is classified as WellFormed (a non-empty
candidates[0].content.parts[0].text) or Malformed.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union

from pydantic import ValidationError

from sketchgen.client.errors import InvalidResponseError
from sketchgen.common.schema import GenerateContentResponse

@dataclass(frozen=True)
class WellFormed:
    text: str

@dataclass(frozen=True)
class Malformed:
    reason: str

Extraction = Union[WellFormed, Malformed]

def extract(data: Any) -> Extraction:
    try:
        parsed = GenerateContentResponse.model_validate(data)
    except ValidationError as e:
        return Malformed(f"unexpected payload shape ({e.error_count()} errors)")
    if not parsed.candidates:
        return Malformed("no candidates")
    content = parsed.candidates[0].content
    if content is None or not content.parts:
        return Malformed("no content parts")
    text = content.parts[0].text
    if not text:
        return Malformed("missing text")
    return WellFormed(text)

def require_text(data: Any) -> str:
    """Generated text, or InvalidResponseError when the field is missing."""
    result = extract(data)
    if isinstance(result, Malformed):
        raise InvalidResponseError()
    return result.text

def text_or_empty(data: Any) -> str:
    """Generated text, or "" when the field is missing."""
    result = extract(data)
    return result.text if isinstance(result, WellFormed) else ""

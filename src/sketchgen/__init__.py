"""
Sketchgen package.

Provides:
- Async client operations over the Gemini generateContent API
  (p5.js code generation, credential check, prompt suggestions)
- A denylist filter applied to generated code before it is returned
- An optional FastAPI surface for a UI layer
"""
from sketchgen.client.errors import (
    GenerationFailedError,
    InvalidResponseError,
    MissingCredentialError,
    MissingPromptError,
    ServiceError,
    SketchGenError,
    TransportError,
    UnsafeCodeError,
)
from sketchgen.client.service import fetch_suggestions, generate_code, test_credential
from sketchgen.common.schema import ColorConstraints

__all__ = [
    "ColorConstraints",
    "GenerationFailedError",
    "InvalidResponseError",
    "MissingCredentialError",
    "MissingPromptError",
    "ServiceError",
    "SketchGenError",
    "TransportError",
    "UnsafeCodeError",
    "fetch_suggestions",
    "generate_code",
    "test_credential",
]

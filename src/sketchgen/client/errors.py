"""Error taxonomy for the client operations."""
from __future__ import annotations


class SketchGenError(Exception):
    """Base class for every error raised by this package."""


class MissingCredentialError(SketchGenError, ValueError):
    def __init__(self, message: str = "API key is required") -> None:
        super().__init__(message)


class MissingPromptError(SketchGenError, ValueError):
    def __init__(self, message: str = "Prompt is required") -> None:
        super().__init__(message)


class TransportError(SketchGenError):
    """The remote endpoint could not be reached (DNS, connection, timeout)."""


class ServiceError(SketchGenError):
    """The remote endpoint answered with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        self.message = message or f"API error: {status_code}"
        super().__init__(self.message)


class InvalidResponseError(SketchGenError):
    def __init__(self, message: str = "Invalid response from Gemini API") -> None:
        super().__init__(message)


class GenerationFailedError(SketchGenError):
    """Generic code-generation failure carrying the original message."""

    PREFIX = "Failed to generate code: "

    def __init__(self, message: str) -> None:
        self.reason = message
        super().__init__(f"{self.PREFIX}{message}")


class UnsafeCodeError(GenerationFailedError):
    """Generated code matched a denylisted pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__("Generated code contains potentially unsafe patterns")

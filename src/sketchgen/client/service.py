"""Exported async operations: code generation, credential check, suggestions.

Each call builds one request, performs at most one network call and shares
no state with other calls.
"""
from __future__ import annotations
import logging
from typing import Mapping

from sketchgen.client.errors import (
    GenerationFailedError,
    InvalidResponseError,
    MissingCredentialError,
    MissingPromptError,
    ServiceError,
    TransportError,
    UnsafeCodeError,
)
from sketchgen.client import extractor, request_builder, transport
from sketchgen.client.sanitizer import sanitize
from sketchgen.client.suggestions import parse_suggestions
from sketchgen.common.config import Settings
from sketchgen.common.schema import ColorConstraints

LOGGER = logging.getLogger("sketchgen.client.service")

async def generate_code(
    credential: str,
    prompt: str,
    constraints: ColorConstraints | Mapping[str, str] | None = None,
    settings: Settings | None = None,
) -> str:
    """
    Generate p5.js drawing code for a visual description.

    Args:
        credential: Gemini API key.
        prompt: User's visual description.
        constraints: Foreground/background colors; white on black when omitted.
        settings: Endpoint settings; loaded from the environment when omitted.

    Returns:
        De-fenced code that passed the denylist scan.

    Raises:
        MissingCredentialError, MissingPromptError: Before any network call.
        ServiceError, InvalidResponseError: Propagated unchanged.
        UnsafeCodeError: The code matched the denylist.
        GenerationFailedError: Transport failures and anything unclassified.
    """
    if not credential:
        raise MissingCredentialError()
    if not prompt or not prompt.strip():
        raise MissingPromptError()

    colors = ColorConstraints.coerce(constraints)
    request = request_builder.build_code_request(prompt, colors)
    LOGGER.info("Generating code (prompt length %d)", len(prompt))
    try:
        data = await transport.send(request, credential, settings)
        return sanitize(extractor.require_text(data))
    except (ServiceError, InvalidResponseError, UnsafeCodeError):
        raise
    except TransportError as e:
        raise GenerationFailedError(str(e)) from e
    except Exception as e:
        LOGGER.exception("Unexpected failure while generating code")
        raise GenerationFailedError(str(e)) from e

async def test_credential(credential: str, settings: Settings | None = None) -> bool:
    """Whether a trivial generation call with this key succeeds. Never raises."""
    try:
        await transport.send(
            request_builder.build_key_test_request(), credential, settings, decode=False
        )
    except Exception as e:
        LOGGER.debug("Credential check failed: %s", type(e).__name__)
        return False
    return True

async def fetch_suggestions(
    credential: str,
    current_prompt: str | None,
    settings: Settings | None = None,
) -> list[str]:
    """
    Suggest up to six short words to continue a visual prompt.

    Missing credentials and every failure collapse to an empty list.
    """
    if not credential:
        return []
    prompt = (current_prompt or "").strip()
    try:
        data = await transport.send(
            request_builder.build_suggestion_request(prompt), credential, settings
        )
        return parse_suggestions(extractor.text_or_empty(data))
    except Exception as e:
        LOGGER.debug("Suggestion fetch failed: %s", type(e).__name__)
        return []

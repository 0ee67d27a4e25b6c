"""Single POST to the generateContent endpoint.

One httpx.AsyncClient is opened per call and closed when the call completes.
No retry, no timeout override and no cancellation hook are applied here.
"""
from __future__ import annotations
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from sketchgen.client.errors import InvalidResponseError, ServiceError, TransportError
from sketchgen.common.config import Settings, load_settings
from sketchgen.common.schema import ErrorResponse, GenerationRequest

LOGGER = logging.getLogger("sketchgen.client.transport")

def _error_message(response: httpx.Response) -> str | None:
    """Server-supplied error.message, if the error body carries one."""
    try:
        body = ErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return None
    return body.error.message if body.error and body.error.message else None

async def send(
    request: GenerationRequest,
    credential: str,
    settings: Settings | None = None,
    decode: bool = True,
) -> Any:
    """
    POST the request body and return the decoded JSON response.

    Args:
        request: Request to serialize as the JSON body.
        credential: API key, sent as the `key` query parameter.
        settings: Endpoint settings; loaded from the environment when omitted.
        decode: When False, only the status is checked and None is returned.

    Raises:
        TransportError: The endpoint could not be reached.
        ServiceError: Non-success status.
        InvalidResponseError: Success status but the body is not JSON.
    """
    settings = settings or load_settings()
    try:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                settings.endpoint,
                params={"key": credential},
                headers={"Content-Type": "application/json"},
                json=request.to_body(),
            )
    except httpx.RequestError as e:
        LOGGER.error("Gemini request failed: %s", type(e).__name__)
        raise TransportError(str(e) or type(e).__name__) from e

    if not response.is_success:
        message = _error_message(response)
        LOGGER.warning("Gemini returned status %s", response.status_code)
        raise ServiceError(response.status_code, message)

    if not decode:
        return None

    try:
        return response.json()
    except ValueError as e:
        LOGGER.error("Gemini returned a non-JSON body")
        raise InvalidResponseError() from e

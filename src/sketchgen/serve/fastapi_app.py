"""FastAPI surface over the sketchgen client operations.

Endpoints:
- GET /health
- POST /generate            { "prompt": "...", "foreground": "#FFFFFF", "background": "#000000" }
- POST /suggestions         { "prompt": "..." }
- POST /credential/test     { }

Every body accepts an optional "api_key"; $GEMINI_API_KEY is used when it is absent.
"""
from __future__ import annotations
import os
import time
import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sketchgen.client import service
from sketchgen.client.errors import (
    GenerationFailedError,
    InvalidResponseError,
    MissingCredentialError,
    MissingPromptError,
    ServiceError,
    TransportError,
    UnsafeCodeError,
)
from sketchgen.common.config import load_settings
from sketchgen.common.logging_setup import setup_logging
from sketchgen.common.schema import ColorConstraints
from sketchgen.common.templates import load_template, placeholders

LOGGER = logging.getLogger("sketchgen.serve.app")
SETTINGS = load_settings()
setup_logging(SETTINGS.log_level)

EXPECTED_PLACEHOLDERS = {
    "code_generation": {"foreground", "background", "prompt"},
    "suggestions": {"prompt"},
}

class GenerateIn(BaseModel):
    prompt: str
    foreground: str = ColorConstraints.foreground
    background: str = ColorConstraints.background
    api_key: str | None = None

class GenerateOut(BaseModel):
    code: str
    latency_ms: int

class SuggestionsIn(BaseModel):
    prompt: str | None = None
    api_key: str | None = None

class SuggestionsOut(BaseModel):
    suggestions: list[str]

class CredentialIn(BaseModel):
    api_key: str | None = None

class CredentialOut(BaseModel):
    valid: bool

app = FastAPI()

@app.on_event("startup")
def _validate_templates_on_startup() -> None:
    """Validate bundled prompt templates on startup and warn if malformed."""
    for name, expected in EXPECTED_PLACEHOLDERS.items():
        try:
            missing = expected - placeholders(load_template(name))
        except OSError as e:
            LOGGER.warning("Failed to read prompt template %s: %s", name, e)
            continue
        if missing:
            LOGGER.warning("Prompt template %s missing placeholders: %s", name, sorted(missing))

def _credential(api_key: str | None) -> str:
    return api_key or os.getenv("GEMINI_API_KEY", "")

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": SETTINGS.model_id}

@app.post("/generate", response_model=GenerateOut)
async def generate(body: GenerateIn) -> GenerateOut:
    constraints = ColorConstraints(foreground=body.foreground, background=body.background)
    start = time.time()
    try:
        code = await service.generate_code(
            _credential(body.api_key), body.prompt, constraints, SETTINGS
        )
    except (MissingCredentialError, MissingPromptError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnsafeCodeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (ServiceError, InvalidResponseError) as e:
        raise HTTPException(status_code=502, detail=str(e))
    except GenerationFailedError as e:
        status = 502 if isinstance(e.__cause__, TransportError) else 500
        raise HTTPException(status_code=status, detail=str(e))

    latency = int((time.time() - start) * 1000)
    return GenerateOut(code=code, latency_ms=latency)

@app.post("/suggestions", response_model=SuggestionsOut)
async def suggestions(body: SuggestionsIn) -> SuggestionsOut:
    words = await service.fetch_suggestions(_credential(body.api_key), body.prompt, SETTINGS)
    return SuggestionsOut(suggestions=words)

@app.post("/credential/test", response_model=CredentialOut)
async def credential_test(body: CredentialIn) -> CredentialOut:
    valid = await service.test_credential(_credential(body.api_key), SETTINGS)
    return CredentialOut(valid=valid)

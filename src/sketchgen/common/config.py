"""Settings for the Gemini endpoint, read from an optional YAML file and the environment."""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL_ID = "gemini-2.0-flash"
DEFAULT_LOG_LEVEL = "INFO"

@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    model_id: str = DEFAULT_MODEL_ID
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def endpoint(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/models/{self.model_id}:generateContent"

def load_cfg(path: str | None) -> dict[str, Any]:
    if not path:
        return {}
    if not Path(path).exists():
        raise FileNotFoundError(f"Config file not found at {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def load_settings(cfg_path: str | None = None) -> Settings:
    """
    Build settings from YAML (if any) with environment variables taking precedence.

    Args:
        cfg_path: YAML config path; defaults to $SKETCHGEN_CONFIG when unset.
    """
    cfg = load_cfg(cfg_path or os.getenv("SKETCHGEN_CONFIG"))
    return Settings(
        api_base_url=os.getenv("SKETCHGEN_API_BASE_URL", str(cfg.get("api_base_url", DEFAULT_API_BASE_URL))),
        model_id=os.getenv("SKETCHGEN_MODEL_ID", str(cfg.get("model_id", DEFAULT_MODEL_ID))),
        log_level=os.getenv("SKETCHGEN_LOG_LEVEL", str(cfg.get("log_level", DEFAULT_LOG_LEVEL))),
    )

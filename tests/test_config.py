from __future__ import annotations

from pathlib import Path

import pytest

from sketchgen.common.config import Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SKETCHGEN_CONFIG", "SKETCHGEN_API_BASE_URL", "SKETCHGEN_MODEL_ID", "SKETCHGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_point_at_gemini_flash() -> None:
    s = load_settings()
    assert s.endpoint == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
    )
    assert s.log_level == "INFO"


def test_yaml_then_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "sketchgen.yaml"
    cfg.write_text("api_base_url: https://proxy.local/v1/\nmodel_id: gemini-pro\nlog_level: DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("SKETCHGEN_MODEL_ID", "gemini-env")
    s = load_settings(str(cfg))
    assert s == Settings(api_base_url="https://proxy.local/v1/", model_id="gemini-env", log_level="DEBUG")
    assert s.endpoint == "https://proxy.local/v1/models/gemini-env:generateContent"


def test_config_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "c.yaml"
    cfg.write_text("model_id: from-file\n", encoding="utf-8")
    monkeypatch.setenv("SKETCHGEN_CONFIG", str(cfg))
    assert load_settings().model_id == "from-file"


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "absent.yaml"))

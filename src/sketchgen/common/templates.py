"""Prompt templating helpers."""
from __future__ import annotations
import re
from pathlib import Path

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

def load_template(name: str, directory: Path = TEMPLATE_DIR) -> str:
    """
    Load a bundled prompt template.

    Args:
        name: Template name without the .txt suffix.
        directory: Directory holding the templates.
    """
    return (directory / f"{name}.txt").read_text(encoding="utf-8")

def placeholders(template: str) -> set[str]:
    """Names of the {{name}} placeholders used in a template."""
    return set(_PLACEHOLDER.findall(template))

def render_prompt(template: str, **values: str) -> str:
    """
    Render values into the template.

    Args:
        template: Template content containing {{name}} placeholders.
        values: Replacement text per placeholder name.

    Returns:
        Rendered prompt. Unknown placeholders are left in place.
    """
    def _sub(match: re.Match[str]) -> str:
        key = match.group(1)
        return values[key] if key in values else match.group(0)

    return _PLACEHOLDER.sub(_sub, template)

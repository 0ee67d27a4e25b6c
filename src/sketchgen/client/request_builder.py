"""Builds generateContent request bodies for each operation."""
from __future__ import annotations

from sketchgen.common.schema import ColorConstraints, GenerationRequest
from sketchgen.common.templates import load_template, render_prompt

CODE_TEMPERATURE = 0.7
CODE_MAX_OUTPUT_TOKENS = 2048

SUGGESTION_TEMPERATURE = 0.9
SUGGESTION_MAX_OUTPUT_TOKENS = 100

KEY_TEST_PROMPT = 'Say "ok"'

def build_code_request(prompt: str, constraints: ColorConstraints) -> GenerationRequest:
    """
    Wrap a visual description in the p5.js code-generation preamble.

    Args:
        prompt: User's visual description.
        constraints: Foreground/background colors the sketch should use.
    """
    text = render_prompt(
        load_template("code_generation"),
        foreground=constraints.foreground,
        background=constraints.background,
        prompt=prompt,
    )
    return GenerationRequest(
        prompt_text=text.strip(),
        foreground_color=constraints.foreground,
        background_color=constraints.background,
        temperature=CODE_TEMPERATURE,
        max_output_tokens=CODE_MAX_OUTPUT_TOKENS,
    )

def build_key_test_request() -> GenerationRequest:
    return GenerationRequest(prompt_text=KEY_TEST_PROMPT)

def build_suggestion_request(current_prompt: str) -> GenerationRequest:
    text = render_prompt(load_template("suggestions"), prompt=current_prompt)
    return GenerationRequest(
        prompt_text=text.strip(),
        temperature=SUGGESTION_TEMPERATURE,
        max_output_tokens=SUGGESTION_MAX_OUTPUT_TOKENS,
    )

"""Fence stripping and denylist scan for generated sketch code.

This is a textual filter, not a sandbox or parser. A denylisted token inside
a string literal or comment is still rejected, and code that assembles a
forbidden call indirectly (string concatenation, unicode escapes) is not
caught.
"""
from __future__ import annotations
import logging
import re

from sketchgen.client.errors import UnsafeCodeError

LOGGER = logging.getLogger("sketchgen.client.sanitizer")

_OPENING_FENCE = re.compile(r"^```(?:[\w+.-]*[ \t]*\r?\n)?")
_CLOSING_FENCE = re.compile(r"\r?\n?```$")

# Case-sensitive on purpose: `p.Document` or `Window.` are not browser globals.
DENYLIST: dict[str, re.Pattern[str]] = {
    "eval(": re.compile(r"\beval\s*\("),
    "Function(": re.compile(r"\bFunction\s*\("),
    "setTimeout(": re.compile(r"\bsetTimeout\s*\("),
    "setInterval(": re.compile(r"\bsetInterval\s*\("),
    "fetch(": re.compile(r"\bfetch\s*\("),
    "XMLHttpRequest": re.compile(r"\bXMLHttpRequest"),
    "document.": re.compile(r"\bdocument\."),
    "window.": re.compile(r"\bwindow\."),
    "localStorage": re.compile(r"\blocalStorage"),
    "sessionStorage": re.compile(r"\bsessionStorage"),
}

def strip_fences(text: str) -> str:
    """
    Remove a leading ```lang fence and a trailing ``` fence, then trim.

    Text without fences is only trimmed.
    """
    code = text.strip()
    code = _OPENING_FENCE.sub("", code, count=1)
    code = _CLOSING_FENCE.sub("", code, count=1)
    return code.strip()

def find_unsafe(code: str) -> str | None:
    """Name of the first denylisted pattern found in code, if any."""
    for name, pattern in DENYLIST.items():
        if pattern.search(code):
            return name
    return None

def sanitize(text: str) -> str:
    """
    De-fence generated code and reject it if it matches the denylist.

    Args:
        text: Raw generated text.

    Returns:
        The de-fenced code, otherwise unchanged.

    Raises:
        UnsafeCodeError: A denylisted pattern occurs anywhere in the code.
    """
    code = strip_fences(text)
    hit = find_unsafe(code)
    if hit is not None:
        LOGGER.warning("Rejected generated code matching %r", hit)
        raise UnsafeCodeError(hit)
    return code

"""Escaping for text inserted into an HTML text node."""

from __future__ import annotations

import re
from typing import Final

_TEXT_HTML_PATTERN: Final = re.compile(r"[&<>]")


def _replace_text_html(match: re.Match[str]) -> str:
    text = match.group(0)
    if text == "&":
        return "&amp;"
    if text == "<":
        return "&lt;"
    if text == ">":
        return "&gt;"
    raise AssertionError(f"Unexpected text {text!r}")


def escape_text_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` so text can appear in an HTML text node."""

    return _TEXT_HTML_PATTERN.sub(_replace_text_html, text)

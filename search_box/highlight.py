from __future__ import annotations

import re


def highlight_parts(text: str, highlight: str) -> list[tuple[str, bool]]:
    """
    Splits text around case-insensitive occurrences of highlight.
    Returns (part, matched) pairs whose concatenation is the original text.
    """
    if not highlight or not highlight.strip():
        return [(text, False)]
    # term is matched literally, so "c++" or "a.b" do not act as patterns
    pattern = re.compile(f"({re.escape(highlight)})", re.IGNORECASE)
    parts = pattern.split(text)
    # re.split with one capture group alternates plain / matched parts
    return [(part, idx % 2 == 1) for idx, part in enumerate(parts) if part]


def render_highlight(text: str, highlight: str, open: str = "**", close: str = "**") -> str:
    return "".join(f"{open}{part}{close}" if matched else part for part, matched in highlight_parts(text, highlight))

"""Label sanitizing shared by every Mermaid builder."""

from __future__ import annotations

import re

_LINE_BREAKS = re.compile(r"[\r\n]+")


def sanitize_text(text: str | None) -> str:
    """Collapse line breaks to one space, rewrite `"` to `'` and trim.

    The result is idempotent: sanitizing twice equals sanitizing once.
    """
    if not text:
        return ""
    return _LINE_BREAKS.sub(" ", text).replace('"', "'").strip()


def quote(text: str | None) -> str:
    """Wrap sanitized text in literal double quotes."""
    return f'"{sanitize_text(text)}"'

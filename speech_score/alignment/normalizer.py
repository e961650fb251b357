"""Text normalization for similarity scoring."""
from __future__ import annotations

import re
from typing import Optional

# Anything outside lowercase letters, digits, apostrophes and spaces
_DISALLOWED_RE = re.compile(r"[^a-z0-9' ]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """Normalize a sentence for edit-distance comparison.

    Lowercases, turns every run of characters other than ``a-z``, ``0-9``,
    apostrophes and spaces into a single space, collapses whitespace and
    trims the ends.

    Args:
        text: The sentence to normalize (``None`` is treated as empty)

    Returns:
        Normalized string, e.g. "Hello, World!" -> "hello world"
    """
    if not text:
        return ""

    text = _DISALLOWED_RE.sub(" ", text.lower())
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()

"""Rule-based improvement tips for a read-aloud attempt.

Rules run on normalized strings in a fixed order; each one adds at most
one tip, so the output is deterministic and free of duplicates.
"""
from __future__ import annotations

import re
from typing import Dict, List

MAX_TIPS = 3

# Hypothesis shorter than this fraction of the reference counts as cut short
MIN_LENGTH_RATIO = 0.7

ARTICLE_RE = re.compile(r"\b(?:a|an|the)\b")
PREPOSITION_RE = re.compile(r"\b(?:to|for|of|in|on|at)\b")

TIP_MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "read_fully": "Read the sentence clearly all the way to the end.",
        "articles": "Pronounce the articles (a/an/the) clearly.",
        "prepositions": "Try not to drop prepositions (to/for/of, etc.).",
        "practice": "Practice natural stress and phrasing.",
    },
    "ko": {
        "read_fully": "문장을 끝까지 또박또박 읽어보세요.",
        "articles": "관사(a/an/the) 발음을 분명히 해보세요.",
        "prepositions": "전치사(to/for/of 등)를 빠뜨리지 않도록 해보세요.",
        "practice": "자연스러운 강세와 끊어 읽기를 연습해보세요.",
    },
}

SUPPORTED_LANGUAGES = tuple(TIP_MESSAGES)


def get_messages(language: str = "en") -> Dict[str, str]:
    """Return the tip catalog for ``language``.

    Raises:
        ValueError: If no catalog exists for the language
    """
    try:
        return TIP_MESSAGES[language]
    except KeyError:
        raise ValueError(
            f"Unsupported tip language: {language!r} "
            f"(expected one of {', '.join(SUPPORTED_LANGUAGES)})"
        ) from None


def build_tips(reference: str, hypothesis: str, language: str = "en") -> List[str]:
    """Build improvement tips from a normalized reference and transcript.

    Args:
        reference: Normalized target sentence
        hypothesis: Normalized transcript
        language: Tip catalog to use ("en" or "ko")

    Returns:
        At most ``MAX_TIPS`` tips, ordered by rule priority
    """
    messages = get_messages(language)
    tips: List[str] = []

    if len(hypothesis) < len(reference) * MIN_LENGTH_RATIO:
        tips.append(messages["read_fully"])

    if ARTICLE_RE.search(reference) and not ARTICLE_RE.search(hypothesis):
        tips.append(messages["articles"])

    if PREPOSITION_RE.search(reference) and not PREPOSITION_RE.search(hypothesis):
        tips.append(messages["prepositions"])

    if not tips:
        tips.append(messages["practice"])

    return tips[:MAX_TIPS]

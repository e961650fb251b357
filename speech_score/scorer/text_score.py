"""Sentence similarity scoring for read-aloud practice."""
from __future__ import annotations

import math
from typing import Optional

from speech_score.alignment import levenshtein, normalize_text
from speech_score.models import ScoreResult
from .tips import build_tips


def _round_half_up(value: float) -> int:
    # round() rounds half to even; 62.5 has to become 63
    return int(math.floor(value + 0.5))


def score_text(
    reference: Optional[str],
    hypothesis: Optional[str],
    language: str = "en",
) -> ScoreResult:
    """Score a transcript against the sentence the user was asked to read.

    Both strings are normalized, compared by character edit distance and
    turned into a 0-100 accuracy relative to the longer of the two.

    Args:
        reference: Target sentence
        hypothesis: Transcript of what was spoken (``None`` means nothing)
        language: Language of the returned tips

    Returns:
        ScoreResult with accuracy and up to three tips

    Example:
        >>> score_text("The quick brown fox", "quick brown fox").accuracy
        79
    """
    ref = normalize_text(reference)
    hyp = normalize_text(hypothesis)

    distance = levenshtein(ref, hyp)
    max_len = max(len(ref), len(hyp)) or 1
    accuracy = max(0, _round_half_up((1 - distance / max_len) * 100))

    return ScoreResult(accuracy=accuracy, tips=tuple(build_tips(ref, hyp, language)))

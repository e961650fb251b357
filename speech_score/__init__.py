"""Read-aloud scoring: compare a transcript with the sentence that was read."""
from .alignment import levenshtein, normalize_text
from .models import ScoreResult
from .scorer import build_tips, score_text

__version__ = "0.1.0"

__all__ = ["score_text", "build_tips", "normalize_text", "levenshtein", "ScoreResult"]

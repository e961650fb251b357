"""Normalization and edit distance used by the scorer."""
from .edit_distance import levenshtein
from .normalizer import normalize_text

__all__ = ["levenshtein", "normalize_text"]

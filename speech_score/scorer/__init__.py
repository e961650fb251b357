"""Text similarity scoring and feedback tips."""
from .text_score import score_text
from .tips import MAX_TIPS, SUPPORTED_LANGUAGES, build_tips

__all__ = ["score_text", "build_tips", "MAX_TIPS", "SUPPORTED_LANGUAGES"]

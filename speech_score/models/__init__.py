from .score_result import ScoreResult

__all__ = ["ScoreResult"]

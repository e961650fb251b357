"""Data model for a sentence score."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ScoreResult:
    """Similarity score between a target sentence and a transcript.

    Attributes:
        accuracy: Similarity in percent, 0 to 100
        tips: Up to three improvement tips, in rule order
    """
    accuracy: int
    tips: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {"accuracy": self.accuracy, "tips": list(self.tips)}

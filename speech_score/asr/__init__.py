"""Speech-to-text clients."""
from .whisper_client import (
    EmptyAudioError,
    TranscriptionConfigError,
    TranscriptionError,
    WhisperTranscriber,
)

__all__ = ["WhisperTranscriber", "TranscriptionError", "TranscriptionConfigError", "EmptyAudioError"]

"""Speech-to-text through the OpenAI Whisper HTTP API.

Audio is sent as a multipart upload straight from memory; nothing is
written to disk.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"


class TranscriptionError(Exception):
    """The transcription provider could not return a transcript.

    Attributes:
        status_code: HTTP status returned by the provider, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TranscriptionConfigError(TranscriptionError):
    """The client is not configured to call the provider (e.g. no API key)."""


class EmptyAudioError(TranscriptionError):
    """The upload contained no audio bytes."""


class WhisperTranscriber:
    """Turns an audio buffer into a transcript string.

    Args:
        api_key: OpenAI API key
        base_url: API root, without the trailing ``/audio/transcriptions``
        model: Whisper model name
        language: Spoken language hint sent with every request
        timeout: Per-request timeout in seconds
        tries: Default attempt count for ``transcribe_with_retry``
        retry_delay: Pause between attempts in seconds
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        model: str = "whisper-1",
        language: str = "en",
        timeout: float = 60.0,
        tries: int = 3,
        retry_delay: float = 0.5,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.language = language
        self.timeout = timeout
        self.tries = tries
        self.retry_delay = retry_delay

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/audio/transcriptions"

    def transcribe(
        self,
        audio: bytes,
        filename: str = "audio.webm",
        content_type: Optional[str] = None,
    ) -> str:
        """Send one transcription request.

        Args:
            audio: Raw bytes of the recording
            filename: Name reported to the provider (its extension picks the decoder)
            content_type: MIME type of the recording, if known

        Returns:
            The transcript text ("" when the provider heard nothing)

        Raises:
            TranscriptionConfigError: If no API key is configured
            EmptyAudioError: If ``audio`` is empty
            TranscriptionError: On network errors, non-2xx responses or bad JSON
        """
        if not self.api_key:
            raise TranscriptionConfigError("OPENAI_API_KEY is not configured")
        if not audio:
            raise EmptyAudioError("Audio upload is empty")

        file_tuple = (filename, audio, content_type) if content_type else (filename, audio)
        files = {"file": file_tuple}
        data = {"model": self.model, "language": self.language}
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            response = requests.post(
                self.endpoint,
                headers=headers,
                data=data,
                files=files,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TranscriptionError(f"Connection error: {e}") from e

        if response.status_code != 200:
            raise TranscriptionError(
                f"Transcription service returned {response.status_code}: "
                f"{_error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            result: Dict[str, Any] = response.json()
        except ValueError as e:
            raise TranscriptionError("Transcription service returned invalid JSON") from e
        if not isinstance(result, dict):
            raise TranscriptionError("Transcription service returned invalid JSON")

        return result.get("text") or ""

    def transcribe_with_retry(
        self,
        audio: bytes,
        filename: str = "audio.webm",
        content_type: Optional[str] = None,
        tries: Optional[int] = None,
    ) -> str:
        """Call ``transcribe`` until it succeeds or the attempts run out.

        Configuration errors and empty uploads are raised immediately.

        Raises:
            TranscriptionError: The error from the last attempt
        """
        tries = self.tries if tries is None else tries
        if tries < 1:
            raise ValueError(f"tries must be at least 1, got {tries}")
        last_error: Optional[TranscriptionError] = None

        for attempt in range(1, tries + 1):
            try:
                return self.transcribe(audio, filename, content_type)
            except (TranscriptionConfigError, EmptyAudioError):
                raise
            except TranscriptionError as e:
                last_error = e
                logger.warning("Transcription attempt %d/%d failed: %s", attempt, tries, e)
                if attempt < tries:
                    time.sleep(self.retry_delay)

        raise last_error


def _error_detail(response: requests.Response) -> str:
    """Pull the provider's error message out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return error.get("message") or str(error)
    if error:
        return str(error)
    return response.text[:200]

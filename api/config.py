"""Server configuration read from environment variables.

Variables are loaded from a `.env` file at the repository root (or the file
passed to ``load_config``) using python-dotenv, then collected into a
``ServerConfig`` that is handed to the app factory at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from speech_score.scorer import SUPPORTED_LANGUAGES

# Resolve repository root directory
ROOT_DIR = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class ServerConfig:
    """Settings for the HTTP server and the transcription client."""

    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    whisper_model: str = "whisper-1"
    language: str = "en"
    transcribe_tries: int = 3
    retry_delay: float = 0.5
    request_timeout: float = 60.0
    host: str = "0.0.0.0"
    port: int = 4000
    max_upload_mb: int = 25
    tip_language: str = "en"
    cors_origin: str = "*"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.transcribe_tries < 1:
            raise ValueError(f"TRANSCRIBE_TRIES must be at least 1, got {self.transcribe_tries}")
        if self.retry_delay < 0:
            raise ValueError(f"TRANSCRIBE_RETRY_DELAY must not be negative, got {self.retry_delay}")
        if self.request_timeout <= 0:
            raise ValueError(f"TRANSCRIBE_TIMEOUT must be positive, got {self.request_timeout}")
        if self.max_upload_mb <= 0:
            raise ValueError(f"MAX_UPLOAD_MB must be positive, got {self.max_upload_mb}")
        if self.tip_language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"TIP_LANGUAGE must be one of {', '.join(SUPPORTED_LANGUAGES)}, "
                f"got {self.tip_language!r}"
            )

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_config(env_file: Optional[Union[str, Path]] = None) -> ServerConfig:
    """Build a ``ServerConfig`` from the environment.

    Args:
        env_file: `.env` file to load (defaults to the repository root's);
            variables already set in the process environment win

    Returns:
        Validated ServerConfig

    Raises:
        ValueError: If a variable holds an invalid value
    """
    load_dotenv(env_file or ROOT_DIR / ".env")

    defaults = ServerConfig()
    return ServerConfig(
        openai_api_key=os.getenv("OPENAI_API_KEY", defaults.openai_api_key),
        openai_base_url=os.getenv("OPENAI_BASE_URL", defaults.openai_base_url),
        whisper_model=os.getenv("WHISPER_MODEL", defaults.whisper_model),
        language=os.getenv("TRANSCRIBE_LANGUAGE", defaults.language),
        transcribe_tries=_env_int("TRANSCRIBE_TRIES", defaults.transcribe_tries),
        retry_delay=_env_float("TRANSCRIBE_RETRY_DELAY", defaults.retry_delay),
        request_timeout=_env_float("TRANSCRIBE_TIMEOUT", defaults.request_timeout),
        host=os.getenv("HOST", defaults.host),
        port=_env_int("PORT", defaults.port),
        max_upload_mb=_env_int("MAX_UPLOAD_MB", defaults.max_upload_mb),
        tip_language=os.getenv("TIP_LANGUAGE", defaults.tip_language),
        cors_origin=os.getenv("CORS_ORIGIN", defaults.cors_origin),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
    )

import pytest

from api.app import create_app
from api.config import ServerConfig


class FakeTranscriber:
    """Stands in for WhisperTranscriber; records every call."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def transcribe(self, audio, filename="audio.webm", content_type=None):
        self.calls.append(("transcribe", audio, filename, content_type))
        if self.error is not None:
            raise self.error
        return self.text

    def transcribe_with_retry(self, audio, filename="audio.webm", content_type=None, tries=None):
        self.calls.append(("transcribe_with_retry", audio, filename, content_type))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def config():
    return ServerConfig()


@pytest.fixture
def client(config, transcriber):
    app = create_app(config, transcriber=transcriber)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def make_transcriber():
    return FakeTranscriber

"""HTTP API for read-aloud scoring.

Accepts an audio recording plus the sentence the user was asked to read,
transcribes the recording with Whisper and scores the transcript.
"""
import logging
import time

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from api.config import load_config
from speech_score.asr import WhisperTranscriber
from speech_score.scorer import score_text

logger = logging.getLogger(__name__)


def build_transcriber(config):
    """Create the Whisper client described by ``config``."""
    return WhisperTranscriber(
        config.openai_api_key,
        base_url=config.openai_base_url,
        model=config.whisper_model,
        language=config.language,
        timeout=config.request_timeout,
        tries=config.transcribe_tries,
        retry_delay=config.retry_delay,
    )


def create_app(config=None, transcriber=None):
    """Build the Flask app.

    Args:
        config: ServerConfig (loaded from the environment when omitted)
        transcriber: Object with ``transcribe`` and ``transcribe_with_retry``
            taking ``(audio_bytes, filename, content_type)``; defaults to a
            WhisperTranscriber built from ``config``
    """
    config = config or load_config()
    transcriber = transcriber or build_transcriber(config)

    if not config.openai_api_key and isinstance(transcriber, WhisperTranscriber):
        logger.warning("OPENAI_API_KEY is not set; transcription requests will fail")

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes
    app.config["SERVER_CONFIG"] = config
    app.extensions["transcriber"] = transcriber

    # ========================================================================
    # CORS
    # ========================================================================
    CORS(app, origins=config.cors_origin)

    @app.errorhandler(RequestEntityTooLarge)
    def upload_too_large(e):
        return jsonify({"error": "file too large"}), 413

    # ========================================================================
    # ROUTES - HEALTH
    # ========================================================================
    @app.route('/')
    def root():
        return "ok", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route('/healthz')
    def healthz():
        return "ok", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route('/health')
    def health():
        return jsonify({"ok": True, "time": int(time.time() * 1000)})

    # ========================================================================
    # ROUTES - TRANSCRIPTION & SCORING
    # ========================================================================
    @app.route('/transcribe', methods=['POST'])
    def transcribe():
        """Transcribe an upload in field "file". Returns {text}."""
        upload = request.files.get('file')
        if upload is None or not upload.filename:
            return jsonify({"error": "file field is required"}), 400

        try:
            text = transcriber.transcribe(upload.read(), upload.filename, upload.mimetype or None)
        except Exception as e:
            logger.exception("Transcription of %s failed", upload.filename)
            return jsonify({"error": str(e) or "transcribe failed"}), 500

        return jsonify({"text": text})

    @app.route('/speech/score', methods=['POST'])
    def speech_score():
        """Score an upload in field "audio" against form field "target".

        Returns {transcript, accuracy, tips}.
        """
        target = request.form.get('target', '')
        upload = request.files.get('audio')
        if upload is None or not upload.filename:
            return jsonify({"error": "audio field is required"}), 400

        try:
            transcript = transcriber.transcribe_with_retry(
                upload.read(), upload.filename, upload.mimetype or None
            )
        except Exception as e:
            logger.exception("Transcription of %s failed after retries", upload.filename)
            return jsonify({"error": str(e) or "Connection error."}), 500

        result = score_text(target, transcript, config.tip_language)
        logger.info("Scored %s: accuracy=%d tips=%d", upload.filename, result.accuracy, len(result.tips))

        return jsonify({"transcript": transcript, **result.to_dict()})

    return app


def main():
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(config)
    logger.info("Server running on http://%s:%d", config.host, config.port)
    app.run(host=config.host, port=config.port)


if __name__ == '__main__':
    main()

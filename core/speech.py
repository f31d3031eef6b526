"""Client-side speech helpers: playback and a single-utterance recorder."""

import logging

from .config import SPEECH_UNSUPPORTED_MESSAGE, PLAYBACK_UNSUPPORTED_MESSAGE
from .errors import SpeechUnavailable, SpeechError
from .interfaces import SpeechSynthesizer, SpeechRecognizer

logger = logging.getLogger(__name__)


class UnsupportedSpeech(SpeechSynthesizer, SpeechRecognizer):
    """Speech backend for environments without audio support."""

    def is_available(self) -> bool:
        return False

    def speak(self, text: str) -> None:
        raise SpeechUnavailable(PLAYBACK_UNSUPPORTED_MESSAGE)

    def listen(self) -> str:
        raise SpeechUnavailable(SPEECH_UNSUPPORTED_MESSAGE)


def play_sentence(synthesizer: SpeechSynthesizer, sentence: str) -> str | None:
    """Speak a sentence. Returns an error message instead of raising."""
    if not synthesizer.is_available():
        return PLAYBACK_UNSUPPORTED_MESSAGE
    try:
        synthesizer.speak(sentence)
    except SpeechUnavailable as e:
        return str(e) or PLAYBACK_UNSUPPORTED_MESSAGE
    return None


class Recorder:
    """Recording state for the speaking activity.

    If the recognizer is unavailable the recorder is permanently unsupported and
    exposes only a static message. A recognition error is kept inline and the
    recorder goes back to idle.
    """

    IDLE = 'idle'
    RECORDING = 'recording'

    def __init__(self, recognizer: SpeechRecognizer):
        self.recognizer = recognizer
        self.supported = recognizer.is_available()
        self.state = self.IDLE
        self.transcript = ''
        self.error = None if self.supported else SPEECH_UNSUPPORTED_MESSAGE

    def record(self) -> str:
        """Capture one utterance. Returns the transcript ('' on failure)."""
        if not self.supported:
            return ''
        self.state = self.RECORDING
        self.transcript = ''
        self.error = None
        try:
            self.transcript = self.recognizer.listen().strip()
        except SpeechUnavailable:
            self.supported = False
            self.error = SPEECH_UNSUPPORTED_MESSAGE
        except SpeechError as e:
            logger.error(f"Speech recognition error: {e}")
            self.error = f"Speech recognition error: {e}"
        finally:
            self.state = self.IDLE
        return self.transcript

    def reset(self) -> None:
        self.state = self.IDLE
        self.transcript = ''
        if self.supported:
            self.error = None

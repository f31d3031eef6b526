"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class AIProvider(ABC):
    """Abstract base class for the generative-AI content gateway."""

    @abstractmethod
    def generate(self, prompt: str, schema: dict | None = None) -> str | dict:
        """Run a prompt.

        Without a schema, returns the response text with surrounding whitespace
        removed. With a schema, returns the parsed object; every field the schema
        declares as required is present. Raises GatewayError on any failure.
        Repeating a prompt may give a different, equally valid result.
        """
        pass


class SpeechSynthesizer(ABC):
    """Text-to-speech playback."""

    @abstractmethod
    def is_available(self) -> bool:
        pass

    @abstractmethod
    def speak(self, text: str) -> None:
        """Play text aloud. Raises SpeechUnavailable if unsupported."""
        pass


class SpeechRecognizer(ABC):
    """Speech-to-text capture."""

    @abstractmethod
    def is_available(self) -> bool:
        pass

    @abstractmethod
    def listen(self) -> str:
        """Record one utterance and return its final transcript.

        Raises SpeechUnavailable if unsupported, SpeechError on a recognition error.
        """
        pass

"""Exception types shared by the core and its collaborators."""

from .config import GATEWAY_ERROR_MESSAGE


class GatewayError(Exception):
    """The AI service failed, or its response could not be used."""

    def __init__(self, message: str = GATEWAY_ERROR_MESSAGE):
        super().__init__(message)


class ContentError(GatewayError):
    """A structured response broke the content contract (e.g. answer not in options)."""


class InvalidTransition(RuntimeError):
    """An action was requested in a state that does not allow it."""

    def __init__(self, action: str, state):
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} while {getattr(state, 'value', state)}")


class SpeechUnavailable(Exception):
    """Speech input or output is not supported by the runtime."""


class SpeechError(Exception):
    """Speech recognition failed mid-session."""

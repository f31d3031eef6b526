from .models import (
    ActivityKind, ActivityState, Scoreboard,
    ListeningContent, GrammarContent, VocabularyContent,
    WritingFeedback, SpeakingFeedback, Correction
)
from .activities import (
    Activity, ChoiceActivity, FreeTextActivity,
    ListeningActivity, SpeakingActivity, WritingActivity, VocabularyActivity, GrammarActivity,
    ACTIVITY_TYPES
)
from .navigation import Navigator
from .interfaces import AIProvider, SpeechSynthesizer, SpeechRecognizer
from .errors import GatewayError, ContentError, InvalidTransition, SpeechUnavailable, SpeechError

__all__ = [
    'ActivityKind', 'ActivityState', 'Scoreboard',
    'ListeningContent', 'GrammarContent', 'VocabularyContent',
    'WritingFeedback', 'SpeakingFeedback', 'Correction',
    'Activity', 'ChoiceActivity', 'FreeTextActivity',
    'ListeningActivity', 'SpeakingActivity', 'WritingActivity', 'VocabularyActivity', 'GrammarActivity',
    'ACTIVITY_TYPES',
    'Navigator',
    'AIProvider', 'SpeechSynthesizer', 'SpeechRecognizer',
    'GatewayError', 'ContentError', 'InvalidTransition', 'SpeechUnavailable', 'SpeechError'
]

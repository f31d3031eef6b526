"""Domain models for lingua application."""

from enum import Enum

from .config import OPTION_COUNT, BLANK_MARKER
from .errors import ContentError


class ActivityKind(str, Enum):
    MENU = 'menu'
    LISTENING = 'listening'
    SPEAKING = 'speaking'
    WRITING = 'writing'
    VOCABULARY = 'vocabulary'
    GRAMMAR = 'grammar'


class ActivityState(str, Enum):
    LOADING = 'loading'
    READY = 'ready'
    ANSWERED = 'answered'
    EVALUATING = 'evaluating'
    EVALUATED = 'evaluated'
    ERROR = 'error'
    DISCARDED = 'discarded'


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ContentError()
    return value


def _require_options(data: dict) -> tuple[list[str], str]:
    """Validate the options/answer pair of a multiple-choice item."""
    options = data.get('options')
    if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
        raise ContentError()
    if len(options) != OPTION_COUNT or len(set(options)) != OPTION_COUNT:
        raise ContentError()
    answer = _require_str(data, 'answer')
    if answer not in options:
        raise ContentError()
    return list(options), answer


class ListeningContent:
    """A sentence to play aloud plus a comprehension question about it."""

    def __init__(self, sentence: str, question: str, options: list[str], answer: str):
        self.sentence = sentence
        self.question = question
        self.options = options
        self.answer = answer

    def to_dict(self) -> dict:
        return {
            'sentence': self.sentence,
            'question': self.question,
            'options': list(self.options),
            'answer': self.answer
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ListeningContent':
        options, answer = _require_options(data)
        return cls(_require_str(data, 'sentence'), _require_str(data, 'question'), options, answer)


class GrammarContent:
    """A fill-in-the-blank question."""

    def __init__(self, question: str, options: list[str], answer: str, hint: str):
        self.question = question
        self.options = options
        self.answer = answer
        self.hint = hint

    def to_dict(self) -> dict:
        return {
            'question': self.question,
            'options': list(self.options),
            'answer': self.answer,
            'hint': self.hint
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'GrammarContent':
        options, answer = _require_options(data)
        question = _require_str(data, 'question')
        if BLANK_MARKER not in question:
            raise ContentError()
        return cls(question, options, answer, _require_str(data, 'hint'))


class VocabularyContent:
    """A word to learn, with its meaning, an example and a synonym."""

    def __init__(self, word: str, meaning: str, example: str, synonym: str):
        self.word = word
        self.meaning = meaning
        self.example = example
        self.synonym = synonym

    def to_dict(self) -> dict:
        return {
            'word': self.word,
            'meaning': self.meaning,
            'example': self.example,
            'synonym': self.synonym
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'VocabularyContent':
        return cls(*(_require_str(data, k) for k in ('word', 'meaning', 'example', 'synonym')))


class Correction:
    def __init__(self, original: str, corrected: str, explanation: str):
        self.original = original
        self.corrected = corrected
        self.explanation = explanation

    def to_dict(self) -> dict:
        return {'original': self.original, 'corrected': self.corrected, 'explanation': self.explanation}


class WritingFeedback:
    """Critique of a written answer. No corrections means no mistakes."""

    def __init__(self, praise: str, corrections: list[Correction]):
        self.praise = praise
        self.corrections = corrections

    @property
    def is_correct(self) -> bool:
        return not self.corrections

    def to_dict(self) -> dict:
        return {
            'praise': self.praise,
            'corrections': [c.to_dict() for c in self.corrections]
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'WritingFeedback':
        raw = data.get('corrections')
        if not isinstance(raw, list):
            raise ContentError()
        corrections = []
        for item in raw:
            if not isinstance(item, dict):
                raise ContentError()
            corrections.append(Correction(
                _require_str(item, 'original'),
                _require_str(item, 'corrected'),
                _require_str(item, 'explanation')
            ))
        return cls(_require_str(data, 'praise'), corrections)


class SpeakingFeedback:
    """Critique of a spoken answer. A blank correction means no mistakes."""

    def __init__(self, praise: str, correction: str, explanation: str):
        self.praise = praise
        self.correction = correction
        self.explanation = explanation

    @property
    def is_correct(self) -> bool:
        return not self.correction.strip()

    def to_dict(self) -> dict:
        return {
            'praise': self.praise,
            'correction': self.correction,
            'explanation': self.explanation
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SpeakingFeedback':
        return cls(
            _require_str(data, 'praise'),
            _require_str(data, 'correction'),
            _require_str(data, 'explanation')
        )


class Scoreboard:
    """Session score. It can only go up."""

    def __init__(self):
        self._score = 0

    @property
    def value(self) -> int:
        return self._score

    def increment(self) -> int:
        self._score += 1
        return self._score

    def to_dict(self) -> dict:
        return {'score': self._score}

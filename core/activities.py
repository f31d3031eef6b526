"""Activity state machines.

Each activity instance moves through LOADING -> READY -> (ANSWERED | EVALUATING
-> EVALUATED) and back to LOADING on "next". A gateway failure moves it to ERROR,
from which the only way out is discarding the instance.

Every gateway call is tagged with a ticket. Starting another call or discarding
the instance invalidates outstanding tickets, so a response that arrives late is
dropped instead of being applied to content the user no longer sees.
"""

import asyncio
import logging
from typing import Callable

from .config import (
    CORRECT_MESSAGE, LISTENING_WRONG_MESSAGE, GRAMMAR_WRONG_MESSAGE,
    NO_MISTAKES_MESSAGE, SUGGESTIONS_HEADING, BETTER_WAY_HEADING,
    UNKNOWN_ERROR_MESSAGE
)
from .errors import GatewayError, ContentError, InvalidTransition
from .interfaces import AIProvider
from .models import (
    ActivityKind, ActivityState,
    ListeningContent, GrammarContent, VocabularyContent,
    WritingFeedback, SpeakingFeedback
)
from . import prompts

logger = logging.getLogger(__name__)


def _as_dict(raw) -> dict:
    if not isinstance(raw, dict):
        raise ContentError()
    return raw


def _as_text(raw) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise ContentError()
    return raw.strip()


class Activity:
    """Base state machine shared by all activity kinds."""

    kind: ActivityKind = None

    def __init__(self, on_correct: Callable[[], int]):
        self._on_correct = on_correct
        self.state = ActivityState.LOADING
        self.content = None
        self.user_input = ''
        self.feedback = None
        self.message = None
        self.correct = None
        self.error = None
        self._generation = 0
        self._pending = None

    # -- per-kind hooks -------------------------------------------------------

    def content_request(self) -> tuple[str, dict | None]:
        """Return (prompt, schema) for fetching new content."""
        raise NotImplementedError

    def parse_content(self, raw):
        raise NotImplementedError

    # -- transitions ----------------------------------------------------------

    @property
    def busy(self) -> bool:
        return self._pending is not None

    def begin_load(self) -> int:
        """Enter LOADING, clearing content, input and feedback. Returns the call ticket."""
        fresh = self.state is ActivityState.LOADING and self._generation == 0
        if self.busy or not (fresh or self.state in (ActivityState.ANSWERED, ActivityState.EVALUATED)):
            raise InvalidTransition('load new content', self.state)
        self.state = ActivityState.LOADING
        self.content = None
        self._clear_answer()
        return self._issue_ticket()

    def complete_load(self, ticket: int, raw) -> bool:
        """Apply fetched content. Returns False if the ticket is stale."""
        if not self._accepts(ticket):
            return False
        try:
            content = self.parse_content(raw)
        except GatewayError as e:
            logger.error(f"Rejected {self.kind.value} content: {raw!r}")
            self._set_error(str(e))
            return True
        self.content = content
        self.state = ActivityState.READY
        logger.debug(f"{self.kind.value}: ready")
        return True

    def fail(self, ticket: int, message: str) -> bool:
        """Record a gateway failure. Returns False if the ticket is stale."""
        if not self._accepts(ticket):
            return False
        self._set_error(message)
        return True

    def discard(self) -> None:
        self._generation += 1
        self._pending = None
        self.state = ActivityState.DISCARDED

    async def load(self, provider: AIProvider) -> None:
        """Fetch new content (initial entry or "next")."""
        ticket = self.begin_load()
        prompt, schema = self.content_request()
        await self._call(provider, prompt, schema, ticket, self.complete_load)

    async def submit(self, provider: AIProvider, answer: str) -> None:
        raise NotImplementedError

    # -- helpers --------------------------------------------------------------

    def _issue_ticket(self) -> int:
        self._generation += 1
        self._pending = self._generation
        return self._generation

    def _accepts(self, ticket: int) -> bool:
        if self.state is ActivityState.DISCARDED or ticket != self._pending:
            logger.info(f"Ignoring stale {self.kind.value} response (ticket {ticket})")
            return False
        self._pending = None
        return True

    def _clear_answer(self) -> None:
        self.user_input = ''
        self.feedback = None
        self.message = None
        self.correct = None
        self.error = None

    def _set_error(self, message: str) -> None:
        self.state = ActivityState.ERROR
        self.error = message
        logger.warning(f"{self.kind.value}: {message}")

    def _award(self) -> None:
        self.correct = True
        total = self._on_correct()
        logger.info(f"{self.kind.value}: point awarded, score is now {total}")

    async def _call(self, provider: AIProvider, prompt: str, schema: dict | None,
                    ticket: int, complete: Callable) -> None:
        try:
            loop = asyncio.get_running_loop()
            raw = await loop.run_in_executor(None, lambda: provider.generate(prompt, schema))
        except GatewayError as e:
            self.fail(ticket, str(e))
        except Exception:
            logger.exception(f"Unexpected error from AI provider during {self.kind.value}")
            self.fail(ticket, UNKNOWN_ERROR_MESSAGE)
        else:
            complete(ticket, raw)

    def view_content(self) -> dict | str | None:
        if self.content is None:
            return None
        if isinstance(self.content, str):
            return self.content
        return self.content.to_dict()

    def to_dict(self) -> dict:
        feedback = self.feedback
        if feedback is not None and not isinstance(feedback, str):
            feedback = feedback.to_dict()
        return {
            'kind': self.kind.value,
            'state': self.state.value,
            'content': self.view_content(),
            'user_input': self.user_input,
            'feedback': feedback,
            'message': self.message,
            'correct': self.correct,
            'error': self.error
        }


class ChoiceActivity(Activity):
    """Multiple-choice activity scored locally against the content's answer."""

    # Fields hidden from the view until the question is answered
    _hidden_fields = ('answer',)

    def wrong_message(self) -> str:
        raise NotImplementedError

    def choose(self, option: str) -> bool:
        """Answer with one of the options. Returns whether it was correct."""
        if self.state is not ActivityState.READY:
            raise InvalidTransition('answer', self.state)
        if option not in self.content.options:
            raise ValueError(f"'{option}' is not one of the options")
        self.user_input = option
        self.state = ActivityState.ANSWERED
        if option == self.content.answer:
            self._award()
            self.message = CORRECT_MESSAGE
        else:
            self.correct = False
            self.message = self.wrong_message()
        return self.correct

    async def submit(self, provider: AIProvider, answer: str) -> None:
        self.choose(answer)

    def view_content(self) -> dict | None:
        data = super().view_content()
        if data is not None and self.state is ActivityState.READY:
            for field in self._hidden_fields:
                data.pop(field, None)
        return data


class FreeTextActivity(Activity):
    """Open-response activity evaluated by the AI."""

    def evaluation_request(self, text: str) -> tuple[str, dict | None]:
        raise NotImplementedError

    def parse_feedback(self, raw):
        raise NotImplementedError

    def is_correct(self, feedback) -> bool:
        raise NotImplementedError

    def result_message(self, correct: bool) -> str | None:
        return CORRECT_MESSAGE if correct else None

    def begin_evaluation(self, text: str) -> int | None:
        """Enter EVALUATING. Blank input is ignored and returns None."""
        if self.busy or self.state is not ActivityState.READY:
            raise InvalidTransition('submit', self.state)
        if not text or not text.strip():
            return None
        self.user_input = text
        self.feedback = None
        self.state = ActivityState.EVALUATING
        return self._issue_ticket()

    def complete_evaluation(self, ticket: int, raw) -> bool:
        if not self._accepts(ticket):
            return False
        try:
            feedback = self.parse_feedback(raw)
        except GatewayError as e:
            logger.error(f"Rejected {self.kind.value} feedback: {raw!r}")
            self._set_error(str(e))
            return True
        self.feedback = feedback
        self.state = ActivityState.EVALUATED
        if self.is_correct(feedback):
            self._award()
        else:
            self.correct = False
        self.message = self.result_message(self.correct)
        return True

    async def submit(self, provider: AIProvider, answer: str) -> None:
        ticket = self.begin_evaluation(answer)
        if ticket is None:
            return
        prompt, schema = self.evaluation_request(answer)
        await self._call(provider, prompt, schema, ticket, self.complete_evaluation)


class ListeningActivity(ChoiceActivity):
    kind = ActivityKind.LISTENING

    def content_request(self):
        return prompts.LISTENING_PROMPT, prompts.LISTENING_SCHEMA

    def parse_content(self, raw):
        return ListeningContent.from_dict(_as_dict(raw))

    def wrong_message(self):
        return LISTENING_WRONG_MESSAGE.format(answer=self.content.answer)


class GrammarActivity(ChoiceActivity):
    kind = ActivityKind.GRAMMAR
    _hidden_fields = ('answer', 'hint')

    def content_request(self):
        return prompts.GRAMMAR_PROMPT, prompts.GRAMMAR_SCHEMA

    def parse_content(self, raw):
        return GrammarContent.from_dict(_as_dict(raw))

    def wrong_message(self):
        return GRAMMAR_WRONG_MESSAGE.format(hint=self.content.hint)


class SpeakingActivity(FreeTextActivity):
    kind = ActivityKind.SPEAKING

    def content_request(self):
        return prompts.SPEAKING_PROMPT, None

    def parse_content(self, raw):
        return _as_text(raw)

    def evaluation_request(self, text):
        return prompts.speaking_feedback_prompt(self.content, text), prompts.SPEAKING_FEEDBACK_SCHEMA

    def parse_feedback(self, raw):
        return SpeakingFeedback.from_dict(_as_dict(raw))

    def is_correct(self, feedback):
        return feedback.is_correct

    def result_message(self, correct):
        return CORRECT_MESSAGE if correct else BETTER_WAY_HEADING


class WritingActivity(FreeTextActivity):
    kind = ActivityKind.WRITING

    def content_request(self):
        return prompts.WRITING_PROMPT, None

    def parse_content(self, raw):
        return _as_text(raw)

    def evaluation_request(self, text):
        return prompts.writing_feedback_prompt(text), prompts.WRITING_FEEDBACK_SCHEMA

    def parse_feedback(self, raw):
        return WritingFeedback.from_dict(_as_dict(raw))

    def is_correct(self, feedback):
        return feedback.is_correct

    def result_message(self, correct):
        return NO_MISTAKES_MESSAGE if correct else SUGGESTIONS_HEADING


class VocabularyActivity(FreeTextActivity):
    kind = ActivityKind.VOCABULARY

    def content_request(self):
        return prompts.VOCABULARY_PROMPT, prompts.VOCABULARY_SCHEMA

    def parse_content(self, raw):
        return VocabularyContent.from_dict(_as_dict(raw))

    def evaluation_request(self, text):
        return prompts.vocabulary_feedback_prompt(self.content.word, text), None

    def parse_feedback(self, raw):
        return _as_text(raw)

    def is_correct(self, feedback):
        # Any completed attempt earns the point
        return True


ACTIVITY_TYPES = {
    cls.kind: cls
    for cls in (ListeningActivity, SpeakingActivity, WritingActivity, VocabularyActivity, GrammarActivity)
}

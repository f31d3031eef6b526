"""Tests for the console client, driven with scripted input."""

import unittest
from unittest.mock import patch

from cli.console import ConsoleUI
from core.config import CORRECT_MESSAGE, GATEWAY_ERROR_MESSAGE, MENU_ITEMS


def view(kind, state, content=None, score=0, **extra):
    activity = {
        'kind': kind, 'state': state, 'content': content, 'user_input': '',
        'feedback': None, 'message': None, 'correct': None, 'error': None
    }
    activity.update(extra)
    return {'active_kind': kind, 'score': score, 'activity': activity}


class FakeClient:
    """Stands in for LinguaAPIClient, replaying canned responses."""

    base_url = 'http://test'

    def __init__(self, select_response, answer_response=None):
        self.select_response = select_response
        self.answer_response = answer_response
        self.selected = []
        self.answers = []
        self.menu_calls = 0

    def health_check(self):
        return {'service': 'lingua', 'status': 'ok'}

    def get_menu(self):
        return [{'kind': k, 'label': label, 'icon': icon} for k, label, icon in MENU_ITEMS]

    def get_status(self):
        return {'active_kind': 'menu', 'score': 0, 'state': None}

    def select_activity(self, kind):
        self.selected.append(kind)
        return self.select_response

    def submit_answer(self, answer):
        self.answers.append(answer)
        return self.answer_response

    def back_to_menu(self):
        self.menu_calls += 1
        return {'active_kind': 'menu', 'score': 0, 'activity': None}


class TestConsoleUI(unittest.TestCase):

    def run_ui(self, client, inputs):
        with patch('builtins.input', side_effect=inputs), patch('builtins.print'):
            ConsoleUI(client).run()

    def test_grammar_round(self):
        question = {'question': 'She ___ to school.', 'options': ['go', 'goes', 'going']}
        answered = dict(question, answer='goes', hint='Use third-person singular.')
        client = FakeClient(
            view('grammar', 'ready', question),
            view('grammar', 'answered', answered, score=1, user_input='goes',
                 message=CORRECT_MESSAGE, correct=True)
        )
        self.run_ui(client, ['5', '2', 'menu', 'exit'])
        self.assertEqual(client.selected, ['grammar'])
        self.assertEqual(client.answers, ['goes'])
        self.assertEqual(client.menu_calls, 1)

    def test_speaking_falls_back_to_typing(self):
        feedback = {'praise': 'Well said!', 'correction': '', 'explanation': ''}
        client = FakeClient(
            view('speaking', 'ready', 'What is your favorite color?'),
            view('speaking', 'evaluated', 'What is your favorite color?', score=1,
                 feedback=feedback, message=CORRECT_MESSAGE, correct=True)
        )
        self.run_ui(client, ['2', 'record', '', 'I like blue.', 'exit'])
        self.assertEqual(client.answers, ['I like blue.'])

    def test_error_only_offers_menu(self):
        client = FakeClient(view('listening', 'error', error=GATEWAY_ERROR_MESSAGE))
        self.run_ui(client, ['1', 'next', 'menu', 'exit'])
        self.assertEqual(client.answers, [])
        self.assertEqual(client.menu_calls, 1)


if __name__ == '__main__':
    unittest.main()

"""Console UI for lingua application."""

import time

import requests

from core.config import GATEWAY_ERROR_MESSAGE
from core.models import ActivityKind, ActivityState
from core.speech import UnsupportedSpeech, Recorder, play_sentence
from cli.api_client import LinguaAPIClient

CHOICE_KINDS = (ActivityKind.LISTENING.value, ActivityKind.GRAMMAR.value)


class ConsoleUI:
    """Console user interface for lingua application."""

    def __init__(self, client: LinguaAPIClient, speech=None):
        self.client = client
        self.speech = speech or UnsupportedSpeech()
        self.last_score = 0

    def print_score(self, score: int):
        """Print the score, marking a change since last time."""
        if score > self.last_score:
            print(f'*** Score: {score} (+{score - self.last_score}) ***')
        else:
            print(f'Score: {score}')
        self.last_score = score

    def print_menu(self, menu: list[dict]):
        print('\n' + '=' * 40)
        print('ENGLISH PRACTICE')
        print('=' * 40)
        for i, item in enumerate(menu, 1):
            print(f"  {i}. {item['icon']} {item['label']}")
        print('=' * 40)

    def print_content(self, view: dict):
        """Print the question or prompt of a ready activity."""
        kind = view['kind']
        content = view['content']
        print('\n' + '-' * 40)
        if kind == ActivityKind.LISTENING.value:
            print('Listen to the sentence ("play"), then answer:')
            print(f"\n{content['question']}")
        elif kind == ActivityKind.GRAMMAR.value:
            print('Fill in the blank:')
            print(f"\n{content['question']}")
        elif kind == ActivityKind.VOCABULARY.value:
            print(f"Word: {content['word']}")
            print(f"Meaning: {content['meaning']}")
            print(f"Example: {content['example']}")
            print(f"Synonym: {content['synonym']}")
            print(f"\nUse \"{content['word']}\" in a sentence of your own.")
        else:
            print(content)
        if kind in CHOICE_KINDS:
            for i, option in enumerate(content['options'], 1):
                print(f'  {i}. {option}')
        print('-' * 40)

    def print_result(self, view: dict):
        """Print the outcome of an answered or evaluated activity."""
        kind = view['kind']
        feedback = view['feedback']
        print('-' * 40)
        if kind in CHOICE_KINDS:
            content = view['content']
            for option in content['options']:
                mark = '+' if option == content['answer'] else ('x' if option == view['user_input'] else ' ')
                print(f'  [{mark}] {option}')
            print(f"\n{view['message']}")
        elif kind == ActivityKind.WRITING.value:
            print(f"{feedback['praise']} 👍")
            if feedback['corrections']:
                print(f"\n{view['message']}")
                for corr in feedback['corrections']:
                    print(f"  {corr['original']} -> {corr['corrected']}")
                    print(f"    💡 {corr['explanation']}")
            else:
                print(view['message'])
        elif kind == ActivityKind.SPEAKING.value:
            print(f"{feedback['praise']} 👍")
            if feedback['correction'].strip():
                print(f"\n{view['message']}")
                print(f"  {feedback['correction']}")
                if feedback['explanation']:
                    print(f"  {feedback['explanation']}")
            else:
                print(view['message'])
        else:
            print(feedback)
        print('-' * 40)

    def _read(self, prompt: str = '==> ') -> str:
        return input(prompt).strip()

    def _ask_choice(self, view: dict) -> str | None:
        """Read an option (by number or text). Returns None for a command already handled."""
        options = view['content']['options']
        user_input = self._read()
        if user_input.isdigit() and 1 <= int(user_input) <= len(options):
            return options[int(user_input) - 1]
        if user_input in options:
            return user_input
        if user_input.lower() == 'play' and view['kind'] == ActivityKind.LISTENING.value:
            error = play_sentence(self.speech, view['content']['sentence'])
            if error:
                print(error)
                print(f"Sentence: {view['content']['sentence']}")
            return None
        return user_input.lower() or None

    def _ask_text(self, view: dict, recorder: Recorder | None) -> str | None:
        user_input = self._read()
        if user_input.lower() == 'record' and recorder is not None:
            if not recorder.supported:
                print(recorder.error)
                print('Type your answer instead.')
                return None
            print('Recording... speak now.')
            transcript = recorder.record()
            if recorder.error:
                print(recorder.error)
                return None
            print(f'You said: {transcript}')
            return transcript or None
        return user_input or None

    def run_activity(self, data: dict) -> bool:
        """Drive one activity until the user goes back to the menu.

        Returns False if the user asked to exit.
        """
        recorder = None
        while True:
            view = data['activity']
            if view is None:
                return True
            self.print_score(data['score'])
            state = view['state']

            if state == ActivityState.ERROR.value:
                print(f"\nError: {view['error'] or GATEWAY_ERROR_MESSAGE}")
                print('Type "menu" to go back.')
                command = self._read().lower()
                while command not in ('menu', 'exit'):
                    print('Type "menu" to go back.')
                    command = self._read().lower()
                self.client.back_to_menu()
                return command == 'menu'

            if state in (ActivityState.LOADING.value, ActivityState.EVALUATING.value):
                time.sleep(0.5)
                data = self.client.get_activity()
                continue

            if state == ActivityState.READY.value:
                is_choice = view['kind'] in CHOICE_KINDS
                if view['kind'] == ActivityKind.SPEAKING.value and recorder is None:
                    recorder = Recorder(self.speech)
                self.print_content(view)
                if is_choice:
                    print('Pick an option by number. Commands: "menu", "exit"'
                          + (', "play"' if view['kind'] == ActivityKind.LISTENING.value else ''))
                    answer = self._ask_choice(view)
                else:
                    print('Type your answer. Commands: "menu", "exit"'
                          + (', "record"' if recorder is not None else ''))
                    answer = self._ask_text(view, recorder)
                if answer is None:
                    continue
                if answer.lower() == 'exit':
                    return False
                if answer.lower() == 'menu':
                    self.client.back_to_menu()
                    return True
                if is_choice and answer not in view['content']['options']:
                    print('Please pick one of the options.')
                    continue
                if not is_choice:
                    print('Checking...')
                try:
                    data = self.client.submit_answer(answer)
                except requests.RequestException as e:
                    print(f"Error submitting answer: {e}")
                continue

            # answered or evaluated
            self.print_result(view)
            print('Commands: "next", "menu", "exit"')
            command = self._read().lower()
            if command == 'exit':
                return False
            if command == 'menu':
                self.client.back_to_menu()
                return True
            if command == 'next':
                if recorder is not None:
                    recorder.reset()
                print('Loading...')
                try:
                    data = self.client.next_item()
                except requests.RequestException as e:
                    print(f"Error getting next item: {e}")

    def run(self):
        """Run the main application loop."""
        # Check server connection
        try:
            health = self.client.health_check()
            print(f"Connected to lingua server ({health['service']})")
        except Exception:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        menu = self.client.get_menu()
        self.last_score = self.client.get_status()['score']

        while True:
            self.print_menu(menu)
            self.print_score(self.last_score)
            print('Choose an activity by number, or "exit" to quit.')
            user_input = self._read().lower()

            if user_input == 'exit':
                print('Goodbye!')
                return
            if not user_input.isdigit() or not 1 <= int(user_input) <= len(menu):
                continue

            item = menu[int(user_input) - 1]
            print(f"Loading {item['label']}...")
            try:
                data = self.client.select_activity(item['kind'])
            except requests.RequestException as e:
                print(f"Error starting activity: {e}")
                continue

            if not self.run_activity(data):
                print('Goodbye!')
                return

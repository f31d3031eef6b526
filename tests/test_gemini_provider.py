"""Tests for GeminiProvider response handling."""

import threading
import unittest
from unittest.mock import patch

from core import prompts
from core.errors import GatewayError
from server.gemini_provider import GeminiProvider

TOKENS = {'prompt_tokens': 10, 'completion_tokens': 5, 'total_tokens': 15}


def make_provider() -> GeminiProvider:
    # Create provider without configuring the real client
    provider = GeminiProvider.__new__(GeminiProvider)
    provider.model_name = 'test-model'
    provider._stats = {}
    provider._stats_lock = threading.Lock()
    return provider


class TestGeminiProviderGenerate(unittest.TestCase):

    def test_text_response_is_trimmed(self):
        provider = make_provider()
        with patch.object(provider, '_execute', return_value=('  What is your favorite color?\n', 120, TOKENS)):
            result = provider.generate(prompts.SPEAKING_PROMPT)
        self.assertEqual(result, 'What is your favorite color?')

    def test_structured_response_is_parsed(self):
        provider = make_provider()
        raw = '{"word": "serene", "meaning": "calm", "example": "A serene lake.", "synonym": "tranquil"}'
        with patch.object(provider, '_execute', return_value=(raw, 100, TOKENS)):
            result = provider.generate(prompts.VOCABULARY_PROMPT, prompts.VOCABULARY_SCHEMA)
        self.assertEqual(result['word'], 'serene')

    def test_structured_response_in_code_fence(self):
        provider = make_provider()
        raw = '```json\n{"praise": "Good effort!", "corrections": []}\n```'
        with patch.object(provider, '_execute', return_value=(raw, 100, TOKENS)):
            result = provider.generate('check', prompts.WRITING_FEEDBACK_SCHEMA)
        self.assertEqual(result, {'praise': 'Good effort!', 'corrections': []})

    def test_malformed_json_raises(self):
        provider = make_provider()
        with patch.object(provider, '_execute', return_value=('This is not valid JSON', 100, TOKENS)):
            with self.assertRaises(GatewayError):
                provider.generate('check', prompts.WRITING_FEEDBACK_SCHEMA)

    def test_missing_required_field_raises(self):
        provider = make_provider()
        raw = '{"question": "She ___ to school.", "options": ["go", "goes", "going"], "answer": "goes"}'
        with patch.object(provider, '_execute', return_value=(raw, 100, TOKENS)):
            with self.assertRaises(GatewayError):
                provider.generate(prompts.GRAMMAR_PROMPT, prompts.GRAMMAR_SCHEMA)

    def test_transport_error_raises_gateway_error(self):
        provider = make_provider()
        with patch.object(provider, '_execute', side_effect=ConnectionError('network down')):
            with self.assertRaises(GatewayError) as ctx:
                provider.generate('hello')
        self.assertIsInstance(ctx.exception.__cause__, ConnectionError)


class TestGeminiProviderStats(unittest.TestCase):

    def test_stats_accumulate_per_call_type(self):
        provider = make_provider()
        with patch.object(provider, '_execute', return_value=('A topic.', 100, TOKENS)):
            provider.generate('topic')
            provider.generate('topic')
        with patch.object(provider, '_execute', return_value=('nope', 50, TOKENS)):
            with self.assertRaises(GatewayError):
                provider.generate('check', prompts.WRITING_FEEDBACK_SCHEMA)

        stats = provider.get_stats()
        self.assertEqual(stats['text']['calls'], 2)
        self.assertEqual(stats['text']['total_tokens'], 30)
        self.assertEqual(stats['structured']['failures'], 1)
        self.assertEqual(stats['total']['calls'], 3)
        self.assertEqual(stats['total']['avg_ms'], round(250 / 3, 1))

    def test_empty_stats(self):
        stats = make_provider().get_stats()
        self.assertEqual(stats['total']['calls'], 0)
        self.assertEqual(stats['total']['avg_ms'], 0)


if __name__ == '__main__':
    unittest.main()

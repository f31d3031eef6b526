"""Gemini AI provider implementation."""

import json
import logging
import threading
import time
import google.generativeai as genai

from core.config import DEFAULT_MODEL
from core.errors import GatewayError
from core.interfaces import AIProvider
from core.utils import extract_json_text, missing_required

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

_STAT_KEYS = ('calls', 'failures', 'total_ms', 'prompt_tokens', 'completion_tokens', 'total_tokens')


class GeminiProvider(AIProvider):
    """Gemini AI provider implementation."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL):
        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(model_name)
        self.model_name = model_name
        self._stats = {}
        self._stats_lock = threading.Lock()

    def _execute(self, prompt: str, generation_config=None) -> tuple[str, int, dict]:
        start_time = time.time()
        response = self.model.generate_content(prompt, generation_config=generation_config)
        ms = int((time.time() - start_time) * 1000)
        usage = getattr(response, 'usage_metadata', None)
        token_stats = {
            'prompt_tokens': getattr(usage, 'prompt_token_count', 0) or 0,
            'completion_tokens': getattr(usage, 'candidates_token_count', 0) or 0,
            'total_tokens': getattr(usage, 'total_token_count', 0) or 0
        }
        return (response.text, ms, token_stats)

    def _record_stats(self, call_type: str, ms: int, token_stats: dict, failed: bool = False) -> None:
        with self._stats_lock:
            stats = self._stats.setdefault(call_type, dict.fromkeys(_STAT_KEYS, 0))
            stats['calls'] += 1
            stats['failures'] += int(failed)
            stats['total_ms'] += ms
            for key in ('prompt_tokens', 'completion_tokens', 'total_tokens'):
                stats[key] += token_stats.get(key, 0)

    def get_stats(self) -> dict:
        """Per call type usage, plus a 'total' entry."""
        with self._stats_lock:
            result = {name: dict(stats) for name, stats in self._stats.items()}
        totals = dict.fromkeys(_STAT_KEYS, 0)
        for stats in result.values():
            for key in _STAT_KEYS:
                totals[key] += stats[key]
        calls = totals['calls']
        result['total'] = {
            **totals,
            'avg_ms': round(totals['total_ms'] / calls, 1) if calls > 0 else 0,
            'avg_tokens': round(totals['total_tokens'] / calls, 1) if calls > 0 else 0
        }
        return result

    def generate(self, prompt: str, schema: dict | None = None) -> str | dict:
        call_type = 'structured' if schema else 'text'
        generation_config = None
        if schema:
            generation_config = genai.GenerationConfig(
                response_mime_type='application/json',
                response_schema=schema
            )
        start_time = time.time()
        try:
            text, ms, token_stats = self._execute(prompt, generation_config)
        except Exception as e:
            ms = int((time.time() - start_time) * 1000)
            logger.error(f"Gemini {call_type} call failed after {ms}ms: {type(e).__name__}: {e}")
            self._record_stats(call_type, ms, {}, failed=True)
            raise GatewayError() from e

        if schema is None:
            self._record_stats(call_type, ms, token_stats)
            return text.strip()

        try:
            data = self._parse_structured(text, schema)
        except GatewayError:
            self._record_stats(call_type, ms, token_stats, failed=True)
            raise
        self._record_stats(call_type, ms, token_stats)
        return data

    def _parse_structured(self, response: str, schema: dict) -> dict:
        sanitized = extract_json_text(response)
        try:
            data = json.loads(sanitized)
        except ValueError as e:
            logger.error(f"Failed to parse structured response: {e}")
            logger.error(f"Raw response:\n{response}")

            # Try to diagnose the issue
            if '{' not in response:
                logger.error("Diagnosis: No opening brace '{' found in response")
            elif '}' not in response:
                logger.error("Diagnosis: No closing brace '}' found in response")
            elif sanitized.count('{') != sanitized.count('}'):
                logger.error(f"Diagnosis: Mismatched braces - {{ count: {sanitized.count('{')}, }} count: {sanitized.count('}')}")
            else:
                logger.error("Diagnosis: Unknown parsing issue - possibly malformed JSON")
            raise GatewayError() from e

        missing = missing_required(data, schema)
        if missing:
            logger.warning(f"AI response missing keys: {missing}")
            logger.warning(f"Raw response:\n{response}")
            raise GatewayError()
        return data

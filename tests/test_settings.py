"""Tests for server configuration loading."""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from core.config import DEFAULT_MODEL
from server.settings import load_config, get_api_key, get_model_name


class TestSettings(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config_file = os.path.join(self.tmpdir.name, 'config.json')
        self.missing_file = os.path.join(self.tmpdir.name, 'missing.json')

    def tearDown(self):
        self.tmpdir.cleanup()

    def write_config(self, config: dict):
        with open(self.config_file, 'w') as f:
            json.dump(config, f)

    def test_load_config_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(self.missing_file)

    def test_api_key_from_environment_wins(self):
        self.write_config({'gemini_api_key': 'from-file'})
        with patch.dict(os.environ, {'GEMINI_API_KEY': 'from-env'}):
            self.assertEqual(get_api_key(self.config_file), 'from-env')

    def test_api_key_from_config_file(self):
        self.write_config({'gemini_api_key': 'from-file'})
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_api_key(self.config_file), 'from-file')

    def test_api_key_absent(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(get_api_key(self.missing_file))

    def test_model_name_default(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_model_name(self.missing_file), DEFAULT_MODEL)

    def test_model_name_from_environment(self):
        with patch.dict(os.environ, {'LINGUA_MODEL': 'gemini-2.5-pro'}):
            self.assertEqual(get_model_name(self.missing_file), 'gemini-2.5-pro')


if __name__ == '__main__':
    unittest.main()

"""Runtime configuration for the server."""

import json
import os

from core.config import DEFAULT_MODEL

DEFAULT_CONFIG_FILE = '~/.config/lingua/config.json'


def load_config(config_file: str = None) -> dict:
    """Read the JSON config file. Raises FileNotFoundError if it is missing."""
    config_file = os.path.expanduser(
        config_file or os.environ.get('LINGUA_CONFIG_FILE', DEFAULT_CONFIG_FILE)
    )
    if not os.path.exists(config_file):
        raise FileNotFoundError(
            f"Config file not found at {config_file}\n"
            f'Please create it with: {{"gemini_api_key": "YOUR_API_KEY_HERE"}}'
        )
    with open(config_file, 'r') as f:
        return json.load(f)


def get_api_key(config_file: str = None) -> str | None:
    """Get the Gemini API key from the environment, then from the config file."""
    api_key = os.environ.get('GEMINI_API_KEY')
    if not api_key:
        try:
            api_key = load_config(config_file).get('gemini_api_key')
        except FileNotFoundError:
            pass
    return api_key


def get_model_name(config_file: str = None) -> str:
    model = os.environ.get('LINGUA_MODEL')
    if not model:
        try:
            model = load_config(config_file).get('model')
        except FileNotFoundError:
            pass
    return model or DEFAULT_MODEL

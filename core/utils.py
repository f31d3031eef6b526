"""Utility functions for lingua application."""

import re


def extract_json_text(text: str) -> str:
    """Strip markdown fences and any chatter around a JSON object."""
    s = text.strip()
    s = re.sub(r'^```(?:json)?\s*', '', s)
    s = re.sub(r'\s*```$', '', s)
    start, end = s.find('{'), s.rfind('}')
    if start != -1 and end > start:
        s = s[start:end + 1]
    return s


def missing_required(data, schema: dict, path: str = '') -> list[str]:
    """List the schema-required fields absent from data, as dotted paths."""
    missing = []
    kind = str(schema.get('type', '')).upper()
    if kind == 'OBJECT':
        if not isinstance(data, dict):
            return [path or '<root>']
        properties = schema.get('properties', {})
        for key in schema.get('required', []):
            if key not in data or data[key] is None:
                missing.append(f"{path}{key}")
            elif key in properties:
                missing.extend(missing_required(data[key], properties[key], f"{path}{key}."))
    elif kind == 'ARRAY':
        if not isinstance(data, list):
            return [path.rstrip('.') or '<root>']
        items = schema.get('items')
        if items:
            for i, item in enumerate(data):
                missing.extend(missing_required(item, items, f"{path}{i}."))
    return missing

"""
Shared fixtures and test doubles.
"""
import io
import json
import os
from unittest.mock import Mock

# Setup test environment before package imports
os.environ.setdefault('VERBOSE_DEBUG', 'false')

import pytest
from PIL import Image

from ae_lingo.services.gemini_client import GeminiResponse


STUB_OPACITY = '{"results":[{"original":"Opacity","translated":"不透明度","description":"控制图层透明程度"}]}'

# Gemini envelopes whose candidates do not have the documented shape
MALFORMED_ENVELOPES = [
    {'candidates': {'0': {'content': {'parts': [{'text': '{}'}]}}}},
    {'candidates': [{'content': '{"results": []}'}]},
    {'candidates': [{'content': {'parts': [{'text': 42}]}}]},
    {'candidates': [{'content': {'parts': {'text': '{}'}}}]},
]


class FakeGeminiClient:
    """Deterministic stand-in for GeminiClient that counts calls."""

    def __init__(self, text: str = '{"results": []}', success: bool = True, error: str = None):
        self.text = text
        self.success = success
        self.error = error
        self.calls = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def generate_content(self, api_key, parts, system_instruction, response_schema, model=None):
        self.calls.append({
            'api_key': api_key,
            'parts': parts,
            'system_instruction': system_instruction,
            'response_schema': response_schema,
            'model': model,
        })
        if not self.success:
            return GeminiResponse(success=False, error=self.error or "boom", model=model)
        return GeminiResponse(success=True, text=self.text, model=model, status_code=200)

    def is_healthy(self, api_key):
        return True


def make_response(status_code=200, body=None, text=None):
    """Mock a requests.Response with a JSON or raw body."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if body is not None:
        response.json.return_value = body
        response.text = json.dumps(body)
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text or ''
    return response


def make_image_bytes(width: int, height: int, fmt: str = 'PNG', mode: str = 'RGB', color=(200, 30, 30)) -> bytes:
    """Encode a solid image for normalizer tests."""
    if mode == 'RGBA' and len(color) == 3:
        color = color + (255,)
    buffer = io.BytesIO()
    Image.new(mode, (width, height), color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def fake_client():
    return FakeGeminiClient()


@pytest.fixture
def database(tmp_path):
    from ae_lingo.database.connection import Database

    db = Database(db_path=tmp_path / 'test.db')
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def storage(database):
    from ae_lingo.database.repositories import StorageRepository

    return StorageRepository(database)

"""
Unit Tests for the Gemini Client
================================
The HTTP session is mocked; no request leaves the process.
"""
from unittest.mock import Mock

import pytest
import requests

from ae_lingo.models.schemas import RESPONSE_SCHEMA
from ae_lingo.services.gemini_client import GeminiClient
from tests.conftest import MALFORMED_ENVELOPES, make_response


def make_client(response=None, error=None):
    client = GeminiClient(base_url="https://example.test/v1beta", model="gemini-test")
    client.session = Mock()
    if error is not None:
        client.session.post.side_effect = error
    else:
        client.session.post.return_value = response
    return client


def candidate_body(*texts, finish_reason='STOP'):
    return {
        'candidates': [{
            'content': {'role': 'model', 'parts': [{'text': t} for t in texts]},
            'finishReason': finish_reason,
        }]
    }


class TestGenerateContent:
    """Test request building and response handling."""

    def test_payload_and_headers(self):
        client = make_client(make_response(body=candidate_body('{"results": []}')))
        parts = [{'text': 'Translate these AE plugin parameters:'}, {'text': 'Opacity'}]

        client.generate_content('secret', parts, 'SYSTEM', RESPONSE_SCHEMA)

        args, kwargs = client.session.post.call_args
        assert args[0] == "https://example.test/v1beta/models/gemini-test:generateContent"
        assert kwargs['headers'] == {'x-goog-api-key': 'secret'}
        payload = kwargs['json']
        assert payload['systemInstruction'] == {'parts': [{'text': 'SYSTEM'}]}
        assert payload['contents'] == [{'role': 'user', 'parts': parts}]
        assert payload['generationConfig']['responseMimeType'] == 'application/json'
        assert payload['generationConfig']['responseSchema'] is RESPONSE_SCHEMA

    def test_one_post_per_call(self):
        client = make_client(make_response(status_code=500, body={'error': {'message': 'internal'}}))
        client.generate_content('secret', [{'text': 'x'}], 'SYSTEM', RESPONSE_SCHEMA)
        assert client.session.post.call_count == 1

    def test_text_parts_are_joined(self):
        client = make_client(make_response(body=candidate_body('{"results": ', '[]}')))
        result = client.generate_content('secret', [{'text': 'x'}], 'SYSTEM', RESPONSE_SCHEMA)

        assert result.success
        assert result.text == '{"results": []}'
        assert result.finish_reason == 'STOP'
        assert result.model == 'gemini-test'

    def test_no_candidates_gives_empty_text(self):
        client = make_client(make_response(body={'promptFeedback': {'blockReason': 'SAFETY'}}))
        result = client.generate_content('secret', [{'text': 'x'}], 'SYSTEM', RESPONSE_SCHEMA)

        assert result.success
        assert result.text == ''

    def test_auth_error_is_reported(self):
        body = {'error': {'code': 400, 'message': 'API key not valid.'}}
        client = make_client(make_response(status_code=400, body=body))
        result = client.generate_content('bad', [{'text': 'x'}], 'SYSTEM', RESPONSE_SCHEMA)

        assert not result.success
        assert result.status_code == 400
        assert 'API key not valid' in result.error

    def test_invalid_envelope_is_reported(self):
        client = make_client(make_response(status_code=200, text='<html>'))
        result = client.generate_content('secret', [{'text': 'x'}], 'SYSTEM', RESPONSE_SCHEMA)

        assert not result.success
        assert 'Invalid JSON' in result.error

    @pytest.mark.parametrize('body', MALFORMED_ENVELOPES)
    def test_malformed_candidates_are_reported(self, body):
        client = make_client(make_response(body=body))
        result = client.generate_content('secret', [{'text': 'x'}], 'SYSTEM', RESPONSE_SCHEMA)

        assert not result.success
        assert result.error == "Unexpected response envelope"

    def test_thought_parts_are_skipped(self):
        body = candidate_body('{"results": []}')
        body['candidates'][0]['content']['parts'].insert(0, {'text': 'thinking...', 'thought': True})
        client = make_client(make_response(body=body))
        result = client.generate_content('secret', [{'text': 'x'}], 'SYSTEM', RESPONSE_SCHEMA)

        assert result.text == '{"results": []}'

    def test_timeout_is_reported(self):
        client = make_client(error=requests.Timeout())
        result = client.generate_content('secret', [{'text': 'x'}], 'SYSTEM', RESPONSE_SCHEMA)

        assert not result.success
        assert result.error == "Request timed out"

    def test_connection_error_is_reported(self):
        client = make_client(error=requests.ConnectionError("refused"))
        result = client.generate_content('secret', [{'text': 'x'}], 'SYSTEM', RESPONSE_SCHEMA)

        assert not result.success
        assert 'refused' in result.error


class TestHealth:
    """Test the health check."""

    def test_healthy(self):
        client = make_client()
        client.session.get.return_value = make_response(body={'models': []})
        assert client.is_healthy('secret') is True

    def test_unreachable(self):
        client = make_client()
        client.session.get.side_effect = requests.ConnectionError("down")
        assert client.is_healthy('secret') is False

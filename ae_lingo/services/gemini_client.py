"""
Gemini API Client
=================
Client for the Gemini generative-language REST API.
"""
import requests
from typing import Optional, List, Dict, Any, Tuple
from dataclasses import dataclass
from ae_lingo.config import config
from ae_lingo.utils.logging import get_logger


@dataclass
class GeminiResponse:
    """Response from the Gemini API."""
    success: bool
    text: Optional[str] = None
    error: Optional[str] = None
    model: Optional[str] = None
    status_code: Optional[int] = None
    finish_reason: Optional[str] = None


class GeminiClient:
    """Client for Gemini API interactions."""

    def __init__(self, base_url: str = None, model: str = None):
        self.base_url = (base_url or config.gemini.base_url).rstrip('/')
        self.model = model or config.gemini.default_model
        self.logger = get_logger().app_logger

        # One attempt per request, pooled connections
        self.session = requests.Session()
        adapter = requests.adapters.HTTPAdapter(
            max_retries=0,
            pool_connections=4,
            pool_maxsize=4
        )
        self.session.mount('http://', adapter)
        self.session.mount('https://', adapter)

    @property
    def models_url(self) -> str:
        return f"{self.base_url}/models"

    def generate_url(self, model: str = None) -> str:
        return f"{self.base_url}/models/{model or self.model}:generateContent"

    def is_healthy(self, api_key: str) -> bool:
        """Check if the API is reachable with the given key."""
        try:
            response = self.session.get(
                self.models_url,
                headers={'x-goog-api-key': api_key},
                timeout=config.gemini.health_check_timeout
            )
            return response.status_code == 200
        except requests.RequestException as e:
            self.logger.warning(f"Gemini health check failed: {e}")
            return False

    def generate_content(
        self,
        api_key: str,
        parts: List[Dict[str, Any]],
        system_instruction: str,
        response_schema: Dict[str, Any],
        model: str = None
    ) -> GeminiResponse:
        """
        Request structured JSON output from the model.

        Args:
            api_key: Gemini API key
            parts: User-turn parts (text and/or inline data)
            system_instruction: System instruction text
            response_schema: Schema the JSON response must follow
            model: Model to use (defaults to configured model)

        Returns:
            GeminiResponse with the raw response text
        """
        model = model or self.model
        payload = {
            'systemInstruction': {'parts': [{'text': system_instruction}]},
            'contents': [{'role': 'user', 'parts': parts}],
            'generationConfig': {
                'responseMimeType': 'application/json',
                'responseSchema': response_schema,
            },
        }

        try:
            response = self.session.post(
                self.generate_url(model),
                json=payload,
                headers={'x-goog-api-key': api_key},
                timeout=(config.gemini.connect_timeout, config.gemini.read_timeout)
            )
        except requests.Timeout:
            return GeminiResponse(success=False, error="Request timed out", model=model)
        except requests.RequestException as e:
            return GeminiResponse(success=False, error=str(e), model=model)

        if not response.ok:
            return GeminiResponse(
                success=False,
                error=f"HTTP {response.status_code}: {self._error_message(response)}",
                model=model,
                status_code=response.status_code
            )

        try:
            result = response.json()
        except ValueError as e:
            return GeminiResponse(
                success=False,
                error=f"Invalid JSON response: {e}",
                model=model,
                status_code=response.status_code
            )

        extracted = self._extract_text(result) if isinstance(result, dict) else None
        if extracted is None:
            return GeminiResponse(
                success=False,
                error="Unexpected response envelope",
                model=model,
                status_code=response.status_code
            )

        text, finish_reason = extracted
        return GeminiResponse(
            success=True,
            text=text,
            model=model,
            status_code=response.status_code,
            finish_reason=finish_reason
        )

    def _extract_text(self, result: Dict[str, Any]) -> Optional[Tuple[str, Optional[str]]]:
        """
        Concatenate the text parts of the first candidate.

        Returns None when the envelope does not have the documented shape.
        """
        candidates = result.get('candidates')
        if not candidates:
            feedback = result.get('promptFeedback')
            reason = feedback.get('blockReason') if isinstance(feedback, dict) else None
            self.logger.warning(f"Gemini returned no candidates: {reason or 'unknown'}")
            return "", None

        if not isinstance(candidates, list) or not isinstance(candidates[0], dict):
            return None

        content = candidates[0].get('content') or {}
        if not isinstance(content, dict):
            return None
        parts = content.get('parts') or []
        if not isinstance(parts, list):
            return None

        texts = []
        for part in parts:
            if not isinstance(part, dict) or part.get('thought'):
                continue
            text = part.get('text', '')
            if not isinstance(text, str):
                return None
            texts.append(text)

        finish_reason = candidates[0].get('finishReason')
        return "".join(texts), finish_reason if isinstance(finish_reason, str) else None

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text[:200]
        if isinstance(body, dict) and isinstance(body.get('error'), dict):
            return body['error'].get('message', '')
        return str(body)[:200]

    def close(self):
        """Close the session."""
        self.session.close()


# Global client instance
_client_instance: Optional[GeminiClient] = None


def get_gemini_client() -> GeminiClient:
    """Get or create the global Gemini client instance."""
    global _client_instance
    if _client_instance is None:
        _client_instance = GeminiClient()
    return _client_instance

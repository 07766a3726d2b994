"""
Glossary Translator Service
===========================
Builds one structured-output request per translation, sends it to Gemini
and validates the returned glossary rows.
"""
import json
import time
from typing import List, Dict, Any, Optional

from ae_lingo.config import config
from ae_lingo.config.constants import InputMode, TEXT_INSTRUCTION, IMAGE_INSTRUCTION
from ae_lingo.exceptions import (
    InvalidInputKindError,
    MissingCredentialError,
    TranslationServiceUnavailableError
)
from ae_lingo.models.schemas import RESPONSE_SCHEMA
from ae_lingo.models.translation import TranslationItem, TranslationRequest
from ae_lingo.services.gemini_client import GeminiClient, get_gemini_client
from ae_lingo.services.image_processor import (
    ImageProcessor,
    ensure_image_mime,
    get_image_processor
)
from ae_lingo.services.terminology import TerminologyManager, get_terminology
from ae_lingo.utils.logging import get_logger, debug_print


EMPTY_PAYLOAD = '{"results": []}'


def parse_translation_payload(text: Optional[str]) -> List[TranslationItem]:
    """
    Parse the model's JSON body into glossary rows.

    An empty body means nothing was recognized. Any other body must be an
    object whose ``results`` list holds complete string triples.

    Raises:
        ValueError: if the body does not match the response schema
    """
    data = json.loads(text or EMPTY_PAYLOAD)
    if not isinstance(data, dict):
        raise ValueError("Response is not a JSON object")

    results = data.get('results')
    if not isinstance(results, list):
        raise ValueError("Response has no 'results' list")

    return [TranslationItem.from_dict(item) for item in results]


class GlossaryTranslator:
    """
    Translates After Effects plugin parameters into a bilingual glossary.

    Holds no per-call state; each call is a single attempt.
    """

    def __init__(
        self,
        client: GeminiClient = None,
        image_processor: ImageProcessor = None,
        terminology: TerminologyManager = None,
        api_key: str = None,
        model_name: str = None
    ):
        self.client = client if client is not None else get_gemini_client()
        self.image_processor = image_processor if image_processor is not None else get_image_processor()
        self.terminology = terminology if terminology is not None else get_terminology()
        self.api_key = api_key
        self.model_name = model_name or config.gemini.default_model
        self.logger = get_logger().translation_logger

    def _resolve_api_key(self) -> str:
        """Read the credential at call time."""
        api_key = self.api_key if self.api_key is not None else config.gemini.api_key
        if not api_key or not api_key.strip():
            raise MissingCredentialError(
                "Gemini API key is not configured. Set GEMINI_API_KEY (or API_KEY)."
            )
        return api_key.strip()

    def translate(self, request: TranslationRequest) -> List[TranslationItem]:
        """Translate a text or image request."""
        if request.kind == InputMode.IMAGE:
            return self.translate_image(request.data, request.mime_type)
        return self.translate_text(request.content)

    def translate_text(self, text: str) -> List[TranslationItem]:
        """
        Translate typed parameter names.

        Args:
            text: Raw user text, forwarded unmodified

        Returns:
            Glossary rows in the order the model returned them
        """
        if not text or not text.strip():
            return []

        api_key = self._resolve_api_key()
        parts = [{'text': TEXT_INSTRUCTION}, {'text': text}]
        return self._generate(api_key, parts, InputMode.TEXT)

    def translate_image(self, image_bytes: bytes, mime_type: str) -> List[TranslationItem]:
        """
        Extract and translate interface text from a screenshot.

        Args:
            image_bytes: Image payload of any size
            mime_type: Declared MIME type of the payload

        Returns:
            Glossary rows in the order the model returned them
        """
        if not image_bytes:
            raise InvalidInputKindError("No image data provided")
        ensure_image_mime(mime_type)

        api_key = self._resolve_api_key()
        processed = self.image_processor.process(image_bytes, mime_type)
        self.logger.info(
            f"Image prepared: {processed.mime_type}, {processed.size} bytes"
            + (f", {processed.width}x{processed.height}" if processed.reencoded else " (original)")
        )

        parts = [processed.to_inline_part(), {'text': IMAGE_INSTRUCTION}]
        return self._generate(api_key, parts, InputMode.IMAGE)

    def _generate(self, api_key: str, parts: List[Dict[str, Any]], mode: InputMode) -> List[TranslationItem]:
        """Send one request and validate the response."""
        start_time = time.time()
        debug_print(f"🌐 Requesting {mode.value.lower()} translation from {self.model_name}", 'INFO', 'TRANSLATE')

        response = self.client.generate_content(
            api_key,
            parts,
            self.terminology.build_system_instruction(),
            RESPONSE_SCHEMA,
            model=self.model_name
        )

        if not response.success:
            self.logger.error(f"{mode.value} translation failed: {response.error}")
            raise TranslationServiceUnavailableError(response.error or "Translation request failed")

        try:
            items = parse_translation_payload(response.text)
        # Deeply nested bodies exhaust the JSON decoder's recursion limit
        except (ValueError, RecursionError) as e:
            self.logger.error(
                f"{mode.value} translation returned a malformed body: {e}; "
                f"body starts with {(response.text or '')[:200]!r}"
            )
            raise TranslationServiceUnavailableError(f"Malformed response: {e}") from e

        elapsed = time.time() - start_time
        self.logger.info(f"{mode.value} translation returned {len(items)} items in {elapsed:.2f}s")
        return items


# Global translator instance
_translator_instance: Optional[GlossaryTranslator] = None


def get_translator() -> GlossaryTranslator:
    """Get or create the global translator."""
    global _translator_instance
    if _translator_instance is None:
        _translator_instance = GlossaryTranslator()
    return _translator_instance

"""
Request/Response Schemas
========================
The structured output schema sent to the model and the API envelopes.
"""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from ae_lingo.models.translation import TranslationItem


# Structured output contract for the model; every field is required
RESPONSE_SCHEMA: Dict[str, Any] = {
    'type': 'OBJECT',
    'properties': {
        'results': {
            'type': 'ARRAY',
            'items': {
                'type': 'OBJECT',
                'properties': {
                    'original': {'type': 'STRING'},
                    'translated': {'type': 'STRING'},
                    'description': {'type': 'STRING'},
                },
                'required': ['original', 'translated', 'description'],
            },
        },
    },
    'required': ['results'],
}


@dataclass
class TranslateResponse:
    """Response schema for the translate endpoints."""
    results: List[TranslationItem] = field(default_factory=list)
    message: Optional[str] = None
    history_id: Optional[str] = None

    @property
    def empty(self) -> bool:
        return not self.results

    def to_dict(self) -> dict:
        result = {
            'results': [item.to_dict() for item in self.results],
            'empty': self.empty,
        }
        if self.message:
            result['message'] = self.message
        if self.history_id:
            result['history_id'] = self.history_id
        return result


@dataclass
class HealthStatus:
    """Health check response."""
    status: str
    credential_configured: bool
    gemini_reachable: Optional[bool]
    model: str
    version: str

    def to_dict(self) -> dict:
        return {
            'status': self.status,
            'credential_configured': self.credential_configured,
            'gemini_reachable': self.gemini_reachable,
            'model': self.model,
            'version': self.version,
        }


@dataclass
class MetricsData:
    """Application metrics."""
    total_requests: int = 0
    successful_translations: int = 0
    empty_translations: int = 0
    failed_translations: int = 0
    total_translation_time: float = 0.0

    @property
    def average_translation_time(self) -> float:
        completed = self.successful_translations + self.empty_translations
        return self.total_translation_time / completed if completed else 0.0

    def to_dict(self) -> dict:
        return {
            'total_requests': self.total_requests,
            'successful_translations': self.successful_translations,
            'empty_translations': self.empty_translations,
            'failed_translations': self.failed_translations,
            'average_translation_time': round(self.average_translation_time, 3),
            'success_rate': (self.successful_translations / self.total_requests * 100) if self.total_requests > 0 else 0,
        }

"""
AE Lingo - Data Models
"""
from ae_lingo.models.translation import (
    TranslationItem,
    TranslationRequest,
    ProcessedImage,
    HistoryEntry
)
from ae_lingo.models.schemas import (
    RESPONSE_SCHEMA,
    TranslateResponse,
    HealthStatus,
    MetricsData
)

__all__ = [
    "TranslationItem",
    "TranslationRequest",
    "ProcessedImage",
    "HistoryEntry",
    "RESPONSE_SCHEMA",
    "TranslateResponse",
    "HealthStatus",
    "MetricsData"
]

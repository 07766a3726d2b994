"""
AE Lingo - Services
"""
from ae_lingo.services.gemini_client import GeminiClient
from ae_lingo.services.image_processor import PillowImageProcessor, PassThroughImageProcessor
from ae_lingo.services.terminology import TerminologyManager
from ae_lingo.services.translator import GlossaryTranslator
from ae_lingo.services.history import HistoryService

__all__ = [
    "GeminiClient",
    "PillowImageProcessor",
    "PassThroughImageProcessor",
    "TerminologyManager",
    "GlossaryTranslator",
    "HistoryService"
]

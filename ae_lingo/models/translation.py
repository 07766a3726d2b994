"""
Translation Data Models
=======================
Core data structures for glossary translations.
"""
import base64
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from ae_lingo.config.constants import InputMode


ITEM_FIELDS = ('original', 'translated', 'description')


@dataclass(frozen=True)
class TranslationItem:
    """One glossary row: source term, Chinese term and a beginner explanation."""
    original: str
    translated: str
    description: str

    @classmethod
    def from_dict(cls, data: Any) -> 'TranslationItem':
        """
        Build an item from a decoded JSON object.

        Raises:
            ValueError: if a field is missing or is not a string
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        for name in ITEM_FIELDS:
            if name not in data:
                raise ValueError(f"Missing field '{name}'")
            if not isinstance(data[name], str):
                raise ValueError(f"Field '{name}' must be a string")
        return cls(
            original=data['original'],
            translated=data['translated'],
            description=data['description']
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'original': self.original,
            'translated': self.translated,
            'description': self.description,
        }


@dataclass(frozen=True)
class TranslationRequest:
    """A single user-initiated translation: typed text or an image."""
    kind: InputMode
    content: str = ""
    data: bytes = b""
    mime_type: Optional[str] = None

    @classmethod
    def text(cls, content: str) -> 'TranslationRequest':
        return cls(kind=InputMode.TEXT, content=content)

    @classmethod
    def image(cls, data: bytes, mime_type: str) -> 'TranslationRequest':
        return cls(kind=InputMode.IMAGE, data=data, mime_type=mime_type)


@dataclass(frozen=True)
class ProcessedImage:
    """Image payload ready to be sent inline to the model."""
    data: bytes
    mime_type: str
    width: Optional[int] = None
    height: Optional[int] = None
    reencoded: bool = True

    @property
    def size(self) -> int:
        return len(self.data)

    def to_inline_part(self) -> Dict[str, Any]:
        """Request part carrying the image as base64 inline data."""
        return {
            'inlineData': {
                'mimeType': self.mime_type,
                'data': base64.b64encode(self.data).decode('ascii'),
            }
        }


@dataclass
class HistoryEntry:
    """A successful translation kept in the recent history list."""
    id: str
    timestamp: int
    mode: InputMode
    query_snippet: str
    results: List[TranslationItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'timestamp': self.timestamp,
            'mode': self.mode.value if isinstance(self.mode, InputMode) else self.mode,
            'query_snippet': self.query_snippet,
            'results': [item.to_dict() for item in self.results],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistoryEntry':
        return cls(
            id=str(data['id']),
            timestamp=int(data['timestamp']),
            mode=InputMode(data['mode']),
            query_snippet=data.get('query_snippet', ''),
            results=[TranslationItem.from_dict(item) for item in data.get('results', [])]
        )

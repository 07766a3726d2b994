"""
Terminology Manager
===================
Holds the After Effects terminology glossary and renders the system
instruction sent with every translation request.
"""
import json
from pathlib import Path
from typing import Dict, List, Optional

from ae_lingo.config import config
from ae_lingo.config.constants import (
    AE_GLOSSARY,
    GLOSSARY_VERSION,
    TRANSLATION_RULES,
    TRANSLATOR_ROLE,
    TRANSLATOR_GOAL
)
from ae_lingo.utils.logging import get_logger


class TerminologyManager:
    """Manages the canonical EN -> CN glossary and output rules."""

    def __init__(
        self,
        terms: Dict[str, Dict[str, str]] = None,
        rules: List[str] = None,
        version: str = None
    ):
        source = AE_GLOSSARY if terms is None else terms
        self.terms: Dict[str, Dict[str, str]] = {
            category: dict(entries) for category, entries in source.items()
        }
        self.rules: List[str] = list(TRANSLATION_RULES if rules is None else rules)
        self.version = version or GLOSSARY_VERSION

    @classmethod
    def from_file(cls, path: str) -> 'TerminologyManager':
        """
        Load a glossary from a JSON file.

        The file holds ``{"version": ..., "terms": {category: {en: cn}}, "rules": [...]}``;
        ``rules`` and ``version`` are optional.
        """
        with open(path, encoding='utf-8') as fh:
            data = json.load(fh)

        terms = data.get('terms')
        if not isinstance(terms, dict) or not all(isinstance(v, dict) for v in terms.values()):
            raise ValueError(f"Glossary file {path} must map categories to term objects")

        return cls(
            terms=terms,
            rules=data.get('rules'),
            version=data.get('version') or Path(path).stem
        )

    def add_term(self, original: str, translated: str, category: str = 'custom'):
        """
        Add a term to the glossary.

        Args:
            original: English term
            translated: Simplified Chinese term
            category: Glossary group the term is listed under
        """
        self.terms.setdefault(category, {})[original] = translated

    def get_term(self, original: str) -> Optional[str]:
        """Get the Chinese term for an English term, if known."""
        for entries in self.terms.values():
            if original in entries:
                return entries[original]
        return None

    def get_glossary(self) -> Dict[str, str]:
        """Get a flat copy of the glossary."""
        flat = {}
        for entries in self.terms.values():
            flat.update(entries)
        return flat

    def __len__(self) -> int:
        return sum(len(entries) for entries in self.terms.values())

    def build_system_instruction(self) -> str:
        """Render the system instruction for the model."""
        lines = [
            f"Role: {TRANSLATOR_ROLE}",
            "",
            f"Goal: {TRANSLATOR_GOAL}",
            "",
            "Strict Glossary (EN->CN):",
        ]
        for entries in self.terms.values():
            if entries:
                lines.append("- " + ", ".join(f"{en}->{cn}" for en, cn in entries.items()))

        lines.extend(["", "Instructions:"])
        for number, rule in enumerate(self.rules, start=1):
            lines.append(f"{number}. {rule}")

        lines.extend(["", "Output: JSON strictly."])
        return "\n".join(lines)


# Global terminology instance
_terminology_instance: Optional[TerminologyManager] = None


def get_terminology() -> TerminologyManager:
    """Get or create the global terminology manager."""
    global _terminology_instance
    if _terminology_instance is None:
        path = config.terminology.glossary_path
        if path:
            _terminology_instance = TerminologyManager.from_file(path)
            get_logger().app_logger.info(
                f"Loaded glossary {_terminology_instance.version} from {path}"
            )
        else:
            _terminology_instance = TerminologyManager()
    return _terminology_instance

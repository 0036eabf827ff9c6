"""
Language rule packs.

Each supported language is a LanguageProcessor composed from the shared
protection stages. ``get_processor`` is the factory keyed by language id.
"""

from typing import Dict, List, Type

from ..core.abc import LanguageProcessor
from .english import EnglishProcessor

class UnsupportedLanguageError(ValueError):
    """Raised for a language id with no rule pack."""
    pass

_PROCESSORS: Dict[str, Type] = {
    "en": EnglishProcessor,
}

_ALIASES = {
    "english": "en",
    "en-us": "en",
    "en-gb": "en",
    "en_us": "en",
    "en_gb": "en",
}

def normalize_language(language: str) -> str:
    """Map a user-facing language id to a rule pack key."""
    key = (language or "").strip().lower()
    key = _ALIASES.get(key, key)
    if key not in _PROCESSORS:
        supported = ", ".join(supported_languages())
        raise UnsupportedLanguageError(
            f"Unsupported language: {language!r}. Use one of: {supported}"
        )
    return key

def supported_languages() -> List[str]:
    return sorted(_PROCESSORS)

def get_processor(language: str = "en", **options) -> LanguageProcessor:
    """
    Create the processor for a language.

    Args:
        language: Language id such as "en" or "english"
        **options: Forwarded to the processor (extra abbreviations and rules, min_length)

    Returns:
        LanguageProcessor: Ready-to-use processor

    Raises:
        UnsupportedLanguageError: If no rule pack exists for the language
    """
    return _PROCESSORS[normalize_language(language)](**options)

__all__ = [
    "EnglishProcessor", "UnsupportedLanguageError", "get_processor",
    "normalize_language", "supported_languages",
]

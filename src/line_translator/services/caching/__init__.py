"""Caching services - per-language translation cache."""

from line_translator.services.caching.translation_cache import (
    NOT_AVAILABLE,
    TRANSLATION_FAILED,
    TranslationCache,
)

__all__ = [
    "TranslationCache",
    "NOT_AVAILABLE",
    "TRANSLATION_FAILED",
]

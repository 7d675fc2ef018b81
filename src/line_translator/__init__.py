"""
Line Translator - translate pasted text line by line into several languages.

Each non-blank line is sent to an OpenAI-compatible chat completion endpoint
that returns all target languages at once; results are cached per language
and shown in language tabs.
"""

__version__ = "0.1.0"

# Make key components available at package level
from line_translator.core import AppConfig, LanguageCatalog, TranslationSession, load_config
from line_translator.services import TranslationPipeline, format_entries

__all__ = [
    "AppConfig",
    "LanguageCatalog",
    "TranslationSession",
    "load_config",
    "TranslationPipeline",
    "format_entries",
]

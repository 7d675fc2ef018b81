"""Domain layer - configuration, requests and session state."""

from .app_config import AppConfig, LanguageCatalog, ModelSettings, load_config
from .errors import ConfigError, EmptyInputError, LineTranslatorError
from .translation_request import TranslationRequest, TranslationResult
from .translation_session import TranslationSession

__all__ = [
    "AppConfig",
    "LanguageCatalog",
    "ModelSettings",
    "load_config",
    "LineTranslatorError",
    "EmptyInputError",
    "ConfigError",
    "TranslationRequest",
    "TranslationResult",
    "TranslationSession",
]

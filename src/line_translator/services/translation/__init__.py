"""Translation services - request building, remote call adapter and response parsing."""

from line_translator.services.translation.translation_service import TranslationService
from line_translator.services.translation.chat_completion_client import ChatCompletionClient
from line_translator.services.translation.request_builder import build_prompt, build_request
from line_translator.services.translation.response_parser import (
    ResponseParseError,
    extract_message_content,
    normalize_content,
    parse_completion,
    parse_translations,
)

__all__ = [
    "TranslationService",
    "ChatCompletionClient",
    "build_prompt",
    "build_request",
    "ResponseParseError",
    "extract_message_content",
    "normalize_content",
    "parse_completion",
    "parse_translations",
]

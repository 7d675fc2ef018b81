"""Services layer - translation pipeline and external integrations."""

from line_translator.services.settings_manager import SettingsManager
from line_translator.services.diagnostics import DiagnosticLog
from line_translator.services.formatting import format_entries
from line_translator.services.translation_pipeline import TranslationPipeline

# Text processing services
from line_translator.services.text_processing import split_lines

# Translation services
from line_translator.services.translation import (
	ChatCompletionClient,
	ResponseParseError,
	TranslationService,
	build_request,
	parse_completion,
)

# Caching services
from line_translator.services.caching import NOT_AVAILABLE, TRANSLATION_FAILED, TranslationCache

__all__ = [
	"SettingsManager",
	"DiagnosticLog",
	"format_entries",
	"TranslationPipeline",
	"split_lines",
	"ChatCompletionClient",
	"ResponseParseError",
	"TranslationService",
	"build_request",
	"parse_completion",
	"TranslationCache",
	"NOT_AVAILABLE",
	"TRANSLATION_FAILED",
]

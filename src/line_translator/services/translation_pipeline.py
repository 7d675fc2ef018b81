"""Translation Pipeline - translates input text line by line into every catalog language."""

import logging
from typing import Callable, Optional

from line_translator.core import EmptyInputError, TranslationSession
from line_translator.services.caching import NOT_AVAILABLE, TranslationCache
from line_translator.services.diagnostics import DiagnosticLog
from line_translator.services.formatting import format_entries
from line_translator.services.text_processing import split_lines
from line_translator.services.translation import TranslationService, build_request
from line_translator.services.translation.chat_completion_client import MISSING_API_KEY_ERROR


logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


class TranslationPipeline:
    """
    Owns the translation cache and runs the sequential request loop.

    Lines are sent one at a time; a failed line never aborts the run and is
    never retried.
    """

    def __init__(
        self,
        session: TranslationSession,
        translation_service: TranslationService,
        diagnostics: Optional[DiagnosticLog] = None,
    ):
        self.session = session
        self.translation_service = translation_service
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.cache = TranslationCache()

    def translate_all(
        self,
        input_text: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> str:
        """
        Translate every non-blank line of the input.

        Args:
            input_text: Raw multi-line text.
            on_progress: Called as (index, total, line) before each line is sent.

        Returns:
            Formatted output for the session's current language.

        Raises:
            EmptyInputError: if the input holds no non-blank line.
        """
        self.cache.clear()
        self.diagnostics.clear()

        lines = split_lines(input_text)
        if not lines:
            raise EmptyInputError()

        codes = self.session.config.catalog.codes
        total = len(lines)
        logger.info("Translating %d line(s) into %d language(s)", total, len(codes))

        if not self.session.has_credential:
            self.diagnostics.report(MISSING_API_KEY_ERROR)
            for line in lines:
                self.cache.record_line(line, None, codes)
            return self.render(self.session.current_lang, report_missing=True)

        for index, line in enumerate(lines):
            if on_progress is not None:
                on_progress(index, total, line)

            request = build_request(line, self.session.config)
            result = self.translation_service.send(request, self.session.api_key)

            self.cache.record_line(line, result, codes)

            if result.is_error:
                self.diagnostics.report(f'Could not translate "{line}": {result.error}')
                continue

            logger.debug('Translated "%s" with %s', line, result.model)
            missing = [code for code in codes if self.cache.get(code, line) == [NOT_AVAILABLE]]
            if missing:
                self.diagnostics.report(
                    f'Missing translations for "{line}": {", ".join(missing)}'
                )

        return self.render(self.session.current_lang, report_missing=True)

    def render(self, lang: Optional[str], report_missing: bool = False) -> str:
        """
        Format the cached entries of a language. Never sends requests.

        Args:
            lang: Language code to render.
            report_missing: Report a diagnostic when nothing is cached for the code.

        Returns:
            Formatted text, or an empty string when the code has no entries.
        """
        entries = self.cache.entries_for(lang) if lang else None
        if entries is None:
            if report_missing:
                self.diagnostics.report(f"No translation available for '{lang}'")
            return ""
        return format_entries(entries)

    def select_language(self, lang: str) -> str:
        """Make a language current and return its formatted output."""
        if lang not in self.session.config.catalog:
            raise ValueError(f"Unknown language code: {lang}")
        self.session.current_lang = lang
        return self.render(lang)

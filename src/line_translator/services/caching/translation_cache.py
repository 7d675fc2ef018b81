"""In-memory translation cache for the current session."""

from typing import Iterable, Mapping, Optional

from line_translator.core import TranslationResult


NOT_AVAILABLE = "Translation not available"
TRANSLATION_FAILED = "Error: Could not translate"


class TranslationCache:
    """
    Session-level cache of translations. No persistence.

    Structure: {lang: {source_line: [translation]}}. Inner mappings keep
    insertion order, which is the order lines were submitted in.
    """

    def __init__(self):
        self._store: dict[str, dict[str, list[str]]] = {}

    def clear(self) -> None:
        """Drop every cached entry."""
        self._store = {}

    def record_line(
        self,
        line: str,
        result: Optional[TranslationResult],
        lang_codes: Iterable[str],
    ) -> None:
        """
        Store one line's entries for all languages from a single result.

        Args:
            line: Source line (cache key).
            result: Adapter outcome; None or an error result marks the whole line as failed.
            lang_codes: Every configured language code.
        """
        failed = result is None or result.is_error
        translations = {} if failed else result.translations

        entries = {}
        for code in lang_codes:
            if failed:
                entries[code] = TRANSLATION_FAILED
            else:
                entries[code] = _pick_translation(translations, code)

        # Build first, then write, so a line is never half-updated
        for code, text in entries.items():
            self._store.setdefault(code, {})[line] = [text]

    def get(self, lang: str, line: str) -> Optional[list[str]]:
        """Return the cached entry for a line in a language, if any."""
        return self._store.get(lang, {}).get(line)

    def entries_for(self, lang: str) -> Optional[dict[str, list[str]]]:
        """Return a copy of all entries for a language, or None if nothing is cached for it."""
        entries = self._store.get(lang)
        if entries is None:
            return None
        return {line: list(values) for line, values in entries.items()}

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._store.values())


def _pick_translation(translations: Mapping, code: str) -> str:
    """
    Return the displayable translation for a code.

    Non-empty strings are used as is and numbers are shown via str().
    Missing, empty, boolean, null or nested values become NOT_AVAILABLE.
    """
    value = translations.get(code)
    if isinstance(value, str) and value:
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return NOT_AVAILABLE

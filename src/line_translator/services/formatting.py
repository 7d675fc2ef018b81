"""Result formatter - renders cached translations as a key/array text block."""

import json
from typing import Mapping, Sequence


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def format_entries(entries: Mapping[str, Sequence[str]]) -> str:
    """
    Render one language's cache entries for display.

    Each entry becomes::

        "<line>": [
            "<translation>"
        ]

    Entries are joined with ",\\n" in insertion order. Strings are written as
    JSON string literals, so quotes and backslashes are escaped.

    Args:
        entries: Mapping of source line -> one-element list of translations.

    Returns:
        Formatted text, or an empty string for an empty mapping.
    """
    blocks = []
    for line, translations in entries.items():
        translation = translations[0] if translations else ""
        blocks.append(f"{_quote(line)}: [\n    {_quote(translation)}\n]")
    return ",\n".join(blocks)

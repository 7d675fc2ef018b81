"""Request builder - turns one source line into a chat completion request."""

import json

from line_translator.core import AppConfig, TranslationRequest


PROMPT_TEMPLATE = 'Translate "{line}" TO {codes}. Return Object with results.'


def build_prompt(line: str, codes: list[str]) -> str:
    """Instruction asking the model for an object keyed by language code."""
    return PROMPT_TEMPLATE.format(line=line, codes=json.dumps(codes, ensure_ascii=False))


def build_request(line: str, config: AppConfig) -> TranslationRequest:
    """
    Build the request translating a line into every catalog language.

    Args:
        line: Trimmed, non-empty source line.
        config: App configuration (catalog and model settings).

    Returns:
        TranslationRequest ready to be sent.

    Raises:
        ValueError: if the line is empty or whitespace-only.
    """
    if not line or not line.strip():
        raise ValueError("Cannot build a translation request for an empty line")

    settings = config.model
    return TranslationRequest(
        model=settings.model,
        role=settings.role,
        prompt=build_prompt(line, config.catalog.codes),
        temperature=settings.temperature,
    )

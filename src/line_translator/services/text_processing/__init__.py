"""Text processing services - input line handling."""

from line_translator.services.text_processing.line_splitting import split_lines

__all__ = ["split_lines"]

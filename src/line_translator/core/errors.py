"""Error types raised by the line translator."""


class LineTranslatorError(Exception):
    """Base class for line translator errors."""


class EmptyInputError(LineTranslatorError):
    """Raised when the submitted text has no non-blank lines."""

    def __init__(self, message: str = "Please enter some text to translate."):
        super().__init__(message)


class ConfigError(LineTranslatorError):
    """Raised when the application configuration cannot be loaded."""

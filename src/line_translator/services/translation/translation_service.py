"""Translation Service - abstract interface for the remote call adapter."""

from abc import ABC, abstractmethod
from typing import Optional

from line_translator.core import TranslationRequest, TranslationResult


class TranslationService(ABC):
    """
    Abstract service that sends one translation request to a remote model.

    Implementations (e.g., ChatCompletionClient) handle the HTTP details and
    must never raise: every failure is reported through TranslationResult.error.
    """

    @abstractmethod
    def send(self, request: TranslationRequest, api_key: Optional[str]) -> TranslationResult:
        """
        Send a translation request.

        Args:
            request: Request built for a single source line.
            api_key: Credential attached to the Authorization header.

        Returns:
            TranslationResult with the language -> translation mapping or an error message.
        """
        pass

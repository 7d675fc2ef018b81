"""Chat Completion Client - sends translation requests to an OpenAI-compatible endpoint."""

import logging
from typing import Optional

import httpx

from line_translator.core import ModelSettings, TranslationRequest, TranslationResult
from line_translator.services.translation.response_parser import (
    ResponseParseError,
    parse_completion,
)
from line_translator.services.translation.translation_service import TranslationService


logger = logging.getLogger(__name__)

MISSING_API_KEY_ERROR = "API key not configured. Add OPENAI_API_KEY to .env file."


class ChatCompletionClient(TranslationService):
    """
    Translation service posting chat completion requests over HTTP.

    One request per call, no retries. The credential is sent verbatim in the
    Authorization header, so it must already carry any scheme prefix
    (e.g. "Bearer sk-...").
    """

    def __init__(self, settings: ModelSettings, client: Optional[httpx.Client] = None):
        """
        Args:
            settings: Endpoint and model parameters.
            client: Shared httpx client. If None, a short-lived client is
                    created for every request.
        """
        self.settings = settings
        self._client = client

    def send(self, request: TranslationRequest, api_key: Optional[str]) -> TranslationResult:
        """
        Post the request and decode the translation object.

        Args:
            request: Request built for a single source line.
            api_key: Credential for the Authorization header.

        Returns:
            TranslationResult with translations, or with an error message on
            a missing credential, non-2xx status, transport or parse failure.
        """
        if not api_key or not api_key.strip():
            logger.warning("Refusing to send request: no API key configured")
            return TranslationResult(model=request.model, error=MISSING_API_KEY_ERROR)

        headers = {
            "Content-Type": "application/json",
            "Authorization": api_key,
        }

        try:
            response = self._post(request, headers)
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", self.settings.endpoint, e)
            return TranslationResult(
                model=request.model,
                error=f"Request failed: {type(e).__name__}: {e}",
            )

        if not response.is_success:
            logger.error("HTTP error from %s: status %s", self.settings.endpoint, response.status_code)
            return TranslationResult(
                model=request.model,
                error=f"HTTP error! status: {response.status_code}",
            )

        try:
            translations = parse_completion(response.json())
        except ValueError as e:
            # json.JSONDecodeError and ResponseParseError are both ValueErrors
            logger.error("Could not parse completion body: %s", e)
            message = str(e) if isinstance(e, ResponseParseError) else f"Invalid JSON body: {e}"
            return TranslationResult(model=request.model, error=message)

        logger.debug("Received translations for %d languages", len(translations))
        return TranslationResult(translations=translations, model=request.model)

    def _post(self, request: TranslationRequest, headers: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(
                self.settings.endpoint,
                json=request.to_payload(),
                headers=headers,
                timeout=self.settings.timeout,
            )

        with httpx.Client(timeout=self.settings.timeout) as client:
            return client.post(
                self.settings.endpoint,
                json=request.to_payload(),
                headers=headers,
            )

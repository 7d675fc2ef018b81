"""Unit tests for the request builder."""

import pytest

from line_translator.core import AppConfig, LanguageCatalog, ModelSettings
from line_translator.services import build_request


@pytest.fixture
def config():
    return AppConfig(
        catalog=LanguageCatalog({"en": "English", "cs": "český"}, "cs"),
        model=ModelSettings(model="gpt-test", role="user", temperature=0.2),
    )


class TestBuildRequest:
    """Tests for build_request."""

    def test_prompt_embeds_line_and_codes(self, config):
        request = build_request("Hello", config)
        assert request.prompt == 'Translate "Hello" TO ["en", "cs"]. Return Object with results.'

    def test_request_uses_model_settings(self, config):
        request = build_request("Hello", config)
        assert request.model == "gpt-test"
        assert request.role == "user"
        assert request.temperature == 0.2

    def test_payload_shape(self, config):
        payload = build_request("Hello", config).to_payload()
        assert payload == {
            "model": "gpt-test",
            "messages": [{
                "role": "user",
                "content": 'Translate "Hello" TO ["en", "cs"]. Return Object with results.',
            }],
            "temperature": 0.2,
        }

    def test_codes_follow_catalog_order(self):
        config = AppConfig(catalog=LanguageCatalog({"uk": "українська", "de": "Deutsch", "en": "English"}, "en"))
        request = build_request("Hi", config)
        assert '["uk", "de", "en"]' in request.prompt

    def test_empty_line_rejected(self, config):
        with pytest.raises(ValueError):
            build_request("", config)

    def test_whitespace_line_rejected(self, config):
        with pytest.raises(ValueError):
            build_request("   \t", config)

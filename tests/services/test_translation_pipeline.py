"""Unit tests for TranslationPipeline."""

from unittest.mock import MagicMock

import pytest

from line_translator.core import (
    AppConfig,
    EmptyInputError,
    LanguageCatalog,
    TranslationResult,
    TranslationSession,
)
from line_translator.services import (
    NOT_AVAILABLE,
    TRANSLATION_FAILED,
    DiagnosticLog,
    TranslationPipeline,
)


class FakeTranslationService:
    """Returns queued results and records every request it receives."""

    def __init__(self, results):
        self.results = list(results)
        self.requests = []

    def send(self, request, api_key):
        self.requests.append((request, api_key))
        return self.results.pop(0)


def ok(**translations):
    return TranslationResult(translations=translations, model="gpt-test")


def failed(message="HTTP error! status: 500"):
    return TranslationResult(model="gpt-test", error=message)


@pytest.fixture
def session():
    config = AppConfig(catalog=LanguageCatalog({"en": "English", "cs": "český"}, "cs"))
    return TranslationSession(config=config, api_key="Bearer sk-test")


def make_pipeline(session, results):
    service = FakeTranslationService(results)
    return TranslationPipeline(session=session, translation_service=service), service


class TestTranslateAll:
    """Tests for the sequential translation loop."""

    def test_end_to_end_mixed_success_and_failure(self, session):
        pipeline, _ = make_pipeline(session, [ok(en="Hello", cs="Ahoj"), failed()])

        output = pipeline.translate_all("Hello\nGoodbye")

        assert pipeline.cache.entries_for("cs") == {
            "Hello": ["Ahoj"],
            "Goodbye": [TRANSLATION_FAILED],
        }
        assert pipeline.cache.entries_for("en") == {
            "Hello": ["Hello"],
            "Goodbye": [TRANSLATION_FAILED],
        }
        assert output == (
            '"Hello": [\n    "Ahoj"\n],\n'
            '"Goodbye": [\n    "Error: Could not translate"\n]'
        )

    def test_every_language_and_line_is_cached(self, session):
        pipeline, _ = make_pipeline(session, [ok(en="a"), failed(), ok(cs="c")])

        pipeline.translate_all("one\ntwo\nthree")

        for code in session.config.catalog.codes:
            for line in ["one", "two", "three"]:
                assert pipeline.cache.get(code, line) is not None

    def test_one_request_per_line_in_order(self, session):
        pipeline, service = make_pipeline(session, [ok(en="1", cs="1"), ok(en="2", cs="2")])

        pipeline.translate_all("first\nsecond")

        prompts = [request.prompt for request, _ in service.requests]
        assert prompts == [
            'Translate "first" TO ["en", "cs"]. Return Object with results.',
            'Translate "second" TO ["en", "cs"]. Return Object with results.',
        ]
        assert all(api_key == "Bearer sk-test" for _, api_key in service.requests)

    def test_blank_lines_are_skipped(self, session):
        pipeline, service = make_pipeline(session, [ok(en="Hi", cs="Ahoj")])

        pipeline.translate_all("\n   \nHi\n\t\n")

        assert len(service.requests) == 1
        assert list(pipeline.cache.entries_for("en").keys()) == ["Hi"]

    def test_missing_language_gets_not_available(self, session):
        pipeline, _ = make_pipeline(session, [ok(en="Hello")])

        pipeline.translate_all("Hello")

        assert pipeline.cache.get("cs", "Hello") == [NOT_AVAILABLE]
        assert pipeline.cache.get("en", "Hello") == ["Hello"]
        assert any("cs" in message for message in pipeline.diagnostics.messages)

    def test_failure_does_not_abort_loop(self, session):
        pipeline, service = make_pipeline(session, [failed(), failed(), ok(en="x", cs="y")])

        pipeline.translate_all("a\nb\nc")

        assert len(service.requests) == 3
        assert pipeline.cache.get("cs", "c") == ["y"]

    def test_empty_input_raises_without_requests(self, session):
        pipeline, service = make_pipeline(session, [])

        with pytest.raises(EmptyInputError):
            pipeline.translate_all("  \n\n\t")

        assert service.requests == []

    def test_cache_is_reset_between_runs(self, session):
        pipeline, _ = make_pipeline(session, [ok(en="old", cs="old"), ok(en="new", cs="nové")])

        pipeline.translate_all("first run")
        pipeline.translate_all("second run")

        assert pipeline.cache.entries_for("cs") == {"second run": ["nové"]}

    def test_failures_are_reported_to_diagnostics(self, session):
        pipeline, _ = make_pipeline(session, [failed("HTTP error! status: 401")])

        pipeline.translate_all("Hello")

        assert pipeline.diagnostics.messages == ['Could not translate "Hello": HTTP error! status: 401']

    def test_diagnostics_cleared_at_start_of_run(self, session):
        pipeline, _ = make_pipeline(session, [failed(), ok(en="a", cs="b")])

        pipeline.translate_all("x")
        pipeline.translate_all("y")

        assert pipeline.diagnostics.messages == []

    def test_progress_callback(self, session):
        pipeline, _ = make_pipeline(session, [ok(en="1", cs="1"), ok(en="2", cs="2")])
        progress = MagicMock()

        pipeline.translate_all("a\nb", on_progress=progress)

        assert [call.args for call in progress.call_args_list] == [(0, 2, "a"), (1, 2, "b")]

    def test_model_is_logged_for_translated_lines(self, session, caplog):
        pipeline, _ = make_pipeline(session, [ok(en="Hello", cs="Ahoj")])

        with caplog.at_level("DEBUG", logger="line_translator.services.translation_pipeline"):
            pipeline.translate_all("Hello")

        assert 'Translated "Hello" with gpt-test' in caplog.text


class TestMissingCredential:
    """Tests for runs without an API key."""

    @pytest.mark.parametrize("api_key", [None, "", "   "])
    def test_no_requests_and_all_lines_failed(self, session, api_key):
        session.api_key = api_key
        pipeline, service = make_pipeline(session, [])

        pipeline.translate_all("Hello\nGoodbye")

        assert service.requests == []
        for code in ["en", "cs"]:
            assert pipeline.cache.entries_for(code) == {
                "Hello": [TRANSLATION_FAILED],
                "Goodbye": [TRANSLATION_FAILED],
            }

    def test_reported_once_per_attempt(self, session):
        session.api_key = None
        pipeline, _ = make_pipeline(session, [])

        pipeline.translate_all("a\nb\nc")

        assert len(pipeline.diagnostics) == 1
        assert "API key" in pipeline.diagnostics.messages[0]


class TestRenderAndLanguageSwitch:
    """Tests for re-rendering cached output."""

    def test_switch_language_does_not_send_requests(self, session):
        pipeline, service = make_pipeline(session, [ok(en="Hello", cs="Ahoj")])
        pipeline.translate_all("Hello")
        sent = len(service.requests)

        output = pipeline.select_language("en")

        assert len(service.requests) == sent
        assert output == '"Hello": [\n    "Hello"\n]'
        assert session.current_lang == "en"

    def test_render_before_any_run_is_empty(self, session):
        pipeline, _ = make_pipeline(session, [])

        assert pipeline.render("cs") == ""
        assert pipeline.select_language("en") == ""

    def test_unknown_language_rejected(self, session):
        pipeline, _ = make_pipeline(session, [])

        with pytest.raises(ValueError):
            pipeline.select_language("fr")
        assert session.current_lang == "cs"

    def test_current_language_outside_catalog_reports_missing_output(self, session):
        session.current_lang = "fr"
        pipeline, _ = make_pipeline(session, [ok(en="Hello", cs="Ahoj")])

        output = pipeline.translate_all("Hello")

        assert output == ""
        assert "No translation available for 'fr'" in pipeline.diagnostics.messages

    def test_shared_diagnostic_log(self, session):
        listener = MagicMock()
        log = DiagnosticLog(listener=listener)
        pipeline = TranslationPipeline(
            session=session,
            translation_service=FakeTranslationService([failed()]),
            diagnostics=log,
        )

        pipeline.translate_all("Hello")

        listener.assert_called_once_with('Could not translate "Hello": HTTP error! status: 500')

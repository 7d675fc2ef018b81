"""Translation Coordinator - Wires the main window to the translation pipeline."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from line_translator.core import EmptyInputError
from line_translator.services import SettingsManager, TranslationPipeline, split_lines
from line_translator.services.api_workers import TranslationWorker


logger = logging.getLogger(__name__)


class _TranslationRun(QObject):
    """Helper class that forwards worker signals to the coordinator."""

    def __init__(self, parent: "TranslationCoordinator"):
        super().__init__()
        self.parent_ref = parent

    @Slot(str)
    def on_translation_result(self, output: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_result(output)
            except RuntimeError:
                # Coordinator might be destroyed, ignore
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_error(error)
            except RuntimeError:
                pass

    @Slot(int, int, str)
    def on_progress(self, index: int, total: int, line: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator.progress_changed.emit(index, total, line)
            except RuntimeError:
                pass

    @Slot()
    def on_finished(self):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_run_finished()
            except RuntimeError:
                pass


class TranslationCoordinator(QObject):
    """
    Orchestrates the translate workflow and language switching.

    Responsibilities:
    - Validate input and start one background run at a time.
    - Re-render cached output when the active language changes (no requests).
    - Store a new API key and hand it to the live session.
    - Forward diagnostics and progress to the UI.

    The translation cache is written by the worker thread, so it is only read
    here when no run is active.
    """

    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)
    translation_finished = Signal()
    output_changed = Signal(str)
    progress_changed = Signal(int, int, str)
    diagnostic_reported = Signal(str)

    def __init__(
        self,
        main_window,
        pipeline: TranslationPipeline,
        settings_manager: SettingsManager,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.main_window = main_window
        self.pipeline = pipeline
        self.settings_manager = settings_manager
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        # Worker threads report through the signal, receivers run in the main thread
        self.pipeline.diagnostics.set_listener(self.diagnostic_reported.emit)

        self.current_output: str = ""
        self._busy = False
        # Keep a reference so the helper isn't garbage collected while the worker runs
        self._run_helper: Optional[_TranslationRun] = None

    @property
    def is_busy(self) -> bool:
        """True while a translation run is in progress."""
        return self._busy

    @property
    def current_lang(self) -> Optional[str]:
        return self.pipeline.session.current_lang

    def request_translation(self, input_text: str) -> None:
        """
        Start translating the given text in the background.

        Args:
            input_text: Raw multi-line text from the input editor.
        """
        if self.is_busy:
            self.main_window.show_error(
                "Translation in progress",
                "Please wait for the current translation to finish.",
            )
            return

        if not split_lines(input_text):
            self.main_window.show_error("Nothing to translate", str(EmptyInputError()))
            return

        self._busy = True
        self.current_output = ""
        self.output_changed.emit("")
        self.translation_started.emit()

        worker = TranslationWorker(pipeline=self.pipeline, input_text=input_text)

        run_helper = _TranslationRun(self)
        self._run_helper = run_helper

        worker.signals.translation_result.connect(run_helper.on_translation_result)
        worker.signals.error.connect(run_helper.on_translation_error)
        worker.signals.progress.connect(run_helper.on_progress)
        worker.signals.finished.connect(run_helper.on_finished)

        logger.debug("Starting translation run")
        self.thread_pool.start(worker)

    def _handle_translation_result(self, output: str) -> None:
        """Handle the formatted output of a finished run (runs in main thread)."""
        self.current_output = output
        self.output_changed.emit(output)
        self.translation_completed.emit(output)

    def _handle_translation_error(self, error: str) -> None:
        logger.error("Translation run failed: %s", error)
        self.translation_failed.emit(error)
        self.main_window.show_error("Translation failed", error)

    def _handle_run_finished(self) -> None:
        self._busy = False
        self._run_helper = None
        self.translation_finished.emit()

    @Slot(str)
    def handle_language_changed(self, lang: str) -> None:
        """
        Switch the active language and show its cached output.

        Only re-formats cached data; no request is sent. During a run only the
        active language is updated; the run's result is rendered in it.
        """
        if lang not in self.pipeline.session.config.catalog:
            logger.warning("Unknown language code: %s", lang)
            return

        if self.is_busy:
            self.pipeline.session.current_lang = lang
            return

        output = self.pipeline.select_language(lang)
        self.current_output = output
        self.output_changed.emit(output)

    @Slot(str)
    def handle_api_key_changed(self, api_key: str) -> None:
        """Persist a new API key and use it for the following requests."""
        api_key = api_key.strip()
        try:
            self.settings_manager.set_api_key(api_key)
        except OSError as e:
            logger.error("Could not store API key in %s: %s", self.settings_manager.env_path, e)
            self.pipeline.session.api_key = api_key or None
            self.main_window.show_error(
                "API key not saved",
                f"Could not write {self.settings_manager.env_path}: {e}\n"
                "The key is used until the application is closed.",
            )
            return

        self.pipeline.session.api_key = self.settings_manager.get_openai_api_key()
        if self.pipeline.session.has_credential:
            self.main_window.show_info("API key saved", "The API key was stored in .env.")
        else:
            self.main_window.show_info("API key removed", "No API key is configured.")

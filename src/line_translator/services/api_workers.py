"""Async workers for non-blocking translation runs using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from line_translator.core import LineTranslatorError
from line_translator.services.translation_pipeline import TranslationPipeline


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    progress = Signal(int, int, str)  # index, total, line
    translation_result = Signal(str)  # formatted output


class TranslationWorker(QRunnable):
    """
    Worker that runs a whole pipeline pass in a background thread.

    Lines are still translated one after another inside the run; the worker
    only keeps the Qt event loop responsive.
    """

    def __init__(self, pipeline: TranslationPipeline, input_text: str):
        super().__init__()
        self.pipeline = pipeline
        self.input_text = input_text
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation run in background thread."""
        try:
            output = self.pipeline.translate_all(
                self.input_text,
                on_progress=self.signals.progress.emit,
            )
            self.signals.translation_result.emit(output)
        except LineTranslatorError as e:
            self.signals.error.emit(str(e))
        except Exception as e:
            # Catch any unexpected exceptions not handled by the pipeline
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()

"""Main Window - Input editor, language tabs, output panel and diagnostic log."""

from PySide6.QtCore import Qt, QTimer, Signal, Slot
from PySide6.QtGui import QAction, QGuiApplication
from PySide6.QtWidgets import (
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QSplitter,
    QTabBar,
    QVBoxLayout,
    QWidget,
)

from line_translator.core import LanguageCatalog


class MainWindow(QMainWindow):
    """Application shell: text editors, language tabs and the API key menu."""

    # Signal emitted with the raw input text when the user asks for a translation
    translate_requested = Signal(str)
    # Signal emitted with a language code when a tab is selected
    language_selected = Signal(str)
    # Signal emitted with a new API key from the settings dialog
    api_key_entered = Signal(str)

    COPY_FEEDBACK_MS = 1500

    def __init__(self, catalog: LanguageCatalog, current_lang: str):
        super().__init__()
        self.setWindowTitle("Line Translator")
        self.setGeometry(100, 100, 1100, 750)

        self.catalog = catalog
        self._setup_ui(current_lang)
        self._create_menu_bar()

    def _setup_ui(self, current_lang: str):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(8, 8, 8, 8)
        main_layout.setSpacing(8)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        # Input side
        input_panel = QWidget()
        input_layout = QVBoxLayout(input_panel)
        input_layout.setContentsMargins(0, 0, 0, 0)

        input_label = QLabel("Text")
        input_label.setStyleSheet("font-weight: bold;")
        input_layout.addWidget(input_label)

        self.input_text = QPlainTextEdit()
        self.input_text.setPlaceholderText("Paste text here, one phrase per line")
        input_layout.addWidget(self.input_text, 1)

        self.translate_button = QPushButton("Translate")
        self.translate_button.clicked.connect(self._on_translate_clicked)
        input_layout.addWidget(self.translate_button)

        splitter.addWidget(input_panel)

        # Output side
        output_panel = QWidget()
        output_layout = QVBoxLayout(output_panel)
        output_layout.setContentsMargins(0, 0, 0, 0)

        self.language_tabs = QTabBar()
        for code in self.catalog.codes:
            index = self.language_tabs.addTab(self.catalog.display_name(code))
            self.language_tabs.setTabData(index, code)
            self.language_tabs.setTabToolTip(index, code)
        self._select_tab(current_lang)
        self.language_tabs.currentChanged.connect(self._on_tab_changed)
        output_layout.addWidget(self.language_tabs)

        self.output_text = QPlainTextEdit()
        self.output_text.setReadOnly(True)
        self.output_text.setPlaceholderText("(No translation yet)")
        output_layout.addWidget(self.output_text, 1)

        output_actions = QHBoxLayout()
        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        output_actions.addWidget(self.status_label, 1)
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self._on_copy_clicked)
        output_actions.addWidget(self.copy_button)
        output_layout.addLayout(output_actions)

        splitter.addWidget(output_panel)
        main_layout.addWidget(splitter, 3)

        log_label = QLabel("Log")
        log_label.setStyleSheet("font-weight: bold;")
        main_layout.addWidget(log_label)

        self.log_text = QPlainTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setMaximumHeight(140)
        main_layout.addWidget(self.log_text, 1)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        api_key_action = QAction("Set &API Key...", self)
        api_key_action.triggered.connect(self._on_set_api_key)
        file_menu.addAction(api_key_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def _select_tab(self, code: str):
        for index in range(self.language_tabs.count()):
            if self.language_tabs.tabData(index) == code:
                self.language_tabs.setCurrentIndex(index)
                return

    def _on_translate_clicked(self):
        self.translate_requested.emit(self.input_text.toPlainText())

    def _on_tab_changed(self, index: int):
        code = self.language_tabs.tabData(index)
        if code:
            self.language_selected.emit(code)

    def _on_copy_clicked(self):
        QGuiApplication.clipboard().setText(self.output_text.toPlainText())
        self.copy_button.setText("Copied!")
        QTimer.singleShot(self.COPY_FEEDBACK_MS, lambda: self.copy_button.setText("Copy"))

    def _on_set_api_key(self):
        api_key, accepted = QInputDialog.getText(
            self,
            "OpenAI API Key",
            "Authorization header value (e.g. Bearer sk-...):",
            QLineEdit.EchoMode.Password,
        )
        if accepted:
            self.api_key_entered.emit(api_key)

    def set_controller(self, controller):
        """Inject the controller and wire UI signals to its slots.

        The controller is expected to expose:
        - request_translation(str)
        - handle_language_changed(str)
        - handle_api_key_changed(str)
        and the signals translation_started, translation_finished,
        output_changed, progress_changed, diagnostic_reported.
        """
        self._controller = controller
        self.translate_requested.connect(controller.request_translation)
        self.language_selected.connect(controller.handle_language_changed)
        self.api_key_entered.connect(controller.handle_api_key_changed)

        controller.translation_started.connect(self.on_translation_started)
        controller.translation_finished.connect(self.on_translation_finished)
        controller.output_changed.connect(self.set_output)
        controller.progress_changed.connect(self.show_progress)
        controller.diagnostic_reported.connect(self.append_log)

    @Slot()
    def on_translation_started(self):
        """Lock the translate action while a run is active."""
        self.log_text.clear()
        self.translate_button.setEnabled(False)
        self.translate_button.setText("Translating...")

    @Slot()
    def on_translation_finished(self):
        self.translate_button.setEnabled(True)
        self.translate_button.setText("Translate")
        self.status_label.setText("")

    @Slot(str)
    def set_output(self, text: str):
        self.output_text.setPlainText(text)

    @Slot(int, int, str)
    def show_progress(self, index: int, total: int, line: str):
        self.status_label.setText(f"Translating {index + 1}/{total}: {line}")

    @Slot(str)
    def append_log(self, message: str):
        self.log_text.appendPlainText(message)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)

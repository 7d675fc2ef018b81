"""Main entry point for the line translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from line_translator.coordinators import TranslationCoordinator
from line_translator.core import ConfigError, TranslationSession, load_config
from line_translator.services import ChatCompletionClient, SettingsManager, TranslationPipeline
from line_translator.ui import MainWindow


logger = logging.getLogger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Settings and logging
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(settings_manager.get_config_path())
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Line Translator")
    app.setOrganizationName("LineTranslator")

    # 3. Session and services (credential is read once, here)
    session = TranslationSession(config=config, api_key=settings_manager.get_openai_api_key())
    if not session.has_credential:
        logger.warning("No API key configured; translations will fail until one is set")

    pipeline = TranslationPipeline(
        session=session,
        translation_service=ChatCompletionClient(config.model),
    )

    # 4. Construct UI
    main_window = MainWindow(catalog=config.catalog, current_lang=session.current_lang)

    # 5. Coordinator (Dependency Injection) and signal wiring
    coordinator = TranslationCoordinator(
        main_window=main_window,
        pipeline=pipeline,
        settings_manager=settings_manager,
    )
    main_window.set_controller(coordinator)

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

"""Settings Manager - Handles the API key and config file location."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, set_key


API_KEY_VAR = "OPENAI_API_KEY"
CONFIG_PATH_VAR = "LINE_TRANSLATOR_CONFIG"
LOG_LEVEL_VAR = "LINE_TRANSLATOR_LOG_LEVEL"


class SettingsManager:
    """
    Manages the locally stored credential and startup settings.

    Reads OPENAI_API_KEY from the .env file in the project root; the settings
    dialog writes new keys back to the same file.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._project_root = project_root
        load_dotenv(dotenv_path=self.env_path)

    @property
    def env_path(self) -> Path:
        return self._project_root / ".env"

    def get_openai_api_key(self) -> Optional[str]:
        """Get the OpenAI API key from environment."""
        key = os.getenv(API_KEY_VAR)
        return key.strip() if key and key.strip() else None

    def set_api_key(self, api_key: str) -> None:
        """
        Store a new API key in .env and the current environment.

        An empty key removes the stored credential.
        """
        value = api_key.strip()
        self.env_path.touch(exist_ok=True)
        set_key(str(self.env_path), API_KEY_VAR, value)
        if value:
            os.environ[API_KEY_VAR] = value
        else:
            os.environ.pop(API_KEY_VAR, None)

    def get_config_path(self) -> Optional[Path]:
        """Path of a JSON config file overriding the built-in defaults, if set."""
        value = os.getenv(CONFIG_PATH_VAR)
        if not value or not value.strip():
            return None
        path = Path(value.strip())
        return path if path.is_absolute() else self._project_root / path

    def get_log_level(self) -> str:
        return (os.getenv(LOG_LEVEL_VAR) or "INFO").strip().upper()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self.env_path, override=True)

"""App configuration entities - language catalog and remote model settings."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from .errors import ConfigError


DEFAULT_LANGUAGES = {
    "en": "English",
    "cs": "český",
    "de": "Deutsch",
    "pl": "Polski",
    "uk": "українська",
    "sk": "slovenský",
}
DEFAULT_LANGUAGE = "pl"

DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_ROLE = "user"
DEFAULT_TEMPERATURE = 0.1


@dataclass(frozen=True)
class LanguageCatalog:
    """Ordered, read-only mapping of language code to display name."""

    languages: Mapping[str, str]
    default_code: str

    def __post_init__(self):
        if not self.languages:
            raise ConfigError("Language catalog must contain at least one language")
        if self.default_code not in self.languages:
            raise ConfigError(
                f"Default language '{self.default_code}' is not in the catalog"
            )
        # Freeze a private copy so callers can't mutate the catalog afterwards
        object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))

    @property
    def codes(self) -> list[str]:
        """Language codes in catalog order."""
        return list(self.languages.keys())

    def display_name(self, code: str) -> str:
        return self.languages[code]

    def __contains__(self, code: object) -> bool:
        return code in self.languages

    def __len__(self) -> int:
        return len(self.languages)


@dataclass(frozen=True)
class ModelSettings:
    """Parameters of the chat completion endpoint."""

    endpoint: str = DEFAULT_ENDPOINT
    model: str = DEFAULT_MODEL
    role: str = DEFAULT_ROLE
    temperature: float = DEFAULT_TEMPERATURE
    timeout: Optional[float] = None  # None = no client-side timeout


@dataclass(frozen=True)
class AppConfig:
    """Static configuration, loaded once at startup."""

    catalog: LanguageCatalog = field(
        default_factory=lambda: LanguageCatalog(DEFAULT_LANGUAGES, DEFAULT_LANGUAGE)
    )
    model: ModelSettings = field(default_factory=ModelSettings)

    @classmethod
    def from_dict(cls, data: Mapping) -> "AppConfig":
        """
        Build a config from the JSON layout used by config files.

        Expected shape::

            {
                "defaultLang": "pl",
                "langs": {"en": "English", ...},
                "openai": {"role": "user", "api": "...", "model": "...", "temperature": 0.1}
            }

        Missing keys fall back to the built-in defaults.

        Raises:
            ConfigError: if a value has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise ConfigError("Config root must be an object")

        langs = data.get("langs", DEFAULT_LANGUAGES)
        if not isinstance(langs, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in langs.items()
        ):
            raise ConfigError("'langs' must map language codes to display names")

        default_code = data.get("defaultLang", DEFAULT_LANGUAGE)
        if default_code not in langs and langs:
            # Fall back to the first configured language
            default_code = next(iter(langs))

        openai = data.get("openai", {})
        if not isinstance(openai, Mapping):
            raise ConfigError("'openai' must be an object")

        try:
            temperature = float(openai.get("temperature", DEFAULT_TEMPERATURE))
            timeout = openai.get("timeout")
            timeout = float(timeout) if timeout is not None else None
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e

        model = ModelSettings(
            endpoint=str(openai.get("api", DEFAULT_ENDPOINT)),
            model=str(openai.get("model", DEFAULT_MODEL)),
            role=str(openai.get("role", DEFAULT_ROLE)),
            temperature=temperature,
            timeout=timeout,
        )
        return cls(catalog=LanguageCatalog(dict(langs), default_code), model=model)


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Load the app configuration.

    Args:
        path: JSON config file. If None, the built-in defaults are used.

    Returns:
        AppConfig instance.

    Raises:
        ConfigError: if the file is missing, not valid JSON, or malformed.
    """
    if path is None:
        return AppConfig()

    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {config_path} is not valid JSON: {e}") from e

    return AppConfig.from_dict(data)

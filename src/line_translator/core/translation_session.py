"""Translation session - the state owned by one translator instance."""

from dataclasses import dataclass, field
from typing import Optional

from .app_config import AppConfig


@dataclass
class TranslationSession:
    """
    Live session state: config, credential and the active language.

    The translation cache itself lives in the pipeline that owns this session.
    """

    config: AppConfig = field(default_factory=AppConfig)
    api_key: Optional[str] = None
    current_lang: Optional[str] = None

    def __post_init__(self):
        if self.current_lang is None:
            self.current_lang = self.config.catalog.default_code

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

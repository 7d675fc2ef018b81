"""Diagnostic log - human-readable failure messages of a translate run."""

import logging
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class DiagnosticLog:
    """Accumulates messages shown to the user; mirrors them to the module logger."""

    def __init__(self, listener: Optional[Callable[[str], None]] = None):
        self._messages: list[str] = []
        self._listener = listener

    def report(self, message: str) -> None:
        self._messages.append(message)
        logger.warning(message)
        if self._listener is not None:
            self._listener(message)

    def set_listener(self, listener: Optional[Callable[[str], None]]) -> None:
        """Call listener with every new message (None to detach)."""
        self._listener = listener

    def clear(self) -> None:
        self._messages = []

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __str__(self) -> str:
        return "\n".join(self._messages)

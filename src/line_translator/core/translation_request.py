"""Translation request and result entities."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class TranslationRequest:
    """Chat completion request for a single source line."""

    model: str
    role: str
    prompt: str
    temperature: float

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body sent to the chat completion endpoint."""
        return {
            "model": self.model,
            "messages": [{"role": self.role, "content": self.prompt}],
            "temperature": self.temperature,
        }


@dataclass
class TranslationResult:
    """Outcome of sending one request: per-language translations or an error."""

    translations: dict[str, Any] = field(default_factory=dict)
    model: str = ""
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """True if no usable translation object was obtained."""
        return self.error is not None

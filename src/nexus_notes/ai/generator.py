"""Text-generation protocol shared by the AI providers."""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class GenerationResult:
    success: bool
    content: str = ""
    error: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GenerationResult":
        return cls(
            success=bool(data.get("success")),
            content=data.get("content") or "",
            error=data.get("error"),
        )


@runtime_checkable
class TextGenerator(Protocol):
    """Anything that can turn a prompt plus a system instruction into text."""

    @property
    def name(self) -> str: ...

    def is_configured(self) -> bool:
        """True when the generator has what it needs to attempt a request."""
        ...

    def generate(self, prompt: str, instruction: str) -> GenerationResult:
        """Issue one request. Failures come back as ``success=False``."""
        ...

from __future__ import annotations

from abc import ABC, abstractmethod


class LLMError(Exception):
    """Raised when the language-model provider call fails or returns no content."""


class LLMClient(ABC):
    """Abstract chat-completion client returning JSON-shaped text."""

    @abstractmethod
    def complete_json(self, system: str, user: str, *, temperature: float) -> str:
        """Return the raw text of the first completion for a system + user prompt pair."""

from __future__ import annotations

from typing import Optional

import requests

from .base import LLMClient, LLMError
from ...utils.logging import get_logger

logger = get_logger("hw.ai.chat")


class ChatCompletionsClient(LLMClient):
    """HTTP client for OpenAI-compatible ``/chat/completions`` endpoints.

    Requests are sent in JSON mode (``response_format={"type": "json_object"}``)
    and the first choice's message content is returned unparsed.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        model: str,
        timeout: int = 60,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()

    def complete_json(self, system: str, user: str, *, temperature: float) -> str:
        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": temperature,
            "response_format": {"type": "json_object"},
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            resp = self.session.post(url, json=payload, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            raise LLMError(f"Chat completion request failed: {exc}") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise LLMError(f"Unexpected chat completion payload: {exc!r}") from exc
        logger.debug("Chat completion returned %d chars", len(content or ""))
        return content or ""

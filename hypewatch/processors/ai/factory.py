from __future__ import annotations

from .base import LLMClient
from .chat_completions import ChatCompletionsClient
from ...utils.config_loader import Settings


def create_llm_client(settings: Settings) -> LLMClient:
    """Create the chat-completion client described by ``settings``.

    Any OpenAI-compatible endpoint works; the base URL selects the provider.
    """
    return ChatCompletionsClient(
        api_key=settings.llm_api_key,
        base_url=settings.llm_base_url,
        model=settings.llm_model,
    )

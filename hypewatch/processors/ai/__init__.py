"""Language-model client for OpenAI-compatible chat-completion endpoints."""

from .base import LLMClient, LLMError
from .chat_completions import ChatCompletionsClient
from .factory import create_llm_client
from .parsing import parse_json_object

__all__ = ["LLMClient", "LLMError", "ChatCompletionsClient", "create_llm_client", "parse_json_object"]

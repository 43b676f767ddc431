from __future__ import annotations

from .ai import LLMClient, parse_json_object
from ..models import Article
from ..utils.logging import get_logger

logger = get_logger("hw.processors.gatekeeper")

SYSTEM_PROMPT = "You are a strict news editor. Output JSON."

_USER_TEMPLATE = """
Analyze if this article is explicitly about a specific business use case, corporate strategy, market trend, or financial implication of AI.
Discard generic "AI is the future" fluff, pure research papers, or simple product announcements without business context.

Title: "{title}"
Description: "{description}"

Return JSON: {{ "is_business_case": boolean }}
"""

TEMPERATURE = 0.1


def build_relevance_prompt(article: Article) -> str:
    return _USER_TEMPLATE.format(title=article.title, description=article.description)


class Gatekeeper:
    """Relevance filter run on every candidate article before analysis.

    Errors never escape: a failed call or an unparseable answer excludes the
    article.
    """

    def __init__(self, llm: LLMClient) -> None:
        self.llm = llm

    def is_relevant(self, article: Article) -> bool:
        try:
            raw = self.llm.complete_json(SYSTEM_PROMPT, build_relevance_prompt(article), temperature=TEMPERATURE)
            result = parse_json_object(raw)
        except Exception as exc:  # noqa: BLE001 - exclusion is the safe default
            logger.warning("Gatekeeper error for '%s': %s", article.title, exc)
            return False
        return result.get("is_business_case") is True

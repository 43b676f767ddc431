"""Skeptical per-article analysis with a prompt-aware cache.

The cache key combines the article identity with a fingerprint of the exact
prompt text, so any change to the prompt wording makes earlier analyses
unreachable without clearing the cache by hand.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from typing import Callable, Tuple

from .ai import LLMClient, parse_json_object
from ..models import Analysis, AnalysisCacheEntry, Article
from ..storage import ANALYSIS, CacheStore
from ..utils.logging import get_logger

logger = get_logger("hw.processors.investigator")

SYSTEM_PROMPT = (
    "You are a skeptical business investigator. Your job is to uncover corporate bias in news articles. "
    "You must respond in valid JSON."
)

_USER_TEMPLATE = """
INVESTIGATION TASK:
Article Title: "{title}"
Source: "{source}"
Description: "{description}"
URL: {url}

Analyze the article and return a JSON object with the following fields:
- "summary": A concise 2-sentence summary.
- "seller_description": What this organization actually sells based on source/description.
- "hidden_motive": Analysis of whether this promotes a business case for the source.
- "motive_score": An integer from 1-10 (10 = pure sales pitch).
- "critique": A 3-sentence skeptical critique.
"""

TEMPERATURE = 0.3

_EXPECTED_FIELDS = ("summary", "seller_description", "hidden_motive", "motive_score", "critique")


class AnalysisError(Exception):
    """Raised when the model's analysis cannot be used."""


def build_investigation_prompt(article: Article) -> str:
    return _USER_TEMPLATE.format(
        title=article.title,
        source=article.source,
        description=article.description,
        url=article.url,
    )


def prompt_fingerprint(system: str, user: str) -> str:
    return hashlib.md5((system + user).encode("utf-8")).hexdigest()


def analysis_cache_key(article: Article, fingerprint: str) -> str:
    identity = article.url or article.title
    return hashlib.md5((identity + fingerprint).encode("utf-8")).hexdigest()


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class Investigator:
    def __init__(
        self,
        llm: LLMClient,
        cache: CacheStore,
        *,
        clock: Callable[[], str] = _utc_now_iso,
    ) -> None:
        self.llm = llm
        self.cache = cache
        self._clock = clock

    def cache_key(self, article: Article) -> str:
        fingerprint = prompt_fingerprint(SYSTEM_PROMPT, build_investigation_prompt(article))
        return analysis_cache_key(article, fingerprint)

    def analyze(self, article: Article) -> Tuple[Analysis, bool]:
        """Return ``(analysis, was_cached)`` for one article.

        Cache hits never reach the model. On a miss the model's answer is
        written to the cache before it is returned. Transport failures
        propagate as ``LLMError``; unusable answers raise ``AnalysisError``.
        """
        key = self.cache_key(article)
        cached = self.cache.get(ANALYSIS, key)
        if isinstance(cached, dict) and isinstance(cached.get("analysis"), dict):
            entry = AnalysisCacheEntry.from_dict(cached)
            logger.info("Using cached analysis for: %s", article.title)
            return Analysis.from_dict(entry.analysis), True
        if cached is not None:
            logger.warning("Ignoring malformed cached analysis for: %s", article.title)

        logger.info("Requesting LLM analysis for: %s...", article.title)
        raw = self.llm.complete_json(SYSTEM_PROMPT, build_investigation_prompt(article), temperature=TEMPERATURE)
        try:
            payload = parse_json_object(raw)
        except ValueError as exc:
            raise AnalysisError(f"Failed to parse LLM JSON response: {exc}") from exc
        if not any(name in payload for name in _EXPECTED_FIELDS):
            raise AnalysisError(f"LLM response has none of the fields {list(_EXPECTED_FIELDS)}")

        entry = AnalysisCacheEntry(title=article.title, url=article.url, analysis=payload, timestamp=self._clock())
        self.cache.put(ANALYSIS, key, entry.to_dict())
        return Analysis.from_dict(payload), False

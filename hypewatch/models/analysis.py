from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .article import Article

MIN_MOTIVE_SCORE = 1
MAX_MOTIVE_SCORE = 10

_TEXT_FIELDS = ("summary", "seller_description", "hidden_motive", "critique")


def coerce_motive_score(value: Any) -> Optional[int]:
    """Interpret a model-supplied motive score as an int in [1, 10].

    Integer-like strings and integral floats are accepted and out-of-range
    numbers are clamped. Anything else (missing, booleans, prose) is ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number or not number.is_integer():  # NaN or fractional
        return None
    return max(MIN_MOTIVE_SCORE, min(MAX_MOTIVE_SCORE, int(number)))


@dataclass(frozen=True, slots=True)
class Analysis:
    summary: str = ""
    seller_description: str = ""
    hidden_motive: str = ""
    motive_score: Optional[int] = None
    critique: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Analysis":
        texts = {}
        for name in _TEXT_FIELDS:
            raw = data.get(name)
            texts[name] = "" if raw is None else str(raw)
        return cls(motive_score=coerce_motive_score(data.get("motive_score")), **texts)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """One successfully analyzed article, as consumed by the report renderer."""

    title: str
    url: str
    source: str
    analysis: Analysis

    @classmethod
    def from_article(cls, article: Article, analysis: Analysis) -> "AnalysisResult":
        return cls(title=article.title, url=article.url, source=article.source, analysis=analysis)


@dataclass(frozen=True, slots=True)
class AnalysisCacheEntry:
    title: str
    url: str
    analysis: dict
    timestamp: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalysisCacheEntry":
        analysis = data.get("analysis")
        return cls(
            title=data.get("title") or "",
            url=data.get("url") or "",
            analysis=dict(analysis) if isinstance(analysis, Mapping) else {},
            timestamp=data.get("timestamp") or "",
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "url": self.url,
            "analysis": self.analysis,
            "timestamp": self.timestamp,
        }

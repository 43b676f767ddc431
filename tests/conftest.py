from __future__ import annotations

import json
from typing import Callable, Dict, List, Optional

import pytest

from hypewatch.models import Article
from hypewatch.processors import gatekeeper as gatekeeper_mod
from hypewatch.processors.ai import LLMClient
from hypewatch.storage import CacheStore


class FakeLLM(LLMClient):
    """Scripted LLM: ``handler(system, user)`` returns the completion text or raises."""

    def __init__(self, handler: Callable[[str, str], str]) -> None:
        self.handler = handler
        self.calls: List[Dict[str, object]] = []

    def complete_json(self, system: str, user: str, *, temperature: float) -> str:
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        return self.handler(system, user)


class FakeNews:
    """News client serving fixed pages; a page value that is an exception is raised."""

    def __init__(self, pages: Optional[Dict[int, object]] = None) -> None:
        self.pages = pages or {}
        self.calls: List[Dict[str, object]] = []

    def fetch_page(self, topic: str, *, from_date: str, page: int, page_size: int) -> List[dict]:
        self.calls.append({"topic": topic, "from_date": from_date, "page": page, "page_size": page_size})
        result = self.pages.get(page, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


class StubGatekeeper:
    def __init__(self, predicate: Callable[[Article], bool] = lambda a: True) -> None:
        self.predicate = predicate
        self.seen: List[str] = []

    def is_relevant(self, article: Article) -> bool:
        self.seen.append(article.url)
        return self.predicate(article)


def provider_item(n: int, *, source: str = "Example Wire") -> dict:
    return {
        "title": f"Article {n}",
        "url": f"https://news.example.com/{n}",
        "description": f"Description {n}",
        "source": {"id": None, "name": source},
    }


def analysis_payload(score: object = 5, **overrides: object) -> str:
    payload = {
        "summary": "A company announced an AI deal.",
        "seller_description": "Sells cloud GPUs.",
        "hidden_motive": "Promotes its own platform.",
        "motive_score": score,
        "critique": "Light on evidence.",
    }
    payload.update(overrides)
    return json.dumps(payload)


def routing_llm(*, relevant: Callable[[str], bool] = lambda user: True, analysis: Callable[[str], str] = lambda user: analysis_payload()) -> FakeLLM:
    """LLM that answers the gatekeeper and the investigator based on the system prompt."""

    def handler(system: str, user: str) -> str:
        if system == gatekeeper_mod.SYSTEM_PROMPT:
            return json.dumps({"is_business_case": relevant(user)})
        return analysis(user)

    return FakeLLM(handler)


@pytest.fixture
def cache(tmp_path) -> CacheStore:
    return CacheStore(tmp_path / "cache")


@pytest.fixture
def article() -> Article:
    return Article(
        title="Bank rolls out AI underwriting",
        url="https://news.example.com/bank-ai",
        source="Finance Daily",
        description="A regional bank says AI cut loan processing time in half.",
    )

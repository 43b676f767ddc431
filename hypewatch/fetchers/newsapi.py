from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import requests

from ..utils.logging import get_logger

logger = get_logger("hw.fetchers.newsapi")

DEFAULT_URL = "https://newsapi.org/v2/everything"


class NewsProviderError(Exception):
    """Raised when the news provider answers with an unusable payload."""


def is_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _validated_url(url: str) -> str:
    if not is_http_url(url):
        raise ValueError(f"Invalid news provider URL: {url}")
    return url


class NewsAPIClient:
    """Thin client for NewsAPI's ``/v2/everything`` search endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        url: str = DEFAULT_URL,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.url = _validated_url(url)
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_page(self, topic: str, *, from_date: str, page: int, page_size: int) -> List[Dict[str, Any]]:
        """Fetch one page of results sorted by relevancy.

        Raises ``requests.RequestException`` on transport or HTTP errors and
        ``NewsProviderError`` when the body is not the expected shape.
        """
        params = {
            "q": topic,
            "from": from_date,
            "pageSize": page_size,
            "sortBy": "relevancy",
            "language": "en",
            "page": page,
        }
        logger.debug("Fetching news page %d for '%s'", page, topic)
        resp = self.session.get(
            self.url,
            params=params,
            headers={"X-Api-Key": self.api_key},
            timeout=self.timeout,
        )
        if resp.status_code >= 400:
            logger.warning("News provider request failed (%s) on page %d", resp.status_code, page)
            resp.raise_for_status()

        data = resp.json()
        if not isinstance(data, dict):
            raise NewsProviderError(f"Expected a JSON object, got {type(data).__name__}")
        articles = data.get("articles") or []
        if not isinstance(articles, list):
            raise NewsProviderError("'articles' must be a list")
        return [a for a in articles if isinstance(a, dict)]

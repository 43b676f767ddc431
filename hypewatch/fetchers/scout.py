from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, List, Optional, Protocol, Set

import requests

from .newsapi import NewsProviderError, is_http_url
from ..models import Article
from ..processors.gatekeeper import Gatekeeper
from ..storage import ARTICLES, CacheStore, topic_cache_key
from ..utils.logging import get_logger

logger = get_logger("hw.fetchers.scout")


class NoRelevantArticlesError(Exception):
    """Raised when paging ends without a single relevant article."""


class NewsClient(Protocol):
    def fetch_page(self, topic: str, *, from_date: str, page: int, page_size: int) -> List[dict]: ...


class Scout:
    """Collect relevant articles for a topic, cache-first.

    A fresh article-list cache entry that holds at least the requested count
    is returned without any network call. Freshness is checked before size,
    so an expired entry is never used however many articles it holds.
    """

    def __init__(
        self,
        news: NewsClient,
        gatekeeper: Gatekeeper,
        cache: CacheStore,
        *,
        page_size: int = 20,
        max_pages: int = 3,
        lookback_days: int = 7,
        cache_ttl_seconds: float = 24 * 3600,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.news = news
        self.gatekeeper = gatekeeper
        self.cache = cache
        self.page_size = page_size
        self.max_pages = max_pages
        self.lookback_days = lookback_days
        self.cache_ttl_seconds = cache_ttl_seconds
        self._today = today

    def _from_cache(self, key: str, desired_count: int) -> Optional[List[Article]]:
        cached = self.cache.get(ARTICLES, key, max_age=self.cache_ttl_seconds)
        if not isinstance(cached, list):
            return None
        if len(cached) < desired_count:
            logger.info("Cache only has %d/%d articles. Re-fetching...", len(cached), desired_count)
            return None
        logger.info("Loading %d articles from local cache...", desired_count)
        return [Article.from_dict(item) for item in cached[:desired_count] if isinstance(item, dict)]

    def fetch(self, topic: str, desired_count: int) -> List[Article]:
        key = topic_cache_key(topic)
        cached = self._from_cache(key, desired_count)
        if cached is not None:
            return cached

        logger.info("Fetching articles from the news provider to find %d relevant business cases...", desired_count)
        from_date = (self._today() - timedelta(days=self.lookback_days)).isoformat()

        collected: List[Article] = []
        seen_urls: Set[str] = set()
        page = 1
        while len(collected) < desired_count and page <= self.max_pages:
            logger.info("Fetching page %d...", page)
            try:
                items = self.news.fetch_page(topic, from_date=from_date, page=page, page_size=self.page_size)
            except (requests.RequestException, NewsProviderError) as exc:
                logger.error("Error fetching page %d: %s", page, exc)
                break

            if not items:
                logger.warning("No more articles available.")
                break

            for item in items:
                if len(collected) >= desired_count:
                    break
                article = Article.from_provider(item)
                if not article.url or article.url in seen_urls:
                    continue
                if not is_http_url(article.url):
                    logger.warning("Skipping article with non-http URL: %s", article.title)
                    continue
                seen_urls.add(article.url)

                if self.gatekeeper.is_relevant(article):
                    logger.info("[Relevant] %s", article.title)
                    collected.append(article)
                else:
                    logger.info("[Skipped] %s", article.title)
            page += 1

        if not collected:
            raise NoRelevantArticlesError("News provider returned no relevant articles after filtering.")

        self.cache.put(ARTICLES, key, [a.to_dict() for a in collected])
        return collected

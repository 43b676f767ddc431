"""File-backed caches for article lists and per-article analyses."""

from .cache_store import ANALYSIS, ARTICLES, CacheStore, topic_cache_key

__all__ = ["ANALYSIS", "ARTICLES", "CacheStore", "topic_cache_key"]

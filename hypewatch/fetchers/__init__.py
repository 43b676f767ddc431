"""News provider access and article scouting."""

from .newsapi import NewsAPIClient, NewsProviderError
from .scout import NoRelevantArticlesError, Scout

__all__ = ["NewsAPIClient", "NewsProviderError", "NoRelevantArticlesError", "Scout"]

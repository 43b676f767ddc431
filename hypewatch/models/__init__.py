"""Typed models used across the application."""

from .article import Article
from .analysis import Analysis, AnalysisCacheEntry, AnalysisResult, coerce_motive_score

__all__ = ["Article", "Analysis", "AnalysisCacheEntry", "AnalysisResult", "coerce_motive_score"]

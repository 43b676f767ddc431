"""Tests for article and analysis models."""

import pytest

from hypewatch.models import Analysis, Article, coerce_motive_score


class TestMotiveScore:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            (7, 7),
            ("8", 8),
            (" 3 ", 3),
            (6.0, 6),
            (15, 10),
            (0, 1),
            (None, None),
            ("", None),
            ("high", None),
            (6.5, None),
            (True, None),
        ],
    )
    def test_coercion(self, raw, expected):
        assert coerce_motive_score(raw) == expected

    def test_analysis_from_partial_dict(self):
        analysis = Analysis.from_dict({"summary": "s", "motive_score": "9"})
        assert analysis.summary == "s"
        assert analysis.critique == ""
        assert analysis.motive_score == 9


class TestArticle:
    def test_from_provider(self):
        article = Article.from_provider(
            {"title": " T ", "url": "https://x", "description": None, "source": {"id": "x", "name": "Wire"}}
        )
        assert article == Article(title="T", url="https://x", source="Wire", description="")

    def test_from_provider_without_source(self):
        assert Article.from_provider({"title": "T", "url": "u"}).source == ""

    def test_frozen(self):
        article = Article(title="t", url="u", source="s")
        with pytest.raises(AttributeError):
            article.title = "changed"

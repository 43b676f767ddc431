"""Self-contained HTML report for a run's analysis results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence

from jinja2 import BaseLoader, Environment
from markupsafe import Markup

from .sanitize import markdown_to_safe_html
from ..fetchers.newsapi import is_http_url
from ..models import AnalysisResult

HIGH_RISK = "high-risk"
MEDIUM_RISK = "med-risk"
LOW_RISK = "low-risk"


def risk_tier(score: Optional[int]) -> str:
    value = score or 0
    if value >= 8:
        return HIGH_RISK
    if value >= 4:
        return MEDIUM_RISK
    return LOW_RISK


def report_period(today: date, lookback_days: int = 7) -> tuple[date, date]:
    return today - timedelta(days=lookback_days), today


@dataclass(slots=True)
class _Row:
    title: str
    url: str
    source: str
    summary: Markup
    seller_description: Markup
    hidden_motive: Markup
    critique: Markup
    risk_class: str
    score_label: str


def _build_row(result: AnalysisResult) -> _Row:
    a = result.analysis
    return _Row(
        title=result.title,
        url=result.url if is_http_url(result.url) else "",
        source=result.source,
        summary=Markup(markdown_to_safe_html(a.summary)),
        seller_description=Markup(markdown_to_safe_html(a.seller_description)),
        hidden_motive=Markup(markdown_to_safe_html(a.hidden_motive)),
        critique=Markup(markdown_to_safe_html(a.critique)),
        risk_class=risk_tier(a.motive_score),
        score_label=str(a.motive_score) if a.motive_score is not None else "N/A",
    )


REPORT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>AI Hype-Watch: {{ period }}</title>
  <style>
    body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif; line-height: 1.6; color: #333; max-width: 1200px; margin: 0 auto; padding: 20px; background-color: #f4f7f6; }
    .header { text-align: center; margin-bottom: 30px; }
    .period-badge { background: #34495e; color: white; padding: 5px 15px; border-radius: 20px; font-size: 0.9em; }
    table { width: 100%; border-collapse: collapse; background: white; box-shadow: 0 1px 3px rgba(0,0,0,0.1); border-radius: 8px; overflow: hidden; }
    th, td { padding: 15px; text-align: left; border-bottom: 1px solid #eee; vertical-align: top; }
    th { background-color: #3498db; color: white; text-transform: uppercase; font-size: 13px; }

    /* Markdown rendered from the analysis fields */
    .analysis-content h1, .analysis-content h2 { font-size: 1.1em; margin-top: 0; }
    .analysis-content p { margin: 0 0 10px 0; }
    .analysis-content ul { padding-left: 20px; margin: 0; }
    .analysis-content strong { color: #2c3e50; }

    .score-badge { display: inline-block; padding: 4px 12px; border-radius: 20px; font-weight: bold; color: white; min-width: 40px; text-align: center; }
    .high-risk { background-color: #e74c3c; }
    .med-risk { background-color: #f39c12; }
    .low-risk { background-color: #27ae60; }
    .empty { text-align: center; color: #888; padding: 40px; }
    a { color: #3498db; text-decoration: none; }
  </style>
</head>
<body>
  <div class="header">
    <h1>&#x1F575;&#xFE0F; AI Hype-Watch: Skeptical Investigator Report</h1>
    <span class="period-badge">Period: {{ period }}</span>
  </div>
  <table>
    <thead>
      <tr>
        <th style="width: 25%">Article &amp; Source</th>
        <th style="width: 65%">Investigation Findings</th>
        <th style="width: 10%">Bias Score</th>
      </tr>
    </thead>
    <tbody>
    {% for row in rows %}
      <tr>
        <td>
          <strong>{{ row.title }}</strong><br>
          <small>Source: {{ row.source }}</small><br>
          {% if row.url %}<small><a href="{{ row.url }}" target="_blank" rel="noopener noreferrer">Read Article &rarr;</a></small>{% endif %}
        </td>
        <td class="analysis-content">
          <div><strong>Summary:</strong> {{ row.summary }}</div>
          <div><strong>Seller Identity:</strong> {{ row.seller_description }}</div>
          <div><strong>Hidden Motive:</strong> {{ row.hidden_motive }}</div>
          <div><strong>Critique:</strong> <em>{{ row.critique }}</em></div>
        </td>
        <td><span class="score-badge {{ row.risk_class }}">{{ row.score_label }}</span></td>
      </tr>
    {% else %}
      <tr><td colspan="3" class="empty">No articles were analyzed in this run.</td></tr>
    {% endfor %}
    </tbody>
  </table>
</body>
</html>
"""

_env = Environment(loader=BaseLoader(), autoescape=True)
_template = _env.from_string(REPORT_TEMPLATE)


def render_report(
    results: Sequence[AnalysisResult],
    *,
    today: Optional[date] = None,
    lookback_days: int = 7,
) -> str:
    """Render results into one HTML document, one table row per result in input order."""
    start, end = report_period(today or date.today(), lookback_days)
    rows: List[_Row] = [_build_row(r) for r in results]
    return _template.render(period=f"{start.isoformat()} to {end.isoformat()}", rows=rows)

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional

from .fetchers import Scout
from .models import AnalysisResult
from .output import PipelineReport, render_report, write_report
from .processors import Investigator
from .utils.logging import get_logger
from .utils.rate_limiter import RequestPacer

logger = get_logger("hw.orchestrator")


@dataclass(slots=True)
class RunOutcome:
    results: List[AnalysisResult]
    report_path: Optional[Path]
    exit_code: int
    stats: PipelineReport = field(default_factory=PipelineReport)


class Orchestrator:
    """Sequential fetch, analyze and report run.

    Articles are analyzed one at a time. A failing article is logged and
    skipped; a Scout failure still yields a report when results exist.
    """

    def __init__(
        self,
        *,
        scout: Scout,
        investigator: Investigator,
        pacer: RequestPacer,
        reports_dir: Path | str = "reports",
        max_articles: int = 5,
        lookback_days: int = 7,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.scout = scout
        self.investigator = investigator
        self.pacer = pacer
        self.reports_dir = Path(reports_dir)
        self.max_articles = max_articles
        self.lookback_days = lookback_days
        self._today = today

    def _write(self, results: List[AnalysisResult], stats: PipelineReport) -> Optional[Path]:
        day = self._today()
        html = render_report(results, today=day, lookback_days=self.lookback_days)
        try:
            path = write_report(html, self.reports_dir, today=day)
        except OSError as exc:
            logger.error("Failed to write report to %s: %s", self.reports_dir, exc)
            return None
        stats.report_written = True
        return path

    def _finish(
        self, results: List[AnalysisResult], stats: PipelineReport, exit_code: int, *, write: bool
    ) -> RunOutcome:
        path = self._write(results, stats) if write else None
        if write and path is None:
            exit_code = 1
        logger.info("Pipeline finished: %s", stats.summary_line())
        return RunOutcome(results=results, report_path=path, exit_code=exit_code, stats=stats)

    def run(self, topic: str) -> RunOutcome:
        logger.info("AI Hype-Watch: starting investigation of '%s'", topic)
        results: List[AnalysisResult] = []
        stats = PipelineReport()
        pauses_before = self.pacer.pauses

        try:
            articles = self.scout.fetch(topic, self.max_articles)
            stats.articles_fetched = len(articles)

            for index, article in enumerate(articles):
                logger.info("[%d/%d] Investigating: %s", index + 1, len(articles), article.title)
                try:
                    analysis, was_cached = self.investigator.analyze(article)
                except Exception as exc:  # noqa: BLE001 - one bad article must not end the run
                    stats.failed += 1
                    logger.warning("Failed to analyze article '%s': %s", article.title, exc)
                    continue

                results.append(AnalysisResult.from_article(article, analysis))
                stats.analyzed += 1
                if was_cached:
                    stats.from_cache += 1
                elif index < len(articles) - 1:
                    self.pacer.pause()
                    stats.pauses = self.pacer.pauses - pauses_before
        except Exception as exc:  # noqa: BLE001 - report whatever was gathered
            logger.error("Stopped: %s", exc)
            return self._finish(results, stats, 1, write=bool(results))

        return self._finish(results, stats, 0, write=True)

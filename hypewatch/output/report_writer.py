from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from ..utils.logging import get_logger

logger = get_logger("hw.output.report_writer")


def report_path(reports_dir: Path | str, day: date) -> Path:
    return Path(reports_dir) / f"report_{day.isoformat()}.html"


def write_report(html: str, reports_dir: Path | str, *, today: Optional[date] = None) -> Path:
    """Write the rendered report as ``report_<YYYY-MM-DD>.html``, replacing a same-day report."""
    path = report_path(reports_dir, today or date.today())
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.info("HTML report generated: %s", path)
    return path

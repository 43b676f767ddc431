from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PipelineReport:
    articles_fetched: int = 0
    analyzed: int = 0
    from_cache: int = 0
    failed: int = 0
    pauses: int = 0
    report_written: bool = False

    def summary_line(self) -> str:
        return (
            f"fetched={self.articles_fetched}, analyzed={self.analyzed}, cached={self.from_cache}, "
            f"failed={self.failed}, pauses={self.pauses}, report={'yes' if self.report_written else 'no'}"
        )

"""HTML report rendering and run summaries."""

from .pipeline_reporter import PipelineReport
from .report_renderer import render_report, risk_tier
from .report_writer import write_report
from .sanitize import markdown_to_safe_html, sanitize_html

__all__ = ["PipelineReport", "render_report", "risk_tier", "write_report", "markdown_to_safe_html", "sanitize_html"]

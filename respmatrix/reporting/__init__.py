"""Reporting helpers (summaries, diagnostic log lines)."""

from .summaries import compute_summary, log_summary, summary_lines

__all__ = ["compute_summary", "log_summary", "summary_lines"]

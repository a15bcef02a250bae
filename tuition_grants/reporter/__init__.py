"""Summary and grant awardee reports."""

from .generator import ApplicationReportGenerator, summarize_shortfalls
from .formatters import (
    fmt_amount,
    format_awardees,
    format_entry_header,
    format_menu,
    format_splash,
    format_summary,
)

__all__ = [
    "ApplicationReportGenerator",
    "summarize_shortfalls",
    "fmt_amount",
    "format_awardees",
    "format_entry_header",
    "format_menu",
    "format_splash",
    "format_summary",
]

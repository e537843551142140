from .summary import (
    SessionSummary,
    format_display_date,
    format_series_label,
    format_session_summary,
)

__all__ = [
    "SessionSummary",
    "format_display_date",
    "format_series_label",
    "format_session_summary",
]

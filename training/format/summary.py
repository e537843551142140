"""Short, human-readable summaries of stored training sessions."""

from datetime import date, datetime
from typing import Iterable

from training.agg import format_volume_label, total_blocks, total_series, total_volume_meters
from training.models import Series, TrainingSession
from training.models.base import DomainModel

UNKNOWN_DATE_LABEL = "Date inconnue"

# Abbreviations used by French short dates ("lun. 06 janv.").
FRENCH_WEEKDAYS = ("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim.")
FRENCH_MONTHS = (
    "janv.",
    "févr.",
    "mars",
    "avr.",
    "mai",
    "juin",
    "juil.",
    "août",
    "sept.",
    "oct.",
    "nov.",
    "déc.",
)


class SessionSummary(DomainModel):
    date: str
    type: str | None = None
    series_label: str
    volume_label: str
    place: str | None = None


def _parse_date(value: str) -> date | None:
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def format_display_date(value: str | None) -> str:
    """Render an ISO date as a short French date.

    Missing dates render as "Date inconnue"; values that cannot be parsed are
    returned unchanged. The date is read as written, without any time zone
    conversion.
    """
    if not value:
        return UNKNOWN_DATE_LABEL
    parsed = _parse_date(value)
    if parsed is None:
        return value
    weekday = FRENCH_WEEKDAYS[parsed.weekday()]
    month = FRENCH_MONTHS[parsed.month - 1]
    return f"{weekday} {parsed.day:02d} {month}"


def format_series_label(series: Iterable[Series]) -> str:
    series = tuple(series)
    return f"{total_series(series)} séries / {total_blocks(series)} blocs"


def format_session_summary(session: TrainingSession) -> SessionSummary:
    return SessionSummary(
        date=format_display_date(session.date),
        type=session.type,
        series_label=format_series_label(session.series),
        volume_label=format_volume_label(total_volume_meters(session.series)),
        place=session.place,
    )

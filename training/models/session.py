"""Training session models."""

from typing import Literal

from .base import DomainModel
from .segment import RestUnit
from .series import Series

SessionPlanStatus = Literal["planned", "ongoing", "canceled", "done", "postponed"]


class TrainingSession(DomainModel):
    """A session scheduled for an athlete."""

    id: str
    athlete_id: str | None = None
    date: str | None = None  # ISO string
    type: str | None = None
    title: str = ""
    place: str | None = None
    description: str = ""
    series: tuple[Series, ...] = ()
    series_rest_interval: int | float | None = None
    series_rest_unit: RestUnit | None = None
    target_intensity: int | float | None = None
    coach_notes: str | None = None
    athlete_feedback: str | None = None
    equipment: str | None = None
    status: str = "planned"


class CreateSessionFromTemplatePayload(DomainModel):
    """Body for scheduling a session from an existing template."""

    date: str
    start_time: str  # HH:MM
    duration_minutes: int
    status: SessionPlanStatus | None = None
    group_id: str | None = None
    place: str | None = None
    description: str | None = None
    coach_notes: str | None = None

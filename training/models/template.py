"""Training template models: the editable draft, the submission payload and
the stored template."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import DomainModel
from .segment import RestUnit
from .series import Series, build_series

TemplateVisibility = Literal["private"]

DEFAULT_SERIES_REST_INTERVAL = 120  # seconds
DEFAULT_TARGET_INTENSITY = 5


def _default_template_series() -> tuple[Series, ...]:
    return (build_series(with_segment=False),)


class TemplateDraft(DomainModel):
    """The in-progress template owned by a form controller."""

    title: str = ""
    type: str | None = "vitesse"
    description: str | None = ""
    equipment: str | None = ""
    target_intensity: int | float | None = DEFAULT_TARGET_INTENSITY
    series: tuple[Series, ...] = Field(default_factory=_default_template_series)
    series_rest_interval: int | float | None = DEFAULT_SERIES_REST_INTERVAL
    series_rest_unit: RestUnit | None = "s"
    visibility: TemplateVisibility = "private"


class TemplatePayload(DomainModel):
    """A normalized draft, ready to be sent to the training API."""

    title: str
    type: str | None
    description: str | None = None
    equipment: str | None = None
    target_intensity: int | None = None
    series: tuple[Series, ...]
    series_rest_interval: int | float
    series_rest_unit: Literal["s"] = "s"
    visibility: TemplateVisibility = "private"


class TrainingTemplate(DomainModel):
    """A template as stored by the training API."""

    id: str
    owner_id: str | None = None
    title: str = ""
    type: str | None = None
    description: str | None = None
    equipment: str | None = None
    target_intensity: int | float | None = None
    series: tuple[Series, ...] = ()
    series_rest_interval: int | float | None = None
    series_rest_unit: RestUnit | None = None
    visibility: TemplateVisibility | None = None
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_draft(self) -> TemplateDraft:
        """Build an editable draft from the stored template."""
        return TemplateDraft(
            title=self.title,
            type=self.type,
            description=self.description,
            equipment=self.equipment,
            target_intensity=self.target_intensity,
            series=self.series,
            series_rest_interval=self.series_rest_interval,
            series_rest_unit=self.series_rest_unit,
            visibility=self.visibility or "private",
        )

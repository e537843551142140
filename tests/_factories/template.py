"""Factories for creating template test data."""

from typing import Any, Mapping

from training.models import TemplateDraft, TrainingTemplate

from .series import SeriesFactory


class TemplateDraftFactory:
    """Factory for creating submittable TemplateDraft instances."""

    def __init__(self):
        self.default = TemplateDraft(
            title="Vitesse lactique",
            type="vitesse",
            description="Travail de vitesse sur piste",
            equipment="Pointes",
            target_intensity=7,
            series=(SeriesFactory().make(),),
            series_rest_interval=180,
            series_rest_unit="s",
        )

    def make(self, update: Mapping[str, Any] | None = None) -> TemplateDraft:
        return self.default.model_copy(deep=True, update=update)


class TrainingTemplateFactory:
    """Factory for creating stored TrainingTemplate instances."""

    def __init__(self):
        self.default = TrainingTemplate(
            id="tpl_1",
            owner_id="coach_1",
            title="Côtes courtes",
            type="force",
            description="10 x 80 m en côte",
            target_intensity=8,
            series=(SeriesFactory().make({"repeat_count": 2}),),
            series_rest_interval=3,
            series_rest_unit="min",
            visibility="private",
        )

    def make(self, update: Mapping[str, Any] | None = None) -> TrainingTemplate:
        return self.default.model_copy(deep=True, update=update)

from training.agg.volume import round_half_up
from training.models import TemplateDraft, TemplatePayload
from training.models.template import DEFAULT_SERIES_REST_INTERVAL
from training.validation.template import clamp_target_intensity


def _trimmed(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip()


def _series_rest_seconds(draft: TemplateDraft) -> int | float:
    """Rest between series in seconds; unset or non-positive means the default."""
    interval = draft.series_rest_interval
    if interval is None or interval <= 0:
        return DEFAULT_SERIES_REST_INTERVAL
    if draft.series_rest_unit == "min":
        return interval * 60
    return interval


def normalize_template(draft: TemplateDraft) -> TemplatePayload:
    """
    Build the submission payload from a draft.

    Text fields are trimmed, the target intensity is clamped to [1, 10] and
    rounded half up, and the rest between series is always expressed in seconds.
    """
    intensity = draft.target_intensity
    return TemplatePayload(
        title=draft.title.strip(),
        type=draft.type,
        description=_trimmed(draft.description),
        equipment=_trimmed(draft.equipment),
        target_intensity=(
            None
            if intensity is None
            else round_half_up(clamp_target_intensity(intensity))
        ),
        series=draft.series,
        series_rest_interval=_series_rest_seconds(draft),
        series_rest_unit="s",
        visibility=draft.visibility,
    )

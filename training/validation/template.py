from training.models import Series, TemplateDraft

from .segment import is_segment_valid

TARGET_INTENSITY_MIN = 1
TARGET_INTENSITY_MAX = 10


def clamp_target_intensity(value: float) -> float:
    return max(TARGET_INTENSITY_MIN, min(TARGET_INTENSITY_MAX, value))


def is_series_valid(series: Series) -> bool:
    """A series needs a repeat count of at least 1 and only valid segments."""
    if series.repeat_count < 1 or not series.segments:
        return False
    return all(is_segment_valid(segment, series.segments) for segment in series.segments)


def is_target_intensity_valid(value: int | float | None) -> bool:
    """Unset, or an integer already inside [1, 10]."""
    if value is None:
        return True
    if isinstance(value, float) and not value.is_integer():
        return False
    return clamp_target_intensity(value) == value


def is_template_submittable(draft: TemplateDraft) -> bool:
    """
    Decide whether a template draft can be submitted.

    Requires a non-blank title, a training type, a valid target intensity, a
    positive rest between series and at least one series, all of them valid.
    """
    has_basics = bool(draft.type) and bool((draft.title or "").strip())
    has_series_rest = (draft.series_rest_interval or 0) > 0
    series_valid = bool(draft.series) and all(
        is_series_valid(serie) for serie in draft.series
    )
    return (
        has_basics
        and is_target_intensity_valid(draft.target_intensity)
        and has_series_rest
        and series_valid
    )

import math
from typing import Iterable, TypeGuard

from training.models import (
    CotesSegment,
    CustomSegment,
    MuscuSegment,
    PpgSegment,
    RecupSegment,
    Segment,
    Series,
    StartSegment,
)

# Block types that never carry distance.
NO_DISTANCE_SEGMENTS = (PpgSegment, MuscuSegment, RecupSegment, StartSegment)


def to_meters(distance: float | None, unit: str | None) -> float:
    """Convert a distance to meters. Unset or non-positive distances count as 0."""
    if not distance or distance <= 0:
        return 0.0
    return distance * 1000 if unit == "km" else float(distance)


def uses_custom_distance_metric(segment: Segment) -> TypeGuard[CustomSegment]:
    return (
        isinstance(segment, CustomSegment)
        and segment.custom_metric_enabled
        and segment.custom_metric_kind == "distance"
    )


def segment_planned_distance_meters(segment: Segment) -> float:
    """
    Planned distance of one execution of a segment, in meters.

    PPG, muscu, recovery and start blocks never contribute distance, and neither
    do hill blocks measured by duration. A custom block contributes its metric
    distance when the distance metric is active, nothing when another metric
    is active, and its plain distance when no metric is enabled.
    """
    if isinstance(segment, NO_DISTANCE_SEGMENTS):
        return 0.0
    if isinstance(segment, CotesSegment) and segment.cotes_mode == "duration":
        return 0.0
    if uses_custom_distance_metric(segment):
        return to_meters(segment.custom_metric_distance, segment.distance_unit)
    if isinstance(segment, CustomSegment) and segment.custom_metric_enabled:
        return 0.0
    return to_meters(segment.distance, segment.distance_unit)


def _positive(value: int | None) -> bool:
    return value is not None and value > 0


def segment_planned_repetitions(segment: Segment) -> int:
    """
    How many times a segment is executed within one pass of its series.

    Custom blocks on the distance metric prefer their metric repetitions.
    Unset or non-positive counts, and block types without a repetition count,
    mean a single execution.
    """
    if uses_custom_distance_metric(segment) and _positive(
        segment.custom_metric_repetitions
    ):
        return segment.custom_metric_repetitions  # type: ignore[return-value]
    repetitions = getattr(segment, "repetitions", None)
    return repetitions if _positive(repetitions) else 1


def series_volume_meters(series: Series) -> float:
    """Total planned distance of a series, including its repeat count.

    A series with a repeat count below 1 is never executed and contributes 0.
    """
    if series.repeat_count < 1:
        return 0.0
    one_pass = sum(
        segment_planned_distance_meters(segment) * segment_planned_repetitions(segment)
        for segment in series.segments
    )
    return one_pass * series.repeat_count


def total_volume_meters(series: Iterable[Series]) -> float:
    """
    Total planned distance across a list of series, in meters.

    Each segment contributes distance x repetitions, each series multiplies its
    segments' sum by its repeat count, and the series are summed.
    """
    return sum(series_volume_meters(serie) for serie in series)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_volume_label(meters: float) -> str:
    """Render a volume as "950 m" below a kilometer and "12.3 km" above."""
    if meters >= 1000:
        return f"{meters / 1000:.1f} km"
    return f"{round_half_up(meters)} m"


def has_volume(label: str | None) -> bool:
    """Whether a volume label is worth displaying."""
    return bool(label) and label not in ("0 m", "0.0 km")

"""Per-block-type completeness rules for segments.

Each block type has its own rule function. The rules are not
uniform: vitesse, cotes and custom blocks need a generic rest interval, while
ppg, muscu, recup and start blocks are checked on their own duration or count
fields instead.

The repetition count of a segment is only required when it is the sole
segment of its series. In a multi-segment series the series repeat count
drives the work and per-segment repetitions may be left empty.
"""

from typing import Callable, Sequence

from training.models import (
    CotesSegment,
    CustomSegment,
    MuscuSegment,
    PpgSegment,
    RecupSegment,
    Segment,
    StartSegment,
    VitesseSegment,
)


def _positive(value: float | None) -> bool:
    return value is not None and value > 0


def _repetitions_ok(repetitions: int | None, siblings: Sequence[Segment]) -> bool:
    if len(siblings) != 1:
        return True
    return _positive(repetitions)


def _vitesse_valid(segment: VitesseSegment, siblings: Sequence[Segment]) -> bool:
    return (
        _positive(segment.distance)
        and _positive(segment.rest_interval)
        and _repetitions_ok(segment.repetitions, siblings)
    )


def _cotes_valid(segment: CotesSegment, siblings: Sequence[Segment]) -> bool:
    if segment.cotes_mode == "duration":
        has_work = _positive(segment.duration_seconds)
    else:
        has_work = _positive(segment.distance)
    return (
        has_work
        and _positive(segment.rest_interval)
        and _repetitions_ok(segment.repetitions, siblings)
    )


def _ppg_valid(segment: PpgSegment, siblings: Sequence[Segment]) -> bool:
    if segment.ppg_mode == "reps":
        return _positive(segment.ppg_repetitions)
    return _positive(segment.ppg_duration_seconds)


def _muscu_valid(segment: MuscuSegment, siblings: Sequence[Segment]) -> bool:
    return _positive(segment.muscu_repetitions)


def _recup_valid(segment: RecupSegment, siblings: Sequence[Segment]) -> bool:
    return _positive(segment.recovery_duration_seconds) and _repetitions_ok(
        segment.repetitions, siblings
    )


def _start_valid(segment: StartSegment, siblings: Sequence[Segment]) -> bool:
    return _positive(segment.start_count)


def _custom_metric_valid(segment: CustomSegment) -> bool:
    match segment.metric_kind:
        case "distance":
            return _positive(segment.custom_metric_distance)
        case "duration":
            return _positive(segment.custom_metric_duration_seconds)
        case "exo":
            return any(exercise.strip() for exercise in segment.custom_exercises)
        case _:
            # "reps" only goes through the generic repetition rule; a disabled
            # metric has nothing to check.
            return True


def _custom_valid(segment: CustomSegment, siblings: Sequence[Segment]) -> bool:
    return (
        _custom_metric_valid(segment)
        and _positive(segment.rest_interval)
        and _repetitions_ok(segment.repetitions, siblings)
    )


SEGMENT_RULES: dict[str, Callable[..., bool]] = {
    "vitesse": _vitesse_valid,
    "cotes": _cotes_valid,
    "ppg": _ppg_valid,
    "muscu": _muscu_valid,
    "recup": _recup_valid,
    "start": _start_valid,
    "custom": _custom_valid,
}


def is_segment_valid(segment: Segment, siblings: Sequence[Segment]) -> bool:
    """
    Decide whether a segment is complete enough to be submitted.

    Args:
        segment: The segment to check.
        siblings: Every segment of the series the segment belongs to,
            including the segment itself.
    """
    rule = SEGMENT_RULES[segment.block_type]
    return rule(segment, siblings)

"""Which pace/intensity references a series may use, and keeping its stored
pace settings consistent with that set.

A series can target a distance reference when it contains at least one block
that covers distance, and a load reference when it contains a muscu block.
"""

import logging
from typing import Any, NamedTuple, Sequence

from training.config.pace_references import (
    DEFAULT_PACE_PERCENT,
    DISTANCE_PACE_REFERENCES,
    LOAD_PACE_REFERENCES,
    LOAD_REFERENCE_FIELDS,
    PACE_PERCENT_MAX,
    PACE_PERCENT_MIN,
    PACE_PERCENT_STEP,
    PREFERRED_DISTANCE_REFERENCE,
    PREFERRED_LOAD_REFERENCE,
    PaceReference,
    is_load_reference,
    load_reference_field,
)
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

logger = logging.getLogger(__name__)


class PaceCapabilities(NamedTuple):
    has_distance_block: bool
    has_load_block: bool
    allowed_references: tuple[PaceReference, ...]


def is_distance_capable(segment: Segment) -> bool:
    """Whether a segment's type lets it be paced against a distance record."""
    if isinstance(segment, (PpgSegment, MuscuSegment, RecupSegment, StartSegment)):
        return False
    if isinstance(segment, CotesSegment):
        return segment.cotes_mode == "distance"
    if isinstance(segment, CustomSegment):
        return (
            not segment.custom_metric_enabled
            or segment.custom_metric_kind == "distance"
        )
    return True


def series_pace_capabilities(series: Series) -> PaceCapabilities:
    has_distance_block = any(is_distance_capable(s) for s in series.segments)
    has_load_block = any(isinstance(s, MuscuSegment) for s in series.segments)
    allowed: list[PaceReference] = []
    if has_distance_block:
        allowed.extend(DISTANCE_PACE_REFERENCES)
    if has_load_block:
        allowed.extend(LOAD_PACE_REFERENCES)
    return PaceCapabilities(has_distance_block, has_load_block, tuple(allowed))


def default_pace_reference(
    allowed: Sequence[PaceReference],
) -> PaceReference | None:
    """Pick the reference to fall back on: 100m, then body weight, then the first."""
    if PREFERRED_DISTANCE_REFERENCE in allowed:
        return PREFERRED_DISTANCE_REFERENCE
    if PREFERRED_LOAD_REFERENCE in allowed:
        return PREFERRED_LOAD_REFERENCE
    return allowed[0] if allowed else None


def clamp_pace_percent(value: float) -> int:
    """Clamp a percentage to [50, 100] on the 5% grid."""
    stepped = round(value / PACE_PERCENT_STEP) * PACE_PERCENT_STEP
    return int(max(PACE_PERCENT_MIN, min(PACE_PERCENT_MAX, stepped)))


def _has_load_values(series: Series) -> bool:
    return any(getattr(series, field) is not None for field in LOAD_REFERENCE_FIELDS)


def _cleared_load_values() -> dict[str, Any]:
    return {field: None for field in LOAD_REFERENCE_FIELDS}


def _resolve_reference(series: Series, allowed: Sequence[PaceReference]) -> str | None:
    current = series.pace_reference_distance
    if current in allowed:
        return current
    return default_pace_reference(allowed)


def reconcile_series_pace(series: Series) -> Series:
    """
    Bring a series' pace settings back in line with its legal references.

    - No legal reference: pace is disabled and every pace field is cleared.
    - Pace disabled: the series is left alone.
    - Otherwise an illegal reference is replaced by the default one, and the
      load fields are cleared when the reference is not a load reference.

    Returns the same instance when nothing needs to change, so running it
    twice is a no-op.
    """
    allowed = series_pace_capabilities(series).allowed_references
    if not allowed:
        if not (
            series.enable_pace
            or series.pace_percent is not None
            or series.pace_reference_distance is not None
            or _has_load_values(series)
        ):
            return series
        logger.debug(f"Disabling pace on series {series.id}: no legal reference")
        return series.model_copy(
            update={
                "enable_pace": False,
                "pace_percent": None,
                "pace_reference_distance": None,
                **_cleared_load_values(),
            }
        )

    if not series.enable_pace:
        return series

    next_ref = _resolve_reference(series, allowed)
    clear_load = not is_load_reference(next_ref)
    if next_ref == series.pace_reference_distance and not (
        clear_load and _has_load_values(series)
    ):
        return series

    logger.debug(
        f"Reconciling pace on series {series.id}: "
        f"{series.pace_reference_distance!r} -> {next_ref!r}"
    )
    update: dict[str, Any] = {"pace_reference_distance": next_ref}
    if clear_load:
        update.update(_cleared_load_values())
    return series.model_copy(update=update)


def reconcile_series_list(series: tuple[Series, ...]) -> tuple[Series, ...]:
    """Reconcile every series; returns the input tuple if none changed."""
    reconciled = tuple(reconcile_series_pace(serie) for serie in series)
    if all(new is old for new, old in zip(reconciled, series)):
        return series
    return reconciled


def toggle_series_pace(series: Series) -> Series:
    """
    Switch pace targeting on or off for a series.

    Does nothing when the series has no legal reference. Turning pace on
    clamps the percentage (90% when unset) and picks a legal reference.
    """
    allowed = series_pace_capabilities(series).allowed_references
    if not allowed:
        return series
    if series.enable_pace:
        return series.model_copy(update={"enable_pace": False})

    next_ref = _resolve_reference(series, allowed)
    update: dict[str, Any] = {
        "enable_pace": True,
        "pace_percent": clamp_pace_percent(
            series.pace_percent if series.pace_percent is not None else DEFAULT_PACE_PERCENT
        ),
        "pace_reference_distance": next_ref,
    }
    if not is_load_reference(next_ref):
        update.update(_cleared_load_values())
    return series.model_copy(update=update)


def set_pace_percent(series: Series, value: float) -> Series:
    return series.model_copy(update={"pace_percent": clamp_pace_percent(value)})


def set_pace_reference(series: Series, reference: PaceReference) -> Series:
    """Select a reference; load values are dropped unless it is a load reference."""
    update: dict[str, Any] = {"pace_reference_distance": reference}
    if not is_load_reference(reference):
        update.update(_cleared_load_values())
    return series.model_copy(update=update)


def set_pace_load_value(series: Series, value: float | None) -> Series:
    """Store the base load for the currently selected load reference."""
    field = load_reference_field(series.pace_reference_distance)
    if field is None:
        return series
    if value is not None and value <= 0:
        value = None
    return series.model_copy(update={field: value})

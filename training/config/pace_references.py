"""Pace/intensity reference table.

A series can express its intensity as a percentage of a reference: either a
distance record (60m ... 400m) or a load (body weight, max lift, max sled).
Load references store their base value on the series itself, in the field
named by `series_field`.
"""

from typing import Literal, NamedTuple

DistancePaceReference = Literal["60m", "100m", "200m", "400m"]
LoadPaceReference = Literal["bodyweight", "max-muscu", "max-chariot"]
PaceReference = Literal[
    "60m", "100m", "200m", "400m", "bodyweight", "max-muscu", "max-chariot"
]
PaceReferenceKind = Literal["distance", "load"]


class PaceReferenceInfo(NamedTuple):
    id: PaceReference
    label: str
    kind: PaceReferenceKind
    unit: str
    meters: int | None = None  # distance references only
    series_field: str | None = None  # load references only
    placeholder: str | None = None  # load references only


DISTANCE_PACE_REFERENCES: tuple[DistancePaceReference, ...] = (
    "60m",
    "100m",
    "200m",
    "400m",
)
LOAD_PACE_REFERENCES: tuple[LoadPaceReference, ...] = (
    "bodyweight",
    "max-muscu",
    "max-chariot",
)
ALL_PACE_REFERENCES: tuple[PaceReference, ...] = (
    *DISTANCE_PACE_REFERENCES,
    *LOAD_PACE_REFERENCES,
)

PACE_REFERENCE_TABLE: dict[str, PaceReferenceInfo] = {
    "60m": PaceReferenceInfo("60m", "60 m", "distance", "s", meters=60),
    "100m": PaceReferenceInfo("100m", "100 m", "distance", "s", meters=100),
    "200m": PaceReferenceInfo("200m", "200 m", "distance", "s", meters=200),
    "400m": PaceReferenceInfo("400m", "400 m", "distance", "s", meters=400),
    "bodyweight": PaceReferenceInfo(
        "bodyweight",
        "Poids du corps",
        "load",
        "kg",
        series_field="pace_reference_body_weight_kg",
        placeholder="Poids (kg)",
    ),
    "max-muscu": PaceReferenceInfo(
        "max-muscu",
        "Max muscu",
        "load",
        "kg",
        series_field="pace_reference_max_muscu_kg",
        placeholder="Charge max (kg)",
    ),
    "max-chariot": PaceReferenceInfo(
        "max-chariot",
        "Max chariot",
        "load",
        "kg",
        series_field="pace_reference_max_chariot_kg",
        placeholder="Charge chariot max (kg)",
    ),
}

# Series fields holding the base value of a load reference.
LOAD_REFERENCE_FIELDS: tuple[str, ...] = tuple(
    PACE_REFERENCE_TABLE[ref].series_field or "" for ref in LOAD_PACE_REFERENCES
)

# Default preferences when a stored reference is no longer legal.
PREFERRED_DISTANCE_REFERENCE: DistancePaceReference = "100m"
PREFERRED_LOAD_REFERENCE: LoadPaceReference = "bodyweight"

PACE_PERCENT_MIN = 50
PACE_PERCENT_MAX = 100
PACE_PERCENT_STEP = 5
DEFAULT_PACE_PERCENT = 90


def is_distance_reference(value: str | None) -> bool:
    return value in DISTANCE_PACE_REFERENCES


def is_load_reference(value: str | None) -> bool:
    return value in LOAD_PACE_REFERENCES


def pace_reference_label(value: str | None) -> str:
    """Display label for a reference ("Choisir" when nothing is selected)."""
    if not value:
        return "Choisir"
    info = PACE_REFERENCE_TABLE.get(value)
    return info.label if info else value


def load_reference_field(value: str | None) -> str | None:
    """Name of the series field storing the base load for `value`, if any."""
    info = PACE_REFERENCE_TABLE.get(value or "")
    if info is None or info.kind != "load":
        return None
    return info.series_field

"""Segment model: one trainable block inside a series.

Each block type is its own model carrying only the fields that type uses, and
`Segment` is the union of all of them. Switching the type of a segment builds
a fresh model of the new type rather than merging fields, so data entered for
a previous type can never be read back.
"""

import uuid
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, BeforeValidator, Field, field_validator

from training.config.blocks import BlockType, resolve_block_type
from .base import DomainModel

DistanceUnit = Literal["m", "km"]
RestUnit = Literal["s", "min"]
CotesMode = Literal["distance", "duration"]
PpgMode = Literal["time", "reps"]
RecoveryMode = Literal["marche", "footing", "passive", "active"]
CustomMetricKind = Literal["distance", "duration", "reps", "exo"]


def new_segment_id() -> str:
    return f"seg_{uuid.uuid4()}"


def normalize_exercise_names(names: object) -> tuple[str, ...]:
    """Trim exercise names, drop blanks and collapse case-insensitive duplicates.

    The first spelling of a name wins and the original order is preserved.
    """
    if not names:
        return ()
    if isinstance(names, str):
        names = [names]
    seen: set[str] = set()
    result: list[str] = []
    for raw in names:  # type: ignore[union-attr]
        if not isinstance(raw, str):
            continue
        name = raw.strip()
        if not name:
            continue
        key = name.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(name)
    return tuple(result)


class _SegmentBase(DomainModel):
    id: str = Field(default_factory=new_segment_id)
    block_name: str | None = None


class VitesseSegment(_SegmentBase):
    block_type: Literal["vitesse"] = "vitesse"
    block_name: str | None = "Vitesse"
    distance: float | None = 200
    distance_unit: DistanceUnit = "m"
    repetitions: int | None = 4
    rest_interval: float | None = 90  # seconds


class CotesSegment(_SegmentBase):
    """Hill block, measured either by distance or by duration."""

    block_type: Literal["cotes"] = "cotes"
    block_name: str | None = "Côtes"
    cotes_mode: CotesMode = "distance"
    distance: float | None = 200
    distance_unit: DistanceUnit = "m"
    duration_seconds: float | None = None
    repetitions: int | None = 4
    rest_interval: float | None = 90


class PpgSegment(_SegmentBase):
    """General physical preparation circuit."""

    block_type: Literal["ppg"] = "ppg"
    block_name: str | None = "PPG"
    ppg_exercises: tuple[str, ...] = ()
    ppg_mode: PpgMode = "time"
    ppg_duration_seconds: float | None = None
    ppg_repetitions: int | None = 10
    ppg_rest_seconds: float | None = None

    @field_validator("ppg_exercises", mode="before")
    @classmethod
    def _normalize_exercises(cls, v: object) -> tuple[str, ...]:
        return normalize_exercise_names(v)


class MuscuSegment(_SegmentBase):
    """Weight-room block."""

    block_type: Literal["muscu"] = "muscu"
    block_name: str | None = "Muscu"
    muscu_exercises: tuple[str, ...] = ()
    muscu_repetitions: int | None = 10
    rest_interval: float | None = 90

    @field_validator("muscu_exercises", mode="before")
    @classmethod
    def _normalize_exercises(cls, v: object) -> tuple[str, ...]:
        return normalize_exercise_names(v)


class RecupSegment(_SegmentBase):
    block_type: Literal["recup"] = "recup"
    block_name: str | None = "Récup"
    recovery_mode: RecoveryMode = "marche"
    recovery_duration_seconds: float | None = None
    repetitions: int | None = 4


class StartSegment(_SegmentBase):
    """Starting-block work: a number of starts over a short exit zone."""

    block_type: Literal["start"] = "start"
    block_name: str | None = "Starting Block"
    start_count: int | None = 3
    start_exit_distance: float | None = None


class CustomSegment(_SegmentBase):
    """Free-form block with an optional single metric.

    When `custom_metric_enabled` is set, `custom_metric_kind` selects which one
    of the metric fields is meaningful.
    """

    block_type: Literal["custom"] = "custom"
    block_name: str | None = "Bloc personnalisé"
    custom_goal: str | None = ""
    custom_notes: str | None = ""
    custom_metric_enabled: bool = False
    custom_metric_kind: CustomMetricKind = "distance"
    custom_metric_distance: float | None = None
    custom_metric_duration_seconds: float | None = None
    custom_metric_repetitions: int | None = None
    custom_exercises: tuple[str, ...] = ()
    distance: float | None = 0
    distance_unit: DistanceUnit = "m"
    repetitions: int | None = 1
    rest_interval: float | None = 90

    @property
    def metric_kind(self) -> CustomMetricKind | None:
        """The active metric kind, or None when the metric is disabled."""
        return self.custom_metric_kind if self.custom_metric_enabled else None


SEGMENT_MODELS: dict[BlockType, type[_SegmentBase]] = {
    "vitesse": VitesseSegment,
    "cotes": CotesSegment,
    "ppg": PpgSegment,
    "muscu": MuscuSegment,
    "recup": RecupSegment,
    "start": StartSegment,
    "custom": CustomSegment,
}

_SEGMENT_CLASSES = tuple(SEGMENT_MODELS.values())


def _seed_to_dict(seed: Mapping[str, Any] | BaseModel | None) -> dict[str, Any]:
    if seed is None:
        return {}
    if isinstance(seed, BaseModel):
        return seed.model_dump()
    return dict(seed)


def _strip_block_type(data: dict[str, Any]) -> dict[str, Any]:
    data.pop("block_type", None)
    data.pop("blockType", None)
    return data


def _raw_block_type(data: Mapping[str, Any]) -> object:
    return data.get("blockType", data.get("block_type"))


def build_segment(
    block_type: str = "vitesse",
    seed: Mapping[str, Any] | BaseModel | None = None,
) -> "Segment":
    """Build a segment of `block_type` with that type's defaults.

    Fields from `seed` are applied on top of the defaults, but only the ones
    the new type declares; everything else in the seed is dropped. A new id is
    assigned unless the seed provides one.
    """
    model = SEGMENT_MODELS[resolve_block_type(block_type)]
    data = _strip_block_type(_seed_to_dict(seed))
    if data.get("id") is None:
        data.pop("id", None)
    return model.model_validate(data)  # type: ignore[return-value]


def parse_segment(raw: Mapping[str, Any] | BaseModel) -> "Segment":
    """Build the right segment model from stored or wire data.

    A missing or unknown block type is read as vitesse.
    """
    if isinstance(raw, _SEGMENT_CLASSES):
        return raw  # type: ignore[return-value]
    data = _seed_to_dict(raw)
    return build_segment(resolve_block_type(_raw_block_type(data)), data)


def switch_block_type(segment: "Segment", block_type: str) -> "Segment":
    """Replace a segment by a fresh default segment of another type.

    Only the id and the block name carry over.
    """
    seed: dict[str, Any] = {"id": segment.id}
    if segment.block_name is not None:
        seed["block_name"] = segment.block_name
    return build_segment(block_type, seed)


def _coerce_segment(value: Any) -> Any:
    if isinstance(value, _SEGMENT_CLASSES):
        return value
    if isinstance(value, Mapping):
        return parse_segment(value)
    return value


Segment = Annotated[
    Union[
        VitesseSegment,
        CotesSegment,
        PpgSegment,
        MuscuSegment,
        RecupSegment,
        StartSegment,
        CustomSegment,
    ],
    BeforeValidator(_coerce_segment),
]

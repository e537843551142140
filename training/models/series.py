import uuid

from pydantic import Field

from training.config.blocks import BLOCK_CATALOG
from .base import DomainModel
from .segment import Segment, build_segment

DEFAULT_SERIES_PACE_PERCENT = 95
DEFAULT_SERIES_PACE_REFERENCE = "100m"


def new_series_id() -> str:
    return f"serie_{uuid.uuid4()}"


class Series(DomainModel):
    """An ordered group of segments executed back-to-back `repeat_count` times.

    Pace fields are only meaningful while `enable_pace` is set, and the load
    fields only while the selected reference is a load reference.
    """

    id: str = Field(default_factory=new_series_id)
    repeat_count: int = 1
    segments: tuple[Segment, ...] = ()
    enable_pace: bool = False
    pace_percent: int | None = None
    pace_reference_distance: str | None = None
    pace_reference_body_weight_kg: float | None = None
    pace_reference_max_muscu_kg: float | None = None
    pace_reference_max_chariot_kg: float | None = None

    def segment_by_id(self, segment_id: str) -> Segment | None:
        return next((s for s in self.segments if s.id == segment_id), None)


def build_series(index: int = 0, with_segment: bool = True) -> Series:
    """Build a default series.

    The starting block type follows the catalog order so that consecutive
    series added to a template start with different block types.
    """
    segments: tuple[Segment, ...] = ()
    if with_segment:
        block_type = BLOCK_CATALOG[index % len(BLOCK_CATALOG)].type
        seed = (
            {"distance": 200, "repetitions": 4}
            if index == 0
            else {"distance": 150, "repetitions": 3, "rest_interval": 75}
        )
        segments = (build_segment(block_type, seed),)
    return Series(
        repeat_count=1,
        enable_pace=False,
        pace_percent=DEFAULT_SERIES_PACE_PERCENT,
        pace_reference_distance=DEFAULT_SERIES_PACE_REFERENCE,
        segments=segments,
    )

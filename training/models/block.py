"""Reusable training blocks saved by a coach."""

from datetime import datetime
from typing import Any

from .base import DomainModel
from .segment import Segment, build_segment


class TrainingBlock(DomainModel):
    """A named segment kept in the coach's block library."""

    id: str
    owner_id: str | None = None
    title: str = ""
    segment: Segment
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TrainingBlockPayload(DomainModel):
    """Body for creating or updating a block."""

    title: str
    segment: Segment

    def to_wire(self) -> dict[str, Any]:
        # Library segments are stored without an id.
        data = super().to_wire()
        data["segment"].pop("id", None)
        return data


def segment_from_block(block: TrainingBlock) -> Segment:
    """Create a new segment (with a new id) from a library block."""
    seed: dict[str, Any] = block.segment.model_dump()
    seed.pop("id", None)
    title = (block.title or "").strip()
    seed["block_name"] = title or block.segment.block_name
    return build_segment(block.segment.block_type, seed)

"""Factories for creating segment test data."""

from typing import Any, Mapping

from training.models import Segment, build_segment


class SegmentFactory:
    """Factory for creating segments of any block type.

    Each call starts from the block type's defaults and gets a fresh id.
    """

    def make(
        self, block_type: str = "vitesse", update: Mapping[str, Any] | None = None
    ) -> Segment:
        return build_segment(block_type, update)

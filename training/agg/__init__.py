from .counts import total_series, total_blocks
from .volume import (
    segment_planned_distance_meters,
    segment_planned_repetitions,
    series_volume_meters,
    total_volume_meters,
    format_volume_label,
    has_volume,
)

__all__ = [
    "total_series",
    "total_blocks",
    "segment_planned_distance_meters",
    "segment_planned_repetitions",
    "series_volume_meters",
    "total_volume_meters",
    "format_volume_label",
    "has_volume",
]

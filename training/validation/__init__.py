from .segment import is_segment_valid, SEGMENT_RULES
from .template import (
    is_series_valid,
    is_template_submittable,
    is_target_intensity_valid,
    clamp_target_intensity,
)

__all__ = [
    "is_segment_valid",
    "SEGMENT_RULES",
    "is_series_valid",
    "is_template_submittable",
    "is_target_intensity_valid",
    "clamp_target_intensity",
]

from .segment import (
    Segment,
    VitesseSegment,
    CotesSegment,
    PpgSegment,
    MuscuSegment,
    RecupSegment,
    StartSegment,
    CustomSegment,
    SEGMENT_MODELS,
    DistanceUnit,
    RestUnit,
    build_segment,
    parse_segment,
    switch_block_type,
    normalize_exercise_names,
)
from .series import Series, build_series
from .block import TrainingBlock, TrainingBlockPayload, segment_from_block
from .template import TemplateDraft, TemplatePayload, TrainingTemplate
from .session import TrainingSession, CreateSessionFromTemplatePayload

__all__ = [
    "Segment",
    "VitesseSegment",
    "CotesSegment",
    "PpgSegment",
    "MuscuSegment",
    "RecupSegment",
    "StartSegment",
    "CustomSegment",
    "SEGMENT_MODELS",
    "DistanceUnit",
    "RestUnit",
    "build_segment",
    "parse_segment",
    "switch_block_type",
    "normalize_exercise_names",
    "Series",
    "build_series",
    "TrainingBlock",
    "TrainingBlockPayload",
    "segment_from_block",
    "TemplateDraft",
    "TemplatePayload",
    "TrainingTemplate",
    "TrainingSession",
    "CreateSessionFromTemplatePayload",
]

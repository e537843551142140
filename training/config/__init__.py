from .blocks import (
    BLOCK_CATALOG,
    BLOCK_TYPES,
    TRAINING_TYPE_OPTIONS,
    BlockCatalogEntry,
    BlockType,
    TrainingType,
    resolve_block_type,
)
from .pace_references import (
    ALL_PACE_REFERENCES,
    DISTANCE_PACE_REFERENCES,
    LOAD_PACE_REFERENCES,
    PACE_REFERENCE_TABLE,
    PaceReference,
    PaceReferenceInfo,
    is_distance_reference,
    is_load_reference,
)

__all__ = [
    "BLOCK_CATALOG",
    "BLOCK_TYPES",
    "TRAINING_TYPE_OPTIONS",
    "BlockCatalogEntry",
    "BlockType",
    "TrainingType",
    "resolve_block_type",
    "ALL_PACE_REFERENCES",
    "DISTANCE_PACE_REFERENCES",
    "LOAD_PACE_REFERENCES",
    "PACE_REFERENCE_TABLE",
    "PaceReference",
    "PaceReferenceInfo",
    "is_distance_reference",
    "is_load_reference",
]

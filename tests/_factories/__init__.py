from .segment import SegmentFactory
from .series import SeriesFactory
from .template import TemplateDraftFactory, TrainingTemplateFactory
from .session import TrainingSessionFactory

__all__ = [
    "SegmentFactory",
    "SeriesFactory",
    "TemplateDraftFactory",
    "TrainingTemplateFactory",
    "TrainingSessionFactory",
]

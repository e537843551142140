from .controller import TemplateFormController, clamp_repetition
from .normalize import normalize_template

__all__ = [
    "TemplateFormController",
    "clamp_repetition",
    "normalize_template",
]

"""Template form controller.

Owns the in-progress `TemplateDraft`, applies field edits and series/segment
edits to it, keeps every series' pace settings legal and caches whether the
draft can be submitted.
"""

from functools import cache
import logging
from typing import Any, Awaitable, Callable, Mapping

from pydantic import TypeAdapter

from training.models import (
    Segment,
    Series,
    TemplateDraft,
    TemplatePayload,
    TrainingBlock,
    TrainingTemplate,
    build_segment,
    build_series,
    segment_from_block,
    switch_block_type,
)
from training.pace import (
    reconcile_series_list,
    set_pace_load_value,
    set_pace_percent,
    set_pace_reference,
    toggle_series_pace,
)
from training.validation import is_template_submittable
from .normalize import normalize_template

logger = logging.getLogger(__name__)

REPETITION_MIN = 1
REPETITION_MAX = 50

DraftSource = TemplateDraft | TrainingTemplate | Mapping[str, Any]


def clamp_repetition(value: float) -> int:
    return max(REPETITION_MIN, min(REPETITION_MAX, round(value)))


@cache
def _field_adapter(field: str) -> TypeAdapter:
    return TypeAdapter(TemplateDraft.model_fields[field].annotation)


def _as_draft(source: DraftSource) -> TemplateDraft:
    if isinstance(source, TemplateDraft):
        draft = source
    elif isinstance(source, TrainingTemplate):
        draft = source.to_draft()
    else:
        draft = TemplateDraft.model_validate(source)
    series = reconcile_series_list(draft.series)
    if series is draft.series:
        return draft
    return draft.model_copy(update={"series": series})


class TemplateFormController:
    """Holds a template draft and the edits a coach makes to it.

    `values` is always an immutable `TemplateDraft`; every edit replaces it.
    Edits that leave the draft unchanged are ignored, so `can_submit` is only
    recomputed when something actually changed.
    """

    def __init__(self, defaults: Mapping[str, Any] | None = None):
        self._defaults = dict(defaults or {})
        self._values = self._build_defaults()
        self._can_submit = is_template_submittable(self._values)

    def _build_defaults(self) -> TemplateDraft:
        return _as_draft(self._defaults)

    def _replace(self, draft: TemplateDraft) -> None:
        self._values = draft
        self._can_submit = is_template_submittable(draft)

    @property
    def values(self) -> TemplateDraft:
        return self._values

    @property
    def can_submit(self) -> bool:
        return self._can_submit

    @property
    def show_series_rest(self) -> bool:
        """Rest between series only matters when a series follows another one."""
        series = self._values.series
        return len(series) > 1 or any(serie.repeat_count >= 2 for serie in series)

    def set(self, field: str, value: Any) -> bool:
        """
        Set one draft field.

        The value is validated against the field's type. Writing `series`
        always reconciles pace settings. Returns whether the draft changed.

        Raises:
            KeyError: If `field` is not a draft field.
        """
        if field not in TemplateDraft.model_fields:
            raise KeyError(field)
        next_value = _field_adapter(field).validate_python(value)
        if field == "series":
            next_value = reconcile_series_list(next_value)
        if next_value == getattr(self._values, field):
            return False
        logger.debug(f"Template draft field {field!r} changed")
        self._replace(self._values.model_copy(update={field: next_value}))
        return True

    def update(self, field: str, fn: Callable[[Any], Any]) -> bool:
        """Set a field from a function of its current value."""
        if field not in TemplateDraft.model_fields:
            raise KeyError(field)
        return self.set(field, fn(getattr(self._values, field)))

    def reset(self) -> None:
        self._replace(self._build_defaults())

    def hydrate(self, draft: DraftSource) -> None:
        """Replace the whole draft, e.g. with a stored template being edited."""
        self._replace(_as_draft(draft))

    async def hydrate_from(self, loader: Callable[[], Awaitable[DraftSource]]) -> None:
        """
        Replace the draft with the result of an async loader.

        The draft is only replaced once the loader has succeeded; if it fails,
        the error propagates and the current draft is kept.
        """
        try:
            loaded = await loader()
        except Exception as e:
            logger.warning(f"Failed to hydrate template draft: {e}")
            raise
        draft = _as_draft(loaded)
        self._replace(draft)
        logger.info(f"Hydrated template draft {draft.title!r}")

    def normalize(self, draft: TemplateDraft | None = None) -> TemplatePayload:
        return normalize_template(draft if draft is not None else self._values)

    # Series editing

    def _update_series(self, series_id: str, fn: Callable[[Series], Series]) -> bool:
        return self.update(
            "series",
            lambda series: tuple(
                fn(serie) if serie.id == series_id else serie for serie in series
            ),
        )

    def _update_segments(
        self,
        series_id: str,
        fn: Callable[[tuple[Segment, ...]], tuple[Segment, ...]],
    ) -> bool:
        return self._update_series(
            series_id, lambda serie: serie.model_copy(update={"segments": fn(serie.segments)})
        )

    def add_series(self) -> Series:
        """Append an empty series and return it."""
        serie = build_series(len(self._values.series), with_segment=False)
        self.update("series", lambda series: (*series, serie))
        return serie

    def remove_series(self, series_id: str) -> bool:
        """Remove a series. The last remaining series is never removed."""
        remaining = tuple(s for s in self._values.series if s.id != series_id)
        if not remaining:
            return False
        return self.set("series", remaining)

    def update_series(self, series_id: str, fn: Callable[[Series], Series]) -> bool:
        return self._update_series(series_id, fn)

    def set_series_repeat_count(self, series_id: str, value: float) -> bool:
        count = clamp_repetition(value)
        return self._update_series(
            series_id, lambda serie: serie.model_copy(update={"repeat_count": count})
        )

    # Segment editing

    def add_segment(self, series_id: str, block_type: str = "vitesse") -> Segment:
        segment = build_segment(block_type)
        self._update_segments(series_id, lambda segments: (*segments, segment))
        return segment

    def add_segment_from_block(self, series_id: str, block: TrainingBlock) -> Segment:
        """Append a copy of a library block to a series."""
        segment = segment_from_block(block)
        self._update_segments(series_id, lambda segments: (*segments, segment))
        return segment

    def remove_segment(self, series_id: str, segment_id: str) -> bool:
        return self._update_segments(
            series_id,
            lambda segments: tuple(s for s in segments if s.id != segment_id),
        )

    def set_block_type(self, series_id: str, segment_id: str, block_type: str) -> bool:
        """Switch a segment to another block type, starting from that type's defaults."""
        return self._update_segments(
            series_id,
            lambda segments: tuple(
                switch_block_type(s, block_type) if s.id == segment_id else s
                for s in segments
            ),
        )

    def update_segment(self, series_id: str, segment_id: str, **changes: Any) -> bool:
        """
        Change fields of one segment.

        Returns False when the series or the segment does not exist.

        Raises:
            KeyError: If a field does not exist on the segment's block type.
        """
        serie = next((s for s in self._values.series if s.id == series_id), None)
        segment = serie.segment_by_id(segment_id) if serie is not None else None
        if segment is None:
            return False
        fields = type(segment).model_fields
        for name in changes:
            if name not in fields or name in ("id", "block_type"):
                raise KeyError(name)
        updated = build_segment(segment.block_type, {**segment.model_dump(), **changes})
        return self._update_segments(
            series_id,
            lambda segments: tuple(updated if s.id == segment_id else s for s in segments),
        )

    # Pace

    def toggle_series_pace(self, series_id: str) -> bool:
        return self._update_series(series_id, toggle_series_pace)

    def set_series_pace_percent(self, series_id: str, value: float) -> bool:
        return self._update_series(series_id, lambda s: set_pace_percent(s, value))

    def set_series_pace_reference(self, series_id: str, reference: str) -> bool:
        return self._update_series(
            series_id,
            lambda s: set_pace_reference(s, reference),  # type: ignore[arg-type]
        )

    def set_series_pace_load(self, series_id: str, value: float | None) -> bool:
        """Set the base load of the series' selected load reference."""
        return self._update_series(series_id, lambda s: set_pace_load_value(s, value))

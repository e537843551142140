import pytest

from training.validation import (
    clamp_target_intensity,
    is_series_valid,
    is_target_intensity_valid,
    is_template_submittable,
)


def test_complete_draft_is_submittable(template_draft_factory):
    assert is_template_submittable(template_draft_factory.make())


def test_draft_without_series_is_not_submittable(template_draft_factory):
    assert not is_template_submittable(template_draft_factory.make({"series": ()}))


@pytest.mark.parametrize("title", ["", "   "])
def test_blank_title_is_not_submittable(template_draft_factory, title):
    assert not is_template_submittable(template_draft_factory.make({"title": title}))


@pytest.mark.parametrize("training_type", [None, ""])
def test_missing_type_is_not_submittable(template_draft_factory, training_type):
    draft = template_draft_factory.make({"type": training_type})
    assert not is_template_submittable(draft)


@pytest.mark.parametrize("rest", [None, 0, -30])
def test_series_rest_is_required(template_draft_factory, rest):
    draft = template_draft_factory.make({"series_rest_interval": rest})
    assert not is_template_submittable(draft)


@pytest.mark.parametrize(
    "intensity, expected",
    [(None, True), (1, True), (7, True), (7.0, True), (10, True), (0, False), (13, False), (7.5, False)],
)
def test_target_intensity(template_draft_factory, intensity, expected):
    assert is_target_intensity_valid(intensity) is expected
    draft = template_draft_factory.make({"target_intensity": intensity})
    assert is_template_submittable(draft) is expected


def test_invalid_series_blocks_submission(template_draft_factory, series_factory):
    draft = template_draft_factory.make(
        {"series": (series_factory.make(), series_factory.make({"repeat_count": 0}))}
    )
    assert not is_template_submittable(draft)


def test_series_needs_segments(series_factory):
    assert is_series_valid(series_factory.make())
    assert not is_series_valid(series_factory.make(segments=[]))


def test_series_checks_segments_against_their_siblings(series_factory, segment_factory):
    without_reps = segment_factory.make("vitesse", {"repetitions": None})
    assert not is_series_valid(series_factory.make(segments=[without_reps]))
    assert is_series_valid(
        series_factory.make(segments=[without_reps, segment_factory.make("vitesse")])
    )


@pytest.mark.parametrize("value, expected", [(-3, 1), (1, 1), (6.5, 6.5), (13, 10)])
def test_clamp_target_intensity(value, expected):
    assert clamp_target_intensity(value) == expected

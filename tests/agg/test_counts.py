from training.agg import total_blocks, total_series


def test_series_count_uses_repeat_count(series_factory, segment_factory):
    series = [
        series_factory.make({"repeat_count": 3}),
        series_factory.make(
            {"repeat_count": 1},
            segments=[segment_factory.make("vitesse"), segment_factory.make("recup")],
        ),
    ]
    assert total_series(series) == 4


def test_block_count_ignores_repeat_count(series_factory, segment_factory):
    series = [
        series_factory.make({"repeat_count": 3}),
        series_factory.make(
            {"repeat_count": 5},
            segments=[segment_factory.make("vitesse"), segment_factory.make("recup")],
        ),
    ]
    assert total_blocks(series) == 3


def test_counts_of_empty_plan():
    assert total_series([]) == 0
    assert total_blocks([]) == 0

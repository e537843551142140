from typing import Iterable

from training.models import Series


def total_series(series: Iterable[Series]) -> int:
    """
    Count series executions: a series repeated 3 times counts for 3.

    This is the "séries" number shown in session summaries.
    """
    return sum(serie.repeat_count for serie in series)


def total_blocks(series: Iterable[Series]) -> int:
    """
    Count the segments written in the plan, without applying repeat counts.

    Reported next to `total_series`; the two numbers are not derived from each
    other.
    """
    return sum(len(serie.segments) for serie in series)

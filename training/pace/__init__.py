from .capabilities import (
    PaceCapabilities,
    series_pace_capabilities,
    default_pace_reference,
    clamp_pace_percent,
    reconcile_series_pace,
    reconcile_series_list,
    toggle_series_pace,
    set_pace_percent,
    set_pace_reference,
    set_pace_load_value,
)

__all__ = [
    "PaceCapabilities",
    "series_pace_capabilities",
    "default_pace_reference",
    "clamp_pace_percent",
    "reconcile_series_pace",
    "reconcile_series_list",
    "toggle_series_pace",
    "set_pace_percent",
    "set_pace_reference",
    "set_pace_load_value",
]

from __future__ import annotations

import os


DEFAULT_PRESET = "daily_fit"


def weighting_preset_name() -> str:
    """Preset used when callers do not pass a weighting model."""

    value = os.getenv("STYLEBRIEF_WEIGHTING_PRESET", DEFAULT_PRESET).strip().lower()
    return value or DEFAULT_PRESET


def transit_cap(default: float) -> float:
    """Largest share of pool weight transit tokens may hold; 1.0 disables the cap."""

    raw = os.getenv("STYLEBRIEF_TRANSIT_CAP")
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if 0.0 < value <= 1.0 else default


def energy_min_score(default: float) -> float:
    raw = os.getenv("STYLEBRIEF_ENERGY_MIN_SCORE")
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


__all__ = ["DEFAULT_PRESET", "energy_min_score", "transit_cap", "weighting_preset_name"]

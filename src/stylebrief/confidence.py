from __future__ import annotations

import math
from enum import Enum
from typing import Mapping

from .adjusters import DignityLevel


HIGH_SHARE = 0.55
MEDIUM_SHARE = 0.40


class ConfidenceLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    MODERATE = "moderate"


_LADDER: tuple[ConfidenceLevel, ...] = (
    ConfidenceLevel.MODERATE,
    ConfidenceLevel.MEDIUM,
    ConfidenceLevel.HIGH,
)


def top_share(weight_by_origin: Mapping[object, float]) -> float:
    """Share of total weight held by the heaviest origin, 0.0 for an empty pool."""

    values = []
    for value in weight_by_origin.values():
        number = float(value)
        values.append(number if math.isfinite(number) and number > 0 else 0.0)
    total = sum(values)
    if total <= 0:
        return 0.0
    return max(values) / total


def assess_confidence(weight_by_origin: Mapping[object, float]) -> ConfidenceLevel:
    share = top_share(weight_by_origin)
    if share > HIGH_SHARE:
        return ConfidenceLevel.HIGH
    if share > MEDIUM_SHARE:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.MODERATE


def adjust_for_dignity(level: ConfidenceLevel, dignity: DignityLevel) -> ConfidenceLevel:
    """Strong dignity firms the read one step; a challenged one softens it."""

    index = _LADDER.index(level)
    if dignity is DignityLevel.STRONG:
        index = min(index + 1, len(_LADDER) - 1)
    elif dignity is DignityLevel.CHALLENGED:
        index = max(index - 1, 0)
    return _LADDER[index]


__all__ = ["ConfidenceLevel", "HIGH_SHARE", "MEDIUM_SHARE", "adjust_for_dignity", "assess_confidence", "top_share"]

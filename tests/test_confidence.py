from __future__ import annotations

import math

import pytest

from src.stylebrief.adjusters import DignityLevel
from src.stylebrief.confidence import ConfidenceLevel, adjust_for_dignity, assess_confidence, top_share
from src.stylebrief.tokens import TokenOrigin


def test_dominant_transit_weight_is_high_confidence():
    weights = {
        TokenOrigin.TRANSIT: 0.7,
        TokenOrigin.NATAL: 0.2,
        TokenOrigin.PROGRESSED: 0.05,
        TokenOrigin.WEATHER: 0.05,
    }
    assert assess_confidence(weights) is ConfidenceLevel.HIGH


@pytest.mark.parametrize(
    "weights, expected",
    [
        ({"natal": 0.45, "transit": 0.35, "weather": 0.2}, ConfidenceLevel.MEDIUM),
        ({"natal": 0.25, "transit": 0.25, "weather": 0.25, "temporal": 0.25}, ConfidenceLevel.MODERATE),
        ({"natal": 0.55, "transit": 0.45}, ConfidenceLevel.MEDIUM),
        ({"natal": 1.0}, ConfidenceLevel.HIGH),
    ],
)
def test_confidence_thresholds(weights, expected):
    assert assess_confidence(weights) is expected


def test_empty_or_garbage_weights_are_moderate():
    assert top_share({}) == 0.0
    assert assess_confidence({}) is ConfidenceLevel.MODERATE
    assert assess_confidence({"natal": math.nan, "weather": -1.0}) is ConfidenceLevel.MODERATE


def test_dignity_moves_one_step():
    assert adjust_for_dignity(ConfidenceLevel.MEDIUM, DignityLevel.STRONG) is ConfidenceLevel.HIGH
    assert adjust_for_dignity(ConfidenceLevel.HIGH, DignityLevel.STRONG) is ConfidenceLevel.HIGH
    assert adjust_for_dignity(ConfidenceLevel.MEDIUM, DignityLevel.CHALLENGED) is ConfidenceLevel.MODERATE
    assert adjust_for_dignity(ConfidenceLevel.MODERATE, DignityLevel.CHALLENGED) is ConfidenceLevel.MODERATE
    assert adjust_for_dignity(ConfidenceLevel.MEDIUM, DignityLevel.NEUTRAL) is ConfidenceLevel.MEDIUM

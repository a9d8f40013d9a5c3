from __future__ import annotations

from datetime import date

from src.stylebrief.assembler import filter_fabrics, join_fabrics
from src.stylebrief.engine import generate
from src.stylebrief.generators import placement_tokens
from src.stylebrief.phrasebank import COOL_FABRICS, TEXTILE_FABRICS, WARM_FABRICS
from src.stylebrief.tokens import WeatherFacts


DAY = date(2025, 3, 14)


def _cancer_chart():
    return placement_tokens("Moon", "Cancer") + placement_tokens("Venus", "Cancer")


def test_hot_day_drops_wool_from_a_nurturing_chart():
    content = generate(
        natal_tokens=_cancer_chart(),
        weather=WeatherFacts(temperature=36.0, condition="sunny"),
        on=DAY,
    )
    textiles = content.textiles.lower()
    assert "wool" not in textiles
    assert "knit" not in textiles
    assert "linen" in textiles


def test_mild_day_keeps_the_chart_fabrics():
    content = generate(
        natal_tokens=_cancer_chart(),
        weather=WeatherFacts(temperature=18.0, condition="cloudy"),
        on=DAY,
    )
    assert content.textiles
    assert "water-resistant" not in content.textiles


def test_hot_filter_swaps_warm_for_cool():
    kept = filter_fabrics(TEXTILE_FABRICS["cozy"], WeatherFacts(temperature=30.0))
    assert not any(word in fabric for fabric in kept for word in WARM_FABRICS)
    for fabric in COOL_FABRICS:
        assert fabric in kept


def test_cold_filter_swaps_cool_for_warm():
    kept = filter_fabrics(TEXTILE_FABRICS["luxurious"], WeatherFacts(temperature=4.0))
    assert "silk" not in kept
    assert kept[:2] == ["cashmere", "anything with a rich hand-feel"]
    assert "knits" in kept
    assert kept.count("cashmere") == 1


def test_rain_adds_waterproof_fabrics():
    kept = filter_fabrics(("linen",), WeatherFacts(condition="Light Rain"))
    assert kept == ["linen", "water-resistant shells", "coated cotton"]


def test_thunderstorm_counts_as_rain():
    kept = filter_fabrics(("denim",), WeatherFacts(temperature=15.0, condition="thunderstorm"))
    assert "coated cotton" in kept


def test_no_weather_leaves_fabrics_alone():
    fabrics = TEXTILE_FABRICS["nurturing"]
    assert filter_fabrics(fabrics, None) == list(fabrics)
    assert filter_fabrics(fabrics, WeatherFacts(temperature=18.0)) == list(fabrics)


def test_join_fabrics():
    assert join_fabrics(["silk", "wool", "linen"]) == "Silk, wool and linen"
    assert join_fabrics(["denim"]) == "Denim"
    assert join_fabrics([]) == ""

from __future__ import annotations

from datetime import date

import pytest

from src.stylebrief.analysis import DailySignature
from src.stylebrief.generators import placement_tokens, temporal_tokens, transit_tokens, weather_tokens
from src.stylebrief.tokens import TokenOrigin, TransitAspect, WeatherFacts


def test_placement_tokens_carry_provenance():
    tokens = placement_tokens("venus", "taurus", house=2)
    assert {token.name for token in tokens} == {"luxurious", "sensual"}
    for token in tokens:
        assert token.origin is TokenOrigin.NATAL
        assert (token.planet_source, token.sign_source, token.house_source) == ("Venus", "Taurus", 2)
        assert token.weight == pytest.approx(3.0 * 1.5)


def test_progressed_placements_weigh_less():
    natal = placement_tokens("Mars", "Leo")
    progressed = placement_tokens("Mars", "Leo", TokenOrigin.PROGRESSED)
    assert progressed[0].weight < natal[0].weight
    assert progressed[0].origin is TokenOrigin.PROGRESSED


def test_outer_planets_fall_back_to_element():
    tokens = placement_tokens("Jupiter", "Sagittarius")
    assert [token.name for token in tokens] == ["fiery"]
    assert tokens[0].weight == pytest.approx(3.0 * 0.8 * 0.5)


def test_retrograde_adds_reflective_token():
    names = [token.name for token in placement_tokens("Venus", "Pisces", retrograde=True)]
    assert names[-1] == "reflective"


def test_unknown_sign_yields_nothing():
    assert placement_tokens("Mars", "Ophiuchus") == []


def test_transit_tokens_weigh_major_applying_personal():
    tokens = transit_tokens([TransitAspect("Moon", "Venus", "Trine", orb=0.5, applying=True)])
    names = [token.name for token in tokens]
    assert names == ["intuitive", "soft", "flowing"]
    assert tokens[0].weight == pytest.approx((3.5 + 0.5) * 1.2)
    assert all(token.aspect_source == "Moon Trine Venus" for token in tokens)


def test_wide_minor_transit_is_faint():
    tokens = transit_tokens([TransitAspect("Saturn", "Sun", "Semisquare", orb=6.0)])
    assert tokens[-1].name == "subtle"
    assert tokens[0].weight == pytest.approx(1.5 * 0.3)


@pytest.mark.parametrize(
    "weather, expected",
    [
        (WeatherFacts(temperature=5), {"cozy", "layered"}),
        (WeatherFacts(temperature=25, condition="light rain"), {"breathable", "light", "protective", "weatherproof"}),
        (WeatherFacts(condition="Sunny", humidity=20), {"bright", "vibrant", "hydrating"}),
        (WeatherFacts(condition="hail"), {"adaptable"}),
    ],
)
def test_weather_tokens(weather, expected):
    tokens = weather_tokens(weather)
    assert {token.name for token in tokens} == expected
    assert all(token.origin is TokenOrigin.WEATHER for token in tokens)


def test_no_weather_no_tokens():
    assert weather_tokens(None) == []
    assert weather_tokens(WeatherFacts()) == []


def test_temporal_tokens_follow_day_and_phase():
    signature = DailySignature.for_day(date(2025, 3, 16), 180.0)  # Sunday, full moon
    tokens = temporal_tokens(signature)
    assert [token.name for token in tokens] == ["radiant", "luminous"]
    assert tokens[0].planet_source == "Sun"
    assert tokens[1].planet_source == "Moon"
    assert all(token.origin is TokenOrigin.TEMPORAL for token in tokens)


def test_transit_tokens_ignore_planet_case():
    upper = transit_tokens([TransitAspect("Moon", "Venus", "Trine", orb=0.5)])
    lower = transit_tokens([TransitAspect("moon", "venus", "trine", orb=0.5)])
    assert [(token.name, token.weight, token.planet_source) for token in lower] == [
        (token.name, token.weight, token.planet_source) for token in upper
    ]
    assert [token.name for token in lower] == ["intuitive", "soft", "flowing"]

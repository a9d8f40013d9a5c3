from __future__ import annotations

import math

import pytest

from src.stylebrief.adjusters import (
    DignityLevel,
    apply_freshness_boost,
    assess_dignity,
    dignity_of_pool,
    freshness_multiplier,
)
from src.stylebrief.tokens import Token, TokenCategory, TokenOrigin, TransitAspect, canonical_aspect


def _token(planet: str | None = None, weight: float = 1.0, aspect_source: str | None = None) -> Token:
    return Token(
        name="bold",
        category=TokenCategory.COLOR,
        weight=weight,
        origin=TokenOrigin.TRANSIT,
        planet_source=planet,
        aspect_source=aspect_source,
    )


def test_token_rejects_negative_weight():
    with pytest.raises(ValueError):
        Token(name="bold", category="color", weight=-0.1, origin="natal")


def test_token_rejects_nan_weight():
    with pytest.raises(ValueError):
        Token(name="bold", category="color", weight=math.nan, origin="natal")


def test_token_coerces_string_enums():
    token = Token(name="soft", category="texture", weight=1, origin="weather")
    assert token.category is TokenCategory.TEXTURE
    assert token.origin is TokenOrigin.WEATHER
    assert isinstance(token.weight, float)


def test_with_weight_floors_at_zero():
    assert _token().with_weight(-3).weight == 0.0
    assert _token().with_weight(-3).is_inert


def test_transit_aspect_rejects_negative_orb():
    with pytest.raises(ValueError):
        TransitAspect("Moon", "Venus", "Trine", orb=-1)


def test_aspect_aliases_are_canonical():
    assert canonical_aspect("inconjunct") == "Quincunx"
    assert canonical_aspect(" square ") == "Square"
    assert canonical_aspect("wobble") is None
    assert TransitAspect("Moon", "Venus", "trine").label == "Moon Trine Venus"


def test_moon_boost_exceeds_saturn_boost():
    moon = apply_freshness_boost(_token("Moon"))
    saturn = apply_freshness_boost(_token("Saturn"))
    assert moon.weight > saturn.weight
    assert moon.weight == pytest.approx(3.0)
    assert saturn.weight == pytest.approx(0.6)


def test_tension_and_minor_aspects_amplify():
    base = freshness_multiplier("Mars")
    assert freshness_multiplier("Mars", "Square") == pytest.approx(base * 1.2)
    assert freshness_multiplier("Mars", "Opposition") == pytest.approx(base * 1.2)
    assert freshness_multiplier("Mars", "Quintile") == pytest.approx(base * 1.4)
    assert freshness_multiplier("Mars", "Trine") == pytest.approx(base)


def test_aspect_is_read_from_source_label():
    boosted = apply_freshness_boost(_token("Moon", aspect_source="Moon Square Venus"))
    assert boosted.weight == pytest.approx(3.0 * 1.2)


def test_unknown_planet_uses_default_multiplier():
    assert apply_freshness_boost(_token("Vesta")).weight == pytest.approx(0.9)
    assert apply_freshness_boost(_token(None)).weight == pytest.approx(0.9)


@pytest.mark.parametrize("planet", ["Moon", "Saturn", "Pluto", "Vesta", None])
@pytest.mark.parametrize("weight", [0.0, 0.25, 4.0])
def test_boost_preserves_provenance_and_sign(planet, weight):
    token = _token(planet, weight, aspect_source="Moon Semisquare Sun")
    boosted = apply_freshness_boost(token)
    assert boosted.weight >= 0
    assert (boosted.name, boosted.category, boosted.origin) == (token.name, token.category, token.origin)
    assert boosted.planet_source == token.planet_source
    assert boosted.aspect_source == token.aspect_source


@pytest.mark.parametrize(
    "planet, sign, expected",
    [
        ("Venus", "Taurus", DignityLevel.STRONG),
        ("Sun", "Aries", DignityLevel.STRONG),
        ("saturn", "capricorn", DignityLevel.STRONG),
        ("Venus", "Scorpio", DignityLevel.CHALLENGED),
        ("Sun", "Libra", DignityLevel.CHALLENGED),
        ("Mars", "Gemini", DignityLevel.NEUTRAL),
        ("Ceres", "Leo", DignityLevel.NEUTRAL),
        ("Venus", None, DignityLevel.NEUTRAL),
    ],
)
def test_assess_dignity(planet, sign, expected):
    assert assess_dignity(planet, sign) is expected


def test_dignity_of_pool_uses_heaviest_placed_token():
    tokens = [
        Token("sensual", "mood", 1.0, "natal", planet_source="Venus", sign_source="Scorpio"),
        Token("radiant", "mood", 3.0, "natal", planet_source="Sun", sign_source="Leo"),
        Token("bold", "color", 9.0, "natal"),
    ]
    assert dignity_of_pool(tokens) is DignityLevel.STRONG
    assert dignity_of_pool([]) is DignityLevel.NEUTRAL


@pytest.mark.parametrize("value", [math.inf, -math.inf])
def test_token_rejects_infinite_weight(value):
    with pytest.raises(ValueError):
        Token(name="bold", category="color", weight=value, origin="natal")


def test_transit_aspect_rejects_infinite_orb():
    with pytest.raises(ValueError):
        TransitAspect("Moon", "Venus", "Trine", orb=math.inf)


def test_planet_and_sign_names_are_title_cased():
    aspect = TransitAspect(" moon ", "north node", "trine")
    assert (aspect.transit_planet, aspect.natal_planet) == ("Moon", "North Node")
    token = Token("soft", "texture", 1.0, "natal", planet_source="venus", sign_source="TAURUS")
    assert (token.planet_source, token.sign_source) == ("Venus", "Taurus")


def test_freshness_ignores_planet_case():
    assert freshness_multiplier("moon") == freshness_multiplier("Moon") == pytest.approx(3.0)
    assert freshness_multiplier("SATURN", "square") == pytest.approx(0.6 * 1.2)

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .tokens import Token, canonical_aspect, is_minor_aspect, proper_name


# Larger for short-period bodies; below 1 shrinks slow, static signal.
SPEED_MULTIPLIERS: dict[str, float] = {
    "Moon": 3.0,
    "Mercury": 2.2,
    "Venus": 2.0,
    "Sun": 1.8,
    "Mars": 1.4,
    "Jupiter": 0.8,
    "Saturn": 0.6,
    "Chiron": 0.6,
    "North Node": 0.7,
    "South Node": 0.7,
    "Uranus": 0.5,
    "Neptune": 0.5,
    "Pluto": 0.4,
}
DEFAULT_SPEED_MULTIPLIER = 0.9
TENSION_MULTIPLIER = 1.2
MINOR_MULTIPLIER = 1.4
TENSION_ASPECTS = frozenset({"Square", "Opposition"})


def _aspect_from_source(source: str | None) -> str | None:
    if not source:
        return None
    for word in str(source).split():
        aspect = canonical_aspect(word)
        if aspect:
            return aspect
    return None


def freshness_multiplier(planet: str | None, aspect_type: str | None = None) -> float:
    multiplier = SPEED_MULTIPLIERS.get(proper_name(planet), DEFAULT_SPEED_MULTIPLIER)
    aspect = canonical_aspect(aspect_type)
    if aspect in TENSION_ASPECTS:
        multiplier *= TENSION_MULTIPLIER
    elif is_minor_aspect(aspect):
        multiplier *= MINOR_MULTIPLIER
    return multiplier


def apply_freshness_boost(token: Token, aspect_type: str | None = None) -> Token:
    """Rescale ``token`` so fast-moving, tense or minor-aspect signals read louder.

    The aspect comes from ``aspect_type`` when given, otherwise it is parsed out of
    ``token.aspect_source`` (``"Moon Square Venus"``).
    """

    aspect = aspect_type or _aspect_from_source(token.aspect_source)
    return token.with_weight(token.weight * freshness_multiplier(token.planet_source, aspect))


def boost_all(tokens: Iterable[Token]) -> list[Token]:
    return [apply_freshness_boost(token) for token in tokens]


class DignityLevel(str, Enum):
    STRONG = "strong"
    NEUTRAL = "neutral"
    CHALLENGED = "challenged"


DOMICILE: dict[str, frozenset[str]] = {
    "Sun": frozenset({"Leo"}),
    "Moon": frozenset({"Cancer"}),
    "Mercury": frozenset({"Gemini", "Virgo"}),
    "Venus": frozenset({"Taurus", "Libra"}),
    "Mars": frozenset({"Aries", "Scorpio"}),
    "Jupiter": frozenset({"Sagittarius", "Pisces"}),
    "Saturn": frozenset({"Capricorn", "Aquarius"}),
    "Uranus": frozenset({"Aquarius"}),
    "Neptune": frozenset({"Pisces"}),
    "Pluto": frozenset({"Scorpio"}),
}
EXALTATION: dict[str, str] = {
    "Sun": "Aries",
    "Moon": "Taurus",
    "Mercury": "Virgo",
    "Venus": "Pisces",
    "Mars": "Capricorn",
    "Jupiter": "Cancer",
    "Saturn": "Libra",
}
OPPOSITE_SIGN: dict[str, str] = {
    "Aries": "Libra",
    "Taurus": "Scorpio",
    "Gemini": "Sagittarius",
    "Cancer": "Capricorn",
    "Leo": "Aquarius",
    "Virgo": "Pisces",
    "Libra": "Aries",
    "Scorpio": "Taurus",
    "Sagittarius": "Gemini",
    "Capricorn": "Cancer",
    "Aquarius": "Leo",
    "Pisces": "Virgo",
}
DETRIMENT: dict[str, frozenset[str]] = {
    planet: frozenset(OPPOSITE_SIGN[sign] for sign in signs) for planet, signs in DOMICILE.items()
}
FALL: dict[str, str] = {planet: OPPOSITE_SIGN[sign] for planet, sign in EXALTATION.items()}


def assess_dignity(planet: str | None, sign: str | None) -> DignityLevel:
    if not planet or not sign:
        return DignityLevel.NEUTRAL
    planet = str(planet).strip().title()
    sign = str(sign).strip().title()
    if sign in DOMICILE.get(planet, ()) or EXALTATION.get(planet) == sign:
        return DignityLevel.STRONG
    if sign in DETRIMENT.get(planet, ()) or FALL.get(planet) == sign:
        return DignityLevel.CHALLENGED
    return DignityLevel.NEUTRAL


def dignity_of_pool(tokens: Iterable[Token]) -> DignityLevel:
    """Dignity of the heaviest token that names both a planet and a sign."""

    placed = [token for token in tokens if token.planet_source and token.sign_source]
    if not placed:
        return DignityLevel.NEUTRAL
    heaviest = max(placed, key=lambda token: token.weight)
    return assess_dignity(heaviest.planet_source, heaviest.sign_source)


__all__ = [
    "DignityLevel",
    "apply_freshness_boost",
    "assess_dignity",
    "boost_all",
    "dignity_of_pool",
    "freshness_multiplier",
]

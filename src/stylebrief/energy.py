"""Six-way energy breakdown distributed over a fixed 21 points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Sequence

from .config import energy_min_score
from .tokens import Token, TokenCategory, TokenOrigin


ENERGY_TOTAL = 21
ENERGY_CATEGORIES: tuple[str, ...] = ("classic", "playful", "romantic", "utility", "drama", "edge")
MIN_ENERGY_SCORE = energy_min_score(0.25)
MIN_SCALE = 0.5


@dataclass(frozen=True)
class EnergyBreakdown:
    classic: int = 0
    playful: int = 0
    romantic: int = 0
    utility: int = 0
    drama: int = 0
    edge: int = 0

    @property
    def total(self) -> int:
        return sum(self.as_dict().values())

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in ENERGY_CATEGORIES}

    def dominant(self) -> str:
        values = self.as_dict()
        return max(ENERGY_CATEGORIES, key=lambda name: values[name])


DEFAULT_BREAKDOWN = EnergyBreakdown(classic=6, playful=3, romantic=4, utility=4, drama=2, edge=2)


DEFAULT_MEMBERSHIPS: dict[str, frozenset[str]] = {
    "classic": frozenset({
        "structured", "grounded", "reserved", "solid", "refined", "polished",
        "professional", "timeless", "balanced", "harmonious", "elegant",
        "sophisticated", "classic", "conservative", "traditional", "disciplined",
        "authoritative", "enduring", "substantial", "commanding", "navy",
        "charcoal", "stone", "cream", "tailored", "crisp", "stable", "precise",
    }),
    "playful": frozenset({
        "bright", "vibrant", "dynamic", "energetic", "fun", "expressive",
        "creative", "colorful", "light", "airy", "versatile", "quick",
        "adaptable", "communicative", "cheerful", "playful", "lively",
        "spirited", "eclectic", "exuberant", "optimistic", "fresh",
    }),
    "romantic": frozenset({
        "flowing", "soft", "gentle", "dreamy", "ethereal", "luxurious",
        "sensual", "beautiful", "harmonious", "nurturing", "comfortable",
        "warm", "delicate", "feminine", "graceful", "fluid", "romantic",
        "nostalgic", "comforting", "luminous",
    }),
    "utility": frozenset({
        "practical", "functional", "comfortable", "weatherproof", "durable",
        "purposeful", "protective", "substantial", "enduring", "reliable",
        "versatile", "structured", "tactical", "insulating", "layered",
        "breathable", "anchored", "secure", "cozy", "adaptable", "detailed",
    }),
    "drama": frozenset({
        "bold", "intense", "powerful", "dramatic", "striking", "rich",
        "deep", "transformative", "commanding", "magnetic", "luxurious",
        "royal", "electric", "metallic", "radiant", "glamorous", "confident",
        "assertive",
    }),
    "edge": frozenset({
        "unconventional", "innovative", "unique", "unexpected", "electric",
        "neon", "metallic", "textured", "distinctive", "rebellious",
        "avant-garde", "edgy", "alternative", "disruptive", "experimental",
        "futuristic", "progressive", "independent",
    }),
}


@dataclass(frozen=True)
class BonusRule:
    """Flat increment added to ``category`` for each member token matching ``applies``."""

    category: str
    increment: float
    applies: Callable[[Token], bool]
    label: str = ""


def _planet(name: str) -> Callable[[Token], bool]:
    return lambda token: token.planet_source == name


def _signs(*names: str) -> Callable[[Token], bool]:
    wanted = frozenset(names)
    return lambda token: token.sign_source in wanted


DEFAULT_BONUS_RULES: tuple[BonusRule, ...] = (
    BonusRule("classic", 1.0, lambda t: t.category is TokenCategory.STRUCTURE, "structure token"),
    BonusRule("classic", 1.0, lambda t: t.weight > 2.0, "heavy token"),
    BonusRule("classic", 1.5, _planet("Saturn"), "Saturn"),
    BonusRule("classic", 0.5, _signs("Taurus", "Virgo", "Capricorn"), "earth sign"),
    BonusRule("playful", 1.0, lambda t: t.category is TokenCategory.EXPRESSION, "expression token"),
    BonusRule(
        "playful",
        1.5,
        lambda t: t.category is TokenCategory.COLOR_QUALITY
        and any(word in t.name for word in ("bright", "vibrant", "electric")),
        "bright colour quality",
    ),
    BonusRule("playful", 1.0, _planet("Mercury"), "Mercury"),
    BonusRule("playful", 0.5, _signs("Gemini", "Libra", "Aquarius"), "air sign"),
    BonusRule("romantic", 1.0, lambda t: t.category is TokenCategory.TEXTURE, "texture token"),
    BonusRule("romantic", 2.0, _planet("Venus"), "Venus"),
    BonusRule("romantic", 1.5, _planet("Moon"), "Moon"),
    BonusRule("romantic", 1.0, _signs("Cancer", "Scorpio", "Pisces"), "water sign"),
    BonusRule("utility", 2.0, lambda t: t.origin is TokenOrigin.WEATHER, "weather origin"),
    BonusRule("utility", 1.5, _planet("Saturn"), "Saturn"),
    BonusRule(
        "utility",
        1.0,
        lambda t: t.planet_source == "Mars"
        and any(word in t.name for word in ("practical", "protective", "tactical")),
        "Mars practicality",
    ),
    BonusRule("drama", 1.5, lambda t: t.weight > 3.0, "heavy token"),
    BonusRule("drama", 2.0, _planet("Pluto"), "Pluto"),
    BonusRule("drama", 1.0, _planet("Mars"), "Mars"),
    BonusRule("drama", 1.0, _signs("Aries", "Leo", "Sagittarius"), "fire sign"),
    BonusRule("edge", 2.5, _planet("Uranus"), "Uranus"),
    BonusRule("edge", 1.5, lambda t: t.weight > 2.5, "heavy unconventional token"),
    BonusRule(
        "edge",
        1.0,
        lambda t: t.origin is TokenOrigin.TRANSIT
        and any(word in t.name for word in ("innovative", "unexpected", "disruptive")),
        "transit disruption",
    ),
)


def raw_scores(
    tokens: Sequence[Token],
    memberships: Mapping[str, Iterable[str]],
    bonus_rules: Iterable[BonusRule],
) -> dict[str, float]:
    members = {name: frozenset(memberships.get(name, ())) for name in ENERGY_CATEGORIES}
    rules = list(bonus_rules)
    scores = {name: 0.0 for name in ENERGY_CATEGORIES}
    for token in tokens:
        if token.is_inert:
            continue
        key = token.name.lower()
        for category in ENERGY_CATEGORIES:
            if key not in members[category]:
                continue
            scores[category] += token.weight
            scores[category] += sum(
                rule.increment for rule in rules if rule.category == category and rule.applies(token)
            )
    return scores


def scale_factor(tokens: Sequence[Token]) -> float:
    """Relative multiplier from the mean token weight of the pool."""

    live = [token.weight for token in tokens if not token.is_inert]
    if not live:
        return MIN_SCALE
    return max((sum(live) / len(live)) / 2.0, MIN_SCALE)


def distribute(scores: Mapping[str, float], total: int = ENERGY_TOTAL) -> dict[str, int]:
    """Largest-remainder apportionment of ``total`` points over ``scores``.

    Returns an empty mapping when no score is positive so callers can fall back.
    """

    cleaned = {
        name: (value if math.isfinite(value) and value > 0 else 0.0)
        for name, value in ((name, float(scores.get(name, 0.0))) for name in ENERGY_CATEGORIES)
    }
    peak = max(cleaned.values())
    if peak <= 0:
        return {}
    # Relative to the peak so the sum cannot overflow.
    relative = {name: value / peak for name, value in cleaned.items()}
    score_total = sum(relative.values())
    quotas = {name: value / score_total * total for name, value in relative.items()}
    points = {name: int(math.floor(quota)) for name, quota in quotas.items()}
    residual = total - sum(points.values())
    order = sorted(
        ENERGY_CATEGORIES,
        key=lambda name: (-(quotas[name] - points[name]), ENERGY_CATEGORIES.index(name)),
    )
    for index in range(residual):
        points[order[index % len(order)]] += 1
    return points


def allocate(
    tokens: Iterable[Token],
    memberships: Mapping[str, Iterable[str]] | None = None,
    bonus_rules: Iterable[BonusRule] | None = None,
) -> EnergyBreakdown:
    """Energy breakdown for ``tokens``; always sums to ``ENERGY_TOTAL``."""

    pool = list(tokens)
    scores = raw_scores(
        pool,
        DEFAULT_MEMBERSHIPS if memberships is None else memberships,
        DEFAULT_BONUS_RULES if bonus_rules is None else bonus_rules,
    )
    factor = scale_factor(pool)
    scaled = {name: value * factor for name, value in scores.items()}
    gated = {name: (value if value >= MIN_ENERGY_SCORE else 0.0) for name, value in scaled.items()}
    points = distribute(gated)
    if not points:
        return DEFAULT_BREAKDOWN
    return EnergyBreakdown(**points)


__all__ = [
    "BonusRule",
    "DEFAULT_BONUS_RULES",
    "DEFAULT_BREAKDOWN",
    "DEFAULT_MEMBERSHIPS",
    "ENERGY_CATEGORIES",
    "ENERGY_TOTAL",
    "EnergyBreakdown",
    "allocate",
    "distribute",
    "raw_scores",
    "scale_factor",
]

"""Ordered narrative selection for the daily style brief.

Tiers run top to bottom and the first one that produces text wins:

1. combination rules (named tokens together, optionally gated on the day),
2. a single dominant token,
3. the primary texture / colour / mood tokens poured into a template,
4. an energy direction derived from structure, mood and texture tokens,
5. the generic fallback.

Within a tier the phrase is chosen with ``pick(bank, seed, multiplier)`` so the
same seed does not land on the same slot in every tier.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, NamedTuple

from jinja2 import Environment, Template

from .analysis import DailySignature, TokenAnalysis
from .confidence import ConfidenceLevel
from .phrasebank import (
    COMBINATION_RULES,
    CONFIDENCE_CODAS,
    CONFIDENCE_LEADINS,
    DIRECTION_KEYWORDS,
    DIRECTION_PHRASES,
    DIRECTIONS,
    DOMINANT_MIN_WEIGHT,
    DOMINANT_PHRASES,
    FALLBACK_PHRASES,
    FLOW_GROUND_TOLERANCE,
    PRIMARY_MIN_WEIGHT,
    PRIMARY_SLOT_ORDER,
    PRIMARY_TEMPLATES,
)
from .seed import pick
from .tokens import EPSILON, TokenCategory


logger = logging.getLogger(__name__)

DOMINANT_MULTIPLIER = 37
PRIMARY_MULTIPLIER = 41
DIRECTION_MULTIPLIER = 43
LEADIN_MULTIPLIER = 47
CODA_MULTIPLIER = 53

_SLOT_CATEGORIES: dict[str, TokenCategory] = {
    "texture": TokenCategory.TEXTURE,
    "color": TokenCategory.COLOR,
    "mood": TokenCategory.MOOD,
}
_DIRECTION_CATEGORIES = frozenset({TokenCategory.STRUCTURE, TokenCategory.MOOD, TokenCategory.TEXTURE})

_ENV = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)


@lru_cache(maxsize=256)
def _template(source: str) -> Template:
    return _ENV.from_string(source)


def render(source: str, **context: object) -> str:
    """Render a bank template and collapse stray whitespace."""

    return " ".join(_template(source).render(**context).split())


class Selection(NamedTuple):
    tier: str
    rule: str
    text: str


def _combination_tier(analysis: TokenAnalysis, signature: DailySignature, seed: int) -> Selection | None:
    for rule in COMBINATION_RULES:
        if rule.planetary_days and signature.planetary_day not in rule.planetary_days:
            continue
        if rule.moon_phases and signature.moon_phase not in rule.moon_phases:
            continue
        if all(analysis.has(name, minimum) for name, minimum in rule.requires):
            return Selection("combination", rule.name, pick(rule.phrases, seed, rule.multiplier))
    return None


def _dominant_tier(analysis: TokenAnalysis, signature: DailySignature, seed: int) -> Selection | None:
    for name, weight in analysis.ranked():
        if weight < DOMINANT_MIN_WEIGHT:
            break
        bank = DOMINANT_PHRASES.get(name)
        if bank:
            return Selection("dominant", name, pick(bank, seed, DOMINANT_MULTIPLIER))
    return None


def _primary_slots(analysis: TokenAnalysis) -> dict[str, str]:
    slots: dict[str, str] = {}
    for slot, category in _SLOT_CATEGORIES.items():
        name = analysis.primary(category)
        if name and analysis.weight(name) >= PRIMARY_MIN_WEIGHT:
            slots[slot] = name
    return slots


def _primary_tier(analysis: TokenAnalysis, signature: DailySignature, seed: int) -> Selection | None:
    slots = _primary_slots(analysis)
    for key in PRIMARY_SLOT_ORDER:
        if all(slot in slots for slot in key):
            source = pick(PRIMARY_TEMPLATES[key], seed, PRIMARY_MULTIPLIER)
            return Selection("primary", "+".join(key), render(source, **slots))
    return None


def derive_direction(analysis: TokenAnalysis) -> str | None:
    """Qualitative direction of the pool, or ``None`` without structure/mood/texture tokens."""

    relevant = [
        (name, weight)
        for name, weight in analysis.weights.items()
        if weight > EPSILON and analysis.categories.get(name) in _DIRECTION_CATEGORIES
    ]
    if not relevant:
        return None
    scores = {direction: 0.0 for direction in DIRECTIONS}
    for name, weight in relevant:
        for direction in DIRECTIONS:
            if name in DIRECTION_KEYWORDS[direction]:
                scores[direction] += weight
    best = max(DIRECTIONS, key=lambda direction: scores[direction])
    if scores[best] <= EPSILON:
        return "balanced"
    flowing, grounded = scores["flowing"], scores["grounded"]
    if best in ("flowing", "grounded") and min(flowing, grounded) > EPSILON:
        if abs(flowing - grounded) <= FLOW_GROUND_TOLERANCE * max(flowing, grounded):
            return "balanced"
    return best


def _direction_tier(analysis: TokenAnalysis, signature: DailySignature, seed: int) -> Selection | None:
    direction = derive_direction(analysis)
    if direction is None:
        return None
    return Selection("direction", direction, pick(DIRECTION_PHRASES[direction], seed, DIRECTION_MULTIPLIER))


TIERS: tuple[Callable[[TokenAnalysis, DailySignature, int], Selection | None], ...] = (
    _combination_tier,
    _dominant_tier,
    _primary_tier,
    _direction_tier,
)


def qualify(text: str, confidence: ConfidenceLevel, seed: int) -> str:
    if confidence is ConfidenceLevel.MODERATE:
        return pick(CONFIDENCE_LEADINS, seed, LEADIN_MULTIPLIER) + text
    if confidence is ConfidenceLevel.MEDIUM:
        return text + pick(CONFIDENCE_CODAS, seed, CODA_MULTIPLIER)
    return text


def select_detailed(
    analysis: TokenAnalysis,
    signature: DailySignature,
    seed: int,
    confidence: ConfidenceLevel = ConfidenceLevel.HIGH,
) -> Selection:
    selection: Selection | None = None
    for tier in TIERS:
        selection = tier(analysis, signature, seed)
        if selection is not None and selection.text:
            break
    else:
        selection = Selection("fallback", "generic", pick(FALLBACK_PHRASES, seed))
    logger.debug(
        "style_brief_tier_selected",
        extra={"tier": selection.tier, "rule": selection.rule, "confidence": confidence.value},
    )
    return selection._replace(text=qualify(selection.text, confidence, seed))


def select(
    analysis: TokenAnalysis,
    signature: DailySignature,
    seed: int,
    confidence: ConfidenceLevel = ConfidenceLevel.HIGH,
) -> str:
    """Narrative text for the pool; never empty."""

    return select_detailed(analysis, signature, seed, confidence).text


__all__ = ["Selection", "TIERS", "derive_direction", "qualify", "render", "select", "select_detailed"]

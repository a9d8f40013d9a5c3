from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Sequence

from .analysis import DailySignature, TokenAnalysis
from .confidence import ConfidenceLevel
from .energy import EnergyBreakdown
from .phrasebank import (
    ACCESSORY_PHRASES,
    BRIGHT_TOKENS,
    COLD_THRESHOLD,
    COLOR_DEFAULT,
    COLOR_TEMPLATE,
    COOL_FABRICS,
    DARK_TOKENS,
    HOT_THRESHOLD,
    MUTED_TOKENS,
    PATTERN_PHRASES,
    PHASE_BRIGHTNESS,
    RAIN_WORDS,
    SHAPE_DEFAULT,
    SHAPE_PHRASES,
    SHAPE_TEMPLATE,
    TAKEAWAYS,
    TEXTILE_DEFAULT,
    TEXTILE_FABRICS,
    TEXTILE_TEMPLATE,
    VIVID_TOKENS,
    WARM_FABRICS,
    WATERPROOF_FABRICS,
)
from .seed import pick
from .selector import derive_direction, render
from .tokens import EPSILON, TokenCategory, WeatherFacts


logger = logging.getLogger(__name__)


TAKEAWAY_MULTIPLIER = 59


@dataclass(frozen=True)
class OutputContent:
    narrative: str
    energy_breakdown: EnergyBreakdown
    brightness: int
    vibrancy: int
    textiles: str = ""
    colors: str = ""
    patterns: str = ""
    shape: str = ""
    accessories: str = ""
    takeaway: str = ""
    confidence: str = ConfidenceLevel.HIGH.value
    direction: str = "balanced"
    seed: int = 0
    temperature: float | None = None
    weather_condition: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def clamp_percent(value: float) -> int:
    if value != value:
        return 50
    return int(round(min(max(value, 0.0), 100.0)))


def _balance(analysis: TokenAnalysis, positive: frozenset[str], negative: frozenset[str]) -> float:
    """Signed share of weight in ``positive`` over ``negative``, in [-1, 1]."""

    if analysis.total_weight <= EPSILON:
        return 0.0
    up = sum(weight for name, weight in analysis.weights.items() if name in positive)
    down = sum(weight for name, weight in analysis.weights.items() if name in negative)
    return (up - down) / analysis.total_weight


def brightness_for(analysis: TokenAnalysis, signature: DailySignature) -> int:
    base = 50.0 + 50.0 * _balance(analysis, BRIGHT_TOKENS, DARK_TOKENS)
    return clamp_percent(base + PHASE_BRIGHTNESS.get(signature.moon_phase, 0))


def vibrancy_for(analysis: TokenAnalysis) -> int:
    return clamp_percent(50.0 + 50.0 * _balance(analysis, VIVID_TOKENS, MUTED_TOKENS))


def _mentions(fabric: str, words: Sequence[str]) -> bool:
    text = fabric.lower()
    return any(word in text for word in words)


def filter_fabrics(fabrics: Sequence[str], weather: WeatherFacts | None) -> list[str]:
    """Drop fabrics the weather rules out and add the ones it calls for.

    Above ``HOT_THRESHOLD`` warm fabrics go and cool ones are required; below
    ``COLD_THRESHOLD`` the reverse. Rain, showers and storms require waterproof
    fabrics. Required fabrics already covered by a kept entry are not repeated.
    """

    if weather is None:
        return list(fabrics)
    excluded: tuple[str, ...] = ()
    required: list[str] = []
    temp = weather.temperature
    if temp is not None and temp > HOT_THRESHOLD:
        excluded, required = WARM_FABRICS, list(COOL_FABRICS)
    elif temp is not None and temp < COLD_THRESHOLD:
        excluded, required = COOL_FABRICS, list(WARM_FABRICS)
    if _mentions(weather.condition or "", RAIN_WORDS):
        required.extend(WATERPROOF_FABRICS)

    kept = [fabric for fabric in fabrics if not _mentions(fabric, excluded)]
    for fabric in required:
        if not any(fabric in entry.lower() for entry in kept):
            kept.append(fabric)
    if len(kept) != len(fabrics) or required:
        logger.debug(
            "fabrics_weather_filtered",
            extra={"temperature": temp, "condition": weather.condition, "kept": len(kept)},
        )
    return kept


def join_fabrics(fabrics: Sequence[str]) -> str:
    """``["silk", "wool", "linen"]`` -> ``"Silk, wool and linen"``."""

    items = [fabric for fabric in fabrics if fabric]
    if not items:
        return ""
    text = items[0] if len(items) == 1 else ", ".join(items[:-1]) + " and " + items[-1]
    return text[0].upper() + text[1:]


def textiles_for(analysis: TokenAnalysis, weather: WeatherFacts | None = None) -> str:
    texture = analysis.primary(TokenCategory.TEXTURE)
    if not texture:
        fabrics: Sequence[str] = TEXTILE_DEFAULT
    else:
        fabrics = TEXTILE_FABRICS.get(texture) or (render(TEXTILE_TEMPLATE, texture=texture),)
    return join_fabrics(filter_fabrics(fabrics, weather)) or join_fabrics(TEXTILE_DEFAULT)


def colors_for(analysis: TokenAnalysis) -> str:
    color = analysis.primary(TokenCategory.COLOR)
    if not color:
        return COLOR_DEFAULT
    quality = analysis.primary(TokenCategory.COLOR_QUALITY)
    return render(COLOR_TEMPLATE, color=color, quality=quality)


def shape_for(analysis: TokenAnalysis) -> str:
    structure = analysis.primary(TokenCategory.STRUCTURE)
    if not structure:
        return SHAPE_DEFAULT
    return SHAPE_PHRASES.get(structure) or render(SHAPE_TEMPLATE, structure=structure)


def assemble(
    narrative: str,
    analysis: TokenAnalysis,
    signature: DailySignature,
    breakdown: EnergyBreakdown,
    seed: int,
    confidence: ConfidenceLevel = ConfidenceLevel.HIGH,
    weather: WeatherFacts | None = None,
) -> OutputContent:
    """Package the narrative with the auxiliary style fields."""

    direction = derive_direction(analysis) or "balanced"
    dominant = breakdown.dominant()
    return OutputContent(
        narrative=narrative,
        energy_breakdown=breakdown,
        brightness=brightness_for(analysis, signature),
        vibrancy=vibrancy_for(analysis),
        textiles=textiles_for(analysis, weather),
        colors=colors_for(analysis),
        patterns=PATTERN_PHRASES[direction],
        shape=shape_for(analysis),
        accessories=ACCESSORY_PHRASES[dominant],
        takeaway=pick(TAKEAWAYS[dominant], seed, TAKEAWAY_MULTIPLIER),
        confidence=ConfidenceLevel(confidence).value,
        direction=direction,
        seed=seed,
        temperature=weather.temperature if weather else None,
        weather_condition=weather.condition if weather else None,
    )


__all__ = [
    "OutputContent",
    "assemble",
    "brightness_for",
    "clamp_percent",
    "filter_fabrics",
    "join_fabrics",
    "textiles_for",
    "vibrancy_for",
]

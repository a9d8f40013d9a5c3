"""Bridges request payloads onto the style brief engine.

Shared by the HTTP router and the command line so both accept the same
request shape.
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

from src.stylebrief.engine import generate
from src.stylebrief.generators import placement_tokens
from src.stylebrief.tokens import Token, TokenOrigin, TransitAspect, WeatherFacts
from src.stylebrief.weighting import PRESETS, WeightingModel, default_model, preset

logger = logging.getLogger(__name__)


def resolve_weighting(weighting: Optional[Mapping[str, Any]]) -> WeightingModel:
    """Preset lookup with optional per-key overrides.

    Raises ValueError for an unknown preset or a negative fraction.
    """
    if not weighting:
        return default_model()
    name = weighting.get("preset")
    base = preset(name) if name else default_model()
    fractions = weighting.get("fractions")
    if not fractions:
        return base
    merged = {**base.fractions(), **fractions}
    return WeightingModel.from_mapping(merged, name=f"{base.name}+custom")


def _tokens(items: Iterable[Mapping[str, Any]], origin: TokenOrigin) -> List[Token]:
    return [Token(origin=origin, **dict(item)) for item in items or ()]


def _placements(items: Iterable[Mapping[str, Any]], origin: TokenOrigin) -> List[Token]:
    tokens: List[Token] = []
    for item in items or ():
        tokens.extend(
            placement_tokens(
                item["planet"],
                item["sign"],
                origin,
                house=item.get("house"),
                retrograde=bool(item.get("retrograde", False)),
            )
        )
    return tokens


def _weather(data: Optional[Mapping[str, Any]]) -> Optional[WeatherFacts]:
    if not data:
        return None
    return WeatherFacts(
        temperature=data.get("temperature"),
        condition=data.get("condition"),
        humidity=data.get("humidity"),
    )


def _date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def build_daily_style(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Run one request payload through the engine and return plain JSON data."""

    natal = _tokens(payload.get("natal_tokens"), TokenOrigin.NATAL)
    natal += _placements(payload.get("natal_placements"), TokenOrigin.NATAL)
    progressed = _tokens(payload.get("progressed_tokens"), TokenOrigin.PROGRESSED)
    progressed += _placements(payload.get("progressed_placements"), TokenOrigin.PROGRESSED)
    aspects = [TransitAspect(**dict(item)) for item in payload.get("transit_aspects") or ()]

    content = generate(
        natal_tokens=natal,
        progressed_tokens=progressed,
        transit_aspects=aspects,
        weather=_weather(payload.get("weather")),
        lunar_phase=payload.get("lunar_phase") or 0.0,
        identity=payload.get("identity"),
        on=_date(payload.get("date")),
        weighting=resolve_weighting(payload.get("weighting")),
    )
    logger.debug(
        "daily_style_built",
        extra={"natal": len(natal), "progressed": len(progressed), "aspects": len(aspects)},
    )
    return content.to_dict()


def list_presets() -> Dict[str, Any]:
    return {
        "default": default_model().name,
        "presets": {name: model.fractions() for name, model in PRESETS.items()},
    }

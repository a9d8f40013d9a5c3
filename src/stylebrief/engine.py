"""Daily style brief generation.

``generate`` is pure apart from logging: same inputs, same output.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from .adjusters import boost_all, dignity_of_pool
from .aggregator import TokenPools, aggregate
from .analysis import DailySignature, TokenAnalysis
from .assembler import OutputContent, assemble
from .confidence import adjust_for_dignity, assess_confidence
from .energy import allocate
from .generators import temporal_tokens, transit_tokens, weather_tokens
from .seed import daily_seed
from .selector import select_detailed
from .tokens import Token, TokenOrigin, TransitAspect, WeatherFacts
from .weighting import WeightingModel, default_model


logger = logging.getLogger(__name__)


def _natal_sun_sign(natal_tokens: Iterable[Token]) -> str | None:
    for token in natal_tokens:
        if token.planet_source == "Sun" and token.sign_source:
            return token.sign_source
    return None


def build_pools(
    natal_tokens: Iterable[Token],
    progressed_tokens: Iterable[Token],
    transit_aspects: Iterable[TransitAspect],
    weather: WeatherFacts | None,
    signature: DailySignature,
) -> TokenPools:
    """Tokenise the day's facts and apply freshness to the fast-changing pools."""

    return TokenPools(
        natal=tuple(natal_tokens),
        progressed=tuple(progressed_tokens),
        transit=tuple(boost_all(transit_tokens(transit_aspects))),
        weather=tuple(weather_tokens(weather)),
        temporal=tuple(boost_all(temporal_tokens(signature))),
    )


def generate(
    natal_tokens: Iterable[Token] = (),
    progressed_tokens: Iterable[Token] = (),
    transit_aspects: Iterable[TransitAspect] = (),
    weather: WeatherFacts | None = None,
    lunar_phase: float = 0.0,
    identity: str | None = None,
    on: date | None = None,
    weighting: WeightingModel | None = None,
    sun_sign: str | None = None,
) -> OutputContent:
    natal = tuple(natal_tokens)
    on = on or date.today()
    model = weighting or default_model()
    sun_sign = sun_sign or _natal_sun_sign(natal)

    signature = DailySignature.for_day(on, lunar_phase, sun_sign)
    pools = build_pools(natal, progressed_tokens, transit_aspects, weather, signature)
    pool = aggregate(pools, model)
    analysis = TokenAnalysis.from_tokens(pool)

    seed = daily_seed(identity, on, sun_sign=sun_sign)
    breakdown = allocate(pool)
    confidence = adjust_for_dignity(
        assess_confidence(analysis.weight_by_origin),
        dignity_of_pool(pools.natal),
    )
    selection = select_detailed(analysis, signature, seed, confidence)
    content = assemble(selection.text, analysis, signature, breakdown, seed, confidence, weather)

    logger.info(
        "style_brief_generated",
        extra={
            "date": on.isoformat(),
            "model": model.name,
            "tier": selection.tier,
            "rule": selection.rule,
            "confidence": confidence.value,
            "token_count": len(pool),
        },
    )
    if logger.isEnabledFor(logging.DEBUG):
        for origin in TokenOrigin:
            logger.debug(
                "style_brief_origin_weight",
                extra={"origin": origin.value, "weight": round(analysis.weight_by_origin.get(origin, 0.0), 4)},
            )
    return content


__all__ = ["build_pools", "generate"]

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import DEFAULT_PRESET, weighting_preset_name
from .tokens import Token, TokenOrigin, proper_name


logger = logging.getLogger(__name__)


FAST_BODIES: frozenset[str] = frozenset({"Moon", "Mercury", "Venus", "Sun", "Mars"})

WEIGHT_KEYS: tuple[str, ...] = (
    "natal",
    "progressed",
    "transit_fast",
    "transit_slow",
    "weather",
    "temporal",
)


class WeightingModel(BaseModel):
    """Per-origin weight fractions applied when token pools are blended.

    Fractions usually sum to 1 but are not required to. Keys outside
    ``WEIGHT_KEYS`` are ignored and missing keys weigh nothing.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = "custom"
    natal: float = Field(default=0.0)
    progressed: float = Field(default=0.0)
    transit_fast: float = Field(default=0.0)
    transit_slow: float = Field(default=0.0)
    weather: float = Field(default=0.0)
    temporal: float = Field(default=0.0)

    @field_validator(*WEIGHT_KEYS)
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value != value or value < 0:
            raise ValueError("weighting fractions must be non-negative")
        return float(value)

    @classmethod
    def from_mapping(cls, fractions: Mapping[str, Any], name: str = "custom") -> "WeightingModel":
        values = {key: fractions[key] for key in WEIGHT_KEYS if key in fractions}
        return cls(name=name, **values)

    def fractions(self) -> dict[str, float]:
        return {key: getattr(self, key) for key in WEIGHT_KEYS}

    def fraction_for(self, token: Token, origin: TokenOrigin | None = None) -> float:
        """Fraction for ``token`` in the ``origin`` pool (its own origin by default).

        Transit tokens split on body speed: fast bodies and unsourced tokens use
        ``transit_fast``, everything else ``transit_slow``.
        """

        origin = TokenOrigin(origin) if origin is not None else token.origin
        if origin is TokenOrigin.TRANSIT:
            body = proper_name(token.planet_source)
            if body is None or body in FAST_BODIES:
                return self.transit_fast
            return self.transit_slow
        return getattr(self, origin.value)


PRESETS: dict[str, WeightingModel] = {
    "daily_fit": WeightingModel(
        name="daily_fit",
        natal=0.40,
        progressed=0.15,
        transit_fast=0.15,
        transit_slow=0.05,
        weather=0.10,
        temporal=0.05,
    ),
    "blueprint": WeightingModel(
        name="blueprint",
        natal=0.65,
        progressed=0.20,
        transit_fast=0.08,
        transit_slow=0.04,
        weather=0.03,
        temporal=0.0,
    ),
    "legacy": WeightingModel(
        name="legacy",
        natal=0.45,
        progressed=0.20,
        transit_fast=0.15,
        transit_slow=0.15,
        weather=0.20,
        temporal=0.20,
    ),
}


def preset(name: str) -> WeightingModel:
    key = str(name or "").strip().lower()
    try:
        return PRESETS[key]
    except KeyError:
        raise ValueError(f"Unknown weighting preset '{name}'") from None


@lru_cache(maxsize=1)
def default_model() -> WeightingModel:
    """Process-wide default, resolved once from ``STYLEBRIEF_WEIGHTING_PRESET``."""

    name = weighting_preset_name()
    if name not in PRESETS:
        logger.warning(
            "weighting_preset_unknown",
            extra={"preset": name, "fallback": DEFAULT_PRESET},
        )
        return PRESETS[DEFAULT_PRESET]
    return PRESETS[name]


__all__ = [
    "FAST_BODIES",
    "PRESETS",
    "WEIGHT_KEYS",
    "WeightingModel",
    "default_model",
    "preset",
]

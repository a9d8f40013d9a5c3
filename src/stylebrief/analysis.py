from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping

from .tokens import EPSILON, Token, TokenCategory, TokenOrigin


PLANETARY_DAYS: tuple[str, ...] = ("Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn", "Sun")
MOON_PHASES: tuple[str, ...] = (
    "new",
    "waxing_crescent",
    "first_quarter",
    "waxing_gibbous",
    "full",
    "waning_gibbous",
    "last_quarter",
    "waning_crescent",
)


def moon_phase_bucket(degrees: float) -> str:
    """Eight 45° buckets centred on new (0°), first quarter (90°), full (180°), ..."""

    try:
        value = float(degrees)
    except (TypeError, ValueError):
        value = 0.0
    if not math.isfinite(value):
        value = 0.0
    index = int(((value % 360.0) + 22.5) // 45.0) % 8
    return MOON_PHASES[index]


@dataclass(frozen=True)
class DailySignature:
    on: date
    planetary_day: str
    moon_phase: str
    sun_sign: str | None = None

    @classmethod
    def for_day(cls, on: date, lunar_phase: float = 0.0, sun_sign: str | None = None) -> "DailySignature":
        return cls(
            on=on,
            planetary_day=PLANETARY_DAYS[on.weekday()],
            moon_phase=moon_phase_bucket(lunar_phase),
            sun_sign=sun_sign,
        )


@dataclass(frozen=True)
class TokenAnalysis:
    """Name-level view of an aggregated token pool."""

    weights: Mapping[str, float] = field(default_factory=dict)
    categories: Mapping[str, TokenCategory] = field(default_factory=dict)
    origins: Mapping[str, frozenset[TokenOrigin]] = field(default_factory=dict)
    weight_by_origin: Mapping[TokenOrigin, float] = field(default_factory=dict)
    total_weight: float = 0.0

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> "TokenAnalysis":
        weights: dict[str, float] = {}
        heaviest: dict[str, Token] = {}
        origins: dict[str, set[TokenOrigin]] = {}
        by_origin: dict[TokenOrigin, float] = {}
        for token in tokens:
            if token.is_inert:
                continue
            name = token.name.lower()
            weights[name] = weights.get(name, 0.0) + token.weight
            if name not in heaviest or token.weight > heaviest[name].weight:
                heaviest[name] = token
            origins.setdefault(name, set()).add(token.origin)
            by_origin[token.origin] = by_origin.get(token.origin, 0.0) + token.weight
        return cls(
            weights=weights,
            categories={name: token.category for name, token in heaviest.items()},
            origins={name: frozenset(found) for name, found in origins.items()},
            weight_by_origin=by_origin,
            total_weight=sum(weights.values()),
        )

    @property
    def is_empty(self) -> bool:
        return self.total_weight <= EPSILON

    def weight(self, name: str) -> float:
        return self.weights.get(name.lower(), 0.0)

    def has(self, name: str, min_weight: float = EPSILON) -> bool:
        return self.weight(name) >= max(min_weight, EPSILON)

    def diversity(self, name: str) -> int:
        """How many origins point at ``name``."""

        return len(self.origins.get(name.lower(), ()))

    def ranked(self, category: TokenCategory | None = None) -> list[tuple[str, float]]:
        items = [
            (name, weight)
            for name, weight in self.weights.items()
            if weight > EPSILON and (category is None or self.categories.get(name) == category)
        ]
        return sorted(items, key=lambda item: (-item[1], item[0]))

    def primary(self, category: TokenCategory) -> str | None:
        ranked = self.ranked(category)
        return ranked[0][0] if ranked else None

    def category_weight(self, categories: Iterable[TokenCategory]) -> float:
        wanted = set(categories)
        return sum(weight for name, weight in self.weights.items() if self.categories.get(name) in wanted)


__all__ = ["DailySignature", "MOON_PHASES", "PLANETARY_DAYS", "TokenAnalysis", "moon_phase_bucket"]

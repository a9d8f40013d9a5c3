from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable


EPSILON = 1e-6


class TokenCategory(str, Enum):
    STRUCTURE = "structure"
    MOOD = "mood"
    TEXTURE = "texture"
    COLOR = "color"
    COLOR_QUALITY = "color_quality"
    EXPRESSION = "expression"


class TokenOrigin(str, Enum):
    NATAL = "natal"
    PROGRESSED = "progressed"
    TRANSIT = "transit"
    WEATHER = "weather"
    TEMPORAL = "temporal"


MAJOR_ASPECTS: tuple[str, ...] = ("Conjunction", "Opposition", "Square", "Trine", "Sextile")
MINOR_ASPECTS: tuple[str, ...] = (
    "Quincunx",
    "Semisextile",
    "Semisquare",
    "Sesquisquare",
    "Quintile",
    "BiQuintile",
)
ASPECT_ALIASES = {"inconjunct": "Quincunx", "semi-sextile": "Semisextile", "biquintile": "BiQuintile"}

_CANONICAL_ASPECTS = {name.lower(): name for name in MAJOR_ASPECTS + MINOR_ASPECTS}


def canonical_aspect(name: str | None) -> str | None:
    """Return the canonical spelling of an aspect name, or ``None`` when unknown."""

    if not name:
        return None
    key = str(name).strip().lower()
    if key in ASPECT_ALIASES:
        return ASPECT_ALIASES[key]
    return _CANONICAL_ASPECTS.get(key)


def is_minor_aspect(name: str | None) -> bool:
    return canonical_aspect(name) in MINOR_ASPECTS


def proper_name(name: str | None) -> str | None:
    """Title-cased planet or sign name (``"north node"`` -> ``"North Node"``), ``None`` when blank."""

    if name is None:
        return None
    return str(name).strip().title() or None


@dataclass(frozen=True)
class Token:
    """Weighted semantic label with the provenance that produced it."""

    name: str
    category: TokenCategory
    weight: float
    origin: TokenOrigin
    planet_source: str | None = None
    sign_source: str | None = None
    house_source: int | None = None
    aspect_source: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", TokenCategory(self.category))
        object.__setattr__(self, "origin", TokenOrigin(self.origin))
        weight = float(self.weight)
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"Token weight must be finite and non-negative, got {self.weight!r} for {self.name!r}")
        object.__setattr__(self, "weight", weight)
        object.__setattr__(self, "planet_source", proper_name(self.planet_source))
        object.__setattr__(self, "sign_source", proper_name(self.sign_source))

    @property
    def is_inert(self) -> bool:
        return self.weight <= EPSILON

    def with_weight(self, weight: float) -> "Token":
        """Copy of this token carrying ``weight`` (floored at zero)."""

        return replace(self, weight=max(float(weight), 0.0))

    def describe(self) -> str:
        text = f"{self.name} ({self.category.value}, {self.origin.value}, weight: {self.weight:.3f})"
        if self.planet_source:
            text += f" from {self.planet_source}"
        if self.sign_source:
            text += f" in {self.sign_source}"
        if self.house_source is not None:
            text += f" in house {self.house_source}"
        if self.aspect_source:
            text += f" via {self.aspect_source}"
        return text


@dataclass(frozen=True)
class TransitAspect:
    """Transiting body aspecting a natal point, as supplied by the chart layer."""

    transit_planet: str
    natal_planet: str
    aspect_type: str
    orb: float = 0.0
    applying: bool = False

    def __post_init__(self) -> None:
        orb = float(self.orb)
        if not math.isfinite(orb) or orb < 0:
            raise ValueError(f"Aspect orb must be finite and non-negative, got {self.orb!r}")
        object.__setattr__(self, "orb", orb)
        object.__setattr__(self, "transit_planet", proper_name(self.transit_planet))
        object.__setattr__(self, "natal_planet", proper_name(self.natal_planet))

    @property
    def canonical_type(self) -> str:
        return canonical_aspect(self.aspect_type) or str(self.aspect_type).strip()

    @property
    def is_major(self) -> bool:
        return self.canonical_type in MAJOR_ASPECTS

    @property
    def label(self) -> str:
        return f"{self.transit_planet} {self.canonical_type} {self.natal_planet}"


@dataclass(frozen=True)
class WeatherFacts:
    temperature: float | None = None
    condition: str | None = None
    humidity: float | None = None


def live_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Drop inert tokens, keeping order."""

    return [token for token in tokens if not token.is_inert]


__all__ = [
    "EPSILON",
    "MAJOR_ASPECTS",
    "MINOR_ASPECTS",
    "Token",
    "TokenCategory",
    "TokenOrigin",
    "TransitAspect",
    "WeatherFacts",
    "canonical_aspect",
    "is_minor_aspect",
    "live_tokens",
    "proper_name",
]

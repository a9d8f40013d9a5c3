"""Thin adapters turning chart, aspect, weather and calendar facts into tokens."""

from __future__ import annotations

from typing import Iterable

from .analysis import DailySignature
from .tokens import Token, TokenCategory, TokenOrigin, TransitAspect, WeatherFacts


S = TokenCategory.STRUCTURE
M = TokenCategory.MOOD
X = TokenCategory.TEXTURE
C = TokenCategory.COLOR
Q = TokenCategory.COLOR_QUALITY
E = TokenCategory.EXPRESSION

Keyword = tuple[str, TokenCategory]

PLACEMENT_KEYWORDS: dict[str, dict[str, tuple[Keyword, ...]]] = {
    "Sun": {
        "Aries": (("bold", M), ("dynamic", S)),
        "Taurus": (("sensual", X), ("earthy", C)),
        "Gemini": (("playful", M), ("versatile", S)),
        "Cancer": (("protective", S), ("comfortable", X)),
        "Leo": (("radiant", M), ("expressive", S)),
        "Virgo": (("refined", M), ("practical", S)),
        "Libra": (("balanced", S), ("harmonious", C)),
        "Scorpio": (("intense", M), ("transformative", X)),
        "Sagittarius": (("expansive", S), ("adventurous", M)),
        "Capricorn": (("structured", S), ("enduring", X)),
        "Aquarius": (("innovative", S), ("distinctive", M)),
        "Pisces": (("fluid", S), ("dreamy", M)),
    },
    "Moon": {
        "Aries": (("energetic", M), ("impulsive", X)),
        "Taurus": (("comforting", X), ("stable", M)),
        "Gemini": (("adaptable", S), ("communicative", M)),
        "Cancer": (("nurturing", X), ("emotional", M)),
        "Leo": (("warm", C), ("dramatic", S)),
        "Virgo": (("detailed", S), ("thoughtful", M)),
        "Libra": (("elegant", S), ("social", M)),
        "Scorpio": (("deep", C), ("magnetic", M)),
        "Sagittarius": (("optimistic", M), ("free-spirited", S)),
        "Capricorn": (("grounded", M), ("reserved", S)),
        "Aquarius": (("unique", S), ("independent", M)),
        "Pisces": (("soft", X), ("intuitive", M)),
    },
    "Venus": {
        "Aries": (("spontaneous", S), ("bold", C)),
        "Taurus": (("luxurious", X), ("sensual", M)),
        "Gemini": (("eclectic", S), ("playful", C)),
        "Cancer": (("nostalgic", M), ("nurturing", X)),
        "Leo": (("glamorous", S), ("vibrant", C)),
        "Virgo": (("subtle", C), ("refined", S)),
        "Libra": (("harmonious", S), ("balanced", C)),
        "Scorpio": (("magnetic", M), ("transformative", S)),
        "Sagittarius": (("exuberant", M), ("expansive", C)),
        "Capricorn": (("elegant", S), ("classic", X)),
        "Aquarius": (("unconventional", S), ("futuristic", X)),
        "Pisces": (("romantic", M), ("dreamy", X)),
    },
    "Mars": {
        "Aries": (("assertive", S), ("energetic", X)),
        "Taurus": (("enduring", X), ("substantial", S)),
        "Gemini": (("versatile", S), ("quick", X)),
        "Cancer": (("protective", S), ("nurturing", X)),
        "Leo": (("confident", S), ("bold", C)),
        "Virgo": (("precise", S), ("detailed", X)),
        "Libra": (("balanced", S), ("harmonious", M)),
        "Scorpio": (("intense", C), ("powerful", S)),
        "Sagittarius": (("adventurous", S), ("expansive", X)),
        "Capricorn": (("disciplined", S), ("enduring", X)),
        "Aquarius": (("innovative", S), ("progressive", M)),
        "Pisces": (("fluid", X), ("adaptive", S)),
    },
}

ELEMENT_KEYWORDS: dict[str, Keyword] = {
    "Aries": ("fiery", M),
    "Leo": ("fiery", M),
    "Sagittarius": ("fiery", M),
    "Taurus": ("earthy", M),
    "Virgo": ("earthy", M),
    "Capricorn": ("earthy", M),
    "Gemini": ("airy", M),
    "Libra": ("airy", M),
    "Aquarius": ("airy", M),
    "Cancer": ("watery", M),
    "Scorpio": ("watery", M),
    "Pisces": ("watery", M),
}

PLACEMENT_BASE_WEIGHT = {TokenOrigin.NATAL: 3.0, TokenOrigin.PROGRESSED: 2.5}
PLANET_PRIORITY = {"Venus": 1.5, "Moon": 1.3, "Mars": 1.2, "Sun": 1.1}
DEFAULT_PLANET_PRIORITY = 0.8

TRANSIT_KEYWORDS: dict[str, tuple[Keyword, ...]] = {
    "Sun": (("radiant", M), ("confident", S)),
    "Moon": (("intuitive", M), ("soft", X)),
    "Mercury": (("versatile", S), ("communicative", E)),
    "Venus": (("harmonious", C), ("sensual", X)),
    "Mars": (("bold", C), ("energetic", M)),
    "Jupiter": (("expansive", S), ("optimistic", M)),
    "Saturn": (("structured", S), ("disciplined", E)),
    "Uranus": (("innovative", S), ("electric", Q)),
    "Neptune": (("dreamy", M), ("fluid", X)),
    "Pluto": (("intense", M), ("transformative", X)),
    "Chiron": (("reflective", M), ("textured", X)),
}

ASPECT_KEYWORDS: dict[str, Keyword] = {
    "Conjunction": ("concentrated", Q),
    "Opposition": ("contrasting", Q),
    "Square": ("dynamic", S),
    "Trine": ("flowing", X),
    "Sextile": ("light", X),
    "Quincunx": ("unexpected", E),
}
MINOR_ASPECT_KEYWORD: Keyword = ("subtle", Q)

TRANSIT_MAJOR_WEIGHT = 3.5
TRANSIT_MINOR_WEIGHT = 1.5
APPLYING_BONUS = 0.5
PERSONAL_TRANSITERS = frozenset({"Venus", "Moon", "Sun"})


def _orb_factor(orb: float) -> float:
    if orb <= 1.0:
        return 1.0
    if orb <= 2.0:
        return 0.9
    if orb <= 3.0:
        return 0.7
    if orb <= 5.0:
        return 0.5
    return 0.3


def placement_tokens(
    planet: str,
    sign: str,
    origin: TokenOrigin = TokenOrigin.NATAL,
    *,
    house: int | None = None,
    retrograde: bool = False,
) -> list[Token]:
    """Keyword tokens for a planet-in-sign placement from the natal or progressed chart."""

    origin = TokenOrigin(origin)
    planet = str(planet).strip().title()
    sign = str(sign).strip().title()
    base = PLACEMENT_BASE_WEIGHT.get(origin, 2.5)
    weight = base * PLANET_PRIORITY.get(planet, DEFAULT_PLANET_PRIORITY)

    keywords = PLACEMENT_KEYWORDS.get(planet, {}).get(sign)
    if keywords is None and planet not in PLACEMENT_KEYWORDS and sign in ELEMENT_KEYWORDS:
        keywords = (ELEMENT_KEYWORDS[sign],)
        weight *= 0.5
    tokens = [
        Token(
            name=name,
            category=category,
            weight=weight,
            origin=origin,
            planet_source=planet,
            sign_source=sign,
            house_source=house,
        )
        for name, category in keywords or ()
    ]
    if retrograde:
        tokens.append(
            Token(
                name="reflective",
                category=M,
                weight=weight * 0.7,
                origin=origin,
                planet_source=planet,
                sign_source=sign,
                house_source=house,
            )
        )
    return tokens


def transit_tokens(aspects: Iterable[TransitAspect]) -> list[Token]:
    tokens: list[Token] = []
    for aspect in aspects:
        aspect_type = aspect.canonical_type
        weight = TRANSIT_MAJOR_WEIGHT if aspect.is_major else TRANSIT_MINOR_WEIGHT
        if aspect.applying:
            weight += APPLYING_BONUS
        if aspect.transit_planet in PERSONAL_TRANSITERS:
            weight *= 1.2
        weight *= _orb_factor(aspect.orb)

        keywords = list(TRANSIT_KEYWORDS.get(aspect.transit_planet, ()))
        keywords.append(ASPECT_KEYWORDS.get(aspect_type, MINOR_ASPECT_KEYWORD))
        for name, category in keywords:
            tokens.append(
                Token(
                    name=name,
                    category=category,
                    weight=weight,
                    origin=TokenOrigin.TRANSIT,
                    planet_source=aspect.transit_planet,
                    aspect_source=aspect.label,
                )
            )
    return tokens


def weather_tokens(weather: WeatherFacts | None) -> list[Token]:
    if weather is None:
        return []
    found: list[Keyword] = []
    temp = weather.temperature
    if temp is not None:
        if temp < 10:
            found += [("cozy", X), ("layered", S)]
        elif temp < 20:
            found += [("layered", S), ("crisp", X)]
        elif temp < 30:
            found += [("breathable", X), ("light", X)]
        else:
            found += [("light", X), ("airy", S)]

    condition = (weather.condition or "").lower()
    if condition:
        if any(word in condition for word in ("rain", "drizzle", "shower")):
            found += [("protective", S), ("weatherproof", X)]
        elif "cloud" in condition:
            found += [("muted", C), ("subdued", M)]
        elif "snow" in condition or "ice" in condition:
            found += [("crisp", X), ("insulating", S)]
        elif "fog" in condition or "mist" in condition:
            found += [("diffused", X), ("soft", Q)]
        elif "sun" in condition or "clear" in condition:
            found += [("bright", C), ("vibrant", M)]
        elif "wind" in condition:
            found += [("anchored", S), ("secure", X)]
        else:
            found.append(("adaptable", S))

    humidity = weather.humidity
    if humidity is not None:
        if humidity > 80:
            found.append(("breathable", X))
        elif humidity < 30:
            found.append(("hydrating", X))

    return [
        Token(name=name, category=category, weight=1.0, origin=TokenOrigin.WEATHER)
        for name, category in found
    ]


DAY_KEYWORDS: dict[str, Keyword] = {
    "Sun": ("radiant", E),
    "Moon": ("nurturing", M),
    "Mars": ("energetic", S),
    "Mercury": ("versatile", S),
    "Jupiter": ("expansive", M),
    "Venus": ("harmonious", C),
    "Saturn": ("structured", S),
}
PHASE_KEYWORDS: dict[str, Keyword] = {
    "new": ("reflective", M),
    "waxing_crescent": ("fresh", Q),
    "first_quarter": ("dynamic", S),
    "waxing_gibbous": ("refined", X),
    "full": ("luminous", Q),
    "waning_gibbous": ("generous", M),
    "last_quarter": ("edited", S),
    "waning_crescent": ("soft", X),
}
TEMPORAL_WEIGHT = 1.5


def temporal_tokens(signature: DailySignature) -> list[Token]:
    """Planetary-day and moon-phase tokens for the day being styled."""

    tokens: list[Token] = []
    day = DAY_KEYWORDS.get(signature.planetary_day)
    if day:
        tokens.append(
            Token(
                name=day[0],
                category=day[1],
                weight=TEMPORAL_WEIGHT,
                origin=TokenOrigin.TEMPORAL,
                planet_source=signature.planetary_day,
                aspect_source="Planetary Day",
            )
        )
    phase = PHASE_KEYWORDS.get(signature.moon_phase)
    if phase:
        tokens.append(
            Token(
                name=phase[0],
                category=phase[1],
                weight=TEMPORAL_WEIGHT,
                origin=TokenOrigin.TEMPORAL,
                planet_source="Moon",
                aspect_source="Moon Phase",
            )
        )
    return tokens


__all__ = ["placement_tokens", "temporal_tokens", "transit_tokens", "weather_tokens"]

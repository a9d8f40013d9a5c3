from __future__ import annotations

from datetime import date as Date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


CategoryName = Literal["structure", "mood", "texture", "color", "color_quality", "expression"]


class TokenIn(BaseModel):
    name: str
    category: CategoryName
    weight: float = Field(default=1.0, ge=0)
    planet_source: Optional[str] = None
    sign_source: Optional[str] = None
    house_source: Optional[int] = None
    aspect_source: Optional[str] = None


class PlacementIn(BaseModel):
    planet: str
    sign: str
    house: Optional[int] = None
    retrograde: bool = False


class TransitAspectIn(BaseModel):
    transit_planet: str
    natal_planet: str
    aspect_type: str
    orb: float = Field(default=0.0, ge=0)
    applying: bool = False


class WeatherIn(BaseModel):
    temperature: Optional[float] = None
    condition: Optional[str] = None
    humidity: Optional[float] = None


class WeightingIn(BaseModel):
    preset: Optional[str] = None
    fractions: Optional[Dict[str, float]] = None


class DailyStyleRequest(BaseModel):
    natal_tokens: List[TokenIn] = []
    progressed_tokens: List[TokenIn] = []
    natal_placements: List[PlacementIn] = []
    progressed_placements: List[PlacementIn] = []
    transit_aspects: List[TransitAspectIn] = []
    weather: Optional[WeatherIn] = None
    lunar_phase: float = 0.0
    identity: Optional[str] = None
    date: Optional[Date] = None
    weighting: Optional[WeightingIn] = None


class EnergyBreakdownOut(BaseModel):
    classic: int
    playful: int
    romantic: int
    utility: int
    drama: int
    edge: int


class DailyStyleResponse(BaseModel):
    narrative: str
    energy_breakdown: EnergyBreakdownOut
    brightness: int = Field(ge=0, le=100)
    vibrancy: int = Field(ge=0, le=100)
    textiles: str = ""
    colors: str = ""
    patterns: str = ""
    shape: str = ""
    accessories: str = ""
    takeaway: str = ""
    confidence: str
    direction: str
    seed: int
    temperature: Optional[float] = None
    weather_condition: Optional[str] = None


class PresetsResponse(BaseModel):
    default: str
    presets: Dict[str, Dict[str, float]]

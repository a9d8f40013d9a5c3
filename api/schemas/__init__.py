from .style import (
    DailyStyleRequest,
    DailyStyleResponse,
    EnergyBreakdownOut,
    PlacementIn,
    PresetsResponse,
    TokenIn,
    TransitAspectIn,
    WeatherIn,
    WeightingIn,
)

import logging

from fastapi import APIRouter, Body, HTTPException

from ..schemas import DailyStyleRequest, DailyStyleResponse, PresetsResponse
from ..services.style_service import build_daily_style, list_presets

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/style", tags=["style"])


@router.post("/daily", response_model=DailyStyleResponse)
def daily_style_endpoint(
    req: DailyStyleRequest = Body(
        ...,
        example={
            "natal_placements": [
                {"planet": "Sun", "sign": "Leo"},
                {"planet": "Venus", "sign": "Taurus"},
                {"planet": "Moon", "sign": "Pisces"},
            ],
            "transit_aspects": [
                {"transit_planet": "Moon", "natal_planet": "Venus", "aspect_type": "Trine", "orb": 1.2, "applying": True},
            ],
            "weather": {"temperature": 18.5, "condition": "cloudy"},
            "lunar_phase": 182.0,
            "identity": "user-123",
            "date": "2025-03-14",
            "weighting": {"preset": "daily_fit"},
        },
    )
) -> DailyStyleResponse:
    try:
        data = build_daily_style(req.model_dump())
    except ValueError as exc:
        logger.warning("daily_style_rejected", extra={"error": str(exc)})
        raise HTTPException(status_code=400, detail=str(exc))
    return DailyStyleResponse(**data)


@router.get("/presets", response_model=PresetsResponse)
def presets_endpoint() -> PresetsResponse:
    return PresetsResponse(**list_presets())

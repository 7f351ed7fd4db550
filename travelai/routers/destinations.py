import asyncio
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
import logging

from travelai.models.destination import (
    DestinationDetailsResponse,
    DestinationListResponse,
    RecommendationResponse,
    TravelPreferences,
)
from travelai.services.enrichment_service import get_destination_details
from travelai.services.recommendation_service import RecommendationService, get_recommendation_service
from travelai.services.store_service import TravelStore, get_store
from travelai.utils.quick_filters import QUICK_FILTERS, apply_quick_filter

logger = logging.getLogger(__name__)
router = APIRouter(tags=["destinations"])


@router.post("/destinations/recommend", response_model=RecommendationResponse)
async def recommend_destinations(
    preferences: TravelPreferences,
    service: RecommendationService = Depends(get_recommendation_service),
    store: TravelStore = Depends(get_store),
):
    """
    Generate destination suggestions for the submitted trip form.
    The preferences and the resulting list replace what the store held.
    """
    logger.info(f"Recommendation request: {preferences.model_dump()}")
    await asyncio.to_thread(store.set_preferences, preferences)

    result = await service.get_destination_recommendations(preferences)
    await asyncio.to_thread(store.set_destinations, result.value)

    return RecommendationResponse(destinations=result.value, fallbackUsed=result.fallback_used)


@router.get("/destinations", response_model=DestinationListResponse)
def list_destinations(
    active_filter: Optional[str] = Query(None, alias="filter", description=f"One of {QUICK_FILTERS}"),
    store: TravelStore = Depends(get_store),
):
    if active_filter and active_filter not in QUICK_FILTERS:
        raise HTTPException(status_code=400, detail=f"Unknown filter: {active_filter}. Must be one of {QUICK_FILTERS}")

    state = store.state
    filtered = apply_quick_filter(state.destinations, active_filter, state.preferences)
    return DestinationListResponse(
        filter=active_filter,
        trending=[d for d in filtered if d.isTrending],
        regular=[d for d in filtered if not d.isTrending],
    )


@router.get("/destinations/trending")
def trending_destinations(
    service: RecommendationService = Depends(get_recommendation_service),
    store: TravelStore = Depends(get_store),
):
    result = service.get_trending_destinations()
    if not result.fallback_used:
        store.set_trending_destinations(result.value)
    return {
        "ok": True,
        "trendingDestinations": [d.model_dump() for d in result.value],
        "fallbackUsed": result.fallback_used,
    }


@router.get("/destinations/{name}/details", response_model=DestinationDetailsResponse)
async def destination_details(name: str):
    if not name.strip():
        raise HTTPException(status_code=400, detail="Destination name is required")
    return await get_destination_details(name.strip())


@router.get("/destinations/{name}/insights")
def destination_insights(
    name: str,
    service: RecommendationService = Depends(get_recommendation_service),
):
    result = service.get_local_insights(name.strip())
    return {"ok": True, "destination": name, "insights": result.value, "fallbackUsed": result.fallback_used}

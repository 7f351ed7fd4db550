from fastapi import APIRouter, Depends
import logging

from travelai.models.itinerary import GenerateItineraryRequest, ItineraryResponse, OptimizeItineraryRequest
from travelai.services.itinerary_service import ItineraryService, get_itinerary_service
from travelai.services.smart_adjust import SmartAdjustAgent, get_smart_adjust_agent

logger = logging.getLogger(__name__)
router = APIRouter(tags=["itinerary"])


@router.post("/itinerary", response_model=ItineraryResponse)
def generate_itinerary(
    request: GenerateItineraryRequest,
    service: ItineraryService = Depends(get_itinerary_service),
):
    """Day-by-day plan for a destination; canned days when generation fails."""
    logger.info(f"Generating itinerary for {request.destination} ({request.duration} days)")
    result = service.generate_itinerary(request.destination, request.duration)
    return ItineraryResponse(
        destination=request.destination,
        itinerary=result.value,
        fallbackUsed=result.fallback_used,
    )


@router.post("/itinerary/optimize", response_model=ItineraryResponse)
def optimize_itinerary(
    request: OptimizeItineraryRequest,
    agent: SmartAdjustAgent = Depends(get_smart_adjust_agent),
):
    """Rewrite an itinerary to follow free-text feedback; unchanged on failure."""
    result = agent.optimize_itinerary(request.itinerary, request.feedback)
    return ItineraryResponse(itinerary=result.value, fallbackUsed=result.fallback_used)

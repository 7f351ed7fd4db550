from pydantic import BaseModel, Field
from typing import Optional, List


# ---------------------------
# Core Models
# ---------------------------

class Activity(BaseModel):
    time: str = ""
    name: str
    details: str = ""
    duration: Optional[str] = None


class ItineraryDay(BaseModel):
    day: int = Field(..., ge=1)
    title: str = ""
    activities: List[Activity] = []


class ItineraryPayload(BaseModel):
    """Shape the model is asked to return: {"itinerary": [...]}"""
    itinerary: List[ItineraryDay]


# ---------------------------
# Request/Response Models
# ---------------------------

class GenerateItineraryRequest(BaseModel):
    destination: str = Field(..., min_length=1, max_length=100)
    duration: str = Field("3", description="Trip length in days")


class OptimizeItineraryRequest(BaseModel):
    itinerary: List[ItineraryDay]
    feedback: str = Field(..., min_length=1, max_length=1000)


class ItineraryResponse(BaseModel):
    ok: bool = True
    destination: Optional[str] = None
    itinerary: List[ItineraryDay]
    fallbackUsed: bool = False

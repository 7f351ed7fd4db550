from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List


# ---------------------------
# Core Models
# ---------------------------

class TravelPreferences(BaseModel):
    """Snapshot of the trip form. Never mutated after creation."""
    model_config = ConfigDict(frozen=True)

    budget: str = ""
    locationTypes: List[str] = []
    hotelPreference: str = ""      # "1 Star" .. "5 Star"
    tripDuration: str = ""         # days
    travelStyle: str = ""          # "Solo Trip" | "Group Trip" | "Family Trip"
    travelGuide: str = ""
    packageType: str = ""

    @field_validator('locationTypes')
    @classmethod
    def dedupe_location_types(cls, v):
        seen = []
        for tag in v:
            if tag not in seen:
                seen.append(tag)
        return seen


class BudgetBreakdown(BaseModel):
    flight: int = Field(0, ge=0)
    stay: int = Field(0, ge=0)
    food: int = Field(0, ge=0)
    activities: int = Field(0, ge=0)
    total: int = Field(0, ge=0)

    @field_validator('flight', 'stay', 'food', 'activities', 'total', mode='before')
    @classmethod
    def round_amounts(cls, v):
        if isinstance(v, float):
            return int(v + 0.5) if v >= 0 else v
        return v

    @model_validator(mode="after")
    def recompute_total(self):
        # total is always the sum of the four categories
        self.total = self.flight + self.stay + self.food + self.activities
        return self


class DestinationImage(BaseModel):
    url: str
    alt: str = ""


class Destination(BaseModel):
    name: str
    country: str = ""
    bestTime: str = ""
    budgetRange: str = ""
    match: float = 0
    highlights: List[str] = []
    description: Optional[str] = None
    idealDuration: Optional[str] = None
    travelStyles: List[str] = []
    isTrending: bool = False
    budgetEstimate: Optional[BudgetBreakdown] = None
    imageUrl: Optional[str] = None

    # enrichment
    intro: Optional[str] = None
    summary: Optional[str] = None
    whatToSee: Optional[str] = None
    whatToDo: Optional[str] = None
    images: List[DestinationImage] = []

    def key(self) -> tuple[str, str]:
        """Identity used by the comparison list."""
        return (self.name, self.country)


class TrendingDestination(BaseModel):
    name: str
    country: str = ""
    bestTime: str = ""
    shortDescription: str = ""


# ---------------------------
# LLM payloads
# ---------------------------

class DestinationListPayload(BaseModel):
    destinations: List[Destination]


class TrendingListPayload(BaseModel):
    trendingDestinations: List[TrendingDestination]


# ---------------------------
# Request/Response Models
# ---------------------------

class DestinationRef(BaseModel):
    name: str = Field(..., min_length=1)
    country: str = ""


class RecommendationResponse(BaseModel):
    ok: bool = True
    destinations: List[Destination]
    fallbackUsed: bool = False


class DestinationListResponse(BaseModel):
    ok: bool = True
    filter: Optional[str] = None
    trending: List[Destination]
    regular: List[Destination]


class DestinationDetailsResponse(BaseModel):
    name: str
    intro: str
    summary: str
    whatToSee: str
    whatToDo: str
    images: List[DestinationImage]

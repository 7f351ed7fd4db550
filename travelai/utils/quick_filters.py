import math
from typing import List, Optional

from travelai.models.destination import Destination, TravelPreferences

QUICK_FILTERS = ["Budget Friendly", "Family Friendly", "Adventure", "Nature", "Luxury"]

DEFAULT_USER_BUDGET = 50000


def _user_budget(preferences: Optional[TravelPreferences]) -> int:
    try:
        budget = float(preferences.budget) if preferences else 0
    except ValueError:
        budget = 0
    if not math.isfinite(budget) or budget <= 0:
        return DEFAULT_USER_BUDGET
    return int(budget) or DEFAULT_USER_BUDGET


def _matches(dest: Destination, active_filter: str, preferences: Optional[TravelPreferences]) -> bool:
    text = f"{dest.name} {dest.description or ''} {' '.join(dest.highlights)}".lower()
    budget_text = (dest.budgetRange or "").lower()
    styles = [s.lower() for s in dest.travelStyles]
    total = dest.budgetEstimate.total if dest.budgetEstimate else 0

    user_budget = _user_budget(preferences)
    location_types = preferences.locationTypes if preferences else []
    user_style = (preferences.travelStyle if preferences else "").lower()
    hotel = preferences.hotelPreference if preferences else ""

    if active_filter == "Budget Friendly":
        return (total <= user_budget * 0.8
                or any(k in budget_text for k in ("budget", "low", "affordable", "cheap")))

    if active_filter == "Family Friendly":
        return ("family" in user_style
                or any("family" in s for s in styles)
                or any(k in text for k in ("family", "kids", "children", "playground", "zoo", "theme park")))

    if active_filter == "Adventure":
        return ("Mountains" in location_types
                or any(k in text for k in ("adventure", "hike", "trek", "climb", "safari", "diving", "rafting", "skiing"))
                or any("adventure" in s for s in styles))

    if active_filter == "Nature":
        return ("Nature & Wildlife" in location_types
                or "Mountains" in location_types
                or any(k in text for k in ("nature", "wildlife", "national park", "forest", "jungle",
                                           "safari", "reserve", "sanctuary")))

    if active_filter == "Luxury":
        return (total >= user_budget * 1.2
                or any(k in budget_text for k in ("high", "luxury", "premium", "5-star", "deluxe"))
                or hotel in ("5", "5 Star")
                or any(k in text for k in ("luxury", "resort")))

    return True


def apply_quick_filter(
    destinations: List[Destination],
    active_filter: Optional[str],
    preferences: Optional[TravelPreferences] = None,
) -> List[Destination]:
    if not active_filter:
        return list(destinations)
    return [d for d in destinations if _matches(d, active_filter, preferences)]

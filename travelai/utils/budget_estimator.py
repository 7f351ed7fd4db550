"""
Rule-of-thumb trip cost estimate used on the comparison page.

Costs are in INR. The region is picked from the destination's country, then
flat/per-day bases are scaled by the region multiplier, hotel class and
travel style.
"""

import math
import re
from typing import Any, Dict, Mapping, Optional, Union

from travelai.models.destination import BudgetBreakdown, Destination, TravelPreferences

DEFAULT_DAYS = 3

# (region, country pattern, multiplier) - first match wins
REGIONS = [
    ("Europe", re.compile(r"France|Italy|Germany|Switzerland|Austria|UK|Spain"), 2.2),
    ("USA", re.compile(r"USA|Canada"), 2.5),
    ("MiddleEast", re.compile(r"UAE|Oman|Qatar|Saudi"), 1.4),
    ("SoutheastAsia", re.compile(r"Thailand|Vietnam|Malaysia|Indonesia|Singapore|Philippines"), 0.8),
    ("SouthAsia", re.compile(r"India|Nepal|Sri Lanka|Bangladesh"), 0.6),
    ("EastAsia", re.compile(r"Japan|South Korea|China"), 1.3),
    ("Australia", re.compile(r"Australia|New Zealand"), 2.0),
    ("Africa", re.compile(r"South Africa|Kenya|Tanzania|Egypt"), 1.1),
]
DEFAULT_REGION = ("Default", 1.0)

FLIGHT_BASE = 12000
STAY_PER_NIGHT = 4000
FOOD_PER_DAY = 1500
ACTIVITIES_PER_DAY = 1200

HOTEL_FACTORS = {
    "3 Star": 1.3,
    "4 Star": 1.7,
    "5 Star": 2.3,
}


def classify_region(country: Optional[str]) -> tuple[str, float]:
    """Return (region name, multiplier) for a country string."""
    country = country or ""
    for region, pattern, multiplier in REGIONS:
        if pattern.search(country):
            return region, multiplier
    return DEFAULT_REGION


def _parse_days(value: Any) -> int:
    try:
        days = float(value)
    except (TypeError, ValueError):
        return DEFAULT_DAYS
    if not math.isfinite(days) or days < 1:
        return DEFAULT_DAYS
    return int(days)


def _field(obj: Union[Mapping[str, Any], Any, None], name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _round(value: float) -> int:
    # half-up, not banker's rounding
    return int(value + 0.5)


def estimate_budget(
    destination: Union[Destination, Dict[str, Any]],
    preferences: Optional[Union[TravelPreferences, Dict[str, Any]]] = None,
) -> BudgetBreakdown:
    days = _parse_days(_field(preferences, "tripDuration"))
    hotel = _field(preferences, "hotelPreference") or ""
    style = _field(preferences, "travelStyle") or ""

    _, multiplier = classify_region(_field(destination, "country"))

    flight = FLIGHT_BASE * multiplier
    stay_per_night = STAY_PER_NIGHT * multiplier
    food_per_day = FOOD_PER_DAY * multiplier
    activities_per_day = ACTIVITIES_PER_DAY * multiplier

    for label, factor in HOTEL_FACTORS.items():
        if label in hotel:
            stay_per_night *= factor

    if "Family" in style:
        food_per_day *= 1.6
        activities_per_day *= 1.4
    if "Group" in style:
        stay_per_night *= 0.8

    breakdown = {
        "flight": _round(flight),
        "stay": _round(stay_per_night * days),
        "food": _round(food_per_day * days),
        "activities": _round(activities_per_day * days),
    }
    return BudgetBreakdown(total=sum(breakdown.values()), **breakdown)

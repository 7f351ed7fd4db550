from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List
import logging

from travelai.models.compare import (
    CompareEntry,
    CompareListResponse,
    CompareResponse,
    CompareSummary,
    ProsCons,
)
from travelai.models.destination import Destination
from travelai.services.store_service import TravelStore, get_store
from travelai.utils.best_for import get_best_for_tags
from travelai.utils.budget_estimator import estimate_budget
from travelai.utils.pros_cons import get_pros_cons
from travelai.utils.weather_snapshot import get_weather_snapshot

logger = logging.getLogger(__name__)
router = APIRouter(tags=["compare"])

MIN_COMPARE = 2


def build_summary(entries: List[CompareEntry]) -> CompareSummary:
    # ties resolve to the earliest entry
    cheapest = min(entries, key=lambda e: e.budget.total)
    richest = max(entries, key=lambda e: len(e.destination.highlights))
    return CompareSummary(bestBudget=cheapest.destination.name, mostActivities=richest.destination.name)


@router.get("/compare", response_model=CompareResponse)
def compare_destinations(store: TravelStore = Depends(get_store)):
    state = store.state
    if len(state.compareList) < MIN_COMPARE:
        raise HTTPException(status_code=400, detail="Add at least 2 destinations to compare")

    entries = [
        CompareEntry(
            destination=dest,
            budget=estimate_budget(dest, state.preferences),
            weather=get_weather_snapshot(dest.name),
            prosCons=ProsCons(**get_pros_cons(dest)),
            bestFor=get_best_for_tags(dest),
        )
        for dest in state.compareList
    ]
    return CompareResponse(entries=entries, summary=build_summary(entries))


@router.post("/compare", response_model=CompareListResponse)
def add_to_compare(destination: Destination, store: TravelStore = Depends(get_store)):
    state = store.add_to_compare(destination)
    return CompareListResponse(compareList=state.compareList)


@router.delete("/compare", response_model=CompareListResponse)
def remove_from_compare(
    name: str = Query(..., min_length=1),
    country: str = Query(""),
    store: TravelStore = Depends(get_store),
):
    state = store.remove_from_compare(name, country)
    return CompareListResponse(compareList=state.compareList)

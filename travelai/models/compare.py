from pydantic import BaseModel
from typing import Dict, List, Optional

from travelai.models.destination import BudgetBreakdown, Destination


class ProsCons(BaseModel):
    pros: List[str]
    cons: List[str]


class CompareEntry(BaseModel):
    destination: Destination
    budget: BudgetBreakdown
    weather: Dict[str, str]
    prosCons: ProsCons
    bestFor: List[str]


class CompareSummary(BaseModel):
    bestBudget: str
    mostActivities: str


class CompareResponse(BaseModel):
    ok: bool = True
    entries: List[CompareEntry]
    summary: Optional[CompareSummary] = None


class CompareListResponse(BaseModel):
    ok: bool = True
    compareList: List[Destination]

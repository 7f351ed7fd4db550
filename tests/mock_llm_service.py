"""
Mock LLM service for testing purposes when API keys are not available.
"""

import json
from typing import Any, Dict, List, Optional

from travelai.services.llm_service import LLMConfig, LLMResponse


class MockLLMService:
    """Returns queued responses in order and records every call"""

    def __init__(self, *responses: LLMResponse):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def generate_content(self, messages, config: Optional[LLMConfig] = None) -> LLMResponse:
        self.calls.append({"messages": messages, "config": config})
        if not self.responses:
            return failure("no mock response queued")
        return self.responses.pop(0)


def success(content) -> LLMResponse:
    if not isinstance(content, str):
        content = json.dumps(content)
    return LLMResponse(success=True, content=content, raw_response={}, finish_reason="stop")


def failure(error: str = "API error: 500") -> LLMResponse:
    return LLMResponse(success=False, content="", raw_response=None, error=error)


SAMPLE_ITINERARY = {
    "itinerary": [
        {
            "day": 1,
            "title": "Day 1: Old Town",
            "activities": [
                {"time": "09:00 AM", "name": "Museum of Art", "details": "Paintings.", "duration": "2 hours"},
                {"time": "09:00 AM", "name": "museum of art", "details": "Duplicate.", "duration": "2 hours"},
                {"time": "01:00 PM", "name": "Lunch", "details": "Local food.", "duration": "1 hour"},
            ],
        },
        {
            "day": 2,
            "title": "Day 2 - Lakeside",
            "activities": [
                {"time": "10:00 AM", "name": "Boat Ride", "details": "On the lake.", "duration": "1 hour"},
            ],
        },
    ]
}

SAMPLE_DESTINATIONS = {
    "destinations": [
        {
            "name": "Kyoto",
            "country": "Japan",
            "bestTime": "March to May",
            "budgetRange": "Medium",
            "match": 92,
            "highlights": ["Temples", "Gardens", "Tea ceremonies"],
            "description": "Historic capital with thousands of temples.",
            "idealDuration": "4-5 days",
            "travelStyles": ["Solo Trip", "Family Trip"],
            "isTrending": True,
            "budgetEstimate": {"flight": 45000, "stay": 30000, "food": 9000, "activities": 6000, "total": 90000},
        },
        {
            "name": "Goa",
            "country": "India",
            "bestTime": "November to February",
            "budgetRange": "Low",
            "match": 85,
            "highlights": ["Beaches", "Nightlife"],
            "description": "Beach state on the west coast.",
            "idealDuration": "3-4 days",
            "travelStyles": ["Group Trip"],
            "isTrending": False,
            "budgetEstimate": {"flight": 6000, "stay": 9000, "food": 4500, "activities": 3000, "total": 22500},
        },
    ]
}

import re
import logging
from typing import List, Optional

from pydantic import ValidationError

from travelai.config import settings
from travelai.models.itinerary import Activity, ItineraryDay, ItineraryPayload
from travelai.models.results import ServiceResult
from travelai.services.llm_service import (
    ChatCompletionLLMService,
    LLMConfig,
    SystemInstructions,
    get_llm_service,
)
from travelai.utils.json_extract import safe_parse_json

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

DEFAULT_DAYS = 3

_DAY_PREFIX_RE = re.compile(r"^Day\s*\d+\s*[:,\-]?\s*", re.IGNORECASE)


def parse_days(duration) -> int:
    try:
        days = int(str(duration).strip())
    except (TypeError, ValueError):
        return DEFAULT_DAYS
    return min(days, settings.max_days) if days > 0 else DEFAULT_DAYS


def _template_days(destination: str) -> List[dict]:
    return [
        {
            "title": "Historic City Center & Cultural Immersion",
            "activities": [
                ("09:00 AM", "Historic Walking Tour",
                 f"Begin your exploration of {destination} with a guided walking tour through the historic "
                 "district. Your local guide shares stories about the city's founding, architecture and "
                 "cultural significance, covering major landmarks, hidden alleyways and photo-worthy spots. "
                 "Wear comfortable walking shoes; most tours cost around $25-40 per person.", "2 hours"),
                ("11:30 AM", "Local Coffee Culture Experience",
                 "Visit a traditional local café to experience authentic coffee culture and interact with locals.",
                 "1 hour"),
                ("01:00 PM", "Traditional Lunch",
                 f"Savor authentic local cuisine at a family-run restaurant specializing in traditional {destination} "
                 "dishes. Try the chef's tasting menu of seasonal, regional specialties. Vegetarian options are "
                 "usually available; expect $30-50 per person and book ahead in peak season.", "1.5 hours"),
                ("03:00 PM", "Cultural Museum Visit",
                 "Explore the local history and culture through interactive exhibits and artifacts.", "2 hours"),
                ("05:30 PM", "Art Gallery & Craft Workshops",
                 "Discover local artists and participate in traditional craft-making workshops.", "1.5 hours"),
                ("07:30 PM", "Historic Monument at Sunset",
                 f"Visit the most iconic historic monument in {destination} during golden hour for stunning photos.",
                 "1 hour"),
                ("08:45 PM", "Traditional Dinner & Folk Show",
                 "Experience authentic cuisine with live traditional music and dance performances.", "2 hours"),
            ],
        },
        {
            "title": "Local Markets & Authentic Experiences",
            "activities": [
                ("08:30 AM", "Morning Market Tour",
                 "Explore bustling local markets, interact with vendors, and sample fresh local produce.", "2 hours"),
                ("11:00 AM", "Cooking Class Experience",
                 "Learn to prepare traditional dishes with local ingredients from the market.", "2.5 hours"),
                ("02:00 PM", "Street Food Adventure",
                 "Guided tour of the best street food spots with tastings and cultural stories.", "2 hours"),
                ("04:30 PM", "Local Neighborhood Walk",
                 "Explore residential areas to see authentic daily life and hidden local gems.", "1.5 hours"),
                ("06:30 PM", "Artisan Workshop Visit",
                 "Meet local craftspeople and see traditional techniques in action.", "1.5 hours"),
                ("08:30 PM", "Local Tavern Experience",
                 "Enjoy dinner at a family-run establishment popular with locals.", "2 hours"),
            ],
        },
        {
            "title": "Nature & Scenic Exploration",
            "activities": [
                ("08:00 AM", "Sunrise Nature Hike",
                 f"Early morning hike to the best viewpoint near {destination} for breathtaking sunrise views.",
                 "2.5 hours"),
                ("11:00 AM", "Botanical Gardens Visit",
                 "Explore diverse flora and peaceful walking paths in the local botanical gardens.", "1.5 hours"),
                ("01:00 PM", "Scenic Lunch Spot",
                 "Enjoy lunch at a restaurant with panoramic views of the surrounding landscape.", "1.5 hours"),
                ("03:00 PM", "Water Activities",
                 "Experience local water activities like boating, swimming, or waterfall visits.", "2 hours"),
                ("05:30 PM", "Photography Walk",
                 "Capture the natural beauty and wildlife with a guided photography session.", "1.5 hours"),
                ("07:30 PM", "Sunset Viewpoint",
                 f"Visit the most spectacular sunset location in {destination} for unforgettable views.", "1 hour"),
                ("09:00 PM", "Outdoor Dinner Under Stars",
                 "Dine al fresco with local specialties while enjoying the night sky.", "2 hours"),
            ],
        },
        {
            "title": "Adventure & Outdoor Activities",
            "activities": [
                ("08:30 AM", "Adventure Sports",
                 f"Try popular adventure activities available in {destination} like zip-lining, rock climbing, "
                 "or cycling.", "3 hours"),
                ("12:00 PM", "Energy-Packed Lunch",
                 "Refuel with hearty local dishes at an adventure-themed restaurant.", "1 hour"),
                ("02:00 PM", "Guided Nature Trek",
                 "Explore hidden trails and discover local wildlife with an experienced guide.", "2.5 hours"),
                ("05:00 PM", "Local Sports Experience",
                 "Participate in or watch traditional local sports and games.", "1.5 hours"),
                ("07:00 PM", "Adventure Stories & Relaxation",
                 "Unwind with fellow travelers sharing adventure stories over drinks.", "1.5 hours"),
                ("09:00 PM", "Hearty Dinner",
                 "Celebrate the day with a satisfying meal featuring local specialties.", "2 hours"),
            ],
        },
        {
            "title": "Spiritual & Wellness Journey",
            "activities": [
                ("07:00 AM", "Morning Meditation",
                 "Start with peaceful meditation at a serene location or temple.", "1 hour"),
                ("08:30 AM", "Temple & Spiritual Sites",
                 f"Visit the most significant religious and spiritual sites in {destination}.", "2.5 hours"),
                ("11:30 AM", "Wellness Treatment",
                 "Experience traditional healing practices like massage or spa treatments.", "2 hours"),
                ("02:00 PM", "Healthy Local Cuisine",
                 "Enjoy nutritious local dishes known for their health benefits.", "1.5 hours"),
                ("04:00 PM", "Yoga or Tai Chi Session",
                 "Participate in outdoor yoga or local movement practices.", "1.5 hours"),
                ("06:00 PM", "Peaceful Garden Walk",
                 "Stroll through tranquil gardens or peaceful natural areas.", "1 hour"),
                ("07:30 PM", "Mindful Dinner",
                 "End with a quiet, mindful dining experience focusing on local flavors.", "2 hours"),
            ],
        },
    ]


def fallback_itinerary(destination: str, days: int) -> List[ItineraryDay]:
    """Canned day plans, cycled and renumbered 1..days."""
    templates = _template_days(destination)
    plan = []
    for i in range(days):
        template = templates[i % len(templates)]
        plan.append(ItineraryDay(
            day=i + 1,
            title=template["title"],
            activities=[Activity(time=t, name=n, details=d, duration=dur)
                        for t, n, d, dur in template["activities"]],
        ))
    return plan


def sanitize_itinerary(days: List[ItineraryDay]) -> List[ItineraryDay]:
    """Strip "Day N:" title prefixes and drop repeated (time, name) activities within a day."""
    cleaned = []
    for day in days:
        seen = set()
        activities = []
        for activity in day.activities:
            key = f"{activity.time}-{activity.name}".lower()
            if key in seen:
                continue
            seen.add(key)
            activities.append(activity)
        cleaned.append(ItineraryDay(
            day=day.day,
            title=_DAY_PREFIX_RE.sub("", day.title).strip(),
            activities=activities,
        ))
    return cleaned


class ItineraryService:
    """Service for generating day-by-day itineraries using the centralized LLM service"""

    def __init__(self, llm_service: Optional[ChatCompletionLLMService] = None):
        self.llm_service = llm_service or get_llm_service()

    @staticmethod
    def parse_llm_response(response_content: str) -> List[ItineraryDay]:
        """Parse an {"itinerary": [...]} response, tolerating prose and code fences."""
        logger.info(f"Raw LLM response (first 200 chars): {response_content[:200]}")
        data = safe_parse_json(response_content)
        return ItineraryPayload.model_validate(data).itinerary

    def generate_itinerary(self, destination: str, duration) -> ServiceResult[List[ItineraryDay]]:
        """
        Generate an itinerary for `destination` lasting `duration` days.
        Falls back to the canned templates on any failure.
        """
        days = parse_days(duration)
        logger.info(f"Generating itinerary for {destination}, {days} days")

        response = self.llm_service.generate_content(
            [
                {"role": "system", "content": SystemInstructions.itinerary_planner()},
                {"role": "user", "content": SystemInstructions.itinerary_request(destination, days)},
            ],
            LLMConfig(model=settings.openai_itinerary_model, temperature=0.6, max_tokens=6000),
        )
        if not response.success:
            logger.error(f"LLM call failed: {response.error}")
            return ServiceResult.fallback(fallback_itinerary(destination, days), response.error)

        try:
            itinerary = sanitize_itinerary(self.parse_llm_response(response.content))
        except (ValueError, ValidationError) as e:
            logger.error(f"Failed to parse itinerary response: {e}")
            return ServiceResult.fallback(fallback_itinerary(destination, days), str(e))

        if not itinerary:
            logger.warning("LLM returned an empty itinerary, using templates")
            return ServiceResult.fallback(fallback_itinerary(destination, days), "empty itinerary")

        logger.info("Itinerary generation completed successfully")
        return ServiceResult.ok(itinerary)


def get_itinerary_service() -> ItineraryService:
    """Get instance of ItineraryService"""
    return ItineraryService()

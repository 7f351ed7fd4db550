import asyncio
import json
import logging
from typing import List, Optional

from pydantic import ValidationError

from travelai.config import settings
from travelai.models.destination import (
    Destination,
    DestinationListPayload,
    TravelPreferences,
    TrendingDestination,
    TrendingListPayload,
)
from travelai.models.results import ServiceResult
from travelai.services.enrichment_service import enrich_destinations
from travelai.services.llm_service import (
    ChatCompletionLLMService,
    LLMConfig,
    SystemInstructions,
    get_llm_service,
)
from travelai.services.pexels_service import placeholder_image_url
from travelai.utils.json_extract import safe_parse_json

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

TRENDING_IN_RECOMMENDATIONS = 5


def local_insights_fallback(destination: str) -> str:
    return (
        f"{destination} is a wonderful destination with rich culture and history. "
        "The weather varies by season, so it's best to check current conditions before traveling. "
        "As with any destination, stay aware of your surroundings and follow local guidelines "
        "for a safe and enjoyable trip."
    )


class RecommendationService:
    """Destination suggestions from the chat completion API"""

    def __init__(self, llm_service: Optional[ChatCompletionLLMService] = None):
        self.llm_service = llm_service or get_llm_service()

    async def get_destination_recommendations(self, preferences: TravelPreferences) -> ServiceResult[List[Destination]]:
        """
        Ask for `recommendation_count` destinations, attach a placeholder image
        and enrich each one. Any LLM or parse failure yields an empty list.
        """
        count = settings.recommendation_count
        logger.info(f"Requesting {count} destination recommendations for preferences: {preferences.model_dump()}")

        messages = [
            {"role": "system", "content": SystemInstructions.destination_expert()},
            {"role": "user", "content": SystemInstructions.destination_request(
                json.dumps(preferences.model_dump(), indent=2),
                count=count,
                trending=TRENDING_IN_RECOMMENDATIONS,
            )},
        ]
        # blocking HTTP call, kept off the event loop
        response = await asyncio.to_thread(
            self.llm_service.generate_content, messages, LLMConfig(temperature=0.7, max_tokens=4000)
        )
        if not response.success:
            logger.error(f"Destination recommendation call failed: {response.error}")
            return ServiceResult.fallback([], response.error)

        try:
            payload = DestinationListPayload.model_validate(safe_parse_json(response.content))
        except (ValueError, ValidationError) as e:
            logger.error(f"Destination recommendation response did not match schema: {e}")
            return ServiceResult.fallback([], str(e))

        destinations = [
            d.model_copy(update={"imageUrl": placeholder_image_url(d.name)})
            for d in payload.destinations[:count]
        ]
        logger.info(f"Valid destinations generated: {len(destinations)}")

        enriched = await enrich_destinations(destinations)
        return ServiceResult.ok(enriched)

    def get_trending_destinations(self) -> ServiceResult[List[TrendingDestination]]:
        response = self.llm_service.generate_content(
            [
                {"role": "system", "content": SystemInstructions.trending_analyst()},
                {"role": "user", "content": SystemInstructions.trending_request(settings.trending_count)},
            ],
            LLMConfig(temperature=0.5, max_tokens=800),
        )
        if not response.success:
            logger.error(f"Trending destinations call failed: {response.error}")
            return ServiceResult.fallback([], response.error)

        try:
            payload = TrendingListPayload.model_validate(safe_parse_json(response.content))
        except (ValueError, ValidationError) as e:
            logger.error(f"Failed to parse trending destinations: {e}")
            return ServiceResult.fallback([], str(e))

        return ServiceResult.ok(payload.trendingDestinations[:settings.trending_count])

    def get_local_insights(self, destination: str) -> ServiceResult[str]:
        response = self.llm_service.generate_content(
            [
                {"role": "system", "content": SystemInstructions.local_insights()},
                {"role": "user", "content": (
                    f"Provide local insights for {destination} including culture, weather patterns, "
                    "safety considerations, and essential travel tips."
                )},
            ],
            LLMConfig(temperature=0.7, max_tokens=400, json_mode=False),
        )
        if not response.success or not response.content.strip():
            logger.error(f"Local insights call failed for {destination}: {response.error}")
            return ServiceResult.fallback(local_insights_fallback(destination), response.error)
        return ServiceResult.ok(response.content.strip())


def get_recommendation_service() -> RecommendationService:
    return RecommendationService()

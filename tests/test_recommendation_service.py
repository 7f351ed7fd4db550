import asyncio
import time
from unittest.mock import AsyncMock, patch

from travelai.models.destination import TravelPreferences
from travelai.services.pexels_service import PLACEHOLDER_BASE
from travelai.services.recommendation_service import RecommendationService, local_insights_fallback

from tests.mock_llm_service import SAMPLE_DESTINATIONS, MockLLMService, failure, success

PREFS = TravelPreferences(budget="80000", locationTypes=["Beach"], hotelPreference="3 Star",
                          tripDuration="4", travelStyle="Solo Trip")


def _recommend(mock):
    service = RecommendationService(llm_service=mock)
    with patch("travelai.services.recommendation_service.enrich_destinations",
               new=AsyncMock(side_effect=lambda dests: dests)):
        return asyncio.run(service.get_destination_recommendations(PREFS))


def test_recommendations_get_placeholder_images():
    mock = MockLLMService(success(SAMPLE_DESTINATIONS))
    result = _recommend(mock)

    assert not result.fallback_used
    assert [d.name for d in result.value] == ["Kyoto", "Goa"]
    assert result.value[0].imageUrl == PLACEHOLDER_BASE + "Kyoto"
    assert result.value[0].budgetEstimate.total == 90000
    assert '"budget": "80000"' in mock.calls[0]["messages"][1]["content"]


def test_failure_yields_empty_list():
    result = _recommend(MockLLMService(failure()))
    assert result.fallback_used
    assert result.value == []


def test_schema_mismatch_yields_empty_list():
    result = _recommend(MockLLMService(success({"places": []})))
    assert result.fallback_used
    assert result.value == []


def test_trending_and_insights():
    trending = {"trendingDestinations": [
        {"name": "Tbilisi", "country": "Georgia", "bestTime": "May", "shortDescription": "Wine and old town."}]}
    service = RecommendationService(llm_service=MockLLMService(success(trending), failure()))

    result = service.get_trending_destinations()
    assert result.value[0].name == "Tbilisi"

    insights = service.get_local_insights("Tbilisi")
    assert insights.fallback_used
    assert insights.value == local_insights_fallback("Tbilisi")


class SlowLLMService(MockLLMService):
    def generate_content(self, messages, config=None):
        time.sleep(0.5)
        return super().generate_content(messages, config)


def test_llm_call_does_not_block_event_loop():
    service = RecommendationService(llm_service=SlowLLMService(success(SAMPLE_DESTINATIONS)))

    async def tick(started):
        await asyncio.sleep(0.05)
        return time.monotonic() - started

    async def run():
        started = time.monotonic()
        with patch("travelai.services.recommendation_service.enrich_destinations",
                   new=AsyncMock(side_effect=lambda dests: dests)):
            return await asyncio.gather(service.get_destination_recommendations(PREFS), tick(started))

    result, ticked_after = asyncio.run(run())
    assert [d.name for d in result.value] == ["Kyoto", "Goa"]
    assert ticked_after < 0.4

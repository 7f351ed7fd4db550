import json
import logging
from typing import List, Optional

from pydantic import ValidationError

from travelai.config import settings
from travelai.models.itinerary import ItineraryDay
from travelai.models.results import ServiceResult
from travelai.services.itinerary_service import ItineraryService
from travelai.services.llm_service import (
    ChatCompletionLLMService,
    LLMConfig,
    SystemInstructions,
    get_llm_service,
)

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def _activity_summary(plan: List[ItineraryDay]) -> str:
    count = sum(len(day.activities) for day in plan)
    names = [a.name for day in plan for a in day.activities]
    return f"{count} activities: {names}"


class SmartAdjustAgent:
    def __init__(self, llm_service: Optional[ChatCompletionLLMService] = None):
        self.llm_service = llm_service or get_llm_service()

    def optimize_itinerary(self, plan: List[ItineraryDay], feedback: str) -> ServiceResult[List[ItineraryDay]]:
        """
        Rewrite `plan` so it obeys the user's feedback.
        On any failure the original plan comes back unchanged.
        """
        logger.info("SmartAdjustAgent: optimize_itinerary method called")
        logger.info(f"Feedback received: {feedback}")
        logger.info(f"Original itinerary has {_activity_summary(plan)}")

        itinerary_json = json.dumps([day.model_dump() for day in plan], indent=2)
        response = self.llm_service.generate_content(
            [
                {"role": "system", "content": SystemInstructions.itinerary_optimizer()},
                {"role": "user", "content": SystemInstructions.optimize_request(itinerary_json, feedback)},
            ],
            LLMConfig(model=settings.openai_model, temperature=0.7, max_tokens=6000),
        )
        if not response.success:
            logger.error(f"LLM call failed: {response.error}")
            logger.warning("Returning original itinerary due to error")
            return ServiceResult.fallback(plan, response.error)

        try:
            optimized = ItineraryService.parse_llm_response(response.content)
        except (ValueError, ValidationError) as e:
            logger.error(f"Failed to parse LLM response: {e}")
            logger.warning("Returning original itinerary due to parsing error")
            return ServiceResult.fallback(plan, str(e))

        if not optimized:
            logger.warning("Optimized itinerary is empty, returning original itinerary")
            return ServiceResult.fallback(plan, "empty itinerary")

        logger.info(f"Optimized itinerary has {_activity_summary(optimized)}")
        return ServiceResult.ok(optimized)


def get_smart_adjust_agent() -> SmartAdjustAgent:
    return SmartAdjustAgent()

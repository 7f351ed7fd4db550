import json
import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

import requests

from travelai.config import settings

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# JSON Schemas the model output must follow.
# Responses are validated with the matching pydantic payload models.
BUDGET_ESTIMATE_JSON_SCHEMA = {
    "type": "object",
    "required": ["flight", "stay", "food", "activities", "total"],
    "properties": {
        "flight": {"type": "integer", "minimum": 0, "description": "Round-trip flight from a major Indian city (INR)"},
        "stay": {"type": "integer", "minimum": 0, "description": "Accommodation for the whole stay (INR)"},
        "food": {"type": "integer", "minimum": 0, "description": "Food for the whole stay (INR)"},
        "activities": {"type": "integer", "minimum": 0, "description": "Sightseeing, tours and experiences (INR)"},
        "total": {"type": "integer", "minimum": 0, "description": "Sum of all categories (INR)"}
    }
}

DESTINATION_LIST_JSON_SCHEMA = {
    "type": "object",
    "required": ["destinations"],
    "properties": {
        "destinations": {
            "type": "array",
            "minItems": 12,
            "maxItems": 12,
            "items": {
                "type": "object",
                "required": ["name", "country", "bestTime", "budgetRange", "match", "highlights", "isTrending"],
                "properties": {
                    "name": {"type": "string"},
                    "country": {"type": "string"},
                    "bestTime": {"type": "string"},
                    "budgetRange": {"type": "string"},
                    "match": {"type": "number", "minimum": 0, "maximum": 100},
                    "description": {"type": "string"},
                    "highlights": {"type": "array", "items": {"type": "string"}},
                    "idealDuration": {"type": "string"},
                    "travelStyles": {"type": "array", "items": {"type": "string"}},
                    "isTrending": {"type": "boolean", "description": "true for the first 5 destinations, false for the rest"},
                    "budgetEstimate": BUDGET_ESTIMATE_JSON_SCHEMA
                }
            }
        }
    }
}

TRENDING_JSON_SCHEMA = {
    "type": "object",
    "required": ["trendingDestinations"],
    "properties": {
        "trendingDestinations": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "country", "bestTime", "shortDescription"],
                "properties": {
                    "name": {"type": "string", "description": "City or region"},
                    "country": {"type": "string"},
                    "bestTime": {"type": "string", "description": "Short phrase"},
                    "shortDescription": {"type": "string", "description": "1-2 sentence teaser"}
                }
            }
        }
    }
}

ITINERARY_JSON_SCHEMA = {
    "type": "object",
    "required": ["itinerary"],
    "properties": {
        "itinerary": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["day", "title", "activities"],
                "properties": {
                    "day": {"type": "integer", "minimum": 1},
                    "title": {"type": "string"},
                    "activities": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["time", "name", "details"],
                            "properties": {
                                "time": {"type": "string", "description": "e.g. 09:00 AM"},
                                "name": {"type": "string"},
                                "details": {"type": "string"},
                                "duration": {"type": "string", "description": "e.g. 2 hours"}
                            }
                        }
                    }
                }
            }
        }
    }
}


def schema_text(schema: Dict[str, Any]) -> str:
    return json.dumps(schema, indent=2)


@dataclass
class LLMConfig:
    """Configuration for LLM calls"""
    model: str = settings.openai_model
    temperature: float = 0.7
    max_tokens: int = 3000
    json_mode: bool = True


@dataclass
class LLMResponse:
    """Standardized LLM response"""
    success: bool
    content: str
    raw_response: Any
    error: Optional[str] = None
    finish_reason: Optional[str] = None


class ChatCompletionLLMService:
    """Thin client for an OpenAI compatible /chat/completions endpoint"""

    def __init__(self, api_key: Optional[str] = None, api_url: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.api_url = api_url or settings.openai_api_url

        if not self.api_key:
            logger.warning("OPENAI_API_KEY not configured; AI calls will use fallbacks")

    def _build_body(self, messages: List[Dict[str, str]], config: LLMConfig) -> Dict[str, Any]:
        body = {
            "model": config.model,
            "messages": messages,
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
        }
        if config.json_mode:
            body["response_format"] = {"type": "json_object"}
        return body

    def generate_content(
        self,
        messages: List[Dict[str, str]],
        config: Optional[LLMConfig] = None
    ) -> LLMResponse:
        """
        Send a chat completion request.

        Args:
            messages: OpenAI style [{"role": ..., "content": ...}] list
            config: LLM configuration (optional, uses defaults if not provided)

        Returns:
            LLMResponse; never raises
        """
        if config is None:
            config = LLMConfig()

        if not self.api_key:
            return LLMResponse(success=False, content="", raw_response=None,
                               error="OPENAI_API_KEY not configured")

        try:
            logger.info(f"Making LLM call with model: {config.model}, messages: {len(messages)}")

            response = requests.post(
                self.api_url,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                json=self._build_body(messages, config),
                timeout=settings.request_timeout_seconds,
            )
            if not response.ok:
                raise RuntimeError(f"Chat completion API error: {response.status_code} - {response.text[:500]}")

            data = response.json()
            choice = (data.get("choices") or [{}])[0]
            content = (choice.get("message") or {}).get("content") or ""
            finish_reason = choice.get("finish_reason")

            logger.info(f"LLM call successful, model: {data.get('model')}, usage: {data.get('usage')}, "
                        f"response length: {len(content)}")
            if finish_reason == "length":
                logger.warning("LLM response was truncated by max_tokens; consider raising the limit")

            return LLMResponse(
                success=True,
                content=content,
                raw_response=data,
                finish_reason=finish_reason
            )

        except Exception as e:
            logger.error(f"LLM call failed: {e}")
            return LLMResponse(
                success=False,
                content="",
                raw_response=None,
                error=str(e)
            )


# Singleton instance
_llm_service_instance = None

def get_llm_service() -> ChatCompletionLLMService:
    """Get singleton instance of LLM service"""
    global _llm_service_instance
    if _llm_service_instance is None:
        _llm_service_instance = ChatCompletionLLMService()
    return _llm_service_instance


# Predefined System Instructions
class SystemInstructions:
    """Collection of predefined system instructions"""

    @staticmethod
    def destination_expert() -> str:
        return (
            "You are a global travel expert with access to real-time travel pricing data. "
            "Research current travel costs and provide accurate budget estimates. "
            "Respond ONLY with valid JSON matching the schema."
        )

    @staticmethod
    def destination_request(preferences_json: str, count: int = 12, trending: int = 5) -> str:
        return (
            f"User preferences:\n{preferences_json}\n\n"
            f"Generate EXACTLY {count} destinations with REAL-TIME budget estimates.\n\n"
            "IMPORTANT: Structure the response as:\n"
            f"- First {trending} destinations: TRENDING destinations that match user preferences (set isTrending: true)\n"
            f"- Next {count - trending} destinations: Additional great matches (set isTrending: false)\n\n"
            "For TRENDING destinations, prioritize:\n"
            "- Currently popular destinations\n"
            "- Destinations matching user location preferences\n"
            "- Seasonal trending spots based on bestTime\n"
            "- Instagram-worthy, social media popular places\n\n"
            "For budgetEstimate, provide current pricing in INR for:\n"
            "- flight: Round-trip from major Indian cities (Delhi/Mumbai/Bangalore)\n"
            "- stay: Accommodation based on hotel preference and duration\n"
            "- food: Daily food costs (local + some dining out)\n"
            "- activities: Sightseeing, tours, and experiences\n"
            "- total: Sum of all categories\n\n"
            "Consider the user's budget, travel style, and trip duration.\n\n"
            f"=== REQUIRED JSON SCHEMA ===\n{schema_text(DESTINATION_LIST_JSON_SCHEMA)}\n"
            "\nRespond ONLY with valid JSON."
        )

    @staticmethod
    def trending_analyst() -> str:
        return (
            "You are a travel trends analyst.\n\n"
            "Your task is to list currently trending travel destinations globally.\n\n"
            f"Return ONLY valid JSON with this exact shape:\n{schema_text(TRENDING_JSON_SCHEMA)}\n\n"
            "Do not include any extra text, comments, or markdown."
        )

    @staticmethod
    def trending_request(count: int = 6) -> str:
        return (
            f"Generate exactly {count} trending travel destinations from around the world.\n\n"
            "Each destination should have:\n"
            "- name (city or region)\n"
            "- country\n"
            "- bestTime (short phrase)\n"
            "- shortDescription (1-2 sentence teaser)"
        )

    @staticmethod
    def itinerary_planner() -> str:
        return (
            "You are an expert travel planner with deep local knowledge. "
            "Create highly detailed, immersive itineraries. Respond ONLY in valid JSON."
        )

    @staticmethod
    def itinerary_request(destination: str, days: int) -> str:
        return (
            f"Generate a comprehensive, detailed itinerary for {destination} lasting {days} days.\n\n"
            "IMPORTANT REQUIREMENTS for each activity:\n"
            "- Make activity details VERY detailed and informative (3-4 sentences minimum)\n"
            "- Include specific locations, addresses, or landmarks when possible\n"
            "- Add practical tips, what to expect, and insider knowledge\n"
            "- Mention costs, booking requirements, or special considerations\n"
            "- Include cultural context and historical significance where relevant\n"
            "- Add local food recommendations and transportation tips between activities\n\n"
            f"Return exactly {days} days numbered from 1.\n\n"
            f"=== REQUIRED JSON SCHEMA ===\n{schema_text(ITINERARY_JSON_SCHEMA)}"
        )

    @staticmethod
    def itinerary_optimizer() -> str:
        return (
            "You are a strict travel planner who MUST follow user instructions exactly.\n\n"
            "=== RULES FOR MODIFICATION ===\n"
            "1. User feedback contains MANDATORY CONSTRAINTS that you MUST obey completely\n"
            "2. If user says \"remove museums\" - DELETE ALL museum activities\n"
            "3. If user says \"no early morning\" - DELETE ALL activities before 9 AM\n"
            "4. If user says \"remove [specific thing]\" - DELETE ALL matching activities\n"
            "5. If user says \"add more [thing]\" - ADD relevant activities while keeping constraints\n"
            "6. NEVER keep activities that violate user constraints\n"
            "7. It's better to have fewer activities than to violate user requests\n\n"
            "=== DELETION KEYWORDS ===\n"
            "\"remove\", \"delete\", \"no\", \"don't want\", \"skip\", \"avoid\", \"not interested\"\n"
            "When you see these, you MUST delete matching activities.\n\n"
            "=== REPLACEMENT STRATEGY ===\n"
            "- After deleting unwanted activities, fill gaps with activities the user would like\n"
            "- Keep the same time slots but change the activity type\n"
            "- Maintain logical flow and timing\n\n"
            "=== OUTPUT FORMAT ===\n"
            "Respond ONLY with valid JSON following the schema below. "
            "Do not include explanations, markdown formatting, or any text outside the JSON.\n\n"
            f"=== REQUIRED JSON SCHEMA ===\n{schema_text(ITINERARY_JSON_SCHEMA)}"
        )

    @staticmethod
    def optimize_request(itinerary_json: str, feedback: str) -> str:
        return (
            f"CURRENT ITINERARY:\n{itinerary_json}\n\n"
            f"USER CONSTRAINTS (MUST BE FOLLOWED EXACTLY):\n\"\"\"\n{feedback}\n\"\"\"\n\n"
            "MANDATORY STEPS:\n"
            "1. READ the user feedback carefully\n"
            "2. IDENTIFY what needs to be removed/changed\n"
            "3. DELETE all activities that match removal requests\n"
            "4. REPLACE deleted activities with user-preferred alternatives\n"
            "5. ENSURE no forbidden activities remain\n\n"
            "CRITICAL: If the user asks to remove something, it MUST be completely gone from the final itinerary.\n\n"
            "Return ONLY a JSON object of the form {\"itinerary\": [...]}."
        )

    @staticmethod
    def chat_assistant() -> str:
        return (
            "You are a professional AI travel assistant.\n\n"
            "=== RESPONSE STYLE ===\n"
            "- Clear, readable, structured\n"
            "- Broken into short paragraphs\n"
            "- Use bullet points when helpful\n"
            "- Use **bold** for subheadings like: **Where to Stay**, **Things to Do**, **Best Time**, **Costs**\n"
            "- Never send JSON, never use code blocks\n"
            "- Never send extremely long essays\n"
            "- Maintain a friendly, expert travel tone\n"
            "- Always focus on giving practical, real travel advice"
        )

    @staticmethod
    def local_insights() -> str:
        return (
            "You are a local travel expert. Provide a concise paragraph about the destination "
            "covering culture, weather, safety, and basic travel tips."
        )

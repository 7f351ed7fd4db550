import logging

from travelai.config import settings
from travelai.models.results import ServiceResult
from travelai.services.http_client import get_json, first_page_extract
from travelai.utils.text_cleaning import clean_html_text, truncate_sentences

logger = logging.getLogger(__name__)

INTRO_MAX_CHARS = 400


def intro_fallback(city_name: str) -> str:
    return f"{city_name} is a fascinating destination with rich history and culture."


def get_city_intro(city_name: str) -> ServiceResult[str]:
    """Introductory paragraph of the city's Wikipedia article."""
    try:
        data = get_json(settings.wikipedia_api_url, params={
            "action": "query",
            "prop": "extracts",
            "exintro": 1,
            "titles": city_name,
            "format": "json",
        })
        intro = clean_html_text(first_page_extract(data))
        if not intro:
            return ServiceResult.fallback(intro_fallback(city_name), "empty extract")
        return ServiceResult.ok(truncate_sentences(intro, INTRO_MAX_CHARS))

    except Exception as e:
        logger.error(f"Error fetching Wikipedia intro for {city_name}: {e}")
        return ServiceResult.fallback(intro_fallback(city_name), str(e))

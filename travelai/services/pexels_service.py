import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

from travelai.config import settings
from travelai.services.http_client import get_json

logger = logging.getLogger(__name__)

PLACEHOLDER_BASE = "https://via.placeholder.com/400x300/4F46E5/FFFFFF?text="


def placeholder_image_url(text: Optional[str]) -> str:
    return PLACEHOLDER_BASE + quote(text or "Travel", safe="")


def placeholder_payload(query: Optional[str]) -> Dict[str, Any]:
    return {
        "photos": [
            {
                "id": 1,
                "src": {"medium": placeholder_image_url(query)},
                "alt": f"Placeholder image for {query}",
            }
        ]
    }


def search_photos(query: Optional[str]) -> Dict[str, Any]:
    """
    Forward a photo search to Pexels.

    Never raises: a missing key or an upstream error yields the
    placeholder payload so the UI always gets something to render.
    """
    logger.info(f"Incoming image search request: {query}")

    if not settings.pexels_api_key:
        logger.warning("Pexels API key not found, returning placeholder image")
        return placeholder_payload(query)

    try:
        return get_json(
            settings.pexels_api_url,
            params={"query": query or "", "per_page": 1},
            headers={"Authorization": settings.pexels_api_key},
        )
    except Exception as e:
        logger.error(f"Pexels search failed for {query}: {e}")
        return placeholder_payload(query)

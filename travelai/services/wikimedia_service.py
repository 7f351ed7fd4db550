import logging
import re
from typing import List

from travelai.config import settings
from travelai.models.destination import DestinationImage
from travelai.models.results import ServiceResult
from travelai.services.http_client import get_json

logger = logging.getLogger(__name__)

MAX_IMAGES = 5
_PHOTO_RE = re.compile(r"\.(jpg|jpeg|png|webp)$", re.IGNORECASE)
_EXCLUDED = ("Commons-logo", "Wikimedia", "icon")

DEFAULT_IMAGE_URLS = [
    ("https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=800&h=600&fit=crop&crop=entropy&auto=format&q=80",
     "Scenic view of {city}"),
    ("https://images.unsplash.com/photo-1469474968028-56623f02e42e?w=800&h=600&fit=crop&crop=entropy&auto=format&q=80",
     "Landscape of {city}"),
    ("https://images.unsplash.com/photo-1501594907352-04cda38ebc29?w=800&h=600&fit=crop&crop=entropy&auto=format&q=80",
     "Architecture in {city}"),
]


def default_images(city_name: str) -> List[DestinationImage]:
    return [DestinationImage(url=url, alt=alt.format(city=city_name)) for url, alt in DEFAULT_IMAGE_URLS]


def _is_photo(url: str) -> bool:
    return bool(_PHOTO_RE.search(url)) and not any(x in url for x in _EXCLUDED)


def get_destination_images(city_name: str) -> ServiceResult[List[DestinationImage]]:
    """Up to five photos used on the city's Commons page."""
    try:
        data = get_json(settings.wikimedia_api_url, params={
            "action": "query",
            "generator": "images",
            "titles": city_name,
            "gimlimit": 10,
            "prop": "imageinfo",
            "iiprop": "url",
            "format": "json",
        })
    except Exception as e:
        logger.error(f"Error fetching images for {city_name}: {e}")
        return ServiceResult.fallback(default_images(city_name), str(e))

    pages = (data.get("query") or {}).get("pages") or {}
    images = []
    for page in pages.values():
        info = page.get("imageinfo") or []
        url = info[0].get("url") if info else None
        if url and _is_photo(url):
            images.append(DestinationImage(url=url, alt=f"Beautiful view of {city_name}"))

    if not images:
        return ServiceResult.fallback(default_images(city_name), "no usable images")
    return ServiceResult.ok(images[:MAX_IMAGES])

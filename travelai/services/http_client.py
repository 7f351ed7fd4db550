"""Shared GET helper for the public, unauthenticated reference APIs."""

import logging
from typing import Any, Dict, Optional

import requests

from travelai.config import settings

logger = logging.getLogger(__name__)


def get_json(url: str, params: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None) -> Any:
    """
    GET `url` and decode the JSON body.

    Raises requests.RequestException (including HTTPError for non-2xx) or
    ValueError for a non-JSON body; callers own the fallback.
    """
    request_headers = {"User-Agent": settings.http_user_agent}
    if headers:
        request_headers.update(headers)

    response = requests.get(url, params=params, headers=request_headers,
                            timeout=settings.request_timeout_seconds)
    response.raise_for_status()
    return response.json()


def first_page_extract(data: Dict[str, Any]) -> str:
    """Return the `extract` of the first page in a MediaWiki query response."""
    pages = (data.get("query") or {}).get("pages") or {}
    if not pages:
        return ""
    first = next(iter(pages.values()))
    return (first or {}).get("extract") or ""

"""
Wikivoyage travel guide excerpts.

Plain-text extracts mark top-level sections as "== See ==", "== Do ==", so
the relevant section is cut out directly. Articles without such a section
fall back to a window of sentences.
"""

import logging
import re
from typing import Dict

from travelai.config import settings
from travelai.models.results import ServiceResult
from travelai.services.http_client import get_json, first_page_extract
from travelai.utils.text_cleaning import clean_html_text

logger = logging.getLogger(__name__)

EXCERPT_MAX_CHARS = 500
SUMMARY_MAX_CHARS = 300

_SECTION_RE = re.compile(r"^==\s*([^=].*?)\s*==\s*$", re.MULTILINE)


def summary_fallback(city_name: str) -> str:
    return f"Discover the beauty and culture of {city_name}."


def see_fallback(city_name: str) -> str:
    return f"Explore the main attractions and landmarks in {city_name}."


def do_fallback(city_name: str) -> str:
    return f"Experience local activities and adventures in {city_name}."


def fetch_wikivoyage_content(city_name: str) -> str:
    """Raw plain-text article. Raises on network/HTTP errors."""
    data = get_json(settings.wikivoyage_api_url, params={
        "action": "query",
        "prop": "extracts",
        "explaintext": 1,
        "titles": city_name,
        "format": "json",
    })
    return first_page_extract(data)


def split_sections(content: str) -> Dict[str, str]:
    """Map of top-level section title -> body. The lead section is keyed ''."""
    sections = {}
    matches = list(_SECTION_RE.finditer(content))
    lead_end = matches[0].start() if matches else len(content)
    sections[""] = content[:lead_end].strip()
    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(content)
        sections[m.group(1).strip()] = content[m.end():end].strip()
    return sections


def _sentence_window(content: str, start_ratio: float, end_ratio: float) -> str:
    sentences = [s for s in clean_html_text(content).split(".") if len(s.strip()) > 30]
    start = int(len(sentences) * start_ratio)
    end = int(len(sentences) * end_ratio)
    return ". ".join(s.strip() for s in sentences[start:end])[:EXCERPT_MAX_CHARS]


def _section_excerpt(content: str, title: str, start_ratio: float, end_ratio: float) -> str:
    body = split_sections(content).get(title)
    if body:
        # drop "=== Sub heading ===" lines before flattening
        body = re.sub(r"^=+.*?=+\s*$", "", body, flags=re.MULTILINE)
        excerpt = clean_html_text(body)[:EXCERPT_MAX_CHARS]
        if excerpt:
            return excerpt
    return _sentence_window(content, start_ratio, end_ratio)


def get_city_summary(city_name: str) -> ServiceResult[str]:
    try:
        content = fetch_wikivoyage_content(city_name)
    except Exception as e:
        logger.error(f"Error fetching Wikivoyage content for {city_name}: {e}")
        return ServiceResult.fallback(summary_fallback(city_name), str(e))

    if not content:
        return ServiceResult.fallback(summary_fallback(city_name), "empty extract")

    lead = split_sections(content)[""] or content
    paragraphs = [p.strip() for p in lead.split("\n") if len(p.strip()) > 50]
    if paragraphs:
        return ServiceResult.ok(clean_html_text(paragraphs[0]))
    return ServiceResult.ok(clean_html_text(content)[:SUMMARY_MAX_CHARS] + "...")


def get_what_to_see(city_name: str) -> ServiceResult[str]:
    try:
        content = fetch_wikivoyage_content(city_name)
    except Exception as e:
        logger.error(f"Error fetching Wikivoyage 'See' for {city_name}: {e}")
        return ServiceResult.fallback(see_fallback(city_name), str(e))

    excerpt = _section_excerpt(content, "See", 0.3, 0.7) if content else ""
    if not excerpt:
        return ServiceResult.fallback(see_fallback(city_name), "no 'See' content")
    return ServiceResult.ok(excerpt)


def get_what_to_do(city_name: str) -> ServiceResult[str]:
    try:
        content = fetch_wikivoyage_content(city_name)
    except Exception as e:
        logger.error(f"Error fetching Wikivoyage 'Do' for {city_name}: {e}")
        return ServiceResult.fallback(do_fallback(city_name), str(e))

    excerpt = _section_excerpt(content, "Do", 0.6, 1.0) if content else ""
    if not excerpt:
        return ServiceResult.fallback(do_fallback(city_name), "no 'Do' content")
    return ServiceResult.ok(excerpt)

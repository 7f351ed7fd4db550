import asyncio
from unittest.mock import patch

import requests

from travelai.models.destination import Destination
from travelai.services.enrichment_service import enrich_destination
from travelai.services.pexels_service import placeholder_payload, search_photos
from travelai.services.wikimedia_service import default_images, get_destination_images
from travelai.services.wikipedia_service import get_city_intro, intro_fallback
from travelai.services.wikivoyage_service import do_fallback, get_what_to_see, see_fallback
from travelai.utils.text_cleaning import truncate_sentences


def _pages(**page):
    return {"query": {"pages": {"123": page}}}


def test_intro_is_cleaned_and_truncated():
    extract = "<p><b>Kyoto</b> is a city in Japan.</p> " + "It has many temples. " * 40
    with patch("travelai.services.wikipedia_service.get_json", return_value=_pages(extract=extract)):
        result = get_city_intro("Kyoto")
    assert not result.fallback_used
    assert result.value.startswith("Kyoto is a city in Japan.")
    assert "<" not in result.value
    assert len(result.value) <= 400


def test_intro_with_one_long_sentence_is_cut():
    extract = "Kyoto " + "and its many temples " * 25 + "is old."
    with patch("travelai.services.wikipedia_service.get_json", return_value=_pages(extract=extract)):
        result = get_city_intro("Kyoto")
    assert not result.fallback_used
    assert result.value.startswith("Kyoto and its many temples")
    assert 0 < len(result.value) <= 400


def test_truncate_sentences_keeps_whole_sentences():
    text = "First one. Second one. Third one."
    assert truncate_sentences(text, 100) == text
    assert truncate_sentences(text, 25) == "First one. Second one."
    assert truncate_sentences("x" * 50, 10) == "x" * 10


def test_intro_network_failure_uses_filler():
    with patch("travelai.services.wikipedia_service.get_json", side_effect=requests.ConnectionError("down")):
        result = get_city_intro("Kyoto")
    assert result.fallback_used
    assert result.value == intro_fallback("Kyoto")


def test_wikivoyage_see_section():
    text = ("Kyoto was the capital.\n\n== Understand ==\nHistory here.\n\n"
            "== See ==\nKinkaku-ji is the golden pavilion. Fushimi Inari has thousands of gates.\n\n"
            "== Do ==\nWalk the philosopher's path.")
    with patch("travelai.services.wikivoyage_service.get_json", return_value=_pages(extract=text)):
        result = get_what_to_see("Kyoto")
    assert not result.fallback_used
    assert "Kinkaku-ji" in result.value
    assert "philosopher" not in result.value


def test_wikivoyage_empty_article_uses_filler():
    with patch("travelai.services.wikivoyage_service.get_json", return_value={"query": {"pages": {}}}):
        result = get_what_to_see("Nowhere")
    assert result.fallback_used
    assert result.value == see_fallback("Nowhere")


def test_images_filter_logos_and_icons():
    data = {"query": {"pages": {
        "1": {"imageinfo": [{"url": "https://upload.wikimedia.org/a/Kyoto_temple.jpg"}]},
        "2": {"imageinfo": [{"url": "https://upload.wikimedia.org/a/Commons-logo.svg"}]},
        "3": {"imageinfo": [{"url": "https://upload.wikimedia.org/a/Wikimedia_map.png"}]},
        "4": {"imageinfo": [{"url": "https://upload.wikimedia.org/a/Gion.JPG"}]},
    }}}
    with patch("travelai.services.wikimedia_service.get_json", return_value=data):
        result = get_destination_images("Kyoto")
    assert [i.url.rsplit("/", 1)[-1] for i in result.value] == ["Kyoto_temple.jpg", "Gion.JPG"]


def test_images_failure_uses_defaults():
    with patch("travelai.services.wikimedia_service.get_json", side_effect=requests.Timeout("slow")):
        result = get_destination_images("Kyoto")
    assert result.fallback_used
    assert len(result.value) == 3
    assert result.value == default_images("Kyoto")


def test_enrichment_survives_one_failing_source():
    see_text = "== See ==\nA castle.\n"
    with patch("travelai.services.wikipedia_service.get_json", side_effect=requests.ConnectionError("down")), \
            patch("travelai.services.wikivoyage_service.get_json", return_value=_pages(extract=see_text)), \
            patch("travelai.services.wikimedia_service.get_json", side_effect=requests.ConnectionError("down")):
        enriched = asyncio.run(enrich_destination(Destination(name="Himeji", country="Japan")))

    assert enriched.intro == intro_fallback("Himeji")
    assert "castle" in enriched.whatToSee
    assert enriched.whatToDo == do_fallback("Himeji")
    assert len(enriched.images) == 3
    assert enriched.name == "Himeji"


def test_pexels_without_key_returns_placeholder():
    with patch("travelai.services.pexels_service.settings") as settings, \
            patch("travelai.services.pexels_service.get_json") as get_json:
        settings.pexels_api_key = ""
        payload = search_photos("Kyoto temples")
    get_json.assert_not_called()
    assert payload == placeholder_payload("Kyoto temples")
    assert payload["photos"][0]["src"]["medium"].endswith("Kyoto%20temples")


def test_pexels_upstream_error_returns_placeholder():
    with patch("travelai.services.pexels_service.settings") as settings, \
            patch("travelai.services.pexels_service.get_json", side_effect=requests.HTTPError("500")):
        settings.pexels_api_key = "key"
        payload = search_photos("Goa")
    assert payload == placeholder_payload("Goa")

from typing import Any, List, Mapping, Union

from travelai.models.destination import Destination
from travelai.utils.pros_cons import destination_text

CURATED_TAGS = [
    (lambda name, text: "zermatt" in name or "matterhorn" in text or "alps" in text,
     ["🎿 Skiing", "🏔️ Mountain Views", "❄️ Winter Sports"]),
    (lambda name, text: "lapland" in name or "northern lights" in text or "arctic" in text,
     ["🌌 Northern Lights", "🐕 Winter Activities", "❄️ Arctic Experience"]),
    (lambda name, text: any(k in text for k in ("thailand", "bangkok", "phuket")),
     ["🍜 Street Food", "🏛️ Temples", "🌴 Tropical Paradise"]),
    (lambda name, text: any(k in text for k in ("japan", "tokyo", "kyoto")),
     ["🏯 Culture", "🍣 Cuisine", "🚅 Technology"]),
    (lambda name, text: any(k in text for k in ("maldives", "seychelles", "mauritius")),
     ["🏖️ Beaches", "💑 Honeymoons", "🏨 Luxury Resorts"]),
]

KEYWORD_TAGS = [
    (("beach", "coast"), "🌴 Beaches"),
    (("mountain", "hill"), "🏔️ Mountains"),
    (("shop", "market"), "🛍️ Shopping"),
    (("family", "kid"), "👨‍👩‍👧 Family Trips"),
    (("romantic", "couple"), "💑 Honeymoons"),
    (("adventure", "trek"), "🎯 Adventure"),
    (("culture", "heritage"), "🏛️ Culture"),
    (("ski", "snow"), "🎿 Winter Sports"),
    (("wildlife", "safari"), "🦁 Wildlife"),
    (("food", "cuisine"), "🍽️ Food & Cuisine"),
]

GENERAL_TAG = "🌍 General Travel"


def get_best_for_tags(destination: Union[Destination, Mapping[str, Any], None]) -> List[str]:
    """Up to three "Best For" badges for the comparison page."""
    name, text = destination_text(destination)

    for matches, tags in CURATED_TAGS:
        if matches(name, text):
            return list(tags)

    tags = [tag for keywords, tag in KEYWORD_TAGS if any(k in text for k in keywords)]
    return tags[:3] if tags else [GENERAL_TAG]

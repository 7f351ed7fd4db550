from typing import Any, Dict, List, Mapping, Union

from travelai.models.destination import Destination

CURATED = [
    (lambda name, text: "zermatt" in name or "matterhorn" in text,
     ["Iconic Matterhorn views", "World-class skiing and snowboarding", "Charming alpine village atmosphere"],
     ["Very expensive accommodation", "Weather-dependent activities", "Limited nightlife options"]),
    (lambda name, text: "lapland" in name or "northern lights" in text,
     ["Magical Northern Lights experience", "Unique winter activities (husky sledding)", "Authentic Sami culture"],
     ["Extremely cold temperatures", "Limited daylight in winter", "Remote location, expensive to reach"]),
    (lambda name, text: "thailand" in text or "bangkok" in text,
     ["Affordable luxury accommodations", "Amazing street food and cuisine", "Rich temples and culture"],
     ["Hot and humid climate", "Language barriers in rural areas", "Tourist scams in popular areas"]),
    (lambda name, text: "japan" in text or "tokyo" in text,
     ["Efficient transportation system", "Unique blend of tradition and modernity", "Exceptional food quality"],
     ["Language barriers for non-Japanese speakers", "High cost of living", "Crowded public spaces"]),
    (lambda name, text: "maldives" in text or "seychelles" in text,
     ["Crystal clear waters and pristine beaches", "Luxury overwater accommodations", "Perfect for romantic getaways"],
     ["Very expensive destination", "Limited cultural experiences", "Vulnerable to weather changes"]),
]

# (keywords, pro, con) - every matching category contributes
KEYWORD_CATEGORIES = [
    (("beach", "coast", "island"),
     "Beautiful beaches and coastal views", "Can be crowded during peak season"),
    (("mountain", "hill", "trek"),
     "Great for adventure and trekking", "May require physical fitness"),
    (("culture", "heritage", "temple", "historic"),
     "Rich cultural and historical sites", "Limited modern entertainment options"),
    (("city", "urban", "metropolitan"),
     "Excellent shopping and dining options", "Higher costs and urban pollution"),
    (("nature", "wildlife", "forest"),
     "Amazing wildlife and natural beauty", "Limited luxury accommodations"),
    (("romantic", "honeymoon", "couple"),
     "Perfect for romantic getaways", "May be expensive for couples"),
]

DEFAULT_PROS = ["Good weather during visit season", "Plenty of sightseeing options", "Great local cuisine"]
DEFAULT_CONS = ["Can get crowded during holidays", "Language barriers possible", "Limited budget options"]

FILLER_PROS = [
    "Friendly local people",
    "Good transportation connectivity",
    "Safe for tourists",
    "Great photo opportunities",
    "Unique local experiences",
]
FILLER_CONS = [
    "Weather can be unpredictable",
    "Tourist traps in popular areas",
    "Seasonal price variations",
    "Limited English signage",
    "Booking required in advance",
]


def destination_text(destination: Union[Destination, Mapping[str, Any], None]) -> tuple[str, str]:
    """Return (lower-cased name, lower-cased name+country+highlights+description)."""
    if destination is None:
        data: Mapping[str, Any] = {}
    elif isinstance(destination, Destination):
        data = destination.model_dump()
    else:
        data = destination

    name = (data.get("name") or "").lower()
    country = (data.get("country") or "").lower()
    highlights = " ".join(data.get("highlights") or []).lower()
    description = (data.get("description") or "").lower()
    return name, f"{name} {country} {highlights} {description}"


def get_pros_cons(destination: Union[Destination, Mapping[str, Any], None]) -> Dict[str, List[str]]:
    name, text = destination_text(destination)

    pros: List[str] = []
    cons: List[str] = []

    for matches, curated_pros, curated_cons in CURATED:
        if matches(name, text):
            pros, cons = list(curated_pros), list(curated_cons)
            break
    else:
        for keywords, pro, con in KEYWORD_CATEGORIES:
            if any(k in text for k in keywords):
                pros.append(pro)
                cons.append(con)
        if not pros:
            pros = list(DEFAULT_PROS)
        if not cons:
            cons = list(DEFAULT_CONS)

    return {
        "pros": (pros + FILLER_PROS)[:3],
        "cons": (cons + FILLER_CONS)[:3],
    }

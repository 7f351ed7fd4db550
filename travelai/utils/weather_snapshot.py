"""Illustrative weather card for a destination. Not a forecast."""

from typing import Dict

# ordered: first matching trigger wins
WEATHER_RULES = [
    (("switzerland", "zermatt", "alps"),
     {"temp": "5–12°C", "weather": "Snowy", "humidity": "65%", "rainfall": "Medium"}),
    (("finland", "lapland", "arctic"),
     {"temp": "-5–3°C", "weather": "Snowy", "humidity": "80%", "rainfall": "Low"}),
    (("thailand", "bangkok", "phuket"),
     {"temp": "28–35°C", "weather": "Tropical", "humidity": "75%", "rainfall": "High"}),
    (("japan", "tokyo", "kyoto"),
     {"temp": "15–22°C", "weather": "Pleasant", "humidity": "60%", "rainfall": "Medium"}),
    (("india", "goa", "kerala"),
     {"temp": "25–32°C", "weather": "Humid", "humidity": "70%", "rainfall": "High"}),
    (("maldives", "seychelles", "mauritius"),
     {"temp": "26–30°C", "weather": "Sunny", "humidity": "75%", "rainfall": "Low"}),
    (("iceland", "norway", "greenland"),
     {"temp": "2–8°C", "weather": "Cool", "humidity": "70%", "rainfall": "Medium"}),
    (("dubai", "egypt", "morocco"),
     {"temp": "30–40°C", "weather": "Hot", "humidity": "40%", "rainfall": "Very Low"}),
]

GENERIC_PRESETS = [
    {"temp": "12–18°C", "weather": "Sunny", "humidity": "45%", "rainfall": "Low"},
    {"temp": "25–30°C", "weather": "Humid", "humidity": "70%", "rainfall": "Medium"},
    {"temp": "18–24°C", "weather": "Pleasant", "humidity": "55%", "rainfall": "Low"},
    {"temp": "20–26°C", "weather": "Mild", "humidity": "50%", "rainfall": "Low"},
]


def name_hash(text: str) -> int:
    """Java-style string hash (h * 31 + c) wrapped to a signed 32-bit int."""
    h = 0
    for ch in text:
        h = ((h << 5) - h + ord(ch)) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 0x100000000
    return h


def get_weather_snapshot(destination_name: str) -> Dict[str, str]:
    name = (destination_name or "").lower()

    for triggers, snapshot in WEATHER_RULES:
        if any(t in name for t in triggers):
            return dict(snapshot)

    return dict(GENERIC_PRESETS[abs(name_hash(name)) % len(GENERIC_PRESETS)])

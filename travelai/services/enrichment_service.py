"""
Destination enrichment from public reference sources.

Each source runs in a worker thread and is gathered concurrently. Every
fetcher already substitutes its own fallback, so one slow or failing source
never affects the others.
"""

import asyncio
import logging
from typing import List

from travelai.models.destination import Destination, DestinationDetailsResponse
from travelai.services.wikipedia_service import get_city_intro
from travelai.services.wikivoyage_service import get_city_summary, get_what_to_see, get_what_to_do
from travelai.services.wikimedia_service import get_destination_images

logger = logging.getLogger(__name__)

CARD_IMAGES = 3


async def enrich_destination(destination: Destination) -> Destination:
    name = destination.name
    intro, see, do, images = await asyncio.gather(
        asyncio.to_thread(get_city_intro, name),
        asyncio.to_thread(get_what_to_see, name),
        asyncio.to_thread(get_what_to_do, name),
        asyncio.to_thread(get_destination_images, name),
    )

    fallbacks = [label for label, r in (("intro", intro), ("see", see), ("do", do), ("images", images))
                 if r.fallback_used]
    if fallbacks:
        logger.info(f"Enrichment for {name} used fallbacks: {fallbacks}")

    return destination.model_copy(update={
        "intro": intro.value,
        "whatToSee": see.value,
        "whatToDo": do.value,
        "images": images.value[:CARD_IMAGES],
    })


async def enrich_destinations(destinations: List[Destination]) -> List[Destination]:
    return list(await asyncio.gather(*(enrich_destination(d) for d in destinations)))


async def get_destination_details(name: str) -> DestinationDetailsResponse:
    intro, summary, see, do, images = await asyncio.gather(
        asyncio.to_thread(get_city_intro, name),
        asyncio.to_thread(get_city_summary, name),
        asyncio.to_thread(get_what_to_see, name),
        asyncio.to_thread(get_what_to_do, name),
        asyncio.to_thread(get_destination_images, name),
    )
    return DestinationDetailsResponse(
        name=name,
        intro=intro.value,
        summary=summary.value,
        whatToSee=see.value,
        whatToDo=do.value,
        images=images.value,
    )

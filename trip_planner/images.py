# images.py
# Speculative Unsplash image URLs for activities, restaurants and the hotel.
# URLs are built from keywords only; nothing is fetched, so they may 404 (the UI hides broken images).

from __future__ import annotations
import copy
import logging
from urllib.parse import quote

from trip_planner.parser import FallbackItinerary, Itinerary, ParsedItinerary

log = logging.getLogger(__name__)

UNSPLASH = "https://source.unsplash.com"


def _search_url(size: str, *keywords: str) -> str:
    # whitespace runs collapse to a single %20
    query = " ".join(" ".join(str(k) for k in keywords if k).split())
    return f"{UNSPLASH}/{size}/?{quote(query, safe='')}"


def place_image_url(place: str, destination: str | None) -> str:
    return _search_url("800x400", place, destination, "monument landmark architecture")


def restaurant_image_url(cuisine: str | None) -> str:
    return _search_url("600x400", cuisine, "food restaurant dish meal")


def hotel_image_url() -> str:
    return _search_url("800x500", "hotel luxury room accommodation interior")


def _annotate_document(doc: dict) -> None:
    overview = doc.get("overview")
    destination = overview.get("destination") if isinstance(overview, dict) else None

    days = doc.get("daily_itinerary")
    if isinstance(days, dict):
        for day in days.values():
            if not isinstance(day, dict):
                continue
            for slot in day.values():
                if not isinstance(slot, dict):
                    continue
                if slot.get("activity"):
                    slot["image_url"] = place_image_url(slot["activity"], destination)
                restaurant = slot.get("restaurant")
                if isinstance(restaurant, dict) and restaurant.get("name"):
                    restaurant["image_url"] = restaurant_image_url(restaurant.get("cuisine"))

    hotel = doc.get("accommodation_details")
    if isinstance(hotel, dict) and hotel.get("hotel_name"):
        hotel["image_url"] = hotel_image_url()


def annotate_images(itinerary: Itinerary) -> Itinerary:
    """
    Attach image_url to every activity, restaurant and the accommodation.
    Works on a copy: on any error the original, unannotated itinerary comes back.
    """
    if isinstance(itinerary, FallbackItinerary):
        return itinerary
    try:
        doc = copy.deepcopy(itinerary.document)
        _annotate_document(doc)
        return ParsedItinerary(document=doc)
    except Exception:
        log.exception("Error adding images to itinerary")
        return itinerary

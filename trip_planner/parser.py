# parser.py
# Pull the itinerary JSON object out of free-form model text, or build the placeholder fallback.

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from trip_planner.models import BudgetBreakdown, ItineraryDocument, Overview, RawItinerary
from trip_planner.utils import split_budget

log = logging.getLogger(__name__)

# a scanned object must carry one of these to count as the itinerary
ITINERARY_KEYS = {"overview", "budget_breakdown", "daily_itinerary"}

# placeholders; they do not reflect the request
FALLBACK_OVERVIEW = {
    "destination": "Unknown",
    "duration": "5 days",
    "total_budget": 50000,
    "currency": "INR",
    "travel_style": "Mid-range",
}

FALLBACK_TIPS = [
    "Check visa requirements",
    "Pack according to weather",
    "Keep emergency contacts handy",
    "Learn basic local phrases",
    "Keep copies of important documents",
]


@dataclass
class ParsedItinerary:
    """JSON object decoded from the model text. Nothing in it is validated."""
    document: Dict[str, Any]


@dataclass
class FallbackItinerary:
    """Placeholder document carrying the unparsed model text."""
    document: Dict[str, Any]
    raw_text: str


Itinerary = Union[ParsedItinerary, FallbackItinerary]


def _greedy_object(text: str) -> Optional[dict]:
    """First '{' through last '}' and a strict parse."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        obj = json.loads(text[start:end + 1])
    except json.JSONDecodeError:
        return None
    # an empty "{}" is placeholder prose, not a document
    return obj if isinstance(obj, dict) and obj else None


def _top_level_starts(text: str) -> List[int]:
    """
    Offsets of every '{' that opens a top-level brace span.
    Braces inside double-quoted strings of a span are ignored; a stray '}' in prose never
    takes the depth below zero.
    """
    starts: List[int] = []
    depth = 0
    in_string = escaped = False
    for i, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"' and depth > 0:
            in_string = True
        elif ch == "{":
            if depth == 0:
                starts.append(i)
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
    return starts


def _scan_objects(text: str) -> Optional[dict]:
    """
    raw_decode at each top-level '{' and keep the first object that looks like an
    itinerary. Objects nested in a span that failed to decode are never tried.
    """
    decoder = json.JSONDecoder()
    for pos in _top_level_starts(text):
        try:
            obj, _ = decoder.raw_decode(text, pos)
        except json.JSONDecodeError:
            continue
        if isinstance(obj, dict) and ITINERARY_KEYS.intersection(obj):
            return obj
    return None


def extract_json_object(text: str) -> Optional[dict]:
    obj = _greedy_object(text)
    if obj is None:
        obj = _scan_objects(text)
    return obj


def build_fallback(text: str) -> FallbackItinerary:
    overview = Overview(**FALLBACK_OVERVIEW)
    doc = ItineraryDocument(
        overview=overview,
        budget_breakdown=BudgetBreakdown(**split_budget(overview.total_budget)),
        daily_itinerary=RawItinerary(raw_response=text),
        travel_tips=list(FALLBACK_TIPS),
    )
    return FallbackItinerary(document=doc.to_json(), raw_text=text)


def parse_itinerary(text: str) -> Itinerary:
    """
    Returns the itinerary JSON object found in `text` unchanged, or a fallback
    document whose daily_itinerary.raw_response is `text` verbatim. Never raises.
    """
    text = text if isinstance(text, str) else ""
    obj = extract_json_object(text)
    if obj is not None:
        return ParsedItinerary(document=obj)
    log.warning("model output is not JSON (%d chars); using fallback document", len(text))
    return build_fallback(text)

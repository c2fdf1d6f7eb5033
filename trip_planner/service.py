# service.py
# prompt -> provider -> parse -> annotate, with the demo itinerary as degraded mode

from __future__ import annotations
import logging
from typing import Optional, Protocol

from trip_planner.demo import build_demo_itinerary
from trip_planner.errors import ItineraryGenerationError, ProviderAccessDenied
from trip_planner.images import annotate_images
from trip_planner.models import TravelRequest
from trip_planner.parser import parse_itinerary
from trip_planner.prompts import build_itinerary_prompt
from trip_planner.utils import run_with_timeout

log = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


class ItineraryService:
    def __init__(self, generator: TextGenerator, timeout_s: Optional[float] = None):
        self.generator = generator
        self.timeout_s = timeout_s

    async def generate_itinerary(self, req: TravelRequest) -> dict:
        """
        Returns the itinerary document as a plain dict.
        - provider blocked our key -> demo itinerary built from the request
        - any other provider failure -> ItineraryGenerationError (no retry)
        Unparseable output and annotation errors never get here; they are absorbed downstream.
        """
        prompt = build_itinerary_prompt(req)
        try:
            text = await run_with_timeout(self.generator.generate(prompt), self.timeout_s)
        except ProviderAccessDenied as e:
            log.info("API key blocked (%s), returning demo itinerary", e.reason)
            return build_demo_itinerary(req)
        except Exception as e:
            log.exception("Error generating itinerary")
            raise ItineraryGenerationError("Failed to generate itinerary") from e

        itinerary = annotate_images(parse_itinerary(text))
        return itinerary.document

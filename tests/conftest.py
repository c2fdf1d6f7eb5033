import json

import pytest

from trip_planner.models import TravelRequest


class FakeGenerator:
    """Stands in for GeminiProvider: returns canned text or raises."""

    def __init__(self, text: str = "", exc: Exception = None):
        self.text = text
        self.exc = exc
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.exc is not None:
            raise self.exc
        return self.text


SAMPLE_DOCUMENT = {
    "overview": {
        "destination": "Paris",
        "duration": "3 days",
        "total_budget": 90000,
        "currency": "INR",
        "travel_style": "Mid-range",
        "recommended_hotel": "Hotel Le Marais, 4th arr.",
    },
    "budget_breakdown": {
        "accommodation": 30000,
        "food": 25000,
        "transportation": 10000,
        "activities": 15000,
        "miscellaneous": 5000,
    },
    "daily_itinerary": {
        "day_1": {
            "morning": {
                "activity": "Louvre Museum",
                "description": "See the Mona Lisa",
                "location": "Rue de Rivoli",
                "duration": "3 hours",
                "cost": 3400,
                "tips": "Book online",
                "restaurant": {
                    "name": "Cafe Marly",
                    "cuisine": "French",
                    "meal": "breakfast",
                    "cost": 2500,
                },
            },
            "evening": {
                "activity": "Seine cruise",
                "description": "Sunset boat ride",
                "cost": 2000,
            },
        },
    },
    "accommodation_details": {
        "hotel_name": "Hotel Le Marais",
        "location": "4th arrondissement",
        "cost_per_night": 10000,
        "total_nights": 2,
        "total_cost": 20000,
        "amenities": ["WiFi"],
    },
    "travel_tips": ["Carry a Navigo pass"],
}


@pytest.fixture
def paris_request():
    return TravelRequest(
        toCity="Paris", days=3, members=2, budget=90000,
        currency="INR", travelStyle="Mid-range", includeRoute=False,
    )


@pytest.fixture
def sample_document():
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def model_text(sample_document):
    return "Here is your plan:\n```json\n" + json.dumps(sample_document, indent=2) + "\n```\nEnjoy the trip!"

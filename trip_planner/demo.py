# demo.py
# Synthetic itinerary served when the provider blocks our key.
# Built only from the request's own fields: fixed budget split + two sample days.

from trip_planner.models import (
    ActivityNode,
    BudgetBreakdown,
    ItineraryDocument,
    Overview,
    RestaurantNode,
    TravelRequest,
)
from trip_planner.utils import duration_label, split_budget


def _slot(budget: float, activity: str, description: str, share: float,
          restaurant: str, cuisine: str, meal: str, meal_share: float) -> ActivityNode:
    return ActivityNode(
        activity=activity,
        description=description,
        cost=budget * share,
        restaurant=RestaurantNode(name=restaurant, cuisine=cuisine, meal=meal, cost=budget * meal_share),
    )


def build_demo_itinerary(req: TravelRequest) -> dict:
    city, style = req.toCity, req.travelStyle
    budget = float(req.budget)

    daily = {
        "day_1": {
            "morning": _slot(budget, f"Arrive in {city} and check into hotel",
                             f"Start your {style.lower()} adventure in {city}", 0.05,
                             "Local Breakfast Cafe", "Local Cuisine", "breakfast", 0.02),
            "afternoon": _slot(budget, f"Explore main attractions in {city}",
                               "Visit the most popular landmarks and take photos", 0.08,
                               "Popular Local Restaurant", "Traditional", "lunch", 0.03),
            "evening": _slot(budget, f"Dinner and evening stroll in {city}",
                             "Experience the nightlife and local culture", 0.06,
                             "Recommended Dinner Spot", "Fine Dining", "dinner", 0.04),
        },
        "day_2": {
            "morning": _slot(budget, "Cultural experiences and museums",
                             "Immerse yourself in local history and culture", 0.07,
                             "Hotel Restaurant", "Continental", "breakfast", 0.02),
            "afternoon": _slot(budget, "Shopping and leisure time",
                               "Browse local markets and shops", 0.09,
                               "Market Food Court", "Street Food", "lunch", 0.025),
            "evening": _slot(budget, "Entertainment and nightlife",
                             "Experience local entertainment", 0.08,
                             "Rooftop Restaurant", "International", "dinner", 0.045),
        },
    }

    doc = ItineraryDocument(
        overview=Overview(
            destination=city,
            duration=duration_label(req.days),
            total_budget=budget,
            currency=req.currency,
            travel_style=style,
        ),
        budget_breakdown=BudgetBreakdown(**split_budget(budget)),
        daily_itinerary=daily,
        travel_tips=[
            f"Check visa requirements for {city}",
            "Pack appropriate clothing for the weather",
            "Learn basic local phrases",
            "Keep copies of important documents",
            "Use official transport and avoid unlicensed taxis",
            "Try local cuisine but be mindful of food allergies",
            "Respect local customs and traditions",
        ],
    )
    return doc.to_json()

# prompts.py
# itinerary prompt: instructions, requirement list and the JSON skeleton the model should mimic

from trip_planner.models import TravelRequest
from trip_planner.utils import duration_label

ROUTES_SKELETON = """,
  "routes": [
    {
      "mode": "flight",
      "duration": "X hours",
      "cost": number,
      "details": "Airline suggestions, booking tips"
    },
    {
      "mode": "train",
      "duration": "X hours",
      "cost": number,
      "details": "Train types, booking process"
    },
    {
      "mode": "bus",
      "duration": "X hours",
      "cost": number,
      "details": "Bus operators, comfort level"
    }
  ]"""


def _money(value: float) -> str:
    # 90000.0 -> "90000", 1234.5 -> "1234.5"
    return str(int(value)) if float(value).is_integer() else str(value)


def _slot(label: str, meal: str, duration: str) -> str:
    return f"""      "{label}": {{
        "activity": "Specific activity/attraction name",
        "description": "Detailed description of what to do, see, experience",
        "location": "Specific address or area",
        "duration": "{duration}",
        "cost": number,
        "tips": "Practical tip for this activity",
        "restaurant": {{
          "name": "Specific restaurant name",
          "cuisine": "cuisine type",
          "meal": "{meal}",
          "location": "restaurant address/area",
          "recommended_dish": "specific dish name",
          "cost": number
        }}
      }}"""


def build_itinerary_prompt(req: TravelRequest) -> str:
    """Interpolate the request into the itinerary instruction prompt (pure)."""
    days, members, city, style = req.days, req.members, req.toCity, req.travelStyle
    budget = _money(req.budget)
    origin = f"from {req.fromCity} " if req.includeRoute else ""
    route_line = f"- Include route planning from {req.fromCity} to {city}\n" if req.includeRoute else ""
    routes = ROUTES_SKELETON if req.includeRoute else ""

    day_one = ",\n".join([
        _slot("morning", "breakfast", "2-3 hours"),
        _slot("afternoon", "lunch", "3-4 hours"),
        _slot("evening", "dinner", "2-3 hours"),
    ])

    return f"""
Create a comprehensive {days}-day travel itinerary for {members} people traveling {origin}to {city}.

Travel Details:
- Budget: {budget} {req.currency} (total for all {members} people)
- Travel Style: {style}
- Duration: {days} days
{route_line}
IMPORTANT REQUIREMENTS:
1. Provide SPECIFIC hotel recommendations with names, locations, and nightly costs
2. Include REAL restaurant names with specific dishes and meal costs for breakfast, lunch, and dinner
3. List SPECIFIC tourist attractions, museums, landmarks with entry fees and visit durations
4. Include exact costs for each activity, meal, and accommodation
5. Provide detailed descriptions of what to do, see, and experience
6. Include transportation costs within the city (taxi, metro, bus)
7. Add practical details like opening hours, booking requirements, dress codes
8. Break down costs per person and total for the group
9. Include specific addresses or areas where possible
10. Suggest {style} appropriate options (budget/mid-range/luxury)

Format the response as a valid JSON object with this EXACT structure:
{{
  "overview": {{
    "destination": "{city}",
    "duration": "{duration_label(days)}",
    "total_budget": {budget},
    "currency": "{req.currency}",
    "travel_style": "{style}",
    "recommended_hotel": "Hotel Name with location",
    "total_accommodation_cost": number
  }},
  "budget_breakdown": {{
    "accommodation": number,
    "food": number,
    "transportation": number,
    "activities": number,
    "miscellaneous": number
  }},
  "daily_itinerary": {{
    "day_1": {{
{day_one}
    }},
    "day_2": {{ /* Same structure for each day */ }},
    "day_3": {{ /* Continue for all {days} days */ }}
  }},
  "accommodation_details": {{
    "hotel_name": "Specific hotel name",
    "location": "Hotel address/area",
    "cost_per_night": number,
    "total_nights": {days - 1},
    "total_cost": number,
    "amenities": ["WiFi", "Breakfast", "Pool", etc.],
    "booking_tips": "How to book, best rates, etc."
  }},
  "travel_tips": [
    "Specific tip about {city}",
    "Local custom to be aware of",
    "Best time to visit attractions",
    "Transportation tips",
    "Safety advice"
  ],
  "emergency_contacts": ["Local emergency number", "Tourist helpline"]{routes}
}}

CRITICAL: Use REAL place names, restaurant names, and attractions that actually exist in {city}. All costs should be realistic and add up to approximately the total budget of {budget} {req.currency}. Make this a practical, actionable itinerary someone could actually follow.
"""

# models.py
# typed request model and itinerary document nodes

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Literal, Optional, Union

class TravelRequest(BaseModel):
    fromCity: Optional[str] = ""
    toCity: str
    days: int = Field(..., gt=0)
    members: int = Field(..., gt=0)
    budget: float = Field(..., gt=0)
    currency: Literal["INR", "USD", "EUR", "GBP", "JPY"] = "INR"
    # form offers Budget, Mid-range, Luxury, Adventure, Cultural, Romantic, Family
    travelStyle: str = "Mid-range"
    includeRoute: bool = False

    @field_validator("toCity")
    @classmethod
    def _to_city_present(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("toCity is required")
        return v

    @field_validator("fromCity")
    @classmethod
    def _from_city_text(cls, v: Optional[str]) -> str:
        return (v or "").strip()


# ---- document nodes (used to build the fallback and demo documents) ----

class Node(BaseModel):
    # model output may carry fields we never asked for
    model_config = ConfigDict(extra="allow")


class Overview(Node):
    destination: str
    duration: str
    total_budget: float
    currency: str
    travel_style: str
    recommended_hotel: Optional[str] = None
    total_accommodation_cost: Optional[float] = None


class BudgetBreakdown(Node):
    accommodation: float
    food: float
    transportation: float
    activities: float
    miscellaneous: float


class RestaurantNode(Node):
    name: Optional[str] = None
    cuisine: Optional[str] = None
    meal: Optional[str] = None
    location: Optional[str] = None
    recommended_dish: Optional[str] = None
    cost: Optional[float] = None
    image_url: Optional[str] = None


class ActivityNode(Node):
    activity: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    cost: Optional[float] = None
    tips: Optional[str] = None
    restaurant: Optional[RestaurantNode] = None
    image_url: Optional[str] = None


class RawItinerary(Node):
    """Unparsed model text kept for manual inspection."""
    raw_response: str


class AccommodationDetails(Node):
    hotel_name: Optional[str] = None
    location: Optional[str] = None
    cost_per_night: Optional[float] = None
    total_nights: Optional[int] = None
    total_cost: Optional[float] = None
    amenities: List[str] = Field(default_factory=list)
    booking_tips: Optional[str] = None
    image_url: Optional[str] = None


class RouteOption(Node):
    mode: str
    duration: str
    cost: float
    details: str


class ItineraryDocument(Node):
    overview: Overview
    budget_breakdown: BudgetBreakdown
    daily_itinerary: Union[RawItinerary, Dict[str, Dict[str, ActivityNode]]]
    accommodation_details: Optional[AccommodationDetails] = None
    travel_tips: List[str] = Field(default_factory=list)
    emergency_contacts: Optional[List[str]] = None
    routes: Optional[List[RouteOption]] = None

    def to_json(self) -> dict:
        return self.model_dump(exclude_none=True)


class ErrorResponse(BaseModel):
    error: str

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class HotelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class Location(HotelModel):
    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""


class Rating(HotelModel):
    average: float = 0.0
    count: int = 0


class RoomOption(HotelModel):
    id: Optional[str] = Field(default=None, alias="_id")
    type: str
    base_price: float = 0.0
    capacity: int = 1
    available: bool = True


class Hotel(HotelModel):
    id: str = Field(alias="_id")
    name: str
    location: Location = Field(default_factory=Location)
    rooms: List[RoomOption] = Field(default_factory=list)
    rating: Rating = Field(default_factory=Rating)
    min_price: Optional[float] = None

    @field_validator("rating", mode="before")
    @classmethod
    def accept_plain_rating(cls, value):
        if isinstance(value, (int, float)):
            return {"average": value}
        return value or {}

    def room(self, room_type: str) -> Optional[RoomOption]:
        for option in self.rooms:
            if option.type == room_type:
                return option
        return None


class HotelListResponse(HotelModel):
    hotels: List[Hotel] = Field(default_factory=list)


class HotelResponse(HotelModel):
    hotel: Hotel


class Recommendation(HotelModel):
    hotel: Hotel
    score: float = 0.0
    reasons: List[str] = Field(default_factory=list)


class RecommendationListResponse(HotelModel):
    recommendations: List[Recommendation] = Field(default_factory=list)


class ReviewRequest(HotelModel):
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = Field(default=None, max_length=500)


class Review(HotelModel):
    id: Optional[str] = Field(default=None, alias="_id")
    user: Optional[Any] = None
    rating: int
    comment: str = ""
    created_at: Optional[datetime] = None


class ReviewResponse(HotelModel):
    message: Optional[str] = None
    review: Review
    new_rating: Rating = Field(default_factory=Rating)


class InteractionRequest(HotelModel):
    interaction_type: str = Field(min_length=1)
    data: Dict[str, Any]


class FeedbackRequest(HotelModel):
    hotel_id: str = Field(min_length=1)
    feedback: str = Field(min_length=1)
    clicked: bool = False
    booked: bool = False


class MessageResponse(HotelModel):
    message: str = ""


class PriceRange(HotelModel):
    min: float = 0
    max: float = 50000


class RecommendationPreferences(HotelModel):
    travel_style: str = "mid-range"
    location_preference: str = "city-center"
    preferred_locations: List[Any] = Field(default_factory=list)
    preferred_seasons: List[Any] = Field(default_factory=list)
    preferred_price_range: PriceRange = Field(default_factory=PriceRange)
    ai_preferences: Dict[str, Any] = Field(default_factory=dict)
    search_history: List[Any] = Field(default_factory=list)


class PreferencesResponse(HotelModel):
    preferences: RecommendationPreferences = Field(
        default_factory=RecommendationPreferences
    )


class RecommendationInsights(HotelModel):
    total_bookings: int = 0
    total_searches: int = 0
    total_hotels_viewed: int = 0
    favorite_locations: List[Any] = Field(default_factory=list)
    travel_style: str = "discovering"
    loyalty_level: str = "Explorer"
    recommendation_accuracy: float = 0


class InsightsResponse(HotelModel):
    insights: RecommendationInsights = Field(default_factory=RecommendationInsights)

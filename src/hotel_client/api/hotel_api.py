import logging
from typing import List, Optional

from pydantic import ValidationError

from hotel_client.api.http import ApiClient
from hotel_client.models.search import SearchQuery
from hotel_client.schemas.hotels import (
    FeedbackRequest,
    Hotel,
    HotelListResponse,
    HotelResponse,
    InsightsResponse,
    InteractionRequest,
    MessageResponse,
    PreferencesResponse,
    Recommendation,
    RecommendationInsights,
    RecommendationListResponse,
    RecommendationPreferences,
    ReviewRequest,
    ReviewResponse,
)
from hotel_client.utils.constants import FEATURED_LIMIT, TRENDING_LIMIT
from hotel_client.utils.custom_exceptions import ApiError

logger = logging.getLogger(__name__)


def _parse(model, body):
    try:
        return model.model_validate(body)
    except ValidationError as err:
        logger.error(f"Unexpected {model.__name__} payload: {err}")
        raise ApiError(None, "Invalid response from server") from err


class HotelApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def search(self, query: SearchQuery) -> List[Hotel]:
        params = {"guests": query.guests}
        if query.destination:
            params["city"] = query.destination
        if query.check_in:
            params["checkIn"] = query.check_in
        if query.check_out:
            params["checkOut"] = query.check_out
        body = self.client.get("/hotels/search", params=params)
        return _parse(HotelListResponse, body).hotels

    def get_by_id(self, hotel_id: str) -> Hotel:
        body = self.client.get(f"/hotels/{hotel_id}")
        return _parse(HotelResponse, body).hotel

    def featured(self, limit: int = FEATURED_LIMIT) -> List[Hotel]:
        body = self.client.get("/hotels/featured", params={"limit": limit})
        return _parse(HotelListResponse, body).hotels

    def add_review(
        self, hotel_id: str, rating: int, comment: Optional[str] = None
    ) -> ReviewResponse:
        request = ReviewRequest(rating=rating, comment=comment)
        body = self.client.post(
            f"/hotels/{hotel_id}/reviews", request.model_dump(exclude_none=True)
        )
        return _parse(ReviewResponse, body)


class RecommendationApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def personalized(
        self,
        limit: Optional[int] = None,
        location: Optional[str] = None,
        price_min: Optional[float] = None,
        price_max: Optional[float] = None,
        exclude_booked_hotels: Optional[bool] = None,
    ) -> List[Recommendation]:
        params = {}
        if limit:
            params["limit"] = limit
        if location:
            params["location"] = location
        if price_min:
            params["priceMin"] = price_min
        if price_max:
            params["priceMax"] = price_max
        if exclude_booked_hotels is not None:
            params["excludeBookedHotels"] = str(exclude_booked_hotels).lower()
        body = self.client.get("/recommendations/personalized", params=params)
        return _parse(RecommendationListResponse, body).recommendations

    def trending(
        self, location: Optional[str] = None, limit: int = TRENDING_LIMIT
    ) -> List[Recommendation]:
        params = {"limit": limit}
        if location:
            params["location"] = location
        body = self.client.get("/recommendations/trending", params=params)
        return _parse(RecommendationListResponse, body).recommendations

    def track_interaction(self, interaction_type: str, data: dict) -> str:
        request = InteractionRequest(interaction_type=interaction_type, data=data)
        body = self.client.post(
            "/recommendations/track", request.model_dump(by_alias=True)
        )
        return _parse(MessageResponse, body).message

    def submit_feedback(
        self, hotel_id: str, feedback: str, clicked: bool = False, booked: bool = False
    ) -> str:
        request = FeedbackRequest(
            hotel_id=hotel_id, feedback=feedback, clicked=clicked, booked=booked
        )
        body = self.client.post(
            "/recommendations/feedback", request.model_dump(by_alias=True)
        )
        return _parse(MessageResponse, body).message

    def preferences(self) -> RecommendationPreferences:
        body = self.client.get("/recommendations/preferences")
        return _parse(PreferencesResponse, body).preferences

    def insights(self) -> RecommendationInsights:
        body = self.client.get("/recommendations/insights")
        return _parse(InsightsResponse, body).insights

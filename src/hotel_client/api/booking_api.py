import logging
from typing import List, Optional

from pydantic import ValidationError

from hotel_client.api.http import ApiClient
from hotel_client.models.bookings import Booking, BookingStatus
from hotel_client.models.drafts import BookingDraft
from hotel_client.schemas.bookings import (
    BookingListResponse,
    BookingPayload,
    CancelRequest,
    CreateBookingRequest,
    StatusUpdateRequest,
)
from hotel_client.utils.constants import BOOKINGS_PAGE_SIZE
from hotel_client.utils.custom_exceptions import ApiError

logger = logging.getLogger(__name__)


class BookingApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def create(self, draft: BookingDraft) -> Booking:
        request = CreateBookingRequest.from_draft(draft)
        body = self.client.post("/bookings/create", request.to_payload())
        return self._to_booking(body)

    def fetch_by_id(self, booking_id: str) -> Booking:
        body = self.client.get(f"/bookings/{booking_id}")
        return self._to_booking(body)

    def cancel(self, booking_id: str, reason: Optional[str] = None) -> Booking:
        request = CancelRequest(reason=reason)
        body = self.client.put(
            f"/bookings/{booking_id}/cancel", request.model_dump(exclude_none=True)
        )
        return self._to_booking(body)

    def update_status(self, booking_id: str, status: BookingStatus) -> Booking:
        request = StatusUpdateRequest(status=status)
        body = self.client.put(
            f"/bookings/{booking_id}/status", request.model_dump(mode="json")
        )
        return self._to_booking(body)

    def list_for_current_user(
        self,
        status: Optional[BookingStatus] = None,
        page: int = 1,
        limit: int = BOOKINGS_PAGE_SIZE,
    ) -> List[Booking]:
        params = {"page": page, "limit": limit}
        if status:
            params["status"] = status.value
        body = self.client.get("/bookings", params=params)
        try:
            listing = BookingListResponse.model_validate(body)
        except ValidationError as err:
            logger.error(f"Unexpected booking list payload: {err}")
            raise ApiError(None, "Invalid booking data received") from err
        return [item.to_domain() for item in listing.bookings]

    @staticmethod
    def _to_booking(body: dict) -> Booking:
        document = body.get("booking", body)
        try:
            return BookingPayload.model_validate(document).to_domain()
        except ValidationError as err:
            logger.error(f"Unexpected booking payload: {err}")
            raise ApiError(None, "Invalid booking data received") from err

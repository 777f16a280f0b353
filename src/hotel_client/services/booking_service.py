import logging
from datetime import date
from typing import Callable, List, Optional

from hotel_client.api.booking_api import BookingApi
from hotel_client.models.bookings import Booking, BookingStatus
from hotel_client.models.drafts import BookingDraft, DraftState, FieldError
from hotel_client.utils.custom_exceptions import DraftStateError

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, booking_api: BookingApi, clock: Callable[[], date] = date.today):
        self.booking_api = booking_api
        self.clock = clock

    def mark_ready(self, draft: BookingDraft) -> List[FieldError]:
        if draft.state != DraftState.SELECTING:
            if draft.state == DraftState.READY_TO_SUBMIT:
                return []
            raise DraftStateError(f"draft is already {draft.state.value}")

        errors = draft.validate(today=self.clock())
        if errors:
            return errors
        draft.state = DraftState.READY_TO_SUBMIT
        return []

    def submit(self, draft: BookingDraft) -> Booking:
        if draft.state != DraftState.READY_TO_SUBMIT:
            raise DraftStateError(
                f"draft must be {DraftState.READY_TO_SUBMIT.value} to submit, "
                f"not {draft.state.value}"
            )

        draft.state = DraftState.SUBMITTING
        try:
            booking = self.booking_api.create(draft)
        except Exception:
            draft.state = DraftState.READY_TO_SUBMIT
            logger.error(f"Booking creation failed for hotel {draft.hotel_id}")
            raise

        draft.booking_id = booking.booking_id
        draft.state = DraftState.SUBMITTED
        logger.info(f"Booking {booking.booking_id} created")
        return booking

    def get_booking(self, booking_id: str) -> Booking:
        return self.booking_api.fetch_by_id(booking_id)

    def list_bookings(self, status: Optional[BookingStatus] = None) -> List[Booking]:
        return self.booking_api.list_for_current_user(status=status)

    def cancel_booking(self, booking_id: str, reason: Optional[str] = None) -> Booking:
        return self.booking_api.cancel(booking_id, reason)

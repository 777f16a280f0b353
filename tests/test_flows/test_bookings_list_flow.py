import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from flows.bookings.booking_confirmation import get_booking_confirmation
from flows.bookings.cancel_booking import cancel_booking
from flows.bookings.get_bookings import get_user_bookings
from hotel_client.models.bookings import Booking, BookingStatus
from hotel_client.models.users import User
from hotel_client.services.app_context import AppContext
from hotel_client.utils.config import Settings
from hotel_client.utils.custom_exceptions import ApiError
from hotel_client.utils.token_store import MemoryTokenStore


class BookingsFlowTests(unittest.TestCase):

    def setUp(self):
        self.context = AppContext(
            settings=Settings(stripe_api_key=None),
            token_store=MemoryTokenStore(),
            session=MagicMock(),
        )
        self.context.user = User(user_id="u1", email="asha@example.com", name="Asha")
        self.booking_api = MagicMock()
        self.context.bookings.booking_api = self.booking_api
        self.booking = Booking(
            booking_id="B123",
            hotel_id="H1",
            room_type="deluxe",
            check_in=datetime(2025, 3, 1, tzinfo=timezone.utc),
            check_out=datetime(2025, 3, 4, tzinfo=timezone.utc),
            guests=2,
            total_amount=7500,
            status=BookingStatus.CONFIRMED,
            hotel_name="Sea Breeze",
            reference="BK-2025-0001",
            nights=3,
        )

    def test_list_requires_login(self):
        self.context.user = None
        response = get_user_bookings({}, self.context)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.redirect_to, "/login")

    def test_list_all(self):
        self.booking_api.list_for_current_user.return_value = [self.booking]

        response = get_user_bookings({}, self.context)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["count"], 1)
        item = response.data["bookings"][0]
        self.assertEqual(item["status"], "confirmed")
        self.assertEqual(item["check_in"], "2025-03-01T00:00:00+00:00")
        self.booking_api.list_for_current_user.assert_called_once_with(status=None)

    def test_list_filtered(self):
        self.booking_api.list_for_current_user.return_value = []
        get_user_bookings({"params": {"status": "cancelled"}}, self.context)
        self.booking_api.list_for_current_user.assert_called_once_with(
            status=BookingStatus.CANCELLED
        )

    def test_list_invalid_status(self):
        response = get_user_bookings({"params": {"status": "lost"}}, self.context)
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.message.startswith("Invalid status. Allowed:"))
        self.booking_api.list_for_current_user.assert_not_called()

    def test_confirmation(self):
        self.booking_api.fetch_by_id.return_value = self.booking
        response = get_booking_confirmation({"booking_id": "B123"}, self.context)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["nights"], 3)
        self.assertEqual(response.data["reference"], "BK-2025-0001")

    def test_confirmation_not_found(self):
        self.booking_api.fetch_by_id.side_effect = ApiError(404, "Booking not found")
        response = get_booking_confirmation({"booking_id": "B404"}, self.context)
        self.assertEqual(response.status_code, 404)

    def test_cancel(self):
        self.booking.status = BookingStatus.CANCELLED
        self.booking_api.cancel.return_value = self.booking

        response = cancel_booking(
            {"booking_id": "B123", "body": {"reason": "change of plans"}}, self.context
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "cancelled")
        self.booking_api.cancel.assert_called_once_with("B123", "change of plans")

    def test_cancel_reason_too_long(self):
        response = cancel_booking(
            {"booking_id": "B123", "body": {"reason": "x" * 201}}, self.context
        )
        self.assertEqual(response.status_code, 400)
        self.booking_api.cancel.assert_not_called()

    def test_cancel_rejected_by_server(self):
        self.booking_api.cancel.side_effect = ApiError(
            400, "Cannot cancel booking less than 24 hours before check-in"
        )
        response = cancel_booking({"booking_id": "B123"}, self.context)
        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()

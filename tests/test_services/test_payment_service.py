import unittest
from unittest.mock import MagicMock

from hotel_client.models.bookings import Booking
from hotel_client.models.payments import PaymentSession, ProviderResult
from hotel_client.services.payment_service import PaymentHandoff, RedirectCountdown
from hotel_client.utils.custom_exceptions import PaymentFailed


def make_booking(booking_id="B123", total_amount=7500):
    return Booking(
        booking_id=booking_id,
        hotel_id="H1",
        room_type="deluxe",
        check_in=None,
        check_out=None,
        guests=2,
        total_amount=total_amount,
    )


class TestPaymentHandoff(unittest.TestCase):

    def setUp(self):
        self.payment_api = MagicMock()
        self.provider = MagicMock()
        self.handoff = PaymentHandoff(
            self.payment_api,
            self.provider,
            return_url="http://localhost:3000/booking-confirmation/",
        )
        self.session = PaymentSession("B123", 7500, "pi_1_secret_abc")

    def test_start_requests_intent_for_server_total(self):
        self.payment_api.create_payment_intent.return_value = "pi_1_secret_abc"

        session = self.handoff.start(make_booking())

        self.payment_api.create_payment_intent.assert_called_once_with("B123", 7500)
        self.assertEqual(session, PaymentSession("B123", 7500, "pi_1_secret_abc"))

    def test_start_without_booking_id(self):
        with self.assertRaises(ValueError):
            self.handoff.start(make_booking(booking_id=""))
        self.payment_api.create_payment_intent.assert_not_called()

    def test_start_with_zero_total(self):
        with self.assertRaises(ValueError):
            self.handoff.start(make_booking(total_amount=0))
        self.payment_api.create_payment_intent.assert_not_called()

    def test_complete_success(self):
        self.provider.confirm.return_value = ProviderResult("succeeded", "pi_1")

        result = self.handoff.complete(self.session, "pm_card_visa")

        self.provider.confirm.assert_called_once_with(
            "pi_1_secret_abc",
            "pm_card_visa",
            return_url="http://localhost:3000/booking-confirmation/B123",
        )
        self.assertTrue(result.succeeded)
        self.assertTrue(self.session.paid)

    def test_complete_not_yet_succeeded(self):
        self.provider.confirm.return_value = ProviderResult("processing", "pi_1")
        result = self.handoff.complete(self.session, "pm_card_visa")
        self.assertFalse(result.succeeded)
        self.assertFalse(self.session.paid)

    def test_complete_provider_error(self):
        self.provider.confirm.return_value = ProviderResult(
            payment_intent_id="pi_1", error_message="Your card was declined."
        )
        with self.assertRaises(PaymentFailed) as ctx:
            self.handoff.complete(self.session, "pm_card_visa")
        self.assertEqual(ctx.exception.message, "Payment failed: Your card was declined.")
        self.assertFalse(self.session.paid)

    def test_complete_without_provider(self):
        handoff = PaymentHandoff(self.payment_api, None)
        with self.assertRaises(RuntimeError):
            handoff.complete(self.session, "pm_card_visa")


class TestRedirectCountdown(unittest.TestCase):

    def setUp(self):
        self.sleep = MagicMock()
        self.ticks = []
        self.navigate = MagicMock()

    def test_counts_down_then_navigates(self):
        countdown = RedirectCountdown(sleep=self.sleep)

        countdown.run(self.ticks.append, self.navigate)

        self.assertEqual(self.ticks, [5, 4, 3, 2, 1, 0])
        self.assertEqual(self.sleep.call_count, 5)
        self.navigate.assert_called_once_with("/my-bookings")

    def test_navigate_now_stops_the_countdown(self):
        countdown = RedirectCountdown(sleep=self.sleep)

        def tick(remaining):
            self.ticks.append(remaining)
            if remaining == 3:
                countdown.navigate_now(self.navigate)

        countdown.run(tick, self.navigate)

        self.assertEqual(self.ticks, [5, 4, 3])
        self.navigate.assert_called_once_with("/my-bookings")

    def test_navigate_now_is_single_shot(self):
        countdown = RedirectCountdown(sleep=self.sleep)
        countdown.navigate_now(self.navigate)
        countdown.navigate_now(self.navigate)
        countdown.run(self.ticks.append, self.navigate)
        self.navigate.assert_called_once_with("/my-bookings")

    def test_handoff_builds_countdown(self):
        handoff = PaymentHandoff(MagicMock(), MagicMock(), countdown_seconds=2)
        countdown = handoff.countdown(sleep=self.sleep)
        countdown.run(self.ticks.append, self.navigate)
        self.assertEqual(self.ticks, [2, 1, 0])


if __name__ == "__main__":
    unittest.main()

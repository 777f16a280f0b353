import logging
import time
from typing import Callable, Optional

from hotel_client.api.payment_api import PaymentApi
from hotel_client.models.bookings import Booking
from hotel_client.models.payments import PaymentSession, ProviderResult
from hotel_client.providers.base import PaymentProvider
from hotel_client.utils.constants import MY_BOOKINGS_PATH, REDIRECT_COUNTDOWN_SECONDS
from hotel_client.utils.custom_exceptions import PaymentFailed

logger = logging.getLogger(__name__)


class PaymentHandoff:
    """Hands a created booking over to the payment provider.

    The intent is always requested for the booking returned by the server, so
    it can only be issued after booking creation has completed.
    """

    def __init__(
        self,
        payment_api: PaymentApi,
        provider: Optional[PaymentProvider],
        return_url: Optional[str] = None,
        countdown_seconds: int = REDIRECT_COUNTDOWN_SECONDS,
    ):
        self.payment_api = payment_api
        self.provider = provider
        self.return_url = return_url
        self.countdown_seconds = countdown_seconds

    def start(self, booking: Booking) -> PaymentSession:
        if not booking.booking_id:
            raise ValueError("Invalid booking ID")
        if not booking.total_amount or booking.total_amount <= 0:
            raise ValueError("Invalid booking data received")

        client_secret = self.payment_api.create_payment_intent(
            booking.booking_id, booking.total_amount
        )
        logger.info(f"Payment intent requested for booking {booking.booking_id}")
        return PaymentSession(
            booking_id=booking.booking_id,
            amount=booking.total_amount,
            client_secret=client_secret,
        )

    def complete(self, session: PaymentSession, payment_method: str) -> ProviderResult:
        if self.provider is None:
            raise RuntimeError("No payment provider configured")

        return_url = None
        if self.return_url:
            return_url = f"{self.return_url.rstrip('/')}/{session.booking_id}"

        result = self.provider.confirm(
            session.client_secret, payment_method, return_url=return_url
        )
        if result.error_message:
            raise PaymentFailed(f"Payment failed: {result.error_message}")

        session.paid = result.succeeded
        if session.paid:
            logger.info(f"Payment succeeded for booking {session.booking_id}")
        else:
            logger.info(
                f"Payment for booking {session.booking_id} is {result.status}"
            )
        return result

    def countdown(self, sleep: Callable[[float], None] = time.sleep) -> "RedirectCountdown":
        return RedirectCountdown(self.countdown_seconds, sleep=sleep)


class RedirectCountdown:
    def __init__(
        self,
        seconds: int = REDIRECT_COUNTDOWN_SECONDS,
        target: str = MY_BOOKINGS_PATH,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.seconds = seconds
        self.target = target
        self.sleep = sleep
        self.remaining = seconds
        self.navigated = False

    def run(self, on_tick: Callable[[int], None], navigate: Callable[[str], None]):
        self.remaining = self.seconds
        on_tick(self.remaining)
        while self.remaining > 0 and not self.navigated:
            self.sleep(1)
            if self.navigated:
                return
            self.remaining -= 1
            on_tick(self.remaining)
        if not self.navigated:
            self._go(navigate)

    def navigate_now(self, navigate: Callable[[str], None]):
        if not self.navigated:
            self._go(navigate)

    def _go(self, navigate: Callable[[str], None]):
        self.navigated = True
        navigate(self.target)

import logging

from hotel_client.models.payments import PaymentSession
from hotel_client.services.app_context import AppContext
from hotel_client.utils.constants import HOTELS_PATH, MY_BOOKINGS_PATH
from hotel_client.utils.custom_exceptions import ApiError, PaymentFailed
from hotel_client.utils.custom_response import (
    api_error_response,
    login_required,
    send_custom_response,
)
from flows.bookings.get_bookings import booking_data

logger = logging.getLogger(__name__)


def load_payment(event: dict, context: AppContext):
    if not context.is_authenticated:
        return login_required()

    booking_id = event.get("booking_id")
    if not booking_id:
        return send_custom_response(400, "Invalid booking ID", redirect_to=HOTELS_PATH)

    try:
        booking = context.bookings.get_booking(booking_id)
        session = context.payments.start(booking)
    except ValueError as err:
        return send_custom_response(400, str(err), redirect_to=HOTELS_PATH)
    except ApiError as err:
        return api_error_response(err)

    return send_custom_response(
        200,
        "Complete Your Payment",
        {
            "booking": booking_data(booking),
            "amount": session.amount,
            "client_secret": session.client_secret,
        },
    )


def submit_payment(event: dict, context: AppContext):
    if not context.is_authenticated:
        return login_required()

    body = event.get("body") or {}
    booking_id = event.get("booking_id")
    client_secret = body.get("client_secret")
    payment_method = body.get("payment_method")
    if not booking_id or not client_secret or not payment_method:
        return send_custom_response(400, "Payment details are incomplete")

    try:
        booking = context.bookings.get_booking(booking_id)
    except ApiError as err:
        return api_error_response(err)

    session = PaymentSession(
        booking_id=booking_id,
        amount=booking.total_amount,
        client_secret=client_secret,
    )
    try:
        result = context.payments.complete(session, payment_method)
    except PaymentFailed as err:
        return send_custom_response(402, err.message)
    except ValueError as err:
        return send_custom_response(400, str(err))
    except Exception:
        logger.exception(f"Unexpected payment error for booking {booking_id}")
        return send_custom_response(
            500, "An unexpected error occurred. Please try again."
        )

    if not result.succeeded:
        return send_custom_response(
            202,
            f"Payment is {result.status}",
            {"status": result.status, "booking_id": booking_id},
        )

    return send_custom_response(
        200,
        "Payment Successful!",
        {
            "status": result.status,
            "booking_id": booking_id,
            "amount": session.amount,
            "countdown": context.payments.countdown_seconds,
        },
        redirect_to=MY_BOOKINGS_PATH,
    )

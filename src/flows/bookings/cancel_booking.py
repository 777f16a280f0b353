from hotel_client.services.app_context import AppContext
from hotel_client.utils.custom_exceptions import ApiError
from hotel_client.utils.custom_response import (
    api_error_response,
    login_required,
    send_custom_response,
)
from flows.bookings.get_bookings import booking_data


def cancel_booking(event: dict, context: AppContext):
    if not context.is_authenticated:
        return login_required()

    booking_id = event.get("booking_id")
    if not booking_id:
        return send_custom_response(400, "Invalid booking ID")

    reason = (event.get("body") or {}).get("reason")
    if reason and len(reason) > 200:
        return send_custom_response(400, "Reason cannot exceed 200 characters")

    try:
        booking = context.bookings.cancel_booking(booking_id, reason)
    except ApiError as err:
        return api_error_response(err)

    return send_custom_response(200, "Booking cancelled successfully", booking_data(booking))

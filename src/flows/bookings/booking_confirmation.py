from hotel_client.services.app_context import AppContext
from hotel_client.utils.custom_exceptions import ApiError
from hotel_client.utils.custom_response import (
    api_error_response,
    login_required,
    send_custom_response,
)
from flows.bookings.get_bookings import booking_data


def get_booking_confirmation(event: dict, context: AppContext):
    if not context.is_authenticated:
        return login_required()

    booking_id = event.get("booking_id")
    if not booking_id:
        return send_custom_response(400, "Invalid booking ID", redirect_to="/hotels")

    try:
        booking = context.bookings.get_booking(booking_id)
    except ApiError as err:
        return api_error_response(err)

    data = booking_data(booking)
    data["nights"] = booking.nights
    return send_custom_response(200, "Booking retrieved successfully", data)

from hotel_client.models.bookings import Booking, BookingStatus
from hotel_client.services.app_context import AppContext
from hotel_client.utils.custom_exceptions import ApiError
from hotel_client.utils.custom_response import (
    api_error_response,
    login_required,
    send_custom_response,
)


def booking_data(b: Booking) -> dict:
    return {
        "booking_id": b.booking_id,
        "reference": b.reference,
        "hotel_id": b.hotel_id,
        "hotel_name": b.hotel_name,
        "room_type": b.room_type,
        "status": b.status.value,
        "payment_status": b.payment_status.value,
        "check_in": b.check_in.isoformat() if b.check_in else None,
        "check_out": b.check_out.isoformat() if b.check_out else None,
        "guests": b.guests,
        "total_amount": b.total_amount,
    }


def get_user_bookings(event: dict, context: AppContext):
    if not context.is_authenticated:
        return login_required()

    status = None
    raw_status = (event.get("params") or {}).get("status")
    if raw_status:
        try:
            status = BookingStatus(raw_status)
        except ValueError:
            allowed = ", ".join(s.value for s in BookingStatus)
            return send_custom_response(400, f"Invalid status. Allowed: {allowed}")

    try:
        bookings = context.bookings.list_bookings(status=status)
    except ApiError as err:
        return api_error_response(err)

    result = [booking_data(b) for b in bookings]
    return send_custom_response(
        200,
        "Bookings retrieved successfully",
        {"count": len(result), "bookings": result},
    )

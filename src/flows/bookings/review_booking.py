from flows.bookings.select_room import draft_summary
from hotel_client.models.drafts import DraftState
from hotel_client.services.app_context import AppContext
from hotel_client.utils.constants import HOTELS_PATH
from hotel_client.utils.custom_exceptions import (
    ApiError,
    DraftStateError,
    NotFoundException,
)
from hotel_client.utils.custom_response import (
    api_error_response,
    field_errors_response,
    login_required,
    send_custom_response,
)

INVALID_BOOKING = "Please select a hotel and room before proceeding with booking."


def get_booking_review(event: dict, context: AppContext):
    if not context.is_authenticated:
        return login_required("You need to be logged in to book a hotel room.")

    flow_id = event.get("flow_id")
    try:
        draft = context.drafts.get(flow_id)
    except NotFoundException:
        return send_custom_response(404, INVALID_BOOKING, redirect_to=HOTELS_PATH)

    return send_custom_response(200, "Complete Your Booking", draft_summary(flow_id, draft))


def confirm_booking(event: dict, context: AppContext):
    if not context.is_authenticated:
        return login_required("You need to be logged in to book a hotel room.")

    flow_id = event.get("flow_id")
    try:
        draft = context.drafts.get(flow_id)
    except NotFoundException:
        return send_custom_response(404, INVALID_BOOKING, redirect_to=HOTELS_PATH)

    try:
        if draft.state == DraftState.SELECTING:
            errors = context.bookings.mark_ready(draft)
            if errors:
                return field_errors_response(errors)
        booking = context.bookings.submit(draft)
    except DraftStateError as err:
        return send_custom_response(409, str(err))
    except ApiError as err:
        if err.status_code is not None and err.status_code >= 500:
            return send_custom_response(
                err.status_code, "Failed to create booking. Please try again."
            )
        return api_error_response(err)

    context.drafts.discard(flow_id)
    return send_custom_response(
        201,
        "Booking created successfully",
        {"booking_id": booking.booking_id, "total_amount": booking.total_amount},
        redirect_to=f"/payment/{booking.booking_id}",
    )


def abandon_booking(event: dict, context: AppContext):
    context.drafts.discard(event.get("flow_id"))
    return send_custom_response(200, "booking abandoned", redirect_to=HOTELS_PATH)

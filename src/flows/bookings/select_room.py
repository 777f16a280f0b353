from hotel_client.models.drafts import BookingDraft, GuestDetails
from hotel_client.services.app_context import AppContext
from hotel_client.utils.custom_exceptions import (
    ApiError,
    DraftStateError,
    NotFoundException,
)
from hotel_client.utils.custom_response import (
    api_error_response,
    login_required,
    send_custom_response,
)


def draft_summary(flow_id: str, draft: BookingDraft) -> dict:
    return {
        "flow_id": flow_id,
        "state": draft.state.value,
        "hotel_id": draft.hotel_id,
        "hotel_name": draft.hotel_name,
        "room_type": draft.room_type,
        "base_price": draft.base_price,
        "check_in": str(draft.check_in) if draft.check_in else None,
        "check_out": str(draft.check_out) if draft.check_out else None,
        "guests": draft.guest_count,
        "nights": draft.nights,
        "total_amount": draft.total_amount,
    }


def _guest_details(body: dict, user) -> GuestDetails:
    given = body.get("guest_details")
    if not isinstance(given, dict):
        given = {}
    return GuestDetails(
        first_name=str(given.get("first_name") or user.first_name),
        last_name=str(given.get("last_name") or user.last_name),
        email=str(given.get("email") or user.email),
        phone=str(given.get("phone") or user.phone or ""),
    )


def _ready_or_errors(flow_id: str, draft: BookingDraft, context: AppContext):
    errors = context.bookings.mark_ready(draft)
    if errors:
        return send_custom_response(
            400,
            errors[0].message,
            {
                "flow_id": flow_id,
                "errors": [{"field": e.field, "message": e.message} for e in errors],
            },
        )
    return send_custom_response(
        200,
        "booking draft ready",
        draft_summary(flow_id, draft),
        redirect_to=f"/booking/{flow_id}",
    )


def start_booking(event: dict, context: AppContext):
    if not context.is_authenticated:
        return login_required("Please login to book a hotel.")

    body = event.get("body") or {}
    hotel_id = body.get("hotel_id")
    room_type = body.get("room_type")
    if not hotel_id or not room_type:
        return send_custom_response(400, "Please select a room and dates to continue.")

    base_price = body.get("base_price")
    hotel_name = body.get("hotel_name")
    room_id = body.get("room_id")
    if base_price is None:
        try:
            hotel = context.hotels.get_hotel(hotel_id)
        except ApiError as err:
            return api_error_response(err)
        room = hotel.room(room_type)
        if room is None:
            return send_custom_response(400, f"Room type '{room_type}' is not offered")
        base_price = room.base_price
        hotel_name = hotel.name
        room_id = room.id

    try:
        base_price = float(base_price)
        guest_count = int(body.get("guests") or 1)
    except (TypeError, ValueError):
        return send_custom_response(400, "Room price and guests must be numbers")

    check_in = body.get("check_in")
    check_out = body.get("check_out")
    for value in (check_in, check_out):
        if value is not None and not isinstance(value, str):
            return send_custom_response(400, "Please enter valid dates")

    draft = BookingDraft(
        hotel_id=hotel_id,
        room_type=room_type,
        base_price=base_price,
        check_in=check_in,
        check_out=check_out,
        guest_count=guest_count,
        guest_details=_guest_details(body, context.user),
        hotel_name=hotel_name,
        room_id=room_id,
    )
    flow_id = context.drafts.create(draft)
    return _ready_or_errors(flow_id, draft, context)


def update_booking_draft(event: dict, context: AppContext):
    if not context.is_authenticated:
        return login_required("Please login to book a hotel.")

    flow_id = event.get("flow_id")
    try:
        draft = context.drafts.get(flow_id)
    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err), redirect_to="/hotels")

    changes = dict(event.get("body") or {})
    if "guests" in changes:
        changes["guest_count"] = changes.pop("guests")

    try:
        draft.update(**changes)
    except DraftStateError as err:
        return send_custom_response(409, str(err))
    except ValueError as err:
        return send_custom_response(400, str(err))

    return _ready_or_errors(flow_id, draft, context)

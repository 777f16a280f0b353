from hotel_client.models.search import SearchQuery
from hotel_client.services.app_context import AppContext
from hotel_client.utils import search_codec
from hotel_client.utils.custom_exceptions import ApiError, InvalidDates
from hotel_client.utils.custom_response import api_error_response, send_custom_response
from hotel_client.utils.datetime_normaliser import to_utc_datetime


def submit_search(event: dict, context: AppContext):
    body = event.get("body") or {}
    destination = str(body.get("destination") or "").strip()
    check_in = body.get("check_in") or ""
    check_out = body.get("check_out") or ""

    if not destination or not check_in or not check_out:
        return send_custom_response(400, "Please fill in all required fields")

    try:
        if to_utc_datetime(check_in) >= to_utc_datetime(check_out):
            return send_custom_response(400, "Check-out date must be after check-in date")
    except ValueError:
        return send_custom_response(400, "Please enter valid dates")

    try:
        guests = int(body.get("guests") or 1)
    except (TypeError, ValueError):
        return send_custom_response(400, "Guests must be a number")
    if guests < 1:
        return send_custom_response(400, "At least one guest is required")

    query = SearchQuery(destination, check_in, check_out, guests)
    return send_custom_response(
        200,
        "search submitted",
        {"query_string": search_codec.encode(query)},
        redirect_to=search_codec.search_path(query),
    )


def search_hotels(event: dict, context: AppContext):
    query = search_codec.decode(event.get("query_string") or "")

    try:
        hotels = context.hotels.search(query)
    except InvalidDates as err:
        return send_custom_response(400, str(err))
    except ApiError as err:
        return api_error_response(err)

    return send_custom_response(
        200,
        "Hotels retrieved successfully",
        {
            "query": {
                "destination": query.destination,
                "check_in": query.check_in,
                "check_out": query.check_out,
                "guests": query.guests,
            },
            "count": len(hotels),
            "hotels": [hotel.model_dump() for hotel in hotels],
        },
    )

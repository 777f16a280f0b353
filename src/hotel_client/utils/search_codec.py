from urllib.parse import parse_qs, urlencode

from hotel_client.models.search import SearchQuery
from hotel_client.utils.constants import DEFAULT_GUESTS, SEARCH_RESULTS_PATH


def encode(query: SearchQuery) -> str:
    return urlencode(
        {
            "city": query.destination,
            "checkIn": query.check_in,
            "checkOut": query.check_out,
            "guests": str(query.guests),
        }
    )


def decode(query_string: str) -> SearchQuery:
    params = parse_qs(query_string.lstrip("?"), keep_blank_values=True)

    def first(key: str) -> str:
        values = params.get(key)
        return values[0] if values else ""

    return SearchQuery(
        destination=first("city"),
        check_in=first("checkIn"),
        check_out=first("checkOut"),
        guests=_parse_guests(first("guests")),
    )


def search_path(query: SearchQuery) -> str:
    return f"{SEARCH_RESULTS_PATH}?{encode(query)}"


def _parse_guests(raw: str) -> int:
    try:
        guests = int(raw)
    except ValueError:
        return DEFAULT_GUESTS
    return guests if guests >= 1 else DEFAULT_GUESTS

from typing import List

from hotel_client.api.hotel_api import HotelApi
from hotel_client.models.search import SearchQuery
from hotel_client.schemas.hotels import Hotel
from hotel_client.utils.custom_exceptions import InvalidDates
from hotel_client.utils.datetime_normaliser import to_utc_datetime


class HotelService:
    def __init__(self, hotel_api: HotelApi):
        self.hotel_api = hotel_api

    def search(self, query: SearchQuery) -> List[Hotel]:
        if query.check_in and query.check_out:
            try:
                checkin = to_utc_datetime(query.check_in)
                checkout = to_utc_datetime(query.check_out)
            except ValueError:
                # unparsable dates go to the server as-is and come back empty
                return self.hotel_api.search(query)
            if checkout <= checkin:
                raise InvalidDates("Check-out date must be after check-in date")
        return self.hotel_api.search(query)

    def get_hotel(self, hotel_id: str) -> Hotel:
        return self.hotel_api.get_by_id(hotel_id)

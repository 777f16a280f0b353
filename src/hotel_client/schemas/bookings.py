from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from hotel_client.models.bookings import Booking, BookingStatus, PaymentStatus
from hotel_client.models.drafts import BookingDraft
from hotel_client.utils.datetime_normaliser import to_utc_datetime


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class RoomLine(CamelModel):
    room_type: str
    quantity: int = 1


class GuestCount(CamelModel):
    adults: int = 1
    children: int = 0


class GuestDetailsPayload(CamelModel):
    first_name: str
    last_name: str
    email: str
    phone: str


class CreateBookingRequest(CamelModel):
    hotel_id: str
    rooms: List[RoomLine]
    check_in: datetime
    check_out: datetime
    guests: GuestCount
    guest_details: GuestDetailsPayload
    total_amount: float

    @classmethod
    def from_draft(cls, draft: BookingDraft) -> "CreateBookingRequest":
        details = draft.guest_details.trimmed()
        return cls(
            hotel_id=draft.hotel_id,
            rooms=[RoomLine(room_type=draft.room_type)],
            check_in=to_utc_datetime(draft.check_in),
            check_out=to_utc_datetime(draft.check_out),
            guests=GuestCount(adults=draft.guest_count),
            guest_details=GuestDetailsPayload(
                first_name=details.first_name,
                last_name=details.last_name,
                email=details.email,
                phone=details.phone,
            ),
            total_amount=draft.total_amount,
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class BookingPayload(CamelModel):
    """Server booking document, normalised from its legacy and populated shapes."""

    id: str = Field(alias="_id")
    booking_id: Optional[str] = None
    hotel_id: str = ""
    hotel_name: Optional[str] = None
    room_type: str = ""
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    nights: Optional[int] = None
    guests: GuestCount = Field(default_factory=GuestCount)
    total_amount: float = 0.0
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    cancellation_reason: Optional[str] = None
    refund_amount: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def flatten_legacy_fields(cls, data: Any):
        if not isinstance(data, dict):
            return data
        data = dict(data)

        hotel = data.pop("hotel", None)
        if isinstance(hotel, dict):
            data.setdefault("hotelId", hotel.get("_id", ""))
            data.setdefault("hotelName", hotel.get("name"))
        elif hotel:
            data.setdefault("hotelId", str(hotel))

        rooms = data.get("rooms") or []
        if not data.get("roomType") and isinstance(rooms, list) and rooms:
            first_room = rooms[0]
            if isinstance(first_room, dict):
                data["roomType"] = first_room.get("roomType", "")

        if "guests" not in data and data.get("numberOfGuests"):
            data["guests"] = {"adults": data["numberOfGuests"], "children": 0}

        pricing = _as_dict(data.get("pricing"))
        if pricing.get("totalAmount"):
            data["totalAmount"] = pricing["totalAmount"]

        payment = _as_dict(data.get("payment"))
        if payment.get("status"):
            data["paymentStatus"] = payment["status"]

        cancellation = _as_dict(data.get("cancellation"))
        if cancellation.get("reason"):
            data.setdefault("cancellationReason", cancellation["reason"])
        if cancellation.get("refundAmount") is not None:
            data.setdefault("refundAmount", cancellation["refundAmount"])
        return data

    def to_domain(self) -> Booking:
        return Booking(
            booking_id=self.id,
            hotel_id=self.hotel_id,
            room_type=self.room_type,
            check_in=self.check_in,
            check_out=self.check_out,
            guests=self.guests.adults + self.guests.children,
            total_amount=self.total_amount,
            status=self.status,
            payment_status=self.payment_status,
            hotel_name=self.hotel_name,
            reference=self.booking_id,
            nights=self.nights,
            cancellation_reason=self.cancellation_reason,
            refund_amount=self.refund_amount,
        )


class Pagination(CamelModel):
    current_page: int = 1
    total_pages: int = 1
    total_bookings: int = 0
    has_next: bool = False
    has_prev: bool = False


class BookingListResponse(CamelModel):
    bookings: List[BookingPayload] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class StatusUpdateRequest(CamelModel):
    status: BookingStatus


class CancelRequest(CamelModel):
    reason: Optional[str] = Field(default=None, max_length=200)

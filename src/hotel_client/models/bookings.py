from enum import Enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    NO_SHOW = "no-show"
    PAYMENT_FAILED = "payment_failed"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


@dataclass
class Booking:
    booking_id: str
    hotel_id: str
    room_type: str
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    guests: int
    total_amount: float
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING

    hotel_name: Optional[str] = None
    reference: Optional[str] = None
    nights: Optional[int] = None
    cancellation_reason: Optional[str] = None
    refund_amount: Optional[float] = None

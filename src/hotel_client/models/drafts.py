from enum import Enum
from dataclasses import dataclass, field, fields
from datetime import date
from typing import List, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

from hotel_client.utils.constants import PHONE_LENGTH
from hotel_client.utils.custom_exceptions import DraftStateError
from hotel_client.utils.datetime_normaliser import DateLike, to_utc_datetime
from hotel_client.utils.pricing import nights_between, total_price

EMAIL_ADAPTER = TypeAdapter(EmailStr)


class DraftState(str, Enum):
    SELECTING = "selecting"
    READY_TO_SUBMIT = "ready_to_submit"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


@dataclass
class FieldError:
    field: str
    message: str


@dataclass
class GuestDetails:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""

    def trimmed(self) -> "GuestDetails":
        return GuestDetails(
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            email=self.email.strip(),
            phone=self.phone.strip(),
        )


GUEST_FIELDS = {f.name for f in fields(GuestDetails)}
TEXT_FIELDS = {"hotel_id", "room_type", "hotel_name", "room_id"}
DATE_FIELDS = {"check_in", "check_out"}
LOCKED_STATES = {DraftState.SUBMITTING, DraftState.SUBMITTED}


def _coerce(name: str, value):
    """Convert a form value to the type the draft field holds, or raise ValueError."""
    if name == "guest_count":
        if isinstance(value, bool):
            raise ValueError("Guests must be a number")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError("Guests must be a number") from None
    if name == "base_price":
        if isinstance(value, bool):
            raise ValueError("Room price must be a number")
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValueError("Room price must be a number") from None
    if name in GUEST_FIELDS:
        if value is None:
            return ""
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            return str(value)
        raise ValueError(f"Invalid value for {name}")
    if name in DATE_FIELDS:
        if value is None or isinstance(value, (str, date)):
            return value
        raise ValueError("Please enter valid dates")
    if name in TEXT_FIELDS:
        if value is None or isinstance(value, str):
            return value
        raise ValueError(f"Invalid value for {name}")
    raise ValueError(f"Unknown draft field: {name}")


@dataclass
class BookingDraft:
    hotel_id: str
    room_type: str
    base_price: float
    check_in: Optional[DateLike] = None
    check_out: Optional[DateLike] = None
    guest_count: int = 1
    guest_details: GuestDetails = field(default_factory=GuestDetails)

    hotel_name: Optional[str] = None
    room_id: Optional[str] = None

    state: DraftState = DraftState.SELECTING
    booking_id: Optional[str] = None

    @property
    def nights(self) -> int:
        return nights_between(self.check_in, self.check_out)

    @property
    def total_amount(self) -> float:
        return total_price(self.base_price, self.nights)

    def update(self, **changes):
        if self.state in LOCKED_STATES:
            raise DraftStateError(f"draft cannot be changed while {self.state.value}")

        coerced = {name: _coerce(name, value) for name, value in changes.items()}

        for name, value in coerced.items():
            if name in GUEST_FIELDS:
                setattr(self.guest_details, name, value)
            else:
                setattr(self, name, value)

        if self.state == DraftState.READY_TO_SUBMIT:
            self.state = DraftState.SELECTING

    def validate(self, today: Optional[date] = None) -> List[FieldError]:
        errors: List[FieldError] = []

        if not str(self.hotel_id or "").strip():
            errors.append(FieldError("hotel_id", "Please select a hotel"))
        if not str(self.room_type or "").strip():
            errors.append(FieldError("room_type", "Please select a room"))
        if self.base_price is None or self.base_price < 0:
            errors.append(FieldError("base_price", "Room price is invalid"))

        errors.extend(self._validate_dates(today))

        if self.guest_count is None or self.guest_count < 1:
            errors.append(FieldError("guest_count", "At least one guest is required"))

        errors.extend(self._validate_guest_details())
        return errors

    def _validate_dates(self, today: Optional[date]) -> List[FieldError]:
        try:
            check_in = to_utc_datetime(self.check_in)
            check_out = to_utc_datetime(self.check_out)
        except ValueError:
            return [FieldError("check_in", "Please enter valid dates")]

        errors = []
        if check_in is None:
            errors.append(FieldError("check_in", "Please select a check-in date"))
        if check_out is None:
            errors.append(FieldError("check_out", "Please select a check-out date"))
        if errors:
            return errors

        if check_out <= check_in:
            errors.append(
                FieldError("check_out", "Check-out date must be after check-in date")
            )
        if today is not None and check_in.date() < today:
            errors.append(FieldError("check_in", "Check-in date cannot be in the past"))
        return errors

    def _validate_guest_details(self) -> List[FieldError]:
        details = self.guest_details.trimmed()
        errors = []
        labels = {
            "first_name": "First name",
            "last_name": "Last name",
            "email": "Email",
            "phone": "Phone",
        }
        for name, label in labels.items():
            if not getattr(details, name):
                errors.append(FieldError(name, f"{label} is required"))

        if details.email:
            try:
                EMAIL_ADAPTER.validate_python(details.email)
            except ValidationError:
                errors.append(FieldError("email", "Valid email is required"))

        if details.phone and (
            not details.phone.isdigit() or len(details.phone) != PHONE_LENGTH
        ):
            errors.append(
                FieldError("phone", f"Valid {PHONE_LENGTH}-digit phone number is required")
            )
        return errors

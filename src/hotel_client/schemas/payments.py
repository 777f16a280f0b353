from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hotel_client.models.bookings import PaymentStatus


class PaymentModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class PaymentIntentRequest(PaymentModel):
    booking_id: str
    amount: float = Field(gt=0)


class PaymentIntentResponse(PaymentModel):
    client_secret: str


class PaymentStatusResponse(PaymentModel):
    booking_id: str
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: Optional[str] = None
    amount: float = 0.0
    paid_at: Optional[datetime] = None
    transaction_id: Optional[str] = None

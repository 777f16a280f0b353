from dataclasses import dataclass
from typing import Optional

from hotel_client.utils.constants import PAYMENT_SUCCEEDED


@dataclass
class PaymentSession:
    booking_id: str
    amount: float
    client_secret: str
    paid: bool = False


@dataclass
class ProviderResult:
    status: Optional[str] = None
    payment_intent_id: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error_message is None and self.status == PAYMENT_SUCCEEDED

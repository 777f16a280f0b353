from typing import Optional, Protocol

from hotel_client.models.payments import ProviderResult


class PaymentProvider(Protocol):
    def confirm(
        self,
        client_secret: str,
        payment_method: str,
        return_url: Optional[str] = None,
    ) -> ProviderResult:
        ...

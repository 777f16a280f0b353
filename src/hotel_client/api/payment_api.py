import logging

from pydantic import ValidationError

from hotel_client.api.http import ApiClient
from hotel_client.schemas.payments import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentStatusResponse,
)
from hotel_client.utils.custom_exceptions import ApiError

logger = logging.getLogger(__name__)


class PaymentApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def create_payment_intent(self, booking_id: str, amount: float) -> str:
        request = PaymentIntentRequest(booking_id=booking_id, amount=amount)
        body = self.client.post(
            "/payment/create-payment-intent", request.model_dump(by_alias=True)
        )
        try:
            return PaymentIntentResponse.model_validate(body).client_secret
        except ValidationError as err:
            logger.error(f"Payment intent for booking {booking_id} has no secret: {err}")
            raise ApiError(None, "Failed to create payment intent") from err

    def get_status(self, booking_id: str) -> PaymentStatusResponse:
        body = self.client.get(f"/payment/status/{booking_id}")
        try:
            return PaymentStatusResponse.model_validate(body)
        except ValidationError as err:
            logger.error(f"Unexpected payment status payload: {err}")
            raise ApiError(None, "Invalid response from server") from err

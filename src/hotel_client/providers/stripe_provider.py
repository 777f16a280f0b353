import logging
from typing import Optional

import stripe

from hotel_client.models.payments import ProviderResult

logger = logging.getLogger(__name__)


def intent_id_from_secret(client_secret: str) -> str:
    """Stripe client secrets look like ``pi_123_secret_abc``."""
    intent_id, separator, _ = client_secret.partition("_secret_")
    if not separator or not intent_id:
        raise ValueError("Malformed payment intent client secret")
    return intent_id


class StripePaymentProvider:
    def __init__(self, api_key: str):
        if not api_key:
            raise RuntimeError("STRIPE_API_KEY environment variable is not set")
        self.api_key = api_key

    def confirm(
        self,
        client_secret: str,
        payment_method: str,
        return_url: Optional[str] = None,
    ) -> ProviderResult:
        intent_id = intent_id_from_secret(client_secret)
        params = {"payment_method": payment_method}
        if return_url:
            params["return_url"] = return_url

        try:
            intent = stripe.PaymentIntent.confirm(
                intent_id, api_key=self.api_key, **params
            )
        except stripe.StripeError as err:
            message = err.user_message or str(err)
            logger.error(f"Stripe rejected payment intent {intent_id}: {message}")
            return ProviderResult(payment_intent_id=intent_id, error_message=message)

        logger.info(f"Payment intent {intent.id} is {intent.status}")
        return ProviderResult(status=intent.status, payment_intent_id=intent.id)

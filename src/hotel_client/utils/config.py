import os
from dataclasses import dataclass
from typing import Optional

API_BASE_URL = os.environ.get("HOTEL_API_URL", "http://localhost:5000/api")
API_TIMEOUT = float(os.environ.get("HOTEL_API_TIMEOUT", "30"))
TOKEN_PATH = os.environ.get(
    "HOTEL_TOKEN_PATH", os.path.join(os.path.expanduser("~"), ".hotel_client", "token")
)
STRIPE_API_KEY = os.environ.get("STRIPE_API_KEY")
PAYMENT_RETURN_URL = os.environ.get(
    "PAYMENT_RETURN_URL", "http://localhost:3000/booking-confirmation"
)
DRAFT_TTL_SECONDS = int(os.environ.get("DRAFT_TTL_SECONDS", str(30 * 60)))


@dataclass
class Settings:
    api_base_url: str = API_BASE_URL
    api_timeout: float = API_TIMEOUT
    token_path: str = TOKEN_PATH
    stripe_api_key: Optional[str] = STRIPE_API_KEY
    payment_return_url: str = PAYMENT_RETURN_URL
    draft_ttl_seconds: int = DRAFT_TTL_SECONDS

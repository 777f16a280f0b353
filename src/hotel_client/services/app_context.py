import logging
from datetime import date
from typing import Callable, Optional

import requests

from hotel_client.api.auth_api import AuthApi
from hotel_client.api.booking_api import BookingApi
from hotel_client.api.hotel_api import HotelApi, RecommendationApi
from hotel_client.api.http import ApiClient
from hotel_client.api.payment_api import PaymentApi
from hotel_client.models.users import User
from hotel_client.providers.base import PaymentProvider
from hotel_client.providers.stripe_provider import StripePaymentProvider
from hotel_client.schemas.users import LoginRequest, ProfileUpdateRequest, RegisterRequest
from hotel_client.services.booking_service import BookingService
from hotel_client.services.draft_store import DraftStore
from hotel_client.services.hotel_service import HotelService
from hotel_client.services.payment_service import PaymentHandoff
from hotel_client.utils.config import Settings
from hotel_client.utils.custom_exceptions import ApiError
from hotel_client.utils.token_format import is_token_expired, is_valid_jwt_format
from hotel_client.utils.token_store import FileTokenStore

logger = logging.getLogger(__name__)


class AppContext:
    """Everything a flow needs: the signed-in user, API clients and services.

    Built once per application, passed to each flow handler. ``init`` restores
    a persisted session, ``teardown`` forgets it.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        token_store=None,
        session: Optional[requests.Session] = None,
        payment_provider: Optional[PaymentProvider] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.settings = settings if settings else Settings()
        self.token_store = (
            token_store if token_store is not None else FileTokenStore(self.settings.token_path)
        )
        self.user: Optional[User] = None
        self.auth_required = False

        self.client = ApiClient(
            self.settings.api_base_url,
            self.token_store,
            session=session,
            timeout=self.settings.api_timeout,
            on_auth_required=self._on_auth_required,
        )
        self.auth_api = AuthApi(self.client)
        self.booking_api = BookingApi(self.client)
        self.hotel_api = HotelApi(self.client)
        self.recommendation_api = RecommendationApi(self.client)
        self.payment_api = PaymentApi(self.client)

        if payment_provider is None and self.settings.stripe_api_key:
            payment_provider = StripePaymentProvider(self.settings.stripe_api_key)

        self.bookings = BookingService(self.booking_api, clock=clock)
        self.hotels = HotelService(self.hotel_api)
        self.drafts = DraftStore(self.settings.draft_ttl_seconds)
        self.payments = PaymentHandoff(
            self.payment_api,
            payment_provider,
            return_url=self.settings.payment_return_url,
        )

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def init(self) -> Optional[User]:
        token = self.token_store.get()
        if not token:
            return None

        if not is_valid_jwt_format(token) or is_token_expired(token):
            logger.warning("Stored token is malformed or expired, clearing it")
            self.teardown()
            return None

        try:
            self.user = self.auth_api.get_profile()
        except ApiError as err:
            logger.error(f"Auth initialization error: {err}")
            self.teardown()
            return None
        return self.user

    def login(self, email: str, password: str) -> User:
        response = self.auth_api.login(LoginRequest(email=email, password=password))
        self._start_session(response.token, response.user.to_domain())
        return self.user

    def register(
        self, name: str, email: str, password: str, phone: Optional[str] = None
    ) -> User:
        request = RegisterRequest(name=name, email=email, password=password, phone=phone)
        response = self.auth_api.register(request)
        self._start_session(response.token, response.user.to_domain())
        return self.user

    def update_profile(
        self, name: Optional[str] = None, phone: Optional[str] = None
    ) -> User:
        self.user = self.auth_api.update_profile(
            ProfileUpdateRequest(name=name, phone=phone)
        )
        return self.user

    def teardown(self):
        self.token_store.clear()
        self.user = None

    logout = teardown

    def _start_session(self, token: str, user: User):
        self.token_store.set(token)
        self.user = user
        self.auth_required = False
        logger.info(f"Signed in as {user.email}")

    def _on_auth_required(self):
        self.user = None
        self.auth_required = True

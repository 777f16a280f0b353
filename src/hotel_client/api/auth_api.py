import logging

from pydantic import ValidationError

from hotel_client.api.http import ApiClient
from hotel_client.models.users import User
from hotel_client.schemas.users import (
    AuthResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserPayload,
)
from hotel_client.utils.custom_exceptions import ApiError

logger = logging.getLogger(__name__)


class AuthApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, request: LoginRequest) -> AuthResponse:
        body = self.client.post("/auth/login", request.model_dump())
        return self._parse(AuthResponse, body)

    def register(self, request: RegisterRequest) -> AuthResponse:
        body = self.client.post("/auth/register", request.model_dump(exclude_none=True))
        return self._parse(AuthResponse, body)

    def get_profile(self) -> User:
        body = self.client.get("/auth/profile")
        return self._parse(UserPayload, body.get("user", body)).to_domain()

    def update_profile(self, request: ProfileUpdateRequest) -> User:
        body = self.client.put("/auth/profile", request.model_dump(exclude_none=True))
        return self._parse(UserPayload, body.get("user", body)).to_domain()

    @staticmethod
    def _parse(model, body: dict):
        try:
            return model.model_validate(body)
        except ValidationError as err:
            logger.error(f"Unexpected auth payload: {err}")
            raise ApiError(None, "Invalid response from server") from err

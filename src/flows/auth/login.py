import logging

from pydantic import ValidationError

from hotel_client.schemas.users import LoginRequest, RegisterRequest
from hotel_client.services.app_context import AppContext
from hotel_client.utils.custom_exceptions import ApiError, AuthenticationError
from hotel_client.utils.custom_response import (
    api_error_response,
    send_custom_response,
    validation_error_response,
)

logger = logging.getLogger(__name__)


def _user_data(user) -> dict:
    return {
        "user_id": user.user_id,
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
    }


def login(event: dict, context: AppContext):
    try:
        request = LoginRequest.model_validate(event.get("body") or {})
    except ValidationError as e:
        return validation_error_response(e)

    try:
        user = context.login(request.email, request.password)
    except AuthenticationError as err:
        return send_custom_response(401, str(err))
    except ApiError as err:
        return api_error_response(err)

    return send_custom_response(
        200, "login successful", _user_data(user), redirect_to=event.get("next") or "/"
    )


def register(event: dict, context: AppContext):
    try:
        request = RegisterRequest.model_validate(event.get("body") or {})
    except ValidationError as e:
        return validation_error_response(e)

    try:
        user = context.register(
            request.name, request.email, request.password, request.phone
        )
    except ApiError as err:
        return api_error_response(err)

    return send_custom_response(201, "signup successful", _user_data(user), redirect_to="/")


def logout(event: dict, context: AppContext):
    context.logout()
    return send_custom_response(200, "logged out", redirect_to="/")

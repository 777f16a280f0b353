import logging
from pydantic import BaseModel, ValidationError
from typing import Any, List, Optional

from hotel_client.utils.constants import LOGIN_PATH
from hotel_client.utils.custom_exceptions import (
    ApiError,
    AuthenticationError,
    NetworkError,
)

logger = logging.getLogger(__name__)


class ViewResponse(BaseModel):
    status_code: int
    message: str
    data: Optional[Any] = None
    redirect_to: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code < 400


def send_custom_response(
    status_code: int,
    message: str,
    data: Optional[Any] = None,
    redirect_to: Optional[str] = None,
) -> ViewResponse:
    return ViewResponse(
        status_code=status_code, message=message, data=data, redirect_to=redirect_to
    )


def api_error_response(err: ApiError) -> ViewResponse:
    if isinstance(err, NetworkError):
        return send_custom_response(503, "Network error. Please try again.")
    if isinstance(err, AuthenticationError):
        return send_custom_response(
            401,
            str(err),
            redirect_to=LOGIN_PATH if err.token_error else None,
        )
    if err.status_code is None or err.status_code >= 500:
        logger.error(f"Server error: {err}")
        return send_custom_response(err.status_code or 502, str(err))
    data = {"errors": err.errors} if err.errors else None
    return send_custom_response(err.status_code, str(err), data)


def validation_error_response(err: ValidationError) -> ViewResponse:
    return send_custom_response(400, "; ".join(e["msg"] for e in err.errors()))


def field_errors_response(errors: List[Any]) -> ViewResponse:
    return send_custom_response(
        400,
        errors[0].message,
        {"errors": [{"field": e.field, "message": e.message} for e in errors]},
    )


def login_required(message: str = "Please login to continue.") -> ViewResponse:
    return send_custom_response(401, message, redirect_to=LOGIN_PATH)

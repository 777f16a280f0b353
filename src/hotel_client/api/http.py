import logging
from typing import Callable, Optional

import requests

from hotel_client.utils.custom_exceptions import (
    ApiError,
    AuthenticationError,
    NetworkError,
)
from hotel_client.utils.token_format import is_valid_jwt_format

logger = logging.getLogger(__name__)


class ApiClient:
    def __init__(
        self,
        base_url: str,
        token_store,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
        on_auth_required: Optional[Callable[[], None]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store
        self.session = session if session else requests.Session()
        self.timeout = timeout
        self.on_auth_required = on_auth_required

    def get(self, path: str, params: Optional[dict] = None) -> dict:
        return self.request("GET", path, params=params)

    def post(self, path: str, payload: Optional[dict] = None) -> dict:
        return self.request("POST", path, payload=payload)

    def put(self, path: str, payload: Optional[dict] = None) -> dict:
        return self.request("PUT", path, payload=payload)

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        payload: Optional[dict] = None,
    ) -> dict:
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = {"Content-Type": "application/json"}
        headers.update(self._auth_header())

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as err:
            logger.error(f"Error calling {method} {url}: {err}")
            raise NetworkError(str(err)) from err

        if response.status_code >= 400:
            self._raise_for_status(method, url, response)

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as err:
            logger.error(f"Unreadable response from {method} {url}: {err}")
            raise ApiError(response.status_code, "Invalid response from server") from err
        if not isinstance(body, dict):
            logger.error(
                f"Expected a JSON object from {method} {url}, got {type(body).__name__}"
            )
            raise ApiError(response.status_code, "Invalid response from server")
        return body

    def _auth_header(self) -> dict:
        token = self.token_store.get()
        if not token:
            return {}
        if not is_valid_jwt_format(token):
            logger.warning("Invalid JWT format detected, removing token")
            self.token_store.clear()
            return {}
        return {"Authorization": f"Bearer {token}"}

    def _raise_for_status(self, method: str, url: str, response: requests.Response):
        body = self._error_body(response)
        message = body.get("message")
        logger.error(
            f"{method} {url} failed with status {response.status_code}: {message}"
        )

        if response.status_code == 401:
            self.token_store.clear()
            token_error = bool(body.get("tokenError"))
            if token_error and self.on_auth_required:
                self.on_auth_required()
            raise AuthenticationError(message, token_error=token_error)

        raise ApiError(response.status_code, message, body.get("errors"))

    @staticmethod
    def _error_body(response: requests.Response) -> dict:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

from typing import List, Optional


class ApiError(Exception):
    def __init__(
        self,
        status_code: Optional[int],
        message: Optional[str] = None,
        errors: Optional[List[dict]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or []

    def __str__(self):
        if self.message:
            return self.message
        if self.errors:
            return self.errors[0].get("msg", "Request failed")
        return f"Request failed with status {self.status_code}"


class AuthenticationError(ApiError):
    def __init__(self, message: Optional[str] = None, token_error: bool = False):
        super().__init__(401, message)
        self.token_error = token_error


class NetworkError(ApiError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(None, message)


class NotFoundException(Exception):
    def __init__(self, resource: str, identifier: str, status_code: int = 404):
        self.resource = resource
        self.identifier = identifier
        self.status_code = status_code

    def __str__(self):
        return f"{self.resource} '{self.identifier}' not found"


class InvalidDates(Exception):
    pass


class DraftStateError(Exception):
    pass


class PaymentFailed(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

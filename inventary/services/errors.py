"""
errors.py - API error types
Single responsibility: classify failures coming back from the backend.
"""


class ApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None, payload: dict | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class NetworkError(ApiError):
    """Connection refused, DNS failure, timeout."""


class HttpError(ApiError):
    """Backend answered with a non-2xx status."""


class AuthenticationError(HttpError):
    """401/403: token missing, expired or rejected."""


class EnvelopeError(ApiError):
    """Body did not match the expected response envelope."""

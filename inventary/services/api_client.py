"""
api_client.py - HTTP client for the Inventary backend
Single responsibility: send requests with shared defaults and map failures to ApiError.
"""
import logging
from typing import Any

import requests

from inventary.config import BACKEND_URL, REQUEST_TIMEOUT_SECONDS
from inventary.services.errors import (
    ApiError,
    AuthenticationError,
    HttpError,
    NetworkError,
)

logger = logging.getLogger(__name__)


def _error_message(response: requests.Response) -> tuple[str, dict | None]:
    """Pull "error"/"message" out of a JSON error body; fall back to the reason."""
    payload = None
    try:
        body = response.json()
        if isinstance(body, dict):
            payload = body
    except ValueError:
        body = None
    if payload:
        for key in ("error", "message"):
            if payload.get(key):
                return str(payload[key]), payload
    reason = response.reason or "Request failed"
    return f"{response.status_code} {reason}", payload


class ApiClient:
    def __init__(
        self,
        base_url: str = BACKEND_URL,
        session_store=None,
        http: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.session_store = session_store
        self.http = http or requests.Session()
        self.timeout = timeout

    def url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, requires_auth: bool) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if requires_auth and self.session_store is not None:
            token = self.session_store.token
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        data: dict | None = None,
        files: dict | None = None,
        requires_auth: bool = True,
    ) -> Any:
        method = method.upper()
        if method not in {"GET", "POST", "PUT", "DELETE"}:
            raise ValueError(f"Unsupported HTTP method: {method}")

        logger.debug("%s %s", method, path)
        try:
            response = self.http.request(
                method,
                self.url(path),
                headers=self._headers(requires_auth),
                json=json,
                data=data,
                files=files,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise NetworkError(str(e)) from e

        if not response.ok:
            message, payload = _error_message(response)
            logger.warning("%s %s -> %s: %s", method, path, response.status_code, message)
            error_cls = AuthenticationError if response.status_code in (401, 403) else HttpError
            raise error_cls(message, status_code=response.status_code, payload=payload)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError("Response is not valid JSON", status_code=response.status_code) from e

    def get(self, path: str, **kwargs) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> Any:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> Any:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request("DELETE", path, **kwargs)


_client: ApiClient | None = None


def get_client() -> ApiClient:
    """Process-wide client bound to the persisted login session."""
    global _client
    if _client is None:
        from inventary.services.auth_service import get_session_store

        _client = ApiClient(session_store=get_session_store())
    return _client


def set_client(client: ApiClient | None) -> None:
    global _client
    _client = client

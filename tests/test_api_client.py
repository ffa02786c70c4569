"""Tests for the HTTP client error mapping and auth header handling."""

import pytest
import requests

from conftest import FakeResponse
from inventary.services.errors import (
    ApiError,
    AuthenticationError,
    HttpError,
    NetworkError,
)


def test_bearer_token_attached(fake_api, fake_http):
    fake_http.queue(FakeResponse(200, {"data": {}}))
    fake_api.get("/api/colors?offset=0&limit=10")

    call = fake_http.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://backend.test/api/colors?offset=0&limit=10"
    assert call["headers"]["Authorization"] == "Bearer tok-123"


def test_public_request_has_no_bearer(fake_api, fake_http):
    fake_http.queue(FakeResponse(200, {"token": "x"}))
    fake_api.post("/api/auth/login", json={"username": "a"}, requires_auth=False)
    assert "Authorization" not in fake_http.calls[0]["headers"]


def test_connection_failure_is_network_error(fake_api, fake_http):
    fake_http.queue(requests.ConnectionError("refused"))
    with pytest.raises(NetworkError):
        fake_api.get("/api/colors")


def test_error_body_message_is_used(fake_api, fake_http):
    fake_http.queue(FakeResponse(400, {"error": "Artikel sudah ada"}, reason="Bad Request"))
    with pytest.raises(HttpError) as exc:
        fake_api.post("/api/admin/products", json={})
    assert exc.value.message == "Artikel sudah ada"
    assert exc.value.status_code == 400


def test_error_without_body_uses_reason(fake_api, fake_http):
    fake_http.queue(FakeResponse(500, None, reason="Internal Server Error"))
    with pytest.raises(HttpError) as exc:
        fake_api.get("/api/colors")
    assert exc.value.message == "500 Internal Server Error"


@pytest.mark.parametrize("status", [401, 403])
def test_auth_failures(fake_api, fake_http, status):
    fake_http.queue(FakeResponse(status, {"message": "Unauthorized"}))
    with pytest.raises(AuthenticationError):
        fake_api.get("/api/admin/products")


def test_empty_body_returns_none(fake_api, fake_http):
    fake_http.queue(FakeResponse(204, None))
    assert fake_api.delete("/api/colors/1") is None


def test_invalid_json_body(fake_api, fake_http):
    fake_http.queue(FakeResponse(200, raw="<html>"))
    with pytest.raises(ApiError):
        fake_api.get("/api/colors")


def test_unsupported_method(fake_api):
    with pytest.raises(ValueError):
        fake_api.request("PATCH", "/api/colors/1")


def test_absolute_urls_pass_through(fake_api):
    assert fake_api.url("https://cdn.test/x.png") == "https://cdn.test/x.png"
    assert fake_api.url("api/colors") == "http://backend.test/api/colors"

"""Pytest configuration and fixtures."""

import json

import pytest

from inventary.services.api_client import ApiClient
from inventary.services.auth_service import Session, SessionStore
from inventary.state.url_store import UrlStateStore


class FakeResponse:
    def __init__(self, status_code=200, body=None, reason="OK", raw=None):
        self.status_code = status_code
        self.reason = reason
        if raw is not None:
            self.content = raw.encode("utf-8")
        elif body is None:
            self.content = b""
        else:
            self.content = json.dumps(body).encode("utf-8")

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return json.loads(self.content.decode("utf-8"))


class FakeHttp:
    """Stands in for requests.Session; replays queued responses or raises."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, response):
        self.responses.append(response)
        return self

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            return FakeResponse(200, {"data": {}})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakePage:
    """Just enough of ft.Page for screens: synchronous threads, no rendering."""

    def __init__(self, route="/"):
        self.route = route
        self.views = []
        self.overlay = []
        self.updates = 0

    def update(self):
        self.updates += 1

    def run_thread(self, handler, *args, **kwargs):
        handler(*args, **kwargs)


class DeferredPage(FakePage):
    """FakePage whose threads wait in a queue until the test runs them."""

    def __init__(self, route="/"):
        super().__init__(route)
        self.pending = []

    def run_thread(self, handler, *args, **kwargs):
        self.pending.append(lambda: handler(*args, **kwargs))


@pytest.fixture
def deferred_page():
    return DeferredPage()


@pytest.fixture
def store():
    return UrlStateStore("/master-product?offset=0&limit=10")


@pytest.fixture
def session_file(tmp_path):
    return str(tmp_path / "session.json")


@pytest.fixture
def session_store(session_file):
    store = SessionStore(session_file)
    store.save(Session(token="tok-123", expires_at="2999-01-01T00:00:00Z", user={"username": "admin"}))
    return store


@pytest.fixture
def fake_http():
    return FakeHttp()


@pytest.fixture
def fake_api(fake_http, session_store):
    return ApiClient(base_url="http://backend.test", session_store=session_store, http=fake_http)


@pytest.fixture
def fake_page():
    return FakePage()

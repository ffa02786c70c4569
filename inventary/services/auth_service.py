"""
auth_service.py - Login session handling
Single responsibility: log in, persist the bearer token and expire it.
"""
import json
import logging
import os
from dataclasses import asdict, dataclass, field

from inventary.config import LOGIN_PATH, SESSION_PATH
from inventary.services.errors import ApiError
from inventary.utils.time import is_expired

logger = logging.getLogger(__name__)


@dataclass
class Session:
    token: str
    expires_at: str
    user: dict = field(default_factory=dict)

    @property
    def username(self) -> str:
        return str(self.user.get("username") or self.user.get("name") or "")


class SessionStore:
    """Session persisted as JSON; expired or unreadable files count as logged out."""

    def __init__(self, path: str = SESSION_PATH):
        self.path = path
        self._session: Session | None = None
        self._loaded = False

    def load(self) -> Session | None:
        self._loaded = True
        self._session = None
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            session = Session(
                token=raw["token"],
                expires_at=raw["expires_at"],
                user=raw.get("user") or {},
            )
        except (json.JSONDecodeError, OSError, KeyError, TypeError):
            logger.warning("Discarding unreadable session file %s", self.path)
            self.clear()
            return None

        if not session.token or is_expired(session.expires_at):
            logger.info("Stored session expired; logging out")
            self.clear()
            return None
        self._session = session
        return session

    @property
    def session(self) -> Session | None:
        if not self._loaded:
            self.load()
        elif self._session is not None and is_expired(self._session.expires_at):
            self.clear()
        return self._session

    @property
    def token(self) -> str | None:
        session = self.session
        return session.token if session else None

    @property
    def is_authenticated(self) -> bool:
        return self.session is not None

    def save(self, session: Session) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(asdict(session), f, ensure_ascii=False, indent=2)
        self._session = session
        self._loaded = True

    def clear(self) -> None:
        self._session = None
        self._loaded = True
        if os.path.exists(self.path):
            try:
                os.remove(self.path)
            except OSError as e:
                logger.debug("Failed to delete session file: %s", e)


_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    global _store
    if _store is None:
        _store = SessionStore()
    return _store


def login(client, username: str, password: str, store: SessionStore | None = None) -> Session:
    """POST credentials (no bearer) and persist the returned session."""
    store = store or client.session_store or get_session_store()
    body = client.post(
        LOGIN_PATH,
        json={"username": username, "password": password},
        requires_auth=False,
    )
    if not isinstance(body, dict) or not body.get("token"):
        raise ApiError("Login response did not include a token", payload=body if isinstance(body, dict) else None)
    session = Session(
        token=body["token"],
        expires_at=str(body.get("expires_at") or ""),
        user=body.get("user") or {},
    )
    store.save(session)
    logger.info("Logged in as %s", session.username or username)
    return session


def logout(store: SessionStore | None = None) -> None:
    (store or get_session_store()).clear()

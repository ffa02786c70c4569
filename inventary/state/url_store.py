"""
url_store.py - Route + query-string state store
Single responsibility: own the list view's query parameters and notify listeners.

The store is the only place list state lives. Controllers read projections of
it with get() and write through update(); the screen mirrors the store's route
onto the Flet page so filtered views stay bookmarkable.
"""
import logging
from typing import Callable, Iterable
from urllib.parse import parse_qsl, urlencode

logger = logging.getLogger(__name__)


class QueryParams:
    """Ordered query parameters with URLSearchParams-like set/delete rules."""

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()):
        self._pairs: list[tuple[str, str]] = [(str(k), str(v)) for k, v in pairs]

    @classmethod
    def parse(cls, query: str | None) -> "QueryParams":
        if not query:
            return cls()
        return cls(parse_qsl(query.lstrip("?"), keep_blank_values=True))

    def get(self, key: str) -> str | None:
        for k, v in self._pairs:
            if k == key:
                return v
        return None

    def has(self, key: str) -> bool:
        return any(k == key for k, _ in self._pairs)

    def set(self, key: str, value) -> None:
        """Replace the first occurrence in place (dropping the rest) or append."""
        value = str(value)
        result: list[tuple[str, str]] = []
        replaced = False
        for k, v in self._pairs:
            if k != key:
                result.append((k, v))
            elif not replaced:
                result.append((k, value))
                replaced = True
        if not replaced:
            result.append((key, value))
        self._pairs = result

    def delete(self, key: str) -> None:
        self._pairs = [(k, v) for k, v in self._pairs if k != key]

    def copy(self) -> "QueryParams":
        return QueryParams(self._pairs)

    def items(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def keys(self) -> list[str]:
        return [k for k, _ in self._pairs]

    def encode(self) -> str:
        return urlencode(self._pairs)

    def __eq__(self, other) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._pairs == other._pairs

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"QueryParams({self._pairs!r})"


Listener = Callable[["UrlStateStore"], None]
Mutator = Callable[[QueryParams], QueryParams]


class UrlStateStore:
    def __init__(self, route: str = "/"):
        path, _, query = (route or "/").partition("?")
        self.path = path or "/"
        self._params = QueryParams.parse(query)
        self._history: list[str] = [self.route]
        self._listeners: list[Listener] = []

    @property
    def params(self) -> QueryParams:
        return self._params.copy()

    @property
    def query_string(self) -> str:
        return self._params.encode()

    @property
    def route(self) -> str:
        query = self.query_string
        return f"{self.path}?{query}" if query else self.path

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    def get(self, key: str) -> str | None:
        return self._params.get(key)

    def update(self, mutator: Mutator, replace: bool = True) -> None:
        """
        Apply mutator to a copy of the current params and commit the result.

        replace=True overwrites the current history entry instead of adding one.
        Listeners are only notified when the params actually changed.
        """
        next_params = mutator(self._params.copy())
        if next_params is None:
            raise ValueError("URL state mutator must return the next QueryParams")
        if next_params == self._params:
            return
        self._params = next_params.copy()
        if replace:
            self._history[-1] = self.route
        else:
            self._history.append(self.route)
        logger.debug("URL state %s: %s", "replaced" if replace else "pushed", self.route)
        for listener in list(self._listeners):
            listener(self)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

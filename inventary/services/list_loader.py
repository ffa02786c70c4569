"""
list_loader.py - List fetch coordination
Single responsibility: run list requests for a screen and keep only the latest result.

Each load() takes a new generation number. A response (or error) whose
generation is no longer the latest is dropped, so a slow request for an old
query can never overwrite the rows of a newer one.
"""
import logging
import threading
from dataclasses import dataclass, field, replace
from typing import Callable

from inventary.domain.envelopes import ListEnvelope
from inventary.services.resource_service import error_text

logger = logging.getLogger(__name__)

Fetch = Callable[[str], ListEnvelope]


@dataclass(frozen=True)
class LoadState:
    initial_loading: bool = True
    refreshing: bool = False
    error: str | None = None
    rows: tuple[dict, ...] = field(default_factory=tuple)
    row_count: int = 0
    generation: int = 0
    key: tuple | None = None

    @property
    def loading(self) -> bool:
        return self.initial_loading or self.refreshing


class ListLoader:
    def __init__(self, fetch: Fetch, on_change: Callable[[LoadState], None] | None = None):
        self.fetch = fetch
        self.on_change = on_change
        self.state = LoadState()
        self._generation = 0
        self._has_settled = False
        self._lock = threading.Lock()

    def _publish(self, state: LoadState) -> None:
        self.state = state
        if self.on_change is not None:
            self.on_change(state)

    def begin(self, key: tuple | None = None) -> int:
        with self._lock:
            self._generation += 1
            generation = self._generation
            state = replace(
                self.state,
                initial_loading=not self._has_settled,
                refreshing=self._has_settled,
                generation=generation,
                key=key,
            )
        self._publish(state)
        return generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def complete(self, generation: int, envelope: ListEnvelope, page_size: int) -> bool:
        with self._lock:
            if not self.is_current(generation):
                logger.debug("Dropping stale list response (generation %s)", generation)
                return False
            self._has_settled = True
            state = replace(
                self.state,
                initial_loading=False,
                refreshing=False,
                error=None,
                rows=tuple(envelope.rows),
                row_count=envelope.row_count(page_size),
            )
        self._publish(state)
        return True

    def fail(self, generation: int, exc: Exception) -> bool:
        with self._lock:
            if not self.is_current(generation):
                logger.debug("Dropping stale list error (generation %s)", generation)
                return False
            self._has_settled = True
            state = replace(
                self.state,
                initial_loading=False,
                refreshing=False,
                error=error_text(exc),
                rows=(),
                row_count=0,
            )
        self._publish(state)
        return True

    def load(self, query_string: str, page_size: int, key: tuple | None = None) -> bool:
        """Fetch synchronously; True if the result was applied."""
        return self.run(self.begin(key), query_string, page_size)

    def run(self, generation: int, query_string: str, page_size: int) -> bool:
        """
        Fetch for a generation already taken with begin().

        Callers that fetch on a worker thread must call begin() before
        scheduling, so generations follow the order of the requests.
        """
        try:
            envelope = self.fetch(query_string)
        except Exception as exc:
            logger.exception("List request failed: %s", query_string)
            return self.fail(generation, exc)
        return self.complete(generation, envelope, page_size)

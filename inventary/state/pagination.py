"""
pagination.py - Pagination controller
Single responsibility: map offset/limit params to a {page, page_size} model and back.
"""
import logging
from collections.abc import Mapping

from inventary.config import DEFAULT_PAGE_SIZE
from inventary.domain.query_state import PaginationModel
from inventary.state.url_store import QueryParams, UrlStateStore

logger = logging.getLogger(__name__)


def _parse_int(raw: str | None, default: int) -> int:
    try:
        return int(raw) if raw not in (None, "") else default
    except (TypeError, ValueError):
        return default


class PaginationController:
    def __init__(self, store: UrlStateStore, default_page_size: int = DEFAULT_PAGE_SIZE):
        self.store = store
        self.default_page_size = default_page_size
        self.model = self._derive()
        # keep the mirror in sync when another controller rewrites offset/limit
        self._unsubscribe = store.subscribe(self._on_store_change)

    @property
    def offset(self) -> int:
        return max(_parse_int(self.store.get("offset"), 0), 0)

    @property
    def limit(self) -> int:
        limit = _parse_int(self.store.get("limit"), self.default_page_size)
        return limit if limit > 0 else self.default_page_size

    def _derive(self) -> PaginationModel:
        limit = self.limit
        return PaginationModel(page=self.offset // limit, page_size=limit)

    def _on_store_change(self, _store: UrlStateStore) -> None:
        derived = self._derive()
        if derived != self.model:
            self.model = derived

    def set_page(self, model) -> None:
        """Accept a PaginationModel or a {"page", "page_size"} mapping."""
        if isinstance(model, Mapping):
            model = PaginationModel(
                page=model.get("page", 0), page_size=model.get("page_size", self.default_page_size)
            )
        page = max(int(model.page), 0)
        page_size = int(model.page_size) if int(model.page_size) > 0 else self.default_page_size
        self.model = PaginationModel(page=page, page_size=page_size)
        logger.debug("Page -> %s (size %s)", page, page_size)

        def mutate(params: QueryParams) -> QueryParams:
            params.set("offset", page * page_size)
            params.set("limit", page_size)
            return params

        self.store.update(mutate, replace=True)

    def dispose(self) -> None:
        self._unsubscribe()

"""
list_state.py - List view state composition
Single responsibility: bundle the four controllers around one store for a screen.
"""
from collections.abc import Iterable

from inventary.config import DEFAULT_PAGE_SIZE
from inventary.domain.query_state import QueryState
from inventary.state.filters import FilterController
from inventary.state.pagination import PaginationController
from inventary.state.query_builder import build_query_string
from inventary.state.search import SearchController
from inventary.state.sorting import SortingController
from inventary.state.url_store import UrlStateStore


class ListState:
    def __init__(
        self,
        route: str = "/",
        filter_fields: Iterable[str] = (),
        default_page_size: int = DEFAULT_PAGE_SIZE,
        store: UrlStateStore | None = None,
    ):
        self.store = store or UrlStateStore(route)
        self.pagination = PaginationController(self.store, default_page_size)
        self.sorting = SortingController(self.store)
        self.search = SearchController(self.store)
        self.filters = FilterController(self.store, filter_fields)

    def snapshot(self) -> QueryState:
        active_sort = self.sorting.active
        return QueryState(
            offset=self.pagination.offset,
            limit=self.pagination.limit,
            sort_field=active_sort.field if active_sort else "",
            sort_order=active_sort.sort if active_sort else "asc",
            search_text=self.search.text,
            filters=tuple(self.filters.model),
        )

    def query_string(self) -> str:
        return build_query_string(
            self.pagination.offset,
            self.pagination.limit,
            self.search.text,
            self.filters.model,
            self.sorting.model,
            filter_fields=self.filters.fields,
        )

    def cache_key(self) -> tuple:
        return self.snapshot().cache_key()

    def subscribe(self, listener):
        return self.store.subscribe(listener)

    def dispose(self) -> None:
        self.pagination.dispose()

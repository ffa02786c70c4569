"""
search.py - Search controller
Single responsibility: map the q param to a search token and commit new searches.

Searches are committed explicitly (Enter key or quick-filter change), not on
every keystroke.
"""
from collections.abc import Iterable

from inventary.state.url_store import QueryParams, UrlStateStore


class SearchController:
    def __init__(self, store: UrlStateStore):
        self.store = store

    @property
    def text(self) -> str:
        return self.store.get("q") or ""

    def set_search(self, text: str | None) -> None:
        def mutate(params: QueryParams) -> QueryParams:
            if text and text.strip():
                params.set("q", text)
            else:
                params.delete("q")
            params.set("offset", 0)
            return params

        self.store.update(mutate, replace=True)

    def set_quick_filter(self, values: Iterable[str] | None) -> None:
        values = [v for v in (values or []) if v]
        self.set_search(" ".join(values))

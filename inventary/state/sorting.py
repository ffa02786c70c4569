"""
sorting.py - Sorting controller
Single responsibility: map sort/order params to a single-column sort model and back.
"""
from collections.abc import Sequence

from inventary.domain.query_state import SORT_ASC, SORT_DESC, SORT_ORDERS, SortItem
from inventary.state.url_store import QueryParams, UrlStateStore


class SortingController:
    def __init__(self, store: UrlStateStore):
        self.store = store

    @property
    def model(self) -> list[SortItem]:
        """[] when unsorted, otherwise exactly one entry."""
        field = self.store.get("sort") or ""
        if not field:
            return []
        order = self.store.get("order") or SORT_ASC
        if order not in SORT_ORDERS:
            order = SORT_ASC
        return [SortItem(field=field, sort=order)]

    @property
    def active(self) -> SortItem | None:
        model = self.model
        return model[0] if model else None

    def set_sort(self, model: Sequence) -> None:
        # the grid may send several columns; only the first one is kept
        first = SortItem.coerce(model[0]) if model else None
        if first is not None and not first.field:
            first = None

        def mutate(params: QueryParams) -> QueryParams:
            params.delete("sort")
            params.delete("order")
            if first is not None:
                params.set("sort", first.field)
                params.set("order", first.sort if first.sort in SORT_ORDERS else SORT_ASC)
            params.set("offset", 0)
            return params

        self.store.update(mutate, replace=True)

    def toggle(self, field: str) -> None:
        """Column-header click: asc -> desc -> unsorted."""
        current = self.active
        if current is None or current.field != field:
            self.set_sort([SortItem(field=field, sort=SORT_ASC)])
        elif current.sort == SORT_ASC:
            self.set_sort([SortItem(field=field, sort=SORT_DESC)])
        else:
            self.set_sort([])

"""
filters.py - Filter controller
Single responsibility: keep the equality-filter model and its URL params in step.

The model is hydrated from the route once, when the controller is built. Later
edits all go through set_filters(), which writes the model and the route
together; a filter param changed on the route by anything else is only picked
up by the next controller (i.e. when the screen is rebuilt).
"""
import logging
from collections.abc import Iterable, Sequence

from inventary.domain.query_state import FILTER_OPERATOR_EQUALS, FilterItem
from inventary.state.url_store import QueryParams, UrlStateStore

logger = logging.getLogger(__name__)


class FilterController:
    def __init__(self, store: UrlStateStore, fields: Iterable[str]):
        self.store = store
        self.fields: tuple[str, ...] = tuple(fields)
        self.model: list[FilterItem] = self._hydrate()

    def _hydrate(self) -> list[FilterItem]:
        items = []
        for name in self.fields:
            value = self.store.get(name)
            if value:
                items.append(FilterItem(field=name, value=value))
        return items

    @property
    def active(self) -> dict[str, str]:
        """field -> value for whitelisted, non-empty entries."""
        return {
            item.field: item.value
            for item in self.model
            if item.field in self.fields and item.value
        }

    def set_filters(self, model: Sequence) -> None:
        items = [FilterItem.coerce(entry) for entry in model]
        self.model = [item for item in items if item.value]
        logger.debug("Filters -> %s", self.active)
        fields = self.fields

        def mutate(params: QueryParams) -> QueryParams:
            search_query = params.get("q")
            for name in fields:
                params.delete(name)
            for item in items:
                if item.field in fields and item.value:
                    params.set(item.field, item.value)
            params.set("offset", 0)
            if search_query:
                params.set("q", search_query)
            return params

        self.store.update(mutate, replace=True)

    def add_filter(self, field: str, value: str | None) -> None:
        """Insert or replace the filter for field; an empty value removes it."""
        entry = FilterItem(field=field, value=value or "", operator=FILTER_OPERATOR_EQUALS)
        updated = list(self.model)
        for index, item in enumerate(updated):
            if item.field == field:
                updated[index] = entry
                break
        else:
            updated.append(entry)
        self.set_filters(updated)

    def remove_filter(self, field: str) -> None:
        self.set_filters([item for item in self.model if item.field != field])

    def clear(self) -> None:
        self.set_filters([])

"""
query_state.py - List query value types
Single responsibility: carry pagination/sort/search/filter inputs for list queries.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field

SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_ORDERS = (SORT_ASC, SORT_DESC)

FILTER_OPERATOR_EQUALS = "equals"


@dataclass(frozen=True)
class PaginationModel:
    page: int = 0
    page_size: int = 10


@dataclass(frozen=True)
class SortItem:
    field: str
    sort: str = SORT_ASC

    @classmethod
    def coerce(cls, value) -> "SortItem":
        """Accept a SortItem or a {"field", "sort"} mapping from a grid event."""
        if isinstance(value, SortItem):
            return value
        if isinstance(value, Mapping):
            return cls(field=str(value.get("field") or ""), sort=value.get("sort") or SORT_ASC)
        raise TypeError(f"Unsupported sort entry: {value!r}")


@dataclass(frozen=True)
class FilterItem:
    field: str
    value: str
    operator: str = FILTER_OPERATOR_EQUALS

    @classmethod
    def coerce(cls, value) -> "FilterItem":
        if isinstance(value, FilterItem):
            return value
        if isinstance(value, Mapping):
            return cls(
                field=str(value.get("field") or ""),
                value="" if value.get("value") is None else str(value.get("value")),
                operator=value.get("operator") or FILTER_OPERATOR_EQUALS,
            )
        raise TypeError(f"Unsupported filter entry: {value!r}")


@dataclass(frozen=True)
class QueryState:
    """Snapshot of everything that drives one list request."""

    offset: int = 0
    limit: int = 10
    sort_field: str = ""
    sort_order: str = SORT_ASC
    search_text: str = ""
    filters: tuple[FilterItem, ...] = field(default_factory=tuple)

    @property
    def page(self) -> int:
        return self.offset // self.limit if self.limit > 0 else 0

    def cache_key(self) -> tuple:
        """Hashable key; two states with equal keys issue the same request."""
        sort = (self.sort_field, self.sort_order) if self.sort_field else None
        return (
            self.search_text,
            self.offset,
            self.limit,
            sort,
            tuple((f.field, f.value) for f in self.filters),
        )

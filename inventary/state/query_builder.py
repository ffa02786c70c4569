"""
query_builder.py - List query-string composition
Single responsibility: turn pagination/search/filter/sort inputs into one query string.

Parameter order is fixed (offset, limit, q, filters, sort/order) so equal
inputs always produce the same string.
"""
from collections.abc import Iterable, Sequence
from functools import lru_cache
from urllib.parse import quote

from inventary.domain.query_state import SORT_ASC, FilterItem, QueryState, SortItem

# matches encodeURIComponent's unreserved set
_SAFE = "!*'()"


def _encode(value: str) -> str:
    return quote(str(value), safe=_SAFE)


@lru_cache(maxsize=256)
def _compose(
    offset: int,
    limit: int,
    search_text: str,
    filters: tuple[tuple[str, str], ...],
    sort: tuple[str, str] | None,
) -> str:
    parts = [f"offset={offset}", f"limit={limit}"]
    if search_text:
        parts.append(f"q={_encode(search_text)}")
    for name, value in filters:
        parts.append(f"{name}={_encode(value)}")
    if sort is not None:
        parts.append(f"sort={sort[0]}")
        parts.append(f"order={sort[1]}")
    return "&".join(parts)


def build_query_string(
    offset: int,
    limit: int,
    search_text: str = "",
    filters: Iterable = (),
    sort: Sequence | SortItem | None = None,
    filter_fields: Iterable[str] | None = None,
) -> str:
    """
    Compose the list endpoint query string.

    filters: FilterItem / mapping entries; empty values are skipped, and when
    filter_fields is given only those fields are emitted.
    sort: a SortItem, or a sort model list of which only the first entry counts.
    """
    allowed = set(filter_fields) if filter_fields is not None else None
    filter_pairs = []
    for entry in filters:
        item = FilterItem.coerce(entry)
        if not item.value:
            continue
        if allowed is not None and item.field not in allowed:
            continue
        filter_pairs.append((item.field, item.value))

    if isinstance(sort, (list, tuple)):
        sort = sort[0] if sort else None
    sort_pair = None
    if sort is not None:
        item = SortItem.coerce(sort)
        if item.field:
            sort_pair = (item.field, item.sort or SORT_ASC)

    return _compose(int(offset), int(limit), search_text or "", tuple(filter_pairs), sort_pair)


def build_from_state(state: QueryState) -> str:
    sort = SortItem(state.sort_field, state.sort_order) if state.sort_field else None
    return build_query_string(
        state.offset, state.limit, state.search_text, state.filters, sort
    )


def build_list_url(path: str, query_string: str) -> str:
    return f"{path}?{query_string}" if query_string else path

"""End-to-end tests for the composed list state."""

from inventary.domain.query_state import PaginationModel, SortItem
from inventary.domain.resources import PRODUCT_FILTER_FIELDS
from inventary.state.list_state import ListState


def test_search_filter_then_page_scenario():
    state = ListState("/master-product?offset=0&limit=10", PRODUCT_FILTER_FIELDS)

    state.search.set_search("sepatu")
    assert state.store.query_string == "offset=0&limit=10&q=sepatu"

    state.filters.add_filter("kat", "Formal")
    assert state.store.query_string == "offset=0&limit=10&q=sepatu&kat=Formal"

    state.pagination.set_page(PaginationModel(page=1, page_size=10))
    assert state.store.query_string == "offset=10&limit=10&q=sepatu&kat=Formal"

    assert state.query_string() == "offset=10&limit=10&q=sepatu&kat=Formal"


def test_query_string_orders_sort_last():
    state = ListState("/master-product?sort=harga&order=desc&kat=Formal&limit=25&offset=50", PRODUCT_FILTER_FIELDS)
    assert state.query_string() == "offset=50&limit=25&kat=Formal&sort=harga&order=desc"


def test_cache_key_changes_with_every_state_change():
    state = ListState("/master-color", ())
    keys = {state.cache_key()}

    state.pagination.set_page(PaginationModel(page=2, page_size=10))
    keys.add(state.cache_key())
    state.sorting.set_sort([SortItem("nama", "asc")])
    keys.add(state.cache_key())
    state.search.set_search("merah")
    keys.add(state.cache_key())

    assert len(keys) == 4


def test_snapshot_reflects_url():
    state = ListState("/master-product?offset=20&limit=10&q=x&kat=Formal&sort=nama&order=asc", PRODUCT_FILTER_FIELDS)
    snap = state.snapshot()
    assert snap.page == 2
    assert snap.search_text == "x"
    assert snap.sort_field == "nama"
    assert [(f.field, f.value) for f in snap.filters] == [("kat", "Formal")]


def test_subscribers_see_each_change_once():
    state = ListState("/master-color?offset=0&limit=10", ())
    routes = []
    state.subscribe(lambda store: routes.append(store.route))

    state.search.set_search("merah")
    state.search.set_search("merah")

    assert routes == ["/master-color?offset=0&limit=10&q=merah"]


def test_dispose_detaches_pagination_mirror():
    state = ListState("/master-color?offset=30&limit=10", ())
    state.dispose()
    state.search.set_search("x")
    # mirror no longer follows the store once disposed
    assert state.pagination.model == PaginationModel(page=3, page_size=10)

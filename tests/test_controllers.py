"""Tests for the pagination, sorting, search and filter controllers."""

import pytest

from inventary.domain.query_state import FilterItem, PaginationModel, SortItem
from inventary.domain.resources import PRODUCT_FILTER_FIELDS
from inventary.state.filters import FilterController
from inventary.state.pagination import PaginationController
from inventary.state.search import SearchController
from inventary.state.sorting import SortingController
from inventary.state.url_store import UrlStateStore


# --- pagination ------------------------------------------------------------


@pytest.mark.parametrize("page", [0, 1, 7])
@pytest.mark.parametrize("page_size", [10, 25, 50, 100])
def test_pagination_round_trip(page, page_size):
    store = UrlStateStore("/master-color")
    controller = PaginationController(store)

    controller.set_page(PaginationModel(page=page, page_size=page_size))

    rederived = PaginationController(store)
    assert rederived.model == PaginationModel(page=page, page_size=page_size)


def test_pagination_writes_offset_and_limit(store):
    controller = PaginationController(store)
    controller.set_page({"page": 2, "page_size": 25})
    assert store.get("offset") == "50"
    assert store.get("limit") == "25"


@pytest.mark.parametrize(
    "route, offset, limit",
    [
        ("/x", 0, 10),
        ("/x?offset=-5&limit=10", 0, 10),
        ("/x?offset=abc&limit=0", 0, 10),
        ("/x?offset=30&limit=-1", 30, 10),
        ("/x?offset=40&limit=20", 40, 20),
    ],
)
def test_pagination_defaults_bad_params(route, offset, limit):
    controller = PaginationController(UrlStateStore(route))
    assert controller.offset == offset
    assert controller.limit == limit


def test_pagination_model_follows_other_writers(store):
    pagination = PaginationController(store)
    pagination.set_page(PaginationModel(page=3, page_size=10))

    SearchController(store).set_search("sepatu")

    assert pagination.model == PaginationModel(page=0, page_size=10)


# --- sorting ---------------------------------------------------------------


def test_sort_keeps_only_first_entry(store):
    sorting = SortingController(store)
    sorting.set_sort([{"field": "harga", "sort": "desc"}, {"field": "nama", "sort": "asc"}])

    assert store.query_string == "offset=0&limit=10&sort=harga&order=desc"
    assert sorting.model == [SortItem("harga", "desc")]


def test_clearing_sort_removes_params(store):
    sorting = SortingController(store)
    sorting.set_sort([SortItem("harga", "asc")])
    sorting.set_sort([])
    assert store.get("sort") is None
    assert store.get("order") is None
    assert sorting.model == []


def test_invalid_order_reads_as_asc():
    sorting = SortingController(UrlStateStore("/x?sort=nama&order=sideways"))
    assert sorting.active == SortItem("nama", "asc")


def test_toggle_cycles_asc_desc_none(store):
    sorting = SortingController(store)
    sorting.toggle("nama")
    assert sorting.active == SortItem("nama", "asc")
    sorting.toggle("nama")
    assert sorting.active == SortItem("nama", "desc")
    sorting.toggle("nama")
    assert sorting.active is None


# --- search ----------------------------------------------------------------


def test_search_sets_q(store):
    SearchController(store).set_search("sepatu")
    assert store.query_string == "offset=0&limit=10&q=sepatu"


@pytest.mark.parametrize("text", ["", "   ", None])
def test_blank_search_removes_q(text):
    store = UrlStateStore("/x?offset=20&limit=10&q=old")
    SearchController(store).set_search(text)
    assert store.get("q") is None
    assert store.get("offset") == "0"


def test_quick_filter_joins_values(store):
    search = SearchController(store)
    search.set_quick_filter(["sepatu", "", "hitam"])
    assert search.text == "sepatu hitam"


# --- filters ---------------------------------------------------------------


def test_add_filter_twice_keeps_one_entry(store):
    filters = FilterController(store, PRODUCT_FILTER_FIELDS)
    filters.add_filter("kat", "Formal")
    filters.add_filter("kat", "Formal")

    assert [f for f in filters.model if f.field == "kat"] == [FilterItem("kat", "Formal")]
    assert store.params.items().count(("kat", "Formal")) == 1


def test_add_filter_replaces_value(store):
    filters = FilterController(store, PRODUCT_FILTER_FIELDS)
    filters.add_filter("kat", "Formal")
    filters.add_filter("kat", "Casual")
    assert filters.active == {"kat": "Casual"}
    assert store.get("kat") == "Casual"


def test_empty_value_removes_filter(store):
    filters = FilterController(store, PRODUCT_FILTER_FIELDS)
    filters.add_filter("kat", "Formal")
    filters.add_filter("kat", "")

    assert store.get("kat") is None
    assert filters.model == []


def test_non_whitelisted_fields_never_reach_the_url(store):
    filters = FilterController(store, PRODUCT_FILTER_FIELDS)
    filters.set_filters([{"field": "password", "value": "x"}, {"field": "kat", "value": "Formal"}])
    assert store.get("password") is None
    assert store.get("kat") == "Formal"
    assert filters.active == {"kat": "Formal"}


def test_set_filters_keeps_search_text():
    store = UrlStateStore("/x?offset=20&limit=10&q=sepatu")
    FilterController(store, PRODUCT_FILTER_FIELDS).add_filter("gender", "Pria")
    assert store.get("q") == "sepatu"
    assert store.get("offset") == "0"


def test_filters_hydrate_from_route():
    store = UrlStateStore("/x?kat=Formal&gender=&unknown=1")
    filters = FilterController(store, PRODUCT_FILTER_FIELDS)
    assert filters.model == [FilterItem("kat", "Formal")]


def test_filters_do_not_rehydrate_after_construction(store):
    filters = FilterController(store, PRODUCT_FILTER_FIELDS)

    def sneak(params):
        params.set("kat", "Formal")
        return params

    store.update(sneak)
    assert filters.model == []
    assert FilterController(store, PRODUCT_FILTER_FIELDS).model == [FilterItem("kat", "Formal")]


def test_clear_and_remove(store):
    filters = FilterController(store, PRODUCT_FILTER_FIELDS)
    filters.add_filter("kat", "Formal")
    filters.add_filter("tipe", "Sneaker")
    filters.remove_filter("kat")
    assert filters.active == {"tipe": "Sneaker"}
    filters.clear()
    assert filters.active == {}
    assert store.get("tipe") is None


# --- reset-to-first-page ---------------------------------------------------


@pytest.mark.parametrize(
    "mutate",
    [
        lambda s: SortingController(s).set_sort([SortItem("harga", "desc")]),
        lambda s: SearchController(s).set_search("sepatu"),
        lambda s: FilterController(s, PRODUCT_FILTER_FIELDS).add_filter("kat", "Formal"),
    ],
    ids=["sort", "search", "filter"],
)
def test_state_changes_reset_offset(mutate):
    store = UrlStateStore("/master-product?offset=40&limit=10")
    mutate(store)
    assert PaginationController(store).offset == 0

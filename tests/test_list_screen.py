"""Tests for the list screen wiring (state -> fetch -> render) with a fake page."""

import requests

from conftest import FakeResponse
from inventary.domain.query_state import PaginationModel
from inventary.domain.resources import COLORS, PRODUCTS
from inventary.ui.components.data_table import ACTION_EDIT, RowAction, has_next_page, page_range_text
from inventary.ui.list_screen import ListScreen


def _colors_page(rows, total_page=1):
    return FakeResponse(200, {"data": {"colors": rows, "total_page": total_page}})


def test_start_fetches_current_query(fake_page, fake_api, fake_http):
    fake_http.queue(_colors_page([{"id": 1, "nama": "Merah", "hex": "#FF0000"}], total_page=2))
    screen = ListScreen(fake_page, COLORS, "/master-color?offset=0&limit=10", client=fake_api)

    screen.start()

    assert fake_http.calls[0]["url"] == "http://backend.test/api/colors?offset=0&limit=10"
    assert screen.loader.state.row_count == 20
    assert screen.table.visible is True
    assert screen.spinner.visible is False
    assert len(screen.table.table.rows) == 1


def test_search_triggers_one_fetch_and_mirrors_route(fake_page, fake_api, fake_http):
    screen = ListScreen(fake_page, COLORS, "/master-color?offset=20&limit=10", client=fake_api)
    screen.start()

    screen.state.search.set_search("merah")

    assert len(fake_http.calls) == 2
    assert fake_http.calls[1]["url"].endswith("/api/colors?offset=0&limit=10&q=merah")
    assert fake_page.route == "/master-color?offset=0&limit=10&q=merah"


def test_network_error_shows_message_and_no_rows(fake_page, fake_api, fake_http):
    fake_http.queue(requests.ConnectionError("Connection refused"))
    screen = ListScreen(fake_page, COLORS, "/master-color", client=fake_api)

    screen.start()

    assert screen.error_text.visible is True
    assert "Connection refused" in screen.error_text.value
    assert screen.table.visible is False
    assert screen.table.table.rows == []
    assert screen.loader.state.rows == ()


def test_product_edit_navigates_to_form_page(fake_page, fake_api):
    visited = []
    screen = ListScreen(fake_page, PRODUCTS, "/master-product", on_navigate=visited.append, client=fake_api)

    screen.dispatch(RowAction(ACTION_EDIT, {"artikel": "SP-001"}))

    assert visited == ["/addEdit-product/SP-001"]


def test_filter_select_all_clears_filter(fake_page, fake_api):
    screen = ListScreen(fake_page, PRODUCTS, "/master-product?kat=Formal", client=fake_api)
    screen.on_filter_select("kat", "__all__")
    assert screen.state.store.get("kat") is None


def test_page_range_text():
    assert page_range_text(PaginationModel(page=1, page_size=10), 57) == "11-20 of 57"
    assert page_range_text(PaginationModel(page=5, page_size=10), 57) == "51-57 of 57"
    assert page_range_text(PaginationModel(), 0) == "0-0 of 0"


def test_has_next_page():
    assert has_next_page(PaginationModel(page=0, page_size=10), 11) is True
    assert has_next_page(PaginationModel(page=1, page_size=10), 20) is False


def test_latest_query_wins_when_fetches_finish_out_of_order(deferred_page, fake_api, fake_http):
    fake_http.queue(_colors_page([{"id": 2, "nama": "new"}]))
    fake_http.queue(_colors_page([{"id": 1, "nama": "old"}]))
    screen = ListScreen(deferred_page, COLORS, "/master-color?offset=0&limit=10", client=fake_api)

    screen.start()
    screen.state.search.set_search("merah")
    first, second = deferred_page.pending
    second()
    first()

    assert fake_http.calls[0]["url"].endswith("/api/colors?offset=0&limit=10&q=merah")
    assert fake_http.calls[1]["url"].endswith("/api/colors?offset=0&limit=10")
    assert screen.loader.state.rows == ({"id": 2, "nama": "new"},)
    assert screen.loader.state.refreshing is False
    assert len(screen.table.table.rows) == 1

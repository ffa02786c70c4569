"""Tests for resource CRUD calls against a fake backend."""

import pytest
import requests

from conftest import FakeResponse
from inventary.domain.resources import BANNERS, COLORS, GRUPS, PRODUCTS, resource_for_route
from inventary.domain.schemas import BannerForm, ColorForm, ProductForm, validate_form
from inventary.services import resource_service
from inventary.services.errors import EnvelopeError, NetworkError


def test_list_rows_hits_list_path(fake_api, fake_http):
    fake_http.queue(FakeResponse(200, {"data": {"colors": [{"id": 1}], "total_page": 1}}))
    envelope = resource_service.list_rows(COLORS, "offset=0&limit=10", client=fake_api)

    assert fake_http.calls[0]["url"] == "http://backend.test/api/colors?offset=0&limit=10"
    assert envelope.rows == [{"id": 1}]


def test_list_rows_bad_envelope(fake_api, fake_http):
    fake_http.queue(FakeResponse(200, {"data": {"grups": "oops"}}))
    with pytest.raises(EnvelopeError):
        resource_service.list_rows(GRUPS, "offset=0&limit=10", client=fake_api)


def test_list_rows_network_error_propagates(fake_api, fake_http):
    fake_http.queue(requests.Timeout("slow"))
    with pytest.raises(NetworkError):
        resource_service.list_rows(GRUPS, "offset=0&limit=10", client=fake_api)


def test_get_row_uses_row_id(fake_api, fake_http):
    fake_http.queue(FakeResponse(200, {"data": {"artikel": "SP-1"}}))
    row = resource_service.get_row(PRODUCTS, "SP-1", client=fake_api)
    assert row == {"artikel": "SP-1"}
    assert fake_http.calls[0]["url"].endswith("/api/admin/products/SP-1")


def test_create_json_resource(fake_api, fake_http):
    form = validate_form(ColorForm, {"nama": "Merah", "hex": "#FF0000"})
    resource_service.create_row(COLORS, form, client=fake_api)

    call = fake_http.calls[0]
    assert call["method"] == "POST"
    assert call["url"].endswith("/api/admin/colors")
    assert call["json"] == {"nama": "Merah", "hex": "#FF0000"}


def test_delete_uses_delete_path(fake_api, fake_http):
    fake_http.queue(FakeResponse(200, {"message": "deleted"}))
    resource_service.delete_row(COLORS, 7, client=fake_api)
    assert fake_http.calls[0]["method"] == "DELETE"
    assert fake_http.calls[0]["url"] == "http://backend.test/api/colors/7"


def test_multipart_create_sends_files(fake_api, fake_http, tmp_path):
    image = tmp_path / "banner.png"
    image.write_bytes(b"\x89PNG fake")
    form = validate_form(BannerForm, {"title": "Promo", "order_index": 1})

    resource_service.create_row(BANNERS, form, files={"image": [str(image)]}, client=fake_api)

    call = fake_http.calls[0]
    assert call["json"] is None
    assert call["data"]["title"] == "Promo"
    assert call["data"]["is_active"] == "true"
    name, (filename, _handle, mime) = call["files"][0]
    assert (name, filename, mime) == ("image", "banner.png", "image/png")


def test_product_update_is_json(fake_api, fake_http):
    data = {
        "artikel": "SP-1", "nama": "N", "deskripsi": "D", "warna": ["Hitam"], "size": "40",
        "grup": "G", "unit": "U", "kat": "K", "model": "M", "gender": "Pria", "tipe": "T",
        "harga": 1000, "marketplace": {"shopee": "https://shopee.co.id/x"}, "status": "active",
        "supplier": "S", "diupdate_oleh": "admin",
    }
    form = validate_form(ProductForm, data)
    resource_service.update_row(PRODUCTS, "SP-1", form, client=fake_api)

    call = fake_http.calls[0]
    assert call["method"] == "PUT"
    assert call["url"].endswith("/api/admin/products/SP-1")
    assert call["json"]["warna"] == "Hitam"
    assert call["files"] is None


def test_fetch_filter_options(fake_api, fake_http):
    fake_http.queue(
        FakeResponse(
            200,
            {
                "data": {
                    "filter_options": {
                        "fields": {
                            "kat": {"values": [{"value": "Formal", "label": "Formal"}, "Casual"]},
                            "gender": {"values": []},
                        }
                    }
                }
            },
        )
    )
    options = resource_service.fetch_filter_options(client=fake_api)
    assert options == {"kat": ["Formal", "Casual"], "gender": []}


def test_sizing_guide_upload_and_delete(fake_api, fake_http, tmp_path):
    image = tmp_path / "panduan.jpg"
    image.write_bytes(b"jpeg")
    resource_service.upload_sizing_guide(str(image), client=fake_api)
    resource_service.delete_sizing_guide(client=fake_api)

    upload, delete = fake_http.calls
    assert upload["url"].endswith("/api/admin/panduan-ukuran")
    assert upload["files"]["image"][0] == "panduan.jpg"
    assert delete["method"] == "DELETE"


def test_error_text():
    assert resource_service.error_text(NetworkError("down")) == "down"
    assert resource_service.error_text(RuntimeError()) == "RuntimeError"


@pytest.mark.parametrize(
    "route, key",
    [
        ("/master-product?offset=0&limit=10", "products"),
        ("/master-color", "colors"),
        ("/master-newsletter", "newsletters"),
    ],
)
def test_resource_for_route(route, key):
    assert resource_for_route(route).key == key


def test_unknown_route():
    assert resource_for_route("/nope") is None

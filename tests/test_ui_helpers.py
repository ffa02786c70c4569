"""Tests for table cell text and form parsing helpers."""

from inventary.domain.resources import BANNERS, COLORS, Column, CURRENCY, BOOL
from inventary.ui.actions import check_uploads
from inventary.ui.helpers import cell_text, format_marketplace, parse_marketplace


def test_cell_text_by_kind():
    row = {"harga": 150000, "is_active": False, "warna": ["Hitam", "Putih"], "model": None}
    assert cell_text(Column("harga", "Harga", kind=CURRENCY), row) == "Rp 150.000"
    assert cell_text(Column("is_active", "Status", kind=BOOL), row) == "Tidak aktif"
    assert cell_text(Column("warna", "Warna"), row) == "Hitam, Putih"
    assert cell_text(Column("model", "Model"), row) == "-"


def test_parse_marketplace_lines():
    text = "tokopedia=https://tokopedia.com/a\n\nShopee = https://shopee.co.id/b"
    assert parse_marketplace(text) == [
        {"key": "tokopedia", "value": "https://tokopedia.com/a"},
        {"key": "shopee", "value": "https://shopee.co.id/b"},
    ]
    assert parse_marketplace("") == []


def test_format_marketplace_round_trips_mapping():
    mapping = {"lazada": "https://lazada.co.id/x"}
    assert parse_marketplace(format_marketplace(mapping)) == [
        {"key": "lazada", "value": "https://lazada.co.id/x"}
    ]


def test_check_uploads_only_for_image_resources(tmp_path):
    path = tmp_path / "kecil.txt"
    path.write_text("x")
    assert check_uploads(COLORS, {"image": [str(path)]}) == {}
    assert check_uploads(BANNERS, {"image": [str(path)]}) == {
        "image": "File harus berupa gambar (png, jpg, gif, webp)."
    }

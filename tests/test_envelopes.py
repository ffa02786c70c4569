"""Tests for response envelope parsing."""

import pytest
from pydantic import ValidationError

from inventary.domain.envelopes import ItemEnvelope, ListEnvelope


def test_parse_collection_by_key():
    payload = {"data": {"colors": [{"id": 1, "nama": "Merah"}], "total_page": 4}}
    envelope = ListEnvelope.parse(payload, "colors")
    assert envelope.rows == [{"id": 1, "nama": "Merah"}]
    assert envelope.total_page == 4
    assert envelope.row_count(10) == 40


def test_total_items_wins_over_total_page():
    payload = {"data": {"items": [{"artikel": "A1"}], "total_page": 2, "total_items": 13}}
    envelope = ListEnvelope.parse(payload, "items")
    assert envelope.row_count(10) == 13


def test_missing_collection_is_empty():
    envelope = ListEnvelope.parse({"data": {"total_page": 0}}, "banners")
    assert envelope.rows == []
    assert envelope.row_count(10) == 0


def test_null_total_page_reads_as_zero():
    envelope = ListEnvelope.parse({"data": {"units": [], "total_page": None}}, "units")
    assert envelope.total_page == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"data": {"colors": "not-a-list"}},
        {"data": {"colors": [1, 2]}},
        {"data": {"colors": [], "total_page": "many"}},
        ["not", "an", "object"],
    ],
)
def test_malformed_payload_raises(payload):
    with pytest.raises(ValidationError):
        ListEnvelope.parse(payload, "colors")


def test_item_envelope():
    assert ItemEnvelope.parse({"data": {"id": 5}}).data == {"id": 5}
    assert ItemEnvelope.parse({"data": None}).data == {}

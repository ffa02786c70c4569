"""
envelopes.py - Response envelope models
Single responsibility: validate backend list/item envelopes at the API boundary.

List endpoints answer {"data": {<collection_key>: [...], "total_page": n}};
products use "items" plus an exact "total_items". Item endpoints answer
{"data": {...}}.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

_ROWS = TypeAdapter(list[dict[str, Any]])


class _ListBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_page: Optional[int] = 0
    total_items: Optional[int] = None


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: Any = None


class ListEnvelope(BaseModel):
    collection_key: str
    rows: list[dict[str, Any]] = Field(default_factory=list)
    total_page: int = 0
    total_items: Optional[int] = None

    @classmethod
    def parse(cls, payload: Any, collection_key: str) -> "ListEnvelope":
        """Raise pydantic.ValidationError when payload is not a list envelope."""
        envelope = _Envelope.model_validate(payload)
        body = _ListBody.model_validate(envelope.data or {})
        raw_rows = (body.model_extra or {}).get(collection_key)
        rows = _ROWS.validate_python(raw_rows or [])
        return cls(
            collection_key=collection_key,
            rows=rows,
            total_page=body.total_page or 0,
            total_items=body.total_items,
        )

    def row_count(self, page_size: int) -> int:
        """
        Row count for the table footer.

        total_items is exact when present. Otherwise total_page * page_size,
        which over-counts a partial last page.
        """
        if self.total_items is not None:
            return self.total_items
        return self.total_page * page_size


class ItemEnvelope(BaseModel):
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def parse(cls, payload: Any) -> "ItemEnvelope":
        envelope = _Envelope.model_validate(payload)
        return cls(data=envelope.data or {})


__all__ = ["ListEnvelope", "ItemEnvelope", "ValidationError"]

"""
schemas.py - Form validation schemas
Single responsibility: declare what a valid create/edit form looks like per resource.

validate_form() is called before any request is built; a FormValidationError
carries one message per offending field for the dialog to show inline.
"""
import json
import re
from datetime import date
from typing import Any, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

HEX_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")
SIZE_PATTERN = re.compile(r"^(\d+(-\d+)?)(,\s*\d+(-\d+)?)*$")
STATUSES = ("active", "inactive", "discontinued")
MARKETPLACE_OPTIONS = ("tokopedia", "shopee", "lazada", "tiktok", "bukalapak")


class FormValidationError(ValueError):
    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


def _required(value, message: str) -> str:
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValueError(message)
    return text


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _blank_to_none(value):
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return value


class FormSchema(BaseModel):
    model_config = ConfigDict(validate_default=True, str_strip_whitespace=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump()

    def to_form_data(self) -> dict[str, str]:
        """Multipart fields; booleans as "true"/"false", None as ""."""
        fields = {}
        for key, value in self.to_json().items():
            if isinstance(value, bool):
                fields[key] = "true" if value else "false"
            elif value is None:
                fields[key] = ""
            elif isinstance(value, (dict, list)):
                fields[key] = json.dumps(value, ensure_ascii=False)
            else:
                fields[key] = str(value)
        return fields


class ColorForm(FormSchema):
    nama: str = ""
    hex: str = "#000000"

    @field_validator("nama", mode="before")
    @classmethod
    def _nama(cls, v):
        return _required(v, "Nama warna harus diisi")

    @field_validator("hex", mode="before")
    @classmethod
    def _hex(cls, v):
        v = _required(v, "Kode hex harus diisi")
        if not HEX_PATTERN.match(v):
            raise ValueError("Kode hex harus dalam format yang valid (contoh: #FF5733)")
        return v


class MasterValueForm(FormSchema):
    """grups, units, kats, genders, tipes: a single name."""

    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _value(cls, v):
        return _required(v, "Nama harus diisi")


class BannerForm(FormSchema):
    title: str = ""
    description: str = ""
    cta_text: str = ""
    cta_link: str = ""
    image_url: str = ""
    order_index: Any = None
    is_active: bool = True

    @field_validator("title", mode="before")
    @classmethod
    def _title(cls, v):
        return _required(v, "Title harus diisi")

    @field_validator("description", "cta_text", "image_url", mode="before")
    @classmethod
    def _optional_text(cls, v):
        return "" if v is None else v

    @field_validator("cta_link", mode="before")
    @classmethod
    def _cta_link(cls, v):
        v = "" if v is None else str(v).strip()
        if v and not _is_http_url(v):
            raise ValueError("CTA Link harus berupa URL yang valid")
        return v

    @field_validator("order_index", mode="before")
    @classmethod
    def _order_index(cls, v):
        if _blank_to_none(v) is None:
            raise ValueError("Urutan harus diisi")
        try:
            number = float(v)
        except (TypeError, ValueError):
            raise ValueError("Urutan harus berupa angka")
        if not number.is_integer():
            raise ValueError("Urutan harus berupa bilangan bulat")
        if number < 1:
            raise ValueError("Urutan tidak boleh kurang dari 1")
        return int(number)


class MarketplaceLink(BaseModel):
    key: str
    value: str

    @field_validator("key")
    @classmethod
    def _key(cls, v):
        if v not in MARKETPLACE_OPTIONS:
            raise ValueError(f"Marketplace harus salah satu dari {', '.join(MARKETPLACE_OPTIONS)}")
        return v

    @field_validator("value")
    @classmethod
    def _value(cls, v):
        if not _is_http_url(v.strip()):
            raise ValueError("Please enter a valid URL")
        return v.strip()


_PRODUCT_REQUIRED = {
    "artikel": "Artikel harus diisi",
    "nama": "Nama harus diisi",
    "deskripsi": "Deskripsi harus diisi",
    "grup": "Grup harus diisi",
    "unit": "Unit harus diisi",
    "kat": "Kategori harus diisi",
    "model": "Model harus diisi",
    "gender": "Gender harus diisi",
    "tipe": "Tipe harus diisi",
    "supplier": "Supplier harus diisi",
    "diupdate_oleh": "Diupdate oleh harus diisi",
}


class ProductForm(FormSchema):
    artikel: str = ""
    nama: str = ""
    deskripsi: str = ""
    warna: list[str] = []
    size: str = ""
    grup: str = ""
    unit: str = ""
    kat: str = ""
    model: str = ""
    gender: str = ""
    tipe: str = ""
    harga: Any = None
    harga_diskon: Optional[float] = None
    rating: Optional[float] = None
    marketplace: list[MarketplaceLink] = []
    tanggal_produk: Optional[date] = None
    tanggal_terima: Optional[date] = None
    status: str = ""
    supplier: str = ""
    diupdate_oleh: str = ""

    @field_validator(*_PRODUCT_REQUIRED.keys(), mode="before")
    @classmethod
    def _required_text(cls, v, info):
        return _required(v, _PRODUCT_REQUIRED[info.field_name])

    @field_validator("warna", mode="before")
    @classmethod
    def _warna(cls, v):
        if isinstance(v, str):
            v = [part.strip() for part in v.split(",")]
        v = [str(part) for part in (v or []) if str(part).strip()]
        if not v:
            raise ValueError("Pilih minimal 1 warna")
        return v

    @field_validator("size", mode="before")
    @classmethod
    def _size(cls, v):
        v = _required(v, "Ukuran harus diisi")
        if not SIZE_PATTERN.match(v):
            raise ValueError("Format ukuran harus berupa angka (mis: 30) atau rentang (mis: 30-38)")
        return v

    @field_validator("harga", mode="before")
    @classmethod
    def _harga(cls, v):
        if _blank_to_none(v) is None:
            raise ValueError("Harga harus diisi")
        try:
            number = float(v)
        except (TypeError, ValueError):
            raise ValueError("Harga harus berupa angka")
        if number <= 0:
            raise ValueError("Harga harus lebih dari 0")
        return number

    @field_validator("harga_diskon", "rating", "tanggal_produk", "tanggal_terima", mode="before")
    @classmethod
    def _optional(cls, v, info):
        v = _blank_to_none(v)
        if isinstance(v, str) and info.field_name.startswith("tanggal_"):
            v = v.split("T", 1)[0]
        return v

    @field_validator("harga_diskon")
    @classmethod
    def _harga_diskon(cls, v):
        if v is not None and v <= 0:
            raise ValueError("Harga diskon harus lebih dari 0")
        return v

    @field_validator("rating")
    @classmethod
    def _rating(cls, v):
        if v is not None and not 0 <= v <= 5:
            raise ValueError("Rating harus antara 0 dan 5")
        return v

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v):
        v = _required(v, "Status harus diisi").lower()
        if v not in STATUSES:
            raise ValueError("Status harus Active, Inactive, atau Discontinued")
        return v

    @field_validator("marketplace", mode="before")
    @classmethod
    def _marketplace(cls, v):
        if isinstance(v, dict):
            v = [{"key": k, "value": url} for k, url in v.items()]
        if not v:
            raise ValueError("Please add at least one marketplace link.")
        return v

    @field_validator("marketplace")
    @classmethod
    def _unique_marketplace(cls, v):
        keys = [link.key for link in v]
        if len(keys) != len(set(keys)):
            raise ValueError("Marketplace keys must be unique.")
        return v

    def to_json(self) -> dict[str, Any]:
        data = self.model_dump()
        data["warna"] = ",".join(self.warna)
        data["marketplace"] = {link.key: link.value for link in self.marketplace}
        for key in ("tanggal_produk", "tanggal_terima"):
            value = getattr(self, key)
            data[key] = f"{value.isoformat()}T00:00:00Z" if value else ""
        return data


def validate_form(schema: type[FormSchema], data: dict) -> FormSchema:
    """Validate raw form values; raise FormValidationError with field -> message."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errors: dict[str, str] = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "__all__"
            message = err["msg"]
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
            errors.setdefault(field, message)
        raise FormValidationError(errors) from e

"""
resources.py - Resource registry
Single responsibility: describe each admin screen's endpoints, columns, filters and form.
"""
from dataclasses import dataclass

from inventary.domain.schemas import (
    BannerForm,
    ColorForm,
    MasterValueForm,
    ProductForm,
    FormSchema,
)

# Filter fields accepted by the products endpoint
PRODUCT_FILTER_FIELDS = (
    "warna",
    "size",
    "grup",
    "unit",
    "kat",
    "model",
    "gender",
    "tipe",
    "status",
    "supplier",
    "diupdate_oleh",
)

# column kinds understood by the table renderer
TEXT = "text"
DATE = "date"
DATETIME = "datetime"
CURRENCY = "currency"
COLOR = "color"
BOOL = "bool"
IMAGE = "image"


@dataclass(frozen=True)
class Column:
    field: str
    header: str
    sortable: bool = True
    kind: str = TEXT
    width: int | None = None


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = "text"  # text | multiline | number | bool | select | colors | marketplace | date | image
    required: bool = False
    options_from: str | None = None  # filter-options field feeding a select
    choices: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResourceSpec:
    key: str
    title: str
    route: str
    list_path: str
    item_path: str
    collection_key: str
    columns: tuple[Column, ...]
    form_schema: type[FormSchema] | None = None
    form_fields: tuple[FormField, ...] = ()
    filter_fields: tuple[str, ...] = ()
    row_id_field: str = "id"
    display_field: str = "id"
    delete_path: str | None = None
    multipart: bool = False
    json_on_update: bool = False
    editable: bool = True
    edit_as_page: bool = False
    form_route: str | None = None
    viewable: bool = False

    def item_url(self, row_id) -> str:
        return f"{self.item_path}/{row_id}"

    def delete_url(self, row_id) -> str:
        return f"{self.delete_path or self.item_path}/{row_id}"

    @property
    def sortable_fields(self) -> tuple[str, ...]:
        return tuple(c.field for c in self.columns if c.sortable)


_UPDATED = Column("tanggal_update", "Terakhir Di-update", kind=DATETIME, width=200)

_VALUE_COLUMNS = (
    Column("id", "ID", width=90),
    Column("value", "Name"),
    _UPDATED,
)
_VALUE_FORM = (FormField("value", "Nama", required=True),)


def _master_value(key: str, title: str, route: str, plural: str) -> ResourceSpec:
    return ResourceSpec(
        key=key,
        title=title,
        route=route,
        list_path=f"/api/admin/{plural}",
        item_path=f"/api/admin/{plural}",
        collection_key=plural,
        columns=_VALUE_COLUMNS,
        form_schema=MasterValueForm,
        form_fields=_VALUE_FORM,
        display_field="value",
    )


PRODUCTS = ResourceSpec(
    key="products",
    title="Master Products",
    route="/master-product",
    list_path="/api/admin/products",
    item_path="/api/admin/products",
    collection_key="items",
    columns=(
        Column("no", "No", sortable=False, width=70),
        Column("artikel", "Artikel", width=120),
        Column("nama", "Nama"),
        Column("warna", "Warna", sortable=False),
        Column("size", "Size", sortable=False),
        Column("grup", "Grup", sortable=False),
        Column("unit", "Unit", sortable=False),
        Column("kat", "Kategori"),
        Column("model", "Model", sortable=False),
        Column("gender", "Gender"),
        Column("tipe", "Tipe"),
        Column("harga", "Harga", kind=CURRENCY),
        Column("tanggal_produk", "Tanggal Produk", kind=DATE),
        Column("tanggal_terima", "Tanggal Terima", kind=DATE),
        Column("usia", "Usia", sortable=False),
        Column("status", "Status"),
        Column("supplier", "Supplier"),
        Column("diupdate_oleh", "Diupdate Oleh"),
        _UPDATED,
    ),
    form_schema=ProductForm,
    form_fields=(
        FormField("artikel", "Artikel", required=True),
        FormField("nama", "Nama", required=True),
        FormField("deskripsi", "Deskripsi", kind="multiline", required=True),
        FormField("warna", "Warna", kind="colors", required=True, options_from="warna"),
        FormField("size", "Ukuran (mis: 30 atau 30-38)", required=True),
        FormField("grup", "Grup", kind="select", required=True, options_from="grup"),
        FormField("unit", "Unit", kind="select", required=True, options_from="unit"),
        FormField("kat", "Kategori", kind="select", required=True, options_from="kat"),
        FormField("model", "Model", required=True),
        FormField("gender", "Gender", kind="select", required=True, options_from="gender"),
        FormField("tipe", "Tipe", kind="select", required=True, options_from="tipe"),
        FormField("harga", "Harga", kind="number", required=True),
        FormField("harga_diskon", "Harga Diskon", kind="number"),
        FormField("rating", "Rating (0-5)", kind="number"),
        FormField("marketplace", "Marketplace (key=url per baris)", kind="marketplace", required=True),
        FormField("tanggal_produk", "Tanggal Produk (YYYY-MM-DD)", kind="date"),
        FormField("tanggal_terima", "Tanggal Terima (YYYY-MM-DD)", kind="date"),
        FormField(
            "status",
            "Status",
            kind="select",
            required=True,
            choices=("active", "inactive", "discontinued"),
        ),
        FormField("supplier", "Supplier", required=True),
        FormField("diupdate_oleh", "Diupdate Oleh", required=True),
        FormField("gambar", "Gambar", kind="image"),
    ),
    filter_fields=PRODUCT_FILTER_FIELDS,
    row_id_field="artikel",
    display_field="nama",
    multipart=True,
    json_on_update=True,
    edit_as_page=True,
    form_route="/addEdit-product",
)

COLORS = ResourceSpec(
    key="colors",
    title="Master Colors",
    route="/master-color",
    list_path="/api/colors",
    item_path="/api/admin/colors",
    delete_path="/api/colors",
    collection_key="colors",
    columns=(
        Column("id", "ID", width=90),
        Column("nama", "Color Name"),
        Column("hex", "Hex Code", kind=COLOR),
        _UPDATED,
    ),
    form_schema=ColorForm,
    form_fields=(
        FormField("nama", "Nama Warna", required=True),
        FormField("hex", "Kode Hex (#RRGGBB)", required=True),
    ),
    display_field="nama",
)

GRUPS = _master_value("grups", "Master Grup", "/master-grup", "grups")
UNITS = _master_value("units", "Master Unit", "/master-unit", "units")
KATS = _master_value("kats", "Master Kategori", "/master-kat", "kats")
GENDERS = _master_value("genders", "Master Gender", "/master-gender", "genders")
TIPES = _master_value("tipes", "Master Tipe", "/master-tipe", "tipes")

BANNERS = ResourceSpec(
    key="banners",
    title="Master Banner",
    route="/master-banner",
    list_path="/api/banners",
    item_path="/api/admin/banners",
    delete_path="/api/banners",
    collection_key="banners",
    columns=(
        Column("is_active", "Status", kind=BOOL, width=110),
        Column("image_url", "Preview", sortable=False, kind=IMAGE, width=160),
        Column("order_index", "Urutan ke", width=90),
        Column("title", "Judul", width=200),
        Column("description", "Deskripsi", width=200),
        Column("cta_text", "CTA Text (Button)", width=200),
        Column("cta_link", "CTA Link", width=200),
        Column("created_at", "Dibuat", kind=DATETIME, width=180),
        Column("updated_at", "Diupdate", kind=DATETIME, width=180),
    ),
    form_schema=BannerForm,
    form_fields=(
        FormField("title", "Title", required=True),
        FormField("description", "Deskripsi", kind="multiline"),
        FormField("cta_text", "CTA Text"),
        FormField("cta_link", "CTA Link"),
        FormField("order_index", "Urutan", kind="number", required=True),
        FormField("is_active", "Aktif", kind="bool"),
        FormField("image", "Gambar (16:9 / 16:10, min 1280x720)", kind="image"),
    ),
    display_field="title",
    multipart=True,
)

NEWSLETTERS = ResourceSpec(
    key="newsletters",
    title="Newsletter",
    route="/master-newsletter",
    list_path="/api/admin/newsletters",
    item_path="/api/admin/newsletters",
    collection_key="newsletters",
    columns=(
        Column("id", "ID", width=90),
        Column("email", "Email"),
        Column("whatsapp", "WhatsApp"),
        Column("message", "Pesan", sortable=False),
        Column("created_at", "Dikirim", kind=DATETIME, width=180),
    ),
    display_field="email",
    editable=False,
    viewable=True,
)

RESOURCES: dict[str, ResourceSpec] = {
    spec.key: spec
    for spec in (PRODUCTS, COLORS, GRUPS, UNITS, KATS, GENDERS, TIPES, BANNERS, NEWSLETTERS)
}

ROUTES: dict[str, ResourceSpec] = {spec.route: spec for spec in RESOURCES.values()}


def resource_for_route(route: str) -> ResourceSpec | None:
    path = (route or "").split("?", 1)[0]
    return ROUTES.get(path)

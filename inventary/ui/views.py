"""
views.py - UI view builders (login/list/product form/sizing guide)
Single responsibility: build flet Views using provided callbacks/state.
"""
import logging
import time

import flet as ft

from inventary.config import (
    APP_TITLE,
    BACKEND_URL,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    COLOR_BG,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MUTED,
    SHADOW_ELEVATION,
    SIZING_GUIDE_IMAGE_PATH,
)
from inventary.domain.resources import PRODUCTS, RESOURCES, ResourceSpec
from inventary.domain.schemas import FormValidationError
from inventary.services import auth_service, resource_service
from inventary.services.api_client import get_client
from inventary.services.errors import ApiError
from inventary.ui import actions
from inventary.ui.components.form_fields import ResourceForm
from inventary.ui.helpers import input_style, show_message
from inventary.ui.list_screen import ListScreen
from inventary.utils.images import SIZING_GUIDE_RULES, check_image

logger = logging.getLogger(__name__)

SIZING_GUIDE_ROUTE = "/master-panduan-ukuran"

NAV_ITEMS = [
    (PRODUCTS.route, "Produk", ft.Icons.INVENTORY_2),
    (RESOURCES["colors"].route, "Warna", ft.Icons.PALETTE),
    (RESOURCES["grups"].route, "Grup", ft.Icons.WORKSPACES),
    (RESOURCES["units"].route, "Unit", ft.Icons.STRAIGHTEN),
    (RESOURCES["kats"].route, "Kategori", ft.Icons.CATEGORY),
    (RESOURCES["genders"].route, "Gender", ft.Icons.WC),
    (RESOURCES["tipes"].route, "Tipe", ft.Icons.STYLE),
    (RESOURCES["banners"].route, "Banner", ft.Icons.VIEW_CAROUSEL),
    (RESOURCES["newsletters"].route, "Newsletter", ft.Icons.MAIL),
    (SIZING_GUIDE_ROUTE, "Panduan Ukuran", ft.Icons.SQUARE_FOOT),
]


def build_appbar(user: str, on_logout) -> ft.AppBar:
    return ft.AppBar(
        title=ft.Text(
            APP_TITLE,
            color=COLOR_APPBAR_FG,
            weight=ft.FontWeight.BOLD,
            size=20,
        ),
        bgcolor=COLOR_APPBAR_BG,
        center_title=False,
        elevation=SHADOW_ELEVATION,
        shadow_color=ft.Colors.BLACK12,
        automatically_imply_leading=False,
        actions=[
            ft.Container(
                content=ft.Text(user, color=COLOR_TEXT_MUTED, size=14, weight=ft.FontWeight.W_500),
                padding=ft.Padding.only(right=12),
                alignment=ft.Alignment.CENTER_LEFT,
            ),
            ft.IconButton(
                icon=ft.Icons.LOGOUT,
                tooltip="Logout",
                on_click=lambda _e: on_logout(),
            ),
        ],
    )


def build_nav_rail(current_path: str, on_navigate) -> ft.NavigationRail:
    routes = [route for route, _, _ in NAV_ITEMS]
    selected = routes.index(current_path) if current_path in routes else None

    def on_change(e):
        on_navigate(routes[e.control.selected_index])

    return ft.NavigationRail(
        selected_index=selected,
        label_type=ft.NavigationRailLabelType.ALL,
        min_width=96,
        bgcolor=COLOR_CARD,
        destinations=[
            ft.NavigationRailDestination(icon=icon, label=label) for _, label, icon in NAV_ITEMS
        ],
        on_change=on_change,
    )


def _shell(route: str, user: str, on_navigate, on_logout, body: ft.Control) -> ft.View:
    path = route.split("?", 1)[0]
    return ft.View(
        route=route,
        appbar=build_appbar(user, on_logout),
        bgcolor=COLOR_BG,
        padding=0,
        controls=[
            ft.Row(
                controls=[
                    build_nav_rail(path, on_navigate),
                    ft.VerticalDivider(width=1),
                    ft.Container(
                        content=body,
                        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
                        expand=True,
                    ),
                ],
                expand=True,
                vertical_alignment=ft.CrossAxisAlignment.START,
            )
        ],
    )


def build_login_view(page: ft.Page, on_logged_in) -> ft.View:
    username_field = ft.TextField(label="Username", autofocus=True, **input_style())
    password_field = ft.TextField(
        label="Password",
        password=True,
        can_reveal_password=True,
        **input_style(),
    )
    error_text = ft.Text("", color=COLOR_DANGER, size=12)

    def on_login(_e=None):
        username = (username_field.value or "").strip()
        password = password_field.value or ""
        if not username or not password:
            error_text.value = "Username dan password harus diisi"
            page.update()
            return
        try:
            auth_service.login(get_client(), username, password)
        except ApiError as e:
            logger.warning("Login failed for %s: %s", username, e)
            error_text.value = resource_service.error_text(e)
            page.update()
            return
        on_logged_in()

    password_field.on_submit = on_login

    card = ft.Container(
        content=ft.Column(
            controls=[
                ft.Text(APP_TITLE, size=24, weight=ft.FontWeight.BOLD),
                ft.Text("Masuk untuk melanjutkan", color=COLOR_TEXT_MUTED),
                username_field,
                password_field,
                error_text,
                ft.FilledButton(
                    "Login",
                    style=ft.ButtonStyle(
                        bgcolor=COLOR_PRIMARY,
                        color="white",
                        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                    ),
                    on_click=on_login,
                ),
            ],
            spacing=16,
            tight=True,
            horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
        ),
        width=400,
        padding=ft.Padding.all(32),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        border=ft.Border.all(1, COLOR_BORDER),
    )
    return ft.View(
        route="/login",
        bgcolor=COLOR_BG,
        vertical_alignment=ft.MainAxisAlignment.CENTER,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        controls=[card],
    )


def build_list_view(
    page: ft.Page,
    resource: ResourceSpec,
    route: str,
    user: str,
    on_navigate,
    on_logout,
) -> tuple[ft.View, ListScreen]:
    """The caller must call screen.start() once the view is on the page."""
    screen = ListScreen(page, resource, route, on_navigate=on_navigate)
    view = _shell(route, user, on_navigate, on_logout, screen.build())
    return view, screen


def build_product_form_view(
    page: ft.Page,
    route: str,
    user: str,
    on_navigate,
    on_logout,
) -> ft.View:
    """/addEdit-product (create) or /addEdit-product/<artikel> (edit)."""
    resource = PRODUCTS
    path = route.split("?", 1)[0]
    artikel = path[len(resource.form_route) + 1:] or None
    back_route = resource.route

    row = None
    load_error = None
    options: dict[str, list[str]] = {}
    try:
        options = resource_service.fetch_filter_options()
    except ApiError as e:
        logger.warning("Filter options unavailable: %s", e)
    if artikel:
        try:
            row = resource_service.get_row(resource, artikel)
        except ApiError as e:
            logger.exception("Failed to load product %s", artikel)
            load_error = resource_service.error_text(e)

    if load_error:
        body = ft.Column(
            [
                ft.Text(f"Gagal memuat produk: {load_error}", color=COLOR_DANGER),
                ft.TextButton("Kembali", icon=ft.Icons.ARROW_BACK, on_click=lambda _e: on_navigate(back_route)),
            ]
        )
        return _shell(route, user, on_navigate, on_logout, body)

    form = ResourceForm(resource.form_fields, initial=row, options=options)

    def on_save(_e=None):
        form.clear_errors()
        try:
            actions.submit_form(resource, form, row_id=artikel)
        except FormValidationError as e:
            form.show_errors(e.errors)
            page.update()
            return
        except ApiError as e:
            logger.warning("Saving product failed: %s", e)
            show_message(page, resource_service.error_text(e), error=True)
            return
        show_message(page, "Produk berhasil disimpan")
        on_navigate(back_route)

    body = ft.Column(
        controls=[
            ft.Row(
                [
                    ft.IconButton(icon=ft.Icons.ARROW_BACK, on_click=lambda _e: on_navigate(back_route)),
                    ft.Text(
                        f"Edit Produk {artikel}" if artikel else "Tambah Produk",
                        size=22,
                        weight=ft.FontWeight.BOLD,
                    ),
                ]
            ),
            ft.Container(
                content=form,
                padding=ft.Padding.all(20),
                bgcolor=COLOR_CARD,
                border_radius=BORDER_RADIUS_CARD,
                border=ft.Border.all(1, COLOR_BORDER),
                width=720,
            ),
            ft.Row(
                [
                    ft.TextButton("Batal", on_click=lambda _e: on_navigate(back_route)),
                    ft.FilledButton(
                        "Simpan",
                        style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                        on_click=on_save,
                    ),
                ],
                width=720,
                alignment=ft.MainAxisAlignment.END,
            ),
        ],
        scroll=ft.ScrollMode.AUTO,
        spacing=16,
        expand=True,
    )
    return _shell(route, user, on_navigate, on_logout, body)


def sizing_guide_url() -> str:
    # cache-buster so a re-upload shows the new image
    return f"{BACKEND_URL}{SIZING_GUIDE_IMAGE_PATH}?t={int(time.time() * 1000)}"


def build_sizing_guide_view(
    page: ft.Page,
    user: str,
    on_navigate,
    on_logout,
) -> ft.View:
    preview = ft.Image(src=sizing_guide_url(), width=640, fit=ft.BoxFit.CONTAIN)
    status_text = ft.Text("", size=12, color=COLOR_TEXT_MUTED)

    def refresh_preview():
        preview.src = sizing_guide_url()
        page.update()

    async def on_upload(_e):
        files = await ft.FilePicker().pick_files(
            allow_multiple=False, file_type=ft.FilePickerFileType.IMAGE
        )
        if not files:
            return
        path = files[0].path
        problems = check_image(path, SIZING_GUIDE_RULES)
        if problems:
            show_message(page, problems[0], error=True)
            return
        try:
            resource_service.upload_sizing_guide(path)
        except ApiError as e:
            logger.warning("Sizing guide upload failed: %s", e)
            show_message(page, resource_service.error_text(e), error=True)
            return
        status_text.value = f"Diunggah: {files[0].name}"
        show_message(page, "Panduan ukuran berhasil diunggah")
        refresh_preview()

    def on_delete(_e):
        try:
            resource_service.delete_sizing_guide()
        except ApiError as e:
            logger.warning("Sizing guide delete failed: %s", e)
            show_message(page, resource_service.error_text(e), error=True)
            return
        status_text.value = ""
        show_message(page, "Panduan ukuran dihapus")
        refresh_preview()

    body = ft.Column(
        controls=[
            ft.Text("Panduan Ukuran", size=22, weight=ft.FontWeight.BOLD),
            ft.Row(
                [
                    ft.FilledButton(
                        "Upload gambar",
                        icon=ft.Icons.UPLOAD,
                        style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                        on_click=on_upload,
                    ),
                    ft.OutlinedButton("Hapus", icon=ft.Icons.DELETE_OUTLINE, on_click=on_delete),
                    status_text,
                ],
                spacing=12,
            ),
            ft.Container(
                content=preview,
                padding=ft.Padding.all(12),
                bgcolor=COLOR_CARD,
                border_radius=BORDER_RADIUS_CARD,
                border=ft.Border.all(1, COLOR_BORDER),
            ),
        ],
        spacing=16,
        scroll=ft.ScrollMode.AUTO,
        expand=True,
    )
    return _shell(SIZING_GUIDE_ROUTE, user, on_navigate, on_logout, body)

"""
actions.py - UI-side actions and dialogs
Single responsibility: handle modal flows that mutate resources.

A failed request keeps the dialog open and reports through a snackbar;
validation problems are shown inline under the offending field.
"""
import logging

import flet as ft

from inventary.config import BORDER_RADIUS_CARD, COLOR_DANGER, COLOR_PRIMARY, COLOR_TEXT_MUTED
from inventary.domain.resources import ResourceSpec
from inventary.domain.schemas import FormValidationError, validate_form
from inventary.services import resource_service
from inventary.services.errors import ApiError
from inventary.ui.components.form_fields import ResourceForm
from inventary.ui.helpers import show_message
from inventary.utils.images import BANNER_RULES, PRODUCT_RULES, check_image

logger = logging.getLogger(__name__)

IMAGE_RULES = {
    "banners": BANNER_RULES,
    "products": PRODUCT_RULES,
}


def check_uploads(resource: ResourceSpec, files: dict[str, list[str]]) -> dict[str, str]:
    """field -> first problem with the picked image, for fields that have one."""
    rules = IMAGE_RULES.get(resource.key)
    if rules is None:
        return {}
    problems = {}
    for name, paths in files.items():
        for path in paths:
            found = check_image(path, rules)
            if found:
                problems[name] = found[0]
                break
    return problems


def submit_form(
    resource: ResourceSpec,
    form: ResourceForm,
    row_id=None,
):
    """
    Validate and send one create/update.

    Raises FormValidationError for bad input (nothing is sent) and ApiError
    when the backend rejects the request.
    """
    files = form.files()
    upload_problems = check_uploads(resource, files)
    try:
        schema = validate_form(resource.form_schema, form.values())
    except FormValidationError as e:
        raise FormValidationError({**e.errors, **upload_problems}) from e
    if upload_problems:
        raise FormValidationError(upload_problems)

    if row_id is None:
        return resource_service.create_row(resource, schema, files=files)
    return resource_service.update_row(resource, row_id, schema, files=files)


def show_form_dialog(
    page: ft.Page,
    resource: ResourceSpec,
    on_saved,
    row: dict | None = None,
    options: dict[str, list[str]] | None = None,
):
    """Open the add/edit dialog; on_saved() runs after a successful request."""
    editing = row is not None
    row_id = row.get(resource.row_id_field) if editing else None
    form = ResourceForm(resource.form_fields, initial=row, options=options)

    def on_save(_e=None):
        form.clear_errors()
        try:
            submit_form(resource, form, row_id=row_id)
        except FormValidationError as e:
            form.show_errors(e.errors)
            page.update()
            return
        except ApiError as e:
            logger.warning("Saving %s failed: %s", resource.key, e)
            show_message(page, resource_service.error_text(e), error=True)
            return
        dialog.open = False
        page.update()
        show_message(page, f"{resource.title}: data berhasil {'diperbarui' if editing else 'ditambahkan'}")
        on_saved()

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(
            f"{'Edit' if editing else 'Tambah'} {resource.title}",
            weight=ft.FontWeight.BOLD,
        ),
        content=ft.Container(content=form, width=560),
        actions=[
            ft.TextButton("Batal", on_click=on_cancel),
            ft.FilledButton(
                "Simpan",
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=on_save,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def confirm_delete(page: ft.Page, resource: ResourceSpec, row: dict, on_deleted):
    row_id = row.get(resource.row_id_field)
    name = row.get(resource.display_field) or row_id

    def on_confirm(_e=None):
        try:
            resource_service.delete_row(resource, row_id)
        except ApiError as e:
            logger.warning("Deleting %s %s failed: %s", resource.key, row_id, e)
            show_message(page, resource_service.error_text(e), error=True)
            return
        dialog.open = False
        page.update()
        show_message(page, f"{name} berhasil dihapus")
        on_deleted()

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Konfirmasi hapus", weight=ft.FontWeight.BOLD),
        content=ft.Text(f'Yakin ingin menghapus "{name}"? Tindakan ini tidak dapat dibatalkan.'),
        actions=[
            ft.TextButton("Batal", on_click=on_cancel),
            ft.FilledButton(
                "Hapus",
                style=ft.ButtonStyle(bgcolor=COLOR_DANGER, color="white"),
                on_click=on_confirm,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def show_message_dialog(page: ft.Page, row: dict):
    """Read-only view of one newsletter submission."""

    def on_close(_e=None):
        dialog.open = False
        page.update()

    def line(label: str, value) -> ft.Control:
        return ft.Column(
            [
                ft.Text(label, size=12, color=COLOR_TEXT_MUTED),
                ft.Text(str(value or "-"), selectable=True),
            ],
            spacing=2,
        )

    dialog = ft.AlertDialog(
        title=ft.Text("Pesan Newsletter", weight=ft.FontWeight.BOLD),
        content=ft.Container(
            content=ft.Column(
                [
                    line("Email", row.get("email")),
                    line("WhatsApp", row.get("whatsapp")),
                    line("Pesan", row.get("message")),
                ],
                spacing=12,
                tight=True,
            ),
            width=480,
        ),
        actions=[ft.TextButton("Tutup", on_click=on_close)],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()

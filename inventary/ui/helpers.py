"""
helpers.py - UI helper functions
Single responsibility: small formatting and notification helpers used across UI.
"""
import flet as ft

from inventary.config import (
    BORDER_RADIUS_BTN,
    COLOR_BORDER,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_SUCCESS,
)
from inventary.domain.resources import BOOL, CURRENCY, DATE, DATETIME, Column
from inventary.utils.formatters import format_bool, format_currency, format_date


def show_message(page: ft.Page, text: str, error: bool = False) -> None:
    snack = ft.SnackBar(
        ft.Text(text, color="white"),
        bgcolor=COLOR_DANGER if error else COLOR_SUCCESS,
        open=True,
    )
    page.overlay.append(snack)
    page.update()


def show_error_dialog(page: ft.Page, title: str, exc: Exception | str) -> None:
    page.overlay.append(
        ft.AlertDialog(
            title=ft.Text(title),
            content=ft.Text(f"Detail: {exc}"),
            open=True,
        )
    )
    page.update()


def cell_text(column: Column, row: dict) -> str:
    """Display text for one table cell."""
    value = row.get(column.field)
    if column.kind == CURRENCY:
        return format_currency(value)
    if column.kind == DATE:
        return format_date(value)
    if column.kind == DATETIME:
        return format_date(value, with_time=True)
    if column.kind == BOOL:
        return format_bool(value)
    if value is None or value == "":
        return "-"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def input_style() -> dict:
    """Shared TextField/Dropdown border styling."""
    return {
        "border_color": COLOR_BORDER,
        "focused_border_color": COLOR_PRIMARY,
        "border_radius": BORDER_RADIUS_BTN,
    }


def parse_marketplace(text: str | None) -> list[dict]:
    """"key=url" lines (or commas) into [{"key", "value"}]; blank lines skipped."""
    links = []
    if not text:
        return links
    for line in text.replace(",", "\n").splitlines():
        line = line.strip()
        if not line:
            continue
        key, sep, url = line.partition("=")
        links.append({"key": key.strip().lower(), "value": url.strip() if sep else ""})
    return links


def format_marketplace(value) -> str:
    if isinstance(value, dict):
        return "\n".join(f"{k}={v}" for k, v in value.items())
    if isinstance(value, list):
        return "\n".join(f"{v.get('key')}={v.get('value')}" for v in value if isinstance(v, dict))
    return value or ""

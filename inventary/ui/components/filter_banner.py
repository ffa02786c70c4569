import flet as ft

from inventary.config import (
    BORDER_RADIUS_CARD,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
)


class ActiveFilterBanner(ft.Container):
    def __init__(self, filters: dict[str, str], on_remove, on_clear_all):
        super().__init__()
        self.filters = filters
        self.on_remove = on_remove
        self.on_clear_all = on_clear_all

        self.padding = ft.Padding.symmetric(horizontal=14, vertical=10)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.Border.all(1, COLOR_BORDER)
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.visible = bool(filters)
        self.content = self._build_content()

    def _chip(self, field: str, value: str) -> ft.Control:
        return ft.Container(
            content=ft.Row(
                [
                    ft.Text(f"{field}: {value}", size=12, color=COLOR_PRIMARY, weight=ft.FontWeight.W_500),
                    ft.IconButton(
                        icon=ft.Icons.CLOSE,
                        icon_size=14,
                        tooltip=f"Hapus filter {field}",
                        on_click=lambda _e, f=field: self.on_remove(f),
                    ),
                ],
                spacing=0,
                tight=True,
            ),
            bgcolor="#EEF2FF",
            padding=ft.Padding.only(left=10),
            border_radius=14,
        )

    def _build_content(self):
        return ft.Row(
            controls=[
                ft.Icon(ft.Icons.FILTER_ALT, color=COLOR_PRIMARY, size=16),
                ft.Text("Filter aktif:", size=13, weight=ft.FontWeight.W_600, color=COLOR_TEXT_MAIN),
                ft.Row(
                    [self._chip(field, value) for field, value in self.filters.items()],
                    spacing=6,
                    run_spacing=6,
                    wrap=True,
                    expand=True,
                ),
                ft.TextButton(
                    "Hapus semua",
                    icon=ft.Icons.CLEAR_ALL,
                    on_click=lambda _e: self.on_clear_all(),
                ),
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

"""
data_table.py - Server-side paginated table
Single responsibility: render one page of rows with sortable headers and a pagination footer.

The table never sorts or pages locally. Header clicks, row buttons and footer
controls are reported back through callbacks; the owning view turns them into
URL state changes and reloads.
"""
from dataclasses import dataclass
from typing import Callable

import flet as ft

from inventary.config import (
    BORDER_RADIUS_CARD,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    PAGE_SIZE_OPTIONS,
)
from inventary.domain.query_state import SORT_ASC, PaginationModel, SortItem
from inventary.domain.resources import COLOR, IMAGE, ResourceSpec
from inventary.ui.helpers import cell_text

ACTION_VIEW = "view"
ACTION_EDIT = "edit"
ACTION_DELETE = "delete"


@dataclass(frozen=True)
class RowAction:
    type: str
    row: dict


def page_range_text(model: PaginationModel, row_count: int) -> str:
    """"11-20 of 57" style footer label."""
    if row_count <= 0:
        return "0-0 of 0"
    start = model.page * model.page_size + 1
    end = min((model.page + 1) * model.page_size, row_count)
    if start > row_count:
        start = end = row_count
    return f"{start}-{end} of {row_count}"


def has_next_page(model: PaginationModel, row_count: int) -> bool:
    return (model.page + 1) * model.page_size < row_count


class ResourceTable(ft.Container):
    def __init__(
        self,
        resource: ResourceSpec,
        on_action: Callable[[RowAction], None],
        on_sort: Callable[[str], None],
        on_page: Callable[[PaginationModel], None],
    ):
        super().__init__()
        self.resource = resource
        self.on_action = on_action
        self.on_sort = on_sort
        self.on_page = on_page
        self.rows: tuple[dict, ...] = ()
        self.row_count = 0
        self.pagination = PaginationModel()
        self.sort: SortItem | None = None

        self.table = ft.DataTable(
            columns=self._build_columns(),
            rows=[],
            heading_text_style=ft.TextStyle(weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
            column_spacing=24,
            expand=True,
        )
        self.range_text = ft.Text("0-0 of 0", size=13, color=COLOR_TEXT_MUTED)
        self.page_size_field = ft.Dropdown(
            label="Rows per page",
            width=140,
            options=[ft.dropdown.Option(str(size), str(size)) for size in PAGE_SIZE_OPTIONS],
            value=str(self.pagination.page_size),
            on_select=self._on_page_size,
            dense=True,
        )
        self.prev_button = ft.IconButton(
            icon=ft.Icons.CHEVRON_LEFT,
            tooltip="Previous page",
            on_click=lambda _e: self._go(self.pagination.page - 1),
        )
        self.next_button = ft.IconButton(
            icon=ft.Icons.CHEVRON_RIGHT,
            tooltip="Next page",
            on_click=lambda _e: self._go(self.pagination.page + 1),
        )

        self.padding = ft.Padding.all(12)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.Border.all(1, COLOR_BORDER)
        self.expand = True
        self.content = ft.Column(
            controls=[
                ft.Row(
                    controls=[self.table],
                    scroll=ft.ScrollMode.AUTO,
                    expand=True,
                    vertical_alignment=ft.CrossAxisAlignment.START,
                ),
                ft.Row(
                    controls=[
                        self.page_size_field,
                        self.range_text,
                        self.prev_button,
                        self.next_button,
                    ],
                    alignment=ft.MainAxisAlignment.END,
                    vertical_alignment=ft.CrossAxisAlignment.CENTER,
                    spacing=12,
                ),
            ],
            scroll=ft.ScrollMode.AUTO,
            expand=True,
        )

    # -- headers ----------------------------------------------------------

    def _header_label(self, column) -> ft.Control:
        label = column.header
        if self.sort is not None and self.sort.field == column.field:
            arrow = ft.Icons.ARROW_UPWARD if self.sort.sort == SORT_ASC else ft.Icons.ARROW_DOWNWARD
            return ft.Row(
                [ft.Text(label), ft.Icon(arrow, size=14, color=COLOR_PRIMARY)],
                spacing=4,
                tight=True,
            )
        return ft.Text(label)

    def _build_columns(self) -> list[ft.DataColumn]:
        columns = [
            ft.DataColumn(
                self._header_label(column),
                on_sort=(lambda _e, f=column.field: self.on_sort(f)) if column.sortable else None,
            )
            for column in self.resource.columns
        ]
        columns.append(ft.DataColumn(ft.Text("Actions")))
        return columns

    # -- rows -------------------------------------------------------------

    def _cell(self, column, row: dict) -> ft.DataCell:
        value = row.get(column.field)
        if column.kind == COLOR and value:
            return ft.DataCell(
                ft.Row(
                    [
                        ft.Container(width=16, height=16, bgcolor=str(value), border_radius=4),
                        ft.Text(str(value)),
                    ],
                    spacing=6,
                    tight=True,
                )
            )
        if column.kind == IMAGE and value:
            return ft.DataCell(ft.Image(src=str(value), height=48, fit=ft.BoxFit.COVER))
        return ft.DataCell(
            ft.Text(cell_text(column, row), max_lines=2, overflow=ft.TextOverflow.ELLIPSIS)
        )

    def _action_cell(self, row: dict) -> ft.DataCell:
        buttons = []
        if self.resource.viewable:
            buttons.append(
                ft.IconButton(
                    icon=ft.Icons.VISIBILITY,
                    icon_color=COLOR_PRIMARY,
                    tooltip="Lihat",
                    on_click=lambda _e, r=row: self.on_action(RowAction(ACTION_VIEW, r)),
                )
            )
        if self.resource.editable:
            buttons.append(
                ft.IconButton(
                    icon=ft.Icons.EDIT,
                    icon_color=COLOR_PRIMARY,
                    tooltip="Edit",
                    on_click=lambda _e, r=row: self.on_action(RowAction(ACTION_EDIT, r)),
                )
            )
        buttons.append(
            ft.IconButton(
                icon=ft.Icons.DELETE_OUTLINE,
                icon_color=COLOR_DANGER,
                tooltip="Hapus",
                on_click=lambda _e, r=row: self.on_action(RowAction(ACTION_DELETE, r)),
            )
        )
        return ft.DataCell(ft.Row(buttons, spacing=0, tight=True))

    def _build_rows(self) -> list[ft.DataRow]:
        return [
            ft.DataRow(
                cells=[self._cell(column, row) for column in self.resource.columns]
                + [self._action_cell(row)]
            )
            for row in self.rows
        ]

    # -- footer -----------------------------------------------------------

    def _go(self, page: int) -> None:
        if page < 0 or (page > self.pagination.page and not has_next_page(self.pagination, self.row_count)):
            return
        self.on_page(PaginationModel(page=page, page_size=self.pagination.page_size))

    def _on_page_size(self, e) -> None:
        try:
            size = int(e.control.value)
        except (TypeError, ValueError):
            return
        # a new page size starts over at the first page
        self.on_page(PaginationModel(page=0, page_size=size))

    # -- public -----------------------------------------------------------

    def set_data(
        self,
        rows,
        row_count: int,
        pagination: PaginationModel,
        sort: SortItem | None,
    ) -> None:
        """Replace the visible page; call update() on the page afterwards."""
        self.rows = tuple(rows)
        self.row_count = row_count
        self.pagination = pagination
        self.sort = sort
        self.table.columns = self._build_columns()
        self.table.rows = self._build_rows()
        self.range_text.value = page_range_text(pagination, row_count)
        self.page_size_field.value = str(pagination.page_size)
        self.prev_button.disabled = pagination.page <= 0
        self.next_button.disabled = not has_next_page(pagination, row_count)

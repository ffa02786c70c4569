"""
list_screen.py - List screen composition root
Single responsibility: wire URL state, the list loader and the table for one resource.

Every controller write goes through the screen's UrlStateStore. The store only
notifies on a real change, so each notification means a new query key and
triggers exactly one fetch; the page route mirrors the store (replace
semantics, no history entries).
"""
import logging

import flet as ft

from inventary.config import BORDER_RADIUS_BTN, COLOR_CARD, COLOR_DANGER, COLOR_PRIMARY, COLOR_TEXT_MUTED
from inventary.domain.resources import ResourceSpec
from inventary.services import resource_service
from inventary.services.api_client import ApiClient
from inventary.services.errors import ApiError
from inventary.services.list_loader import ListLoader, LoadState
from inventary.state.list_state import ListState
from inventary.state.url_store import UrlStateStore
from inventary.ui import actions
from inventary.ui.components.data_table import (
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_VIEW,
    ResourceTable,
    RowAction,
)
from inventary.ui.components.filter_banner import ActiveFilterBanner

logger = logging.getLogger(__name__)

ALL_OPTION = "__all__"


class ListScreen:
    def __init__(
        self,
        page: ft.Page,
        resource: ResourceSpec,
        route: str,
        on_navigate=None,
        client: ApiClient | None = None,
    ):
        self.page = page
        self.resource = resource
        self.on_navigate = on_navigate
        self.client = client
        self.state = ListState(route, resource.filter_fields)
        self.loader = ListLoader(self._fetch, on_change=self.render)
        self.filter_options: dict[str, list[str]] = {}

        self.table = ResourceTable(
            resource,
            on_action=self.dispatch,
            on_sort=self.state.sorting.toggle,
            on_page=self.state.pagination.set_page,
        )
        self.table.visible = False
        self.spinner = ft.Container(
            content=ft.ProgressRing(color=COLOR_PRIMARY),
            alignment=ft.Alignment.CENTER,
            padding=80,
            expand=True,
        )
        self.refresh_bar = ft.ProgressBar(visible=False, color=COLOR_PRIMARY)
        self.error_text = ft.Text("", color=COLOR_DANGER, size=15, visible=False)
        self.search_field = ft.TextField(
            prefix_icon=ft.Icons.SEARCH,
            hint_text="Cari lalu tekan Enter...",
            value=self.state.search.text,
            on_submit=lambda e: self.state.search.set_search(e.control.value),
            border_radius=BORDER_RADIUS_BTN,
            border_color="transparent",
            bgcolor=COLOR_CARD,
            content_padding=ft.Padding.symmetric(horizontal=12, vertical=12),
            text_size=14,
            width=360,
        )
        self.filter_dropdowns: dict[str, ft.Dropdown] = {
            name: ft.Dropdown(
                label=name,
                width=170,
                dense=True,
                options=[],
                on_select=lambda e, f=name: self.on_filter_select(f, e.control.value),
            )
            for name in resource.filter_fields
        }
        self.banner_slot = ft.Container()
        self._unsubscribe = self.state.subscribe(self._on_store_change)
        self._sync_filter_controls()

    # -- data -------------------------------------------------------------

    def _fetch(self, query_string: str):
        return resource_service.list_rows(self.resource, query_string, client=self.client)

    def reload(self) -> None:
        """Fetch the current query on a worker thread."""
        generation = self.loader.begin(self.state.cache_key())
        self.page.run_thread(
            self.loader.run,
            generation,
            self.state.query_string(),
            self.state.pagination.limit,
        )

    def load_filter_options(self) -> None:
        if not self.resource.filter_fields:
            return
        try:
            self.filter_options = resource_service.fetch_filter_options(client=self.client)
        except ApiError as e:
            logger.warning("Filter options unavailable: %s", e)
            self.filter_options = {}
        self._sync_filter_controls()
        self.page.update()

    def _on_store_change(self, store: UrlStateStore) -> None:
        self.page.route = store.route
        self._sync_filter_controls()
        self.reload()

    # -- rendering --------------------------------------------------------

    def _sync_filter_controls(self) -> None:
        active = self.state.filters.active
        for name, dropdown in self.filter_dropdowns.items():
            values = list(self.filter_options.get(name, []))
            current = active.get(name)
            if current and current not in values:
                values.append(current)
            dropdown.options = [ft.dropdown.Option(ALL_OPTION, "(semua)")] + [
                ft.dropdown.Option(v, v) for v in values
            ]
            dropdown.value = current
        self.banner_slot.content = ActiveFilterBanner(
            active,
            on_remove=self.state.filters.remove_filter,
            on_clear_all=self.state.filters.clear,
        )

    def render(self, load_state: LoadState) -> None:
        self.spinner.visible = load_state.initial_loading
        self.refresh_bar.visible = load_state.refreshing
        failed = load_state.error is not None
        self.error_text.value = f"Gagal memuat data: {load_state.error}" if failed else ""
        self.error_text.visible = failed
        self.table.visible = not load_state.initial_loading and not failed
        self.table.set_data(
            load_state.rows,
            load_state.row_count,
            self.state.pagination.model,
            self.state.sorting.active,
        )
        self.page.update()

    # -- user input -------------------------------------------------------

    def on_filter_select(self, field: str, value: str | None) -> None:
        self.state.filters.add_filter(field, None if value == ALL_OPTION else value)

    def open_create(self) -> None:
        if self.resource.edit_as_page and self.on_navigate:
            self.on_navigate(self.resource.form_route)
            return
        actions.show_form_dialog(
            self.page, self.resource, on_saved=self.reload, options=self.filter_options
        )

    def dispatch(self, action: RowAction) -> None:
        row = action.row
        if action.type == ACTION_EDIT:
            if self.resource.edit_as_page and self.on_navigate:
                row_id = row.get(self.resource.row_id_field)
                self.on_navigate(f"{self.resource.form_route}/{row_id}")
                return
            actions.show_form_dialog(
                self.page, self.resource, on_saved=self.reload, row=row, options=self.filter_options
            )
        elif action.type == ACTION_DELETE:
            actions.confirm_delete(self.page, self.resource, row, on_deleted=self.reload)
        elif action.type == ACTION_VIEW:
            actions.show_message_dialog(self.page, row)
        else:
            logger.warning("Unknown row action: %s", action.type)

    # -- layout -----------------------------------------------------------

    def build(self) -> ft.Control:
        toolbar = ft.Row(
            controls=[
                self.search_field,
                ft.Container(expand=True),
                *(
                    [
                        ft.FilledButton(
                            "Tambah",
                            icon=ft.Icons.ADD,
                            style=ft.ButtonStyle(
                                bgcolor=COLOR_PRIMARY,
                                color="white",
                                shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                            ),
                            on_click=lambda _e: self.open_create(),
                        )
                    ]
                    if self.resource.editable
                    else []
                ),
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
        filters_row = ft.Row(
            controls=list(self.filter_dropdowns.values()),
            wrap=True,
            spacing=8,
            run_spacing=8,
            visible=bool(self.filter_dropdowns),
        )
        return ft.Column(
            controls=[
                ft.Text(self.resource.title, size=22, weight=ft.FontWeight.BOLD),
                toolbar,
                filters_row,
                self.banner_slot,
                self.refresh_bar,
                self.error_text,
                self.spinner,
                self.table,
                ft.Text(
                    "Tip: klik judul kolom untuk mengurutkan.",
                    size=11,
                    color=COLOR_TEXT_MUTED,
                ),
            ],
            spacing=12,
            expand=True,
        )

    def start(self) -> None:
        """Initial fetch plus filter options; call after the view is on the page."""
        self.reload()
        if self.resource.filter_fields:
            self.page.run_thread(self.load_filter_options)

    def dispose(self) -> None:
        self._unsubscribe()
        self.state.dispose()

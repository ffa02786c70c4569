"""
app_main.py - Inventary Admin main application
Inventary Admin v0.1
"""

import logging
import sys
from pathlib import Path

import flet as ft

from inventary.config import APP_TITLE, COLOR_BG, COLOR_PRIMARY
from inventary.domain.resources import PRODUCTS, resource_for_route
from inventary.services import auth_service
from inventary.ui import views
from inventary.ui_state import AppState

logger = logging.getLogger(__name__)

HOME_ROUTE = PRODUCTS.route


def resource_path(relative_path: str) -> str:
    """Get absolute path to resource, works for dev and for PyInstaller"""
    if hasattr(sys, "_MEIPASS"):
        return str(Path(sys._MEIPASS) / relative_path)
    return str(Path.cwd() / relative_path)


def main(page: ft.Page):
    page.title = APP_TITLE
    page.window.icon = resource_path("app.ico")
    page.window.maximized = True
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(
        color_scheme_seed=COLOR_PRIMARY,
        font_family="Roboto",
    )

    state = AppState()
    session_store = auth_service.get_session_store()

    def dispose_screen():
        if state.screen is not None:
            state.screen.dispose()
            state.screen = None

    def show_view(view: ft.View, route: str):
        page.views.clear()
        page.views.append(view)
        state.current_route = route
        page.route = route
        page.update()

    def logout():
        auth_service.logout(session_store)
        dispose_screen()
        navigate(HOME_ROUTE)

    def navigate(route: str):
        route = route or HOME_ROUTE
        path = route.split("?", 1)[0]
        try:
            if not session_store.is_authenticated:
                dispose_screen()
                target = route if path not in ("/", "/login") else HOME_ROUTE
                show_view(views.build_login_view(page, on_logged_in=lambda: navigate(target)), "/login")
                return

            session = session_store.session
            state.user = session.username if session else ""
            if path in ("/", "/login"):
                route, path = HOME_ROUTE, HOME_ROUTE

            dispose_screen()
            resource = resource_for_route(path)
            if resource is not None:
                view, screen = views.build_list_view(
                    page, resource, route, state.user, on_navigate=navigate, on_logout=logout
                )
                state.screen = screen
                show_view(view, screen.state.store.route)
                screen.start()
            elif PRODUCTS.form_route and path.startswith(PRODUCTS.form_route):
                show_view(
                    views.build_product_form_view(page, route, state.user, navigate, logout),
                    route,
                )
            elif path == views.SIZING_GUIDE_ROUTE:
                show_view(
                    views.build_sizing_guide_view(page, state.user, navigate, logout),
                    route,
                )
            else:
                logger.info("Unknown route %s; redirecting home", route)
                navigate(HOME_ROUTE)
        except Exception as exc:
            logger.exception("Error while opening %s", route)
            page.overlay.append(
                ft.AlertDialog(
                    title=ft.Text("Terjadi kesalahan"),
                    content=ft.Text(f"Detail: {exc}"),
                    open=True,
                )
            )
            page.update()

    def route_change(_e: ft.RouteChangeEvent):
        # the list screen mirrors its own URL state into page.route
        if state.screen is not None and page.route == state.screen.state.store.route:
            return
        if page.route == state.current_route:
            return
        navigate(page.route)

    def view_pop(_e: ft.ViewPopEvent = None):
        if state.current_path != HOME_ROUTE:
            navigate(HOME_ROUTE)

    page.on_route_change = route_change
    page.on_view_pop = view_pop

    start_route = page.route if page.route not in (None, "", "/") else HOME_ROUTE
    navigate(start_route)


# ==========================================================================
# Entry point
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)

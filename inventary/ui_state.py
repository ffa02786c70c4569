"""
ui_state.py - UI state container
"""


class AppState:
    def __init__(self):
        self.user: str = ""
        self.current_route: str = ""
        self.screen = None  # ListScreen of the visible list view, if any

    @property
    def current_path(self) -> str:
        return self.current_route.split("?", 1)[0]

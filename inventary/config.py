"""
config.py - paths, backend settings and app constants
Inventary Admin v0.1
"""

import os
import sys

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    Directory the app runs from.
    - frozen exe : directory containing the executable
    - script     : project root (one level above this package)
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_local_dir() -> str:
    """Per-user data directory (%LOCALAPPDATA%\\Inventary or ~/.inventary)."""
    override = os.environ.get("INVENTARY_DATA_DIR")
    if override:
        return override
    local_app_data = os.environ.get("LOCALAPPDATA")
    if local_app_data:
        return os.path.join(local_app_data, "Inventary")
    return os.path.join(os.path.expanduser("~"), ".inventary")


BASE_PATH = get_base_path()
LOCAL_DIR = get_local_dir()
SESSION_PATH = os.path.join(LOCAL_DIR, "session.json")

# ---------------------------------------------------------------------------
# Backend
# ---------------------------------------------------------------------------

BACKEND_URL = os.environ.get("INVENTARY_BACKEND_URL", "http://localhost:8080").rstrip("/")
REQUEST_TIMEOUT_SECONDS = float(os.environ.get("INVENTARY_REQUEST_TIMEOUT", "15"))

LOGIN_PATH = "/api/auth/login"
FILTER_OPTIONS_PATH = "/api/filters"
SIZING_GUIDE_PATH = "/api/admin/panduan-ukuran"
SIZING_GUIDE_IMAGE_PATH = "/uploads/panduan/1.png"

# ---------------------------------------------------------------------------
# App constants
# ---------------------------------------------------------------------------

APP_TITLE = "Inventary Admin"
APP_VERSION = "0.1.0"

# List views
DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = (10, 25, 50, 100)

# Uploads
MAX_UPLOAD_BYTES = 20 * 1024 * 1024  # 20MB
ASPECT_RATIO_TOLERANCE = 0.1
BANNER_ASPECT_RATIOS = ((16 / 9, "16:9"), (16 / 10, "16:10"))
BANNER_MIN_RESOLUTION = (1280, 720)
PRODUCT_ASPECT_RATIOS = ((1.0, "1:1"), (1.25, "5:4"), (0.8, "4:5"))
PRODUCT_MIN_RESOLUTION = (512, 512)

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------

COLOR_BG = "#F0F2F5"  # page background
COLOR_CARD = "#FFFFFF"  # cards / table
COLOR_BORDER = "#D0D7DE"
COLOR_TEXT_MUTED = "#656D76"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#4F46E5"  # indigo
COLOR_SUCCESS = "#2DA44E"
COLOR_DANGER = "#CF222E"

# AppBar
COLOR_APPBAR_BG = "#FFFFFF"
COLOR_APPBAR_FG = "#1F2328"

# UI constants
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2

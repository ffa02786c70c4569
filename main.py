import logging
import os
import sys


def _log_level() -> int:
    """INVENTARY_LOG_LEVEL (DEBUG/INFO/WARNING...) or INFO."""
    name = os.environ.get("INVENTARY_LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


# Logging
logging.basicConfig(
    level=_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

if __name__ == "__main__":
    import flet as ft
    from inventary.app_main import main

    try:
        ft.app(target=main)
    except Exception:
        logging.exception("Unhandled exception running Flet app")
        # exit with non-zero so local runs notice failure; CI will also log
        sys.exit(1)

"""
formatters.py - display formatting helpers
Single responsibility: money/date formatting for tables and dialogs.
"""
import logging

from inventary.utils.time import parse_iso

logger = logging.getLogger(__name__)


def format_currency(value) -> str:
    """Indonesian Rupiah without decimals ("Rp 150.000"); "-" for invalid input."""
    if value is None or isinstance(value, bool):
        return "-"
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Invalid value for currency formatting: %r", value)
        return "-"
    if number != number:  # NaN
        return "-"
    grouped = f"{abs(round(number)):,.0f}".replace(",", ".")
    sign = "-" if number < 0 else ""
    return f"{sign}Rp {grouped}"


def format_date(value, with_time: bool = False) -> str:
    """dd/mm/yyyy (and HH:MM) in local time; "-" for empty or invalid values."""
    if not value:
        return "-"
    dt = parse_iso(str(value))
    if dt is None:
        return "-"
    dt = dt.astimezone()
    return dt.strftime("%d/%m/%Y %H:%M" if with_time else "%d/%m/%Y")


def format_bool(value) -> str:
    return "Aktif" if value in (True, 1, "1", "true", "True") else "Tidak aktif"

"""
images.py - upload image checks
Inventary Admin v0.1
"""
import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from inventary.config import (
    ASPECT_RATIO_TOLERANCE,
    BANNER_ASPECT_RATIOS,
    BANNER_MIN_RESOLUTION,
    MAX_UPLOAD_BYTES,
    PRODUCT_ASPECT_RATIOS,
    PRODUCT_MIN_RESOLUTION,
)

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}


@dataclass(frozen=True)
class ImageRules:
    max_bytes: int = MAX_UPLOAD_BYTES
    min_size: tuple[int, int] | None = None
    aspect_ratios: Sequence[tuple[float, str]] = ()
    tolerance: float = ASPECT_RATIO_TOLERANCE


BANNER_RULES = ImageRules(min_size=BANNER_MIN_RESOLUTION, aspect_ratios=BANNER_ASPECT_RATIOS)
PRODUCT_RULES = ImageRules(min_size=PRODUCT_MIN_RESOLUTION, aspect_ratios=PRODUCT_ASPECT_RATIOS)
SIZING_GUIDE_RULES = ImageRules()


def check_image(path: str, rules: ImageRules = SIZING_GUIDE_RULES) -> list[str]:
    """
    Inspect a local image before upload and list what is wrong with it.

    An empty list means the file can be uploaded. Checks run in order:
    extension, byte size, decodability, resolution, aspect ratio.

    Args:
        path: local image file
        rules: byte limit, minimum resolution and allowed aspect ratios

    Returns:
        user-facing error messages
    """
    problems: list[str] = []
    ext = os.path.splitext(path)[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        problems.append("File harus berupa gambar (png, jpg, gif, webp).")
        return problems

    try:
        size_bytes = os.path.getsize(path)
    except OSError:
        return ["File tidak ditemukan."]
    if size_bytes > rules.max_bytes:
        limit_mb = rules.max_bytes // (1024 * 1024)
        problems.append(f"Ukuran file tidak boleh melebihi {limit_mb}MB.")
        return problems

    try:
        with Image.open(path) as img:
            width, height = img.size
    except (UnidentifiedImageError, OSError):
        logger.debug("Unreadable image: %s", path, exc_info=True)
        return ["File gambar tidak dapat dibaca."]

    if rules.min_size is not None:
        min_w, min_h = rules.min_size
        if width < min_w or height < min_h:
            problems.append(f"Resolusi minimal {min_w}x{min_h} (saat ini {width}x{height}).")

    if rules.aspect_ratios and height > 0:
        ratio = width / height
        matches = [
            label
            for target, label in rules.aspect_ratios
            if abs(ratio - target) / target <= rules.tolerance
        ]
        if not matches:
            allowed = ", ".join(label for _, label in rules.aspect_ratios)
            problems.append(f"Rasio gambar harus {allowed}.")

    return problems


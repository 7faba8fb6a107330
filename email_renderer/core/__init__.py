"""Core module pour le renderer email."""
from .schemas import EmailSettings, EmailDocument, coerce_document
from .icons import ICON_PATHS, ICON_SIZES, ICON_RADII, GLYPH_INSET, resolve_icon, glyph_size
from .merge_tags import resolve_merge_tags, personalize, tracking_pixel_url, inject_tracking_pixel

__all__ = [
    "EmailSettings",
    "EmailDocument",
    "coerce_document",
    "ICON_PATHS",
    "ICON_SIZES",
    "ICON_RADII",
    "GLYPH_INSET",
    "resolve_icon",
    "glyph_size",
    "resolve_merge_tags",
    "personalize",
    "tracking_pixel_url",
    "inject_tracking_pixel",
]

"""Renderer HTML — compilateur de blocs + assembleur de document."""
from .html import compile_block, compile_blocks, format_copyright, star_rating, has_rating
from .document import render_document

__all__ = [
    "compile_block",
    "compile_blocks",
    "render_document",
    "format_copyright",
    "star_rating",
    "has_rating",
]

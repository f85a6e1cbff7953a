"""Text layout and pagination."""

from lexform.layout.config import LayoutConfig
from lexform.layout.models import Fragment, Page, Section, Style
from lexform.layout.wrap import char_measure, font_measure, wrap_text
from lexform.layout.writer import PaginatedTextWriter, render_sections

__all__ = [
    "Fragment",
    "LayoutConfig",
    "Page",
    "PaginatedTextWriter",
    "Section",
    "Style",
    "char_measure",
    "font_measure",
    "render_sections",
    "wrap_text",
]

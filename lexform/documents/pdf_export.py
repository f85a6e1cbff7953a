"""Serialize laid-out pages to a PDF file."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from lexform.documents.base import create_canvas, ensure_output_dir, timestamped_filename
from lexform.documents.errors import PDFGenerationError
from lexform.layout.config import LayoutConfig
from lexform.layout.models import Page, Style

_LOGGER = logging.getLogger(__name__)


def draw_pages(pdf_canvas: canvas.Canvas, pages: Sequence[Page], config: LayoutConfig) -> None:
    """Draw every fragment, flipping y to the PDF bottom-left origin."""
    for page in pages:
        for fragment in page.fragments:
            font = config.bold_font_name if fragment.style is Style.BOLD else config.font_name
            pdf_canvas.setFont(font, fragment.font_size)
            x = fragment.x * mm
            y = (config.page_height - fragment.y) * mm
            if fragment.align == "center":
                pdf_canvas.drawCentredString(x, y, fragment.text)
            else:
                pdf_canvas.drawString(x, y, fragment.text)
        pdf_canvas.showPage()


def export_pdf(
    pages: Sequence[Page],
    document_type: str,
    config: Optional[LayoutConfig] = None,
    output_dir: Optional[Path] = None,
    now: Optional[datetime] = None,
) -> str:
    """Write ``pages`` to ``<output>/<document_type>/<document_type>_<timestamp>.pdf``."""
    config = config or LayoutConfig()
    try:
        output_path = _document_output_path(document_type, output_dir, now)
        pdf_canvas = create_canvas(output_path, config)
        draw_pages(pdf_canvas, pages, config)
        pdf_canvas.save()
    except (KeyError, OSError) as exc:
        raise PDFGenerationError(str(exc)) from exc

    _LOGGER.info(
        "Document written.",
        extra={"document_type": document_type, "pages": len(pages), "path": str(output_path)},
    )
    return str(output_path)


def _document_output_path(document_type: str, output_dir: Optional[Path], now: Optional[datetime]) -> Path:
    directory = ensure_output_dir(document_type, base=output_dir)
    return directory / timestamped_filename(document_type, now)

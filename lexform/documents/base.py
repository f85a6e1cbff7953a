"""Shared utilities for PDF document generation."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from lexform.layout.config import LayoutConfig

PROJECT_ROOT = Path(__file__).resolve().parents[2]
OUTPUT_BASE = PROJECT_ROOT / "output"


def output_base() -> Path:
    """Return the output root, honouring ``LEXFORM_OUTPUT_DIR`` when set."""
    configured = os.getenv("LEXFORM_OUTPUT_DIR")
    return Path(configured) if configured else OUTPUT_BASE


def ensure_output_dir(subdir: str = "", base: Optional[Path] = None) -> Path:
    """Ensure an output subdirectory exists and return its path."""
    output_dir = (base or output_base()) / subdir
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def timestamped_filename(document_type: str, now: Optional[datetime] = None, ext: str = "pdf") -> str:
    """Build ``<document_type>_<YYYYMMDD_HHmmss>.<ext>``."""
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"{document_type}_{stamp}.{ext}"


def create_canvas(output_path: Path, config: LayoutConfig) -> canvas.Canvas:
    """Create a reportlab canvas sized to the layout page."""
    return canvas.Canvas(str(output_path), pagesize=(config.page_width * mm, config.page_height * mm))

"""Fill a template from answers, lay it out and export it."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from lexform.documents.errors import PDFGenerationError
from lexform.documents.pdf_export import export_pdf
from lexform.documents.registry import resolve_template
from lexform.layout import LayoutConfig, Page, PaginatedTextWriter
from lexform.layout.wrap import Measure
from lexform.reference.jurisdictions import JurisdictionLookup
from lexform.templates import DocumentTemplate, FilledDocument, fill_template


def _write_signature_block(writer: PaginatedTextWriter, filled: FilledDocument) -> None:
    heading = filled.signature_heading
    lines = filled.signature_lines
    if not heading and not lines:
        return

    # Keep the block on one page when it fits on a fresh one.
    config = writer.config
    height = len(lines) * config.line_height + (config.title_advance if heading else 0)
    writer.ensure_space(height)
    if heading:
        writer.write_line(heading, bold=True, advance=config.title_advance)
    for line in lines:
        writer.write_line(line)


def _layout(
    template: DocumentTemplate,
    answers: Mapping[str, Any],
    config: Optional[LayoutConfig],
    lookup: Optional[JurisdictionLookup],
    measure: Optional[Measure],
) -> Tuple[Page, ...]:
    if not isinstance(answers, Mapping):
        raise PDFGenerationError(f"answers must be a mapping, got {type(answers).__name__}")

    filled = fill_template(template, answers, lookup)
    writer = PaginatedTextWriter(config, measure=measure)
    writer.write_title(filled.title, font_size=filled.title_font_size)
    for section in filled.sections:
        writer.write_section(section.title, section.body)
    _write_signature_block(writer, filled)
    return writer.finish()


def render_document(
    document_type: str,
    answers: Mapping[str, Any],
    config: Optional[LayoutConfig] = None,
    lookup: Optional[JurisdictionLookup] = None,
    measure: Optional[Measure] = None,
) -> Tuple[Page, ...]:
    """Return the laid-out pages for ``document_type`` without writing a file."""
    return _layout(resolve_template(document_type), answers, config, lookup, measure)


def generate_document(
    document_type: str,
    answers: Mapping[str, Any],
    config: Optional[LayoutConfig] = None,
    output_dir: Optional[Path] = None,
    lookup: Optional[JurisdictionLookup] = None,
    now: Optional[datetime] = None,
) -> str:
    """Generate the PDF for ``document_type`` and return its file path."""
    template = resolve_template(document_type)
    pages = _layout(template, answers, config, lookup, None)
    return export_pdf(pages, template.key, config, output_dir, now)

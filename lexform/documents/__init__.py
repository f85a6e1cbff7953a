"""Document generation modules."""

from lexform.documents.errors import DocumentError, PDFGenerationError, UnknownDocumentError
from lexform.documents.generator import generate_document, render_document
from lexform.documents.pdf_export import export_pdf
from lexform.documents.registry import resolve_template

__all__ = [
    "DocumentError",
    "PDFGenerationError",
    "UnknownDocumentError",
    "export_pdf",
    "generate_document",
    "render_document",
    "resolve_template",
]

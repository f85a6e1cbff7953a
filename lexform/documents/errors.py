"""Errors for document generation."""


class DocumentError(RuntimeError):
    """Base class for failures while producing a document."""


class UnknownDocumentError(DocumentError):
    """Raised when no template is registered under the requested key."""


class PDFGenerationError(DocumentError):
    """Raised when PDF generation fails due to answer or filesystem errors."""

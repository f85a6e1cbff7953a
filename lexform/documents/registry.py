"""Resolve a requested document type to a registered template."""

from __future__ import annotations

import logging

from lexform.documents.errors import UnknownDocumentError
from lexform.templates import TEMPLATES, DocumentTemplate

ALIASES = {
    "nda": "non_disclosure_agreement",
    "loan": "loan_agreement",
    "eviction": "eviction_notice",
}

_LOGGER = logging.getLogger(__name__)


def normalize_document_type(document_type: str) -> str:
    key = document_type.strip().lower().replace("-", "_").replace(" ", "_")
    return ALIASES.get(key, key)


def resolve_template(document_type: str) -> DocumentTemplate:
    """Resolve a template from its key or a known alias.

    Args:
        document_type: Template key such as ``"loan_agreement"`` or ``"NDA"``.

    Returns:
        The registered template.
    """
    key = normalize_document_type(document_type)
    template = TEMPLATES.get(key)
    if template is None:
        _LOGGER.warning(
            "Unknown document type requested.",
            extra={"document_type": document_type, "available": sorted(TEMPLATES)},
        )
        raise UnknownDocumentError(
            f"Unknown document type {document_type!r}. Available: {', '.join(sorted(TEMPLATES))}"
        )
    return template

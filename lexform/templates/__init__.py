"""Bundled document templates, keyed by document type."""

from typing import Dict, List

from lexform.templates import eviction_notice, loan_agreement, nda
from lexform.templates.base import DocumentTemplate, FilledDocument, SectionTemplate, fill_template

TEMPLATES: Dict[str, DocumentTemplate] = {
    module.TEMPLATE.key: module.TEMPLATE for module in (nda, loan_agreement, eviction_notice)
}


def available_templates() -> List[str]:
    return sorted(TEMPLATES)


__all__ = [
    "DocumentTemplate",
    "FilledDocument",
    "SectionTemplate",
    "TEMPLATES",
    "available_templates",
    "fill_template",
]

"""Document templates as data: ordered sections with ``{field}`` placeholders."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from lexform.layout.models import Section
from lexform.reference.jurisdictions import DEFAULT_LOOKUP, JurisdictionLookup
from lexform.templates.answers import PLACEHOLDER, is_blank, normalize_answers

Derive = Callable[[Dict[str, str]], Dict[str, str]]


class _PlaceholderFormatter(string.Formatter):
    """``str.format`` that substitutes ``PLACEHOLDER`` for missing or blank fields."""

    def get_value(self, key, args, kwargs):
        if isinstance(key, str):
            value = kwargs.get(key)
            return PLACEHOLDER if is_blank(value) else value
        return super().get_value(key, args, kwargs)


_FORMATTER = _PlaceholderFormatter()


@dataclass(frozen=True)
class SectionTemplate:
    title: str
    body: str


@dataclass(frozen=True)
class DocumentTemplate:
    """A legal document: title, ordered sections and a closing signature block.

    ``derive`` computes extra fields (conditional clauses) from the normalized
    answers before substitution.
    """

    key: str
    title: str
    sections: Tuple[SectionTemplate, ...]
    description: str = ""
    signature_heading: str = ""
    signature_lines: Tuple[str, ...] = ()
    date_fields: Tuple[str, ...] = ()
    money_fields: Tuple[str, ...] = ()
    title_font_size: Optional[float] = None
    derive: Optional[Derive] = None


@dataclass(frozen=True)
class FilledDocument:
    key: str
    title: str
    sections: Tuple[Section, ...]
    signature_heading: str = ""
    signature_lines: Tuple[str, ...] = ()
    title_font_size: Optional[float] = None


def substitute(text: str, values: Mapping[str, Any]) -> str:
    return _FORMATTER.vformat(text, (), dict(values))


def _resolve_jurisdiction(values: Dict[str, str], lookup: JurisdictionLookup) -> None:
    country = values.get("country", PLACEHOLDER)
    state = values.get("state", PLACEHOLDER)
    country_name = lookup.country_name(country) if country != PLACEHOLDER else None
    state_name = lookup.state_name(country, state) if state != PLACEHOLDER else None

    values["country_name"] = country_name or PLACEHOLDER
    values["state_name"] = state_name or PLACEHOLDER
    if is_blank(values.get("governing_law")) or values.get("governing_law") == PLACEHOLDER:
        parts = [name for name in (state_name, country_name) if name]
        values["governing_law"] = ", ".join(parts) if parts else PLACEHOLDER


def fill_template(
    template: DocumentTemplate,
    answers: Mapping[str, Any],
    lookup: Optional[JurisdictionLookup] = None,
) -> FilledDocument:
    """Substitute answers into ``template``; unanswered fields read ``PLACEHOLDER``."""
    values = normalize_answers(answers, template.date_fields, template.money_fields)
    _resolve_jurisdiction(values, lookup or DEFAULT_LOOKUP)
    if template.derive is not None:
        values.update(template.derive(values))

    sections: List[Section] = [
        Section(title=substitute(section.title, values), body=substitute(section.body, values))
        for section in template.sections
    ]
    return FilledDocument(
        key=template.key,
        title=substitute(template.title, values),
        sections=tuple(sections),
        signature_heading=substitute(template.signature_heading, values),
        signature_lines=tuple(substitute(line, values) for line in template.signature_lines),
        title_font_size=template.title_font_size,
    )

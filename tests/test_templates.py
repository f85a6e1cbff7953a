"""Unit tests for answer normalization and template filling."""

from datetime import date

import pytest

from lexform.reference import StaticJurisdictionLookup
from lexform.templates import TEMPLATES, available_templates, fill_template
from lexform.templates.answers import PLACEHOLDER, format_date, format_money, normalize_answers
from lexform.templates.base import substitute
from lexform.templates.loan_agreement import TEMPLATE as LOAN
from lexform.templates.nda import TEMPLATE as NDA


def test_normalize_answers_formats_and_fills_blanks() -> None:
    """Dates and money are formatted; blank answers become the placeholder."""
    answers = {
        "agreement_date": "2024-06-01",
        "loan_amount": "$1,500",
        "lender_name": "  Jane Roe ",
        "borrower_name": "",
        "loan_purpose": None,
    }
    values = normalize_answers(answers, date_fields=["agreement_date"], money_fields=["loan_amount"])
    assert values == {
        "agreement_date": "June 01, 2024",
        "loan_amount": "$1,500.00",
        "lender_name": "Jane Roe",
        "borrower_name": PLACEHOLDER,
        "loan_purpose": PLACEHOLDER,
    }


@pytest.mark.parametrize(
    "value, expected",
    [(1500, "$1,500.00"), ("2500.5", "$2,500.50"), ("five hundred", "five hundred"), (None, PLACEHOLDER)],
)
def test_format_money(value, expected) -> None:
    """Parsable amounts are normalized; free text is kept."""
    assert format_money(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(date(2024, 12, 25), "December 25, 2024"), ("2023-01-09", "January 09, 2023"), ("end of June", "end of June")],
)
def test_format_date(value, expected) -> None:
    """ISO strings and date objects render as long dates."""
    assert format_date(value) == expected


def test_substitute_uses_placeholder_for_missing_fields() -> None:
    """Unknown and blank fields render as the underscore placeholder."""
    assert substitute("Between {lender_name} and {borrower_name}.", {"lender_name": "A", "borrower_name": " "}) == (
        f"Between A and {PLACEHOLDER}."
    )


def test_available_templates_lists_bundled_documents() -> None:
    """All bundled templates are registered by key."""
    assert available_templates() == ["eviction_notice", "loan_agreement", "non_disclosure_agreement"]


@pytest.mark.parametrize("key", sorted(TEMPLATES))
def test_every_template_fills_with_no_answers(key) -> None:
    """Empty answers produce placeholder text and no leftover braces."""
    filled = fill_template(TEMPLATES[key], {})
    text = " ".join([filled.title] + [s.title + s.body for s in filled.sections] + list(filled.signature_lines))
    assert "{" not in text and "}" not in text
    assert PLACEHOLDER in text


def test_nda_governing_law_from_jurisdiction_answers() -> None:
    """Country and state answers resolve to display names for governing law."""
    filled = fill_template(
        NDA,
        {
            "country": "233:United States",
            "state": "CA",
            "effective_date": "2024-03-15",
            "disclosing_party_name": "Acme Corp",
        },
    )
    bodies = {section.title: section.body for section in filled.sections}
    assert bodies["11. Governing Law"] == "This Agreement shall be governed by the laws of California, United States."
    assert "March 15, 2024" in filled.sections[0].body
    assert "Acme Corp" in filled.sections[0].body
    assert f"and {PLACEHOLDER}, located at" in filled.sections[0].body


def test_explicit_governing_law_is_kept() -> None:
    """A typed governing law answer wins over the jurisdiction fields."""
    filled = fill_template(NDA, {"governing_law": "England and Wales", "country": "232:United Kingdom"})
    bodies = {section.title: section.body for section in filled.sections}
    assert bodies["11. Governing Law"].endswith("laws of England and Wales.")


def test_injected_lookup_is_used() -> None:
    """The jurisdiction lookup is a collaborator supplied by the caller."""
    lookup = StaticJurisdictionLookup({"1": "Freedonia"}, {"1": {"CAP": "Capital District"}})
    filled = fill_template(NDA, {"country": "1", "state": "CAP"}, lookup=lookup)
    bodies = {section.title: section.body for section in filled.sections}
    assert "Capital District, Freedonia" in bodies["11. Governing Law"]


def test_loan_repayment_one_time_payment() -> None:
    """A one-time payment selects the lump-sum clause."""
    filled = fill_template(LOAN, {"installment_frequency": "One-time payment"})
    bodies = {section.title: section.body for section in filled.sections}
    assert bodies["Repayment Terms."].endswith("in one lump sum on the due date specified above.")


def test_loan_repayment_installments() -> None:
    """Installment answers are formatted into the schedule clause."""
    filled = fill_template(
        LOAN,
        {
            "installment_frequency": "Monthly",
            "installment_amount": "250",
            "installment_start_date": "2024-07-01",
            "loan_amount": 5000,
        },
    )
    bodies = {section.title: section.body for section in filled.sections}
    assert bodies["Repayment Terms."].endswith("Monthly installments of $250.00 each, beginning on July 01, 2024.")
    assert "the sum of $5,000.00" in bodies["Loan Details."]

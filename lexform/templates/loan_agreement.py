"""Loan agreement between a lender and a borrower."""

from typing import Dict

from lexform.templates.answers import PLACEHOLDER
from lexform.templates.base import DocumentTemplate, SectionTemplate

ONE_TIME_PAYMENT = "One-time payment"


def _repayment_schedule(values: Dict[str, str]) -> Dict[str, str]:
    if values.get("installment_frequency") == ONE_TIME_PAYMENT:
        schedule = "The entire loan amount shall be repaid in one lump sum on the due date specified above."
    else:
        frequency = values.get("installment_frequency", PLACEHOLDER)
        amount = values.get("installment_amount", PLACEHOLDER)
        start = values.get("installment_start_date", PLACEHOLDER)
        schedule = f"{frequency} installments of {amount} each, beginning on {start}."
    return {"repayment_schedule": schedule}


TEMPLATE = DocumentTemplate(
    key="loan_agreement",
    title="Loan Agreement",
    description="Fixed-sum loan with a repayment schedule and witnesses.",
    date_fields=("agreement_date", "loan_due_date", "installment_start_date"),
    money_fields=("loan_amount", "installment_amount"),
    derive=_repayment_schedule,
    sections=(
        SectionTemplate(
            title="",
            body=(
                "This Loan Agreement (\"Agreement\") is entered into on {agreement_date}, by and between "
                "{lender_name} (\"Lender\") and {borrower_name} (\"Borrower\")."
            ),
        ),
        SectionTemplate(
            title="Lender Information.",
            body=(
                "The Lender hereby agrees to lend money to the Borrower under the terms specified in this "
                "Agreement. Lender's details: Name: {lender_name}, Address: {lender_address}."
            ),
        ),
        SectionTemplate(
            title="Borrower Information.",
            body=(
                "The Borrower hereby agrees to borrow money from the Lender and repay it according to the terms "
                "specified in this Agreement. Borrower's details: Name: {borrower_name}, Address: "
                "{borrower_address}."
            ),
        ),
        SectionTemplate(
            title="Loan Details.",
            body=(
                "The Lender agrees to loan the Borrower the sum of {loan_amount} (the \"Loan Amount\"). The "
                "purpose of this loan is: {loan_purpose}. The full amount of the loan shall be due and payable "
                "on {loan_due_date}."
            ),
        ),
        SectionTemplate(
            title="Repayment Terms.",
            body="The Borrower agrees to repay the loan according to the following schedule: {repayment_schedule}",
        ),
        SectionTemplate(
            title="Interest and Late Fees.",
            body=(
                "This loan shall bear no interest unless specifically agreed upon in writing by both parties. "
                "In the event of late payment, additional fees may apply as mutually agreed by the parties."
            ),
        ),
        SectionTemplate(
            title="Default.",
            body=(
                "If the Borrower fails to make any payment when due under this Agreement, the Borrower shall be "
                "in default. Upon default, the entire unpaid balance of the loan shall become immediately due "
                "and payable."
            ),
        ),
        SectionTemplate(
            title="Governing Law.",
            body=(
                "This Agreement shall be governed by and construed in accordance with the laws of "
                "{governing_law}."
            ),
        ),
        SectionTemplate(
            title="Witnesses.",
            body=(
                "The following witnesses attest to the execution of this Agreement: {witness1_name} and "
                "{witness2_name}."
            ),
        ),
    ),
    signature_heading="Signatures.",
    signature_lines=(
        "The Borrower:",
        "____________________________",
        "{borrower_name} (Printed Name)",
        "Date: _________________",
        "",
        "The Lender:",
        "____________________________",
        "{lender_name} (Printed Name)",
        "Date: _________________",
        "",
        "Witness 1:",
        "____________________________",
        "{witness1_name} (Printed Name)",
        "",
        "Witness 2:",
        "____________________________",
        "{witness2_name} (Printed Name)",
    ),
)

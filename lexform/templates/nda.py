"""Non-disclosure agreement."""

from lexform.templates.base import DocumentTemplate, SectionTemplate

TEMPLATE = DocumentTemplate(
    key="non_disclosure_agreement",
    title="NON-DISCLOSURE AGREEMENT",
    description="Mutual confidentiality terms between a disclosing party and a recipient.",
    date_fields=("effective_date", "termination_date"),
    sections=(
        SectionTemplate(
            title="",
            body=(
                "This Non-Disclosure Agreement (the \"Agreement\") is entered into as of {effective_date} "
                "(the \"Effective Date\") by and between {disclosing_party_name}, located at "
                "{disclosing_party_address} (the \"Disclosing Party\"), and {recipient_name}, located at "
                "{recipient_address} (the \"Recipient\")."
            ),
        ),
        SectionTemplate(
            title="",
            body=(
                "The Recipient wishes to receive certain information from the Disclosing Party for the purpose "
                "of evaluating a possible business relationship. In consideration of that disclosure the parties "
                "agree as follows."
            ),
        ),
        SectionTemplate(
            title="1. Confidential Information",
            body=(
                "\"Confidential Information\" means all written and oral information, in any form, disclosed by "
                "the Disclosing Party to the Recipient, including business plans, customer lists, financial "
                "information, technical data, trade secrets and know-how, whether or not marked as confidential."
            ),
        ),
        SectionTemplate(
            title="2. Term",
            body=(
                "This Agreement shall remain in effect until {termination_date}, unless terminated earlier in "
                "accordance with Section 3. The Recipient's duty to protect Confidential Information survives "
                "termination."
            ),
        ),
        SectionTemplate(
            title="3. Termination",
            body=(
                "Either party may terminate this Agreement by giving {early_termination_days} days' written "
                "notice to the other party."
            ),
        ),
        SectionTemplate(
            title="4. Protection of Confidential Information",
            body=(
                "The Recipient shall hold the Confidential Information in strict confidence and shall not "
                "disclose it to any third party without the prior written consent of the Disclosing Party. "
                "The Recipient shall not copy, reproduce or modify any Confidential Information, shall promptly "
                "notify the Disclosing Party of any unauthorized use or disclosure, and may disclose Confidential "
                "Information to its employees only on a strict need-to-know basis."
            ),
        ),
        SectionTemplate(
            title="5. Exceptions",
            body=(
                "Confidential Information does not include information that: (i) is or becomes publicly known "
                "through no fault of the Recipient; (ii) is received lawfully from a third party without a duty "
                "of confidentiality; (iii) is independently developed by the Recipient; (iv) is disclosed under "
                "a legal or regulatory obligation; or (v) is agreed in writing not to be confidential."
            ),
        ),
        SectionTemplate(
            title="6. Unauthorized Disclosure - Injunctive Relief",
            body=(
                "The Recipient acknowledges that unauthorized disclosure may cause irreparable harm for which "
                "monetary damages are inadequate. The Disclosing Party may seek injunctive or equitable relief in "
                "addition to any other remedy available at law."
            ),
        ),
        SectionTemplate(
            title="7. Non-Circumvention",
            body=(
                "For a period of {non_circumvention_duration} from the Effective Date, the Recipient shall not "
                "circumvent the Disclosing Party by engaging in any transaction with contacts or opportunities "
                "introduced by the Disclosing Party without its prior written consent."
            ),
        ),
        SectionTemplate(
            title="8. Return or Destruction of Confidential Information",
            body=(
                "Upon termination or written request, the Recipient shall return or permanently destroy all "
                "Confidential Information, including copies, summaries and notes, and certify in writing that "
                "it has done so."
            ),
        ),
        SectionTemplate(
            title="9. No Obligation; No Warranty",
            body=(
                "Nothing in this Agreement obligates either party to enter into any transaction. All Confidential "
                "Information is provided \"as is\" without any warranty, express or implied."
            ),
        ),
        SectionTemplate(
            title="10. Entire Agreement; Amendment",
            body=(
                "This Agreement is the entire understanding between the parties on its subject matter and may be "
                "amended only in a writing signed by both parties."
            ),
        ),
        SectionTemplate(
            title="11. Governing Law",
            body="This Agreement shall be governed by the laws of {governing_law}.",
        ),
        SectionTemplate(
            title="12. Signatories",
            body=(
                "This Agreement shall be executed by {disclosing_signatory_name}, on behalf of "
                "{disclosing_party_name}, and {recipient_signatory_name}, and delivered in the manner prescribed "
                "by law as of the Effective Date."
            ),
        ),
    ),
    signature_heading="SIGNATURES",
    signature_lines=(
        "Disclosing Party:",
        "Name: {disclosing_signatory_name}",
        "Signature: _______________________",
        "Title: {disclosing_signatory_title}",
        "Date: ___________________________",
        "",
        "Recipient:",
        "Name: {recipient_signatory_name}",
        "Signature: _______________________",
        "Title: {recipient_signatory_title}",
        "Date: ___________________________",
    ),
)

"""Notice to a tenant to cure lease violations."""

from lexform.templates.base import DocumentTemplate, SectionTemplate

TEMPLATE = DocumentTemplate(
    key="eviction_notice",
    title="EVICTION NOTICE",
    title_font_size=18,
    description="Notice of lease violations with a thirty-day cure period.",
    date_fields=("date_of_notice", "lease_date"),
    sections=(
        SectionTemplate(
            title="",
            body=(
                "DATE OF NOTICE: {date_of_notice}\n"
                "TENANT'S NAME: {tenant_name}\n"
                "ADDRESS OF PREMISES: {address_of_premises}"
            ),
        ),
        SectionTemplate(
            title="TAKE NOTICE THAT",
            body=(
                "This Notice is being provided to you pursuant to the terms of your written lease agreement "
                "(the \"Lease\"), entered into on or about {lease_date}, between you and the undersigned, "
                "concerning the leased premises located at: {address_of_premises} (hereinafter referred to as "
                "the \"Premises\")."
            ),
        ),
        SectionTemplate(
            title="1. Lease Violation",
            body=(
                "Please be advised that you are currently in breach of one or more covenants, conditions, or "
                "provisions of your Lease. The specific violations are as follows: {violations}"
            ),
        ),
        SectionTemplate(
            title="2. Required Corrective Action",
            body=(
                "You are hereby required to take the following corrective action(s) in order to cure the "
                "above-described violations: {corrective_actions}"
            ),
        ),
        SectionTemplate(
            title="3. Timeframe for Compliance",
            body=(
                "Pursuant to applicable law and the terms of your Lease, you are required to correct the "
                "above-mentioned violations within thirty (30) days of receipt or delivery of this Notice (the "
                "\"Deadline\"). Failure to comply within this timeframe will be deemed a continuing violation of "
                "the Lease and may result in further legal action."
            ),
        ),
        SectionTemplate(
            title="4. Landlord's Right to Remedy",
            body=(
                "If you do not correct the violations within the stated time period, the Landlord or its "
                "authorized agents may, but are not obligated to, take necessary steps to rectify the matter at "
                "your expense, including entering the Premises to cure the default if permitted by law."
            ),
        ),
        SectionTemplate(
            title="5. Potential Consequences",
            body=(
                "This Notice shall also serve as a formal warning that repeated or continued violations of your "
                "Lease may constitute grounds for termination of your tenancy and possible eviction proceedings "
                "in accordance with the governing laws of {governing_law}."
            ),
        ),
    ),
    signature_lines=(
        "TENANT'S NAME: {tenant_name}",
        "SIGNATURE: _________________________________",
        "",
        "LANDLORD NAME: {landlord_name}",
        "SIGNATURE: _________________________________",
    ),
)

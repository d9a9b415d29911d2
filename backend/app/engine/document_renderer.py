from __future__ import annotations

import logging
from datetime import date

from ..schemas import CaseAssessment, DocumentType

logger = logging.getLogger(__name__)

TEMPLATE_NOT_FOUND = "Document template not found"


def generate_document(
    doc_type: str,
    assessment: CaseAssessment,
    today: date | None = None,
) -> str:
    """Render ``assessment`` into the template named by ``doc_type``.

    Unknown document types yield ``TEMPLATE_NOT_FOUND`` instead of raising.
    ``today`` defaults to the system date and only affects the demand letter.
    """
    try:
        document_type = DocumentType(doc_type)
    except ValueError:
        logger.info("No template for document type %r", doc_type)
        return TEMPLATE_NOT_FOUND

    if document_type is DocumentType.DEMAND_LETTER:
        return _demand_letter(assessment, today or date.today())
    elif document_type is DocumentType.LEGAL_COMPLAINT:
        return _legal_complaint(assessment)
    else:
        return _post_conviction_petition(assessment)


# ------------------------------------------------------------------
# Formatting helpers
# ------------------------------------------------------------------


def _us_date(value: date) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def _dollars(amount: int) -> str:
    return f"${amount:,}"


# ------------------------------------------------------------------
# Templates
# ------------------------------------------------------------------


def _demand_letter(assessment: CaseAssessment, today: date) -> str:
    claim_lines = "\n".join(f"• {claim}" for claim in assessment.claims)

    return (
        "DEMAND LETTER\n\n"
        f"Date: {_us_date(today)}\n\n"
        "To Whom It May Concern:\n\n"
        f"RE: Legal Claim - {assessment.category.value}\n\n"
        "This letter serves as formal notice of our intent to pursue legal "
        f"action regarding: {assessment.issue}\n\n"
        "Based on our analysis, we have identified the following claims:\n"
        f"{claim_lines}\n\n"
        f"Total damages claimed: {_dollars(assessment.damages.total)}\n\n"
        "We demand settlement of this matter within 30 days to avoid formal "
        "litigation.\n\n"
        "Sincerely,\n"
        "APGC Legal AI\n"
        "American Power Global Corporation"
    )


def _legal_complaint(assessment: CaseAssessment) -> str:
    claim_lines = "\n".join(
        f"{number}. {claim}"
        for number, claim in enumerate(assessment.claims, start=1)
    )

    return (
        "IN THE UNITED STATES DISTRICT COURT\n"
        "COMPLAINT\n\n"
        "Plaintiff: [Your Name]\n"
        "vs.\n"
        "Defendant: [Opposing Party]\n\n"
        f"1. This action arises from: {assessment.issue}\n\n"
        "2. Jurisdiction: This Court has jurisdiction under 28 U.S.C. § 1331\n\n"
        "3. Claims:\n"
        f"{claim_lines}\n\n"
        f"4. Damages: {_dollars(assessment.damages.total)}\n\n"
        "WHEREFORE, Plaintiff requests judgment against Defendant.\n\n"
        "Respectfully submitted,\n"
        "[Your Name]\n"
        "Pro Se"
    )


def _post_conviction_petition(assessment: CaseAssessment) -> str:
    return (
        "IN THE [STATE] SUPERIOR COURT\n"
        "POST-CONVICTION RELIEF PETITION\n\n"
        "Petitioner: [Your Name]\n"
        "Case No: [Your Case Number]\n\n"
        "1. The Petitioner seeks post-conviction relief based on: "
        f"{assessment.issue}\n\n"
        "2. Grounds for Relief:\n"
        "   • Ineffective assistance of counsel\n"
        "   • Newly discovered evidence\n"
        "   • Constitutional violations\n\n"
        "3. Requested Relief:\n"
        "   • Vacate conviction\n"
        "   • Reduce sentence\n"
        "   • New trial\n\n"
        "Respectfully submitted,\n"
        "[Your Name]\n"
        "Pro Se"
    )

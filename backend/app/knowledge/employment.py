from ..schemas import CaseCategory, EmploymentDamages
from .base import CategoryKnowledge, ClaimTrigger

EMPLOYMENT = CategoryKnowledge(
    category=CaseCategory.EMPLOYMENT,
    keywords=["employer", "fired", "terminated", "work"],
    damages_model=EmploymentDamages,
    success_probability=75,
    documents=["EEOC Charge", "Wrongful Termination Complaint", "Demand Letter"],
    actions=[
        "File EEOC charge within 180 days",
        "Send demand letter to employer",
        "Document all communications",
        "Preserve evidence and emails",
    ],
    triggers=[
        ClaimTrigger(
            claims=["Wrongful Termination"],
            any_of=["fired", "terminated"],
            damages={"back_pay": 15000, "front_pay": 25000},
        ),
        # "retaliated" counts too
        ClaimTrigger(
            claims=["Retaliation"],
            any_of=["retaliat"],
            damages={"punitive": 50000},
        ),
        ClaimTrigger(
            claims=["Employment Discrimination"],
            any_of=["discrimination"],
            damages={"emotional": 25000},
        ),
    ],
)

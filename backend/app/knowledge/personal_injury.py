from ..schemas import CaseCategory, PersonalInjuryDamages
from .base import CategoryKnowledge

PERSONAL_INJURY = CategoryKnowledge(
    category=CaseCategory.PERSONAL_INJURY,
    keywords=["injured", "accident", "medical", "hurt"],
    damages_model=PersonalInjuryDamages,
    success_probability=80,
    documents=["Personal Injury Complaint", "Demand Letter", "Settlement Agreement"],
    actions=[
        "Send demand letter to insurance company",
        "File personal injury lawsuit",
        "Gather medical records and bills",
        "Document injury and recovery process",
    ],
    base_claims=["Negligence", "Personal Injury"],
    base_damages={"medical": 15000, "lost_wages": 12000, "pain": 25000},
)

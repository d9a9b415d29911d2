from ..schemas import CaseCategory, GeneralDamages
from .base import CategoryKnowledge

# Fallback when no other category's keywords appear.
GENERAL = CategoryKnowledge(
    category=CaseCategory.GENERAL,
    keywords=[],
    damages_model=GeneralDamages,
    success_probability=50,
    documents=["Legal Consultation Form"],
    actions=[
        "Consult with specialized attorney",
        "Research specific laws in your state",
        "Gather all relevant documentation",
    ],
    base_claims=["Legal Consultation Recommended"],
    base_damages={"estimated": 25000},
)

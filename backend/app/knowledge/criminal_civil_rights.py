from ..schemas import CaseCategory, CriminalCivilRightsDamages
from .base import CategoryKnowledge, ClaimTrigger

CRIMINAL_CIVIL_RIGHTS = CategoryKnowledge(
    category=CaseCategory.CRIMINAL_CIVIL_RIGHTS,
    keywords=["post conviction", "police", "beat", "excessive force"],
    damages_model=CriminalCivilRightsDamages,
    success_probability=65,
    documents=[
        "Post-Conviction Relief Petition",
        "Civil Rights Complaint",
        "Police Brutality Lawsuit",
    ],
    actions=[
        "File post-conviction relief petition with sentencing court",
        "Submit civil rights complaint for police brutality",
        "Gather medical records and witness statements",
        "Contact civil rights organizations",
    ],
    triggers=[
        ClaimTrigger(
            claims=[
                "Post-Conviction Relief Petition",
                "Habeas Corpus Petition",
                "Sentence Modification",
            ],
            any_of=["post conviction", "release"],
        ),
        # Police brutality is the only trigger carrying damages; without it
        # the category reports all-zero damages.
        ClaimTrigger(
            claims=[
                "Police Brutality - 42 USC § 1983",
                "Excessive Force",
                "Civil Rights Violation",
            ],
            any_of=["beat", "excessive force"],
            all_of=["police"],
            damages={"medical": 25000, "pain": 50000, "punitive": 100000},
        ),
    ],
)

from .criminal_civil_rights import CRIMINAL_CIVIL_RIGHTS
from .employment import EMPLOYMENT
from .general import GENERAL
from .personal_injury import PERSONAL_INJURY

# Evaluation order matters: first match wins.
CATEGORY_KNOWLEDGE = [
    CRIMINAL_CIVIL_RIGHTS,
    EMPLOYMENT,
    PERSONAL_INJURY,
]

DEFAULT_KNOWLEDGE = GENERAL

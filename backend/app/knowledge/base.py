from dataclasses import dataclass, field

from ..schemas import CaseCategory, Damages


@dataclass
class ClaimTrigger:
    claims: list[str]
    any_of: list[str]  # fires when the text contains any of these
    all_of: list[str] = field(default_factory=list)  # ...and all of these
    damages: dict[str, int] = field(default_factory=dict)

    def matches(self, text: str) -> bool:
        # Case-sensitive: only category selection ignores case.
        return any(k in text for k in self.any_of) and all(
            k in text for k in self.all_of
        )


@dataclass
class CategoryKnowledge:
    category: CaseCategory
    keywords: list[str]  # for initial classification from caller's description
    damages_model: type[Damages]
    success_probability: int
    documents: list[str]
    actions: list[str]
    triggers: list[ClaimTrigger] = field(default_factory=list)
    base_claims: list[str] = field(default_factory=list)
    base_damages: dict[str, int] = field(default_factory=dict)

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return any(k in lowered for k in self.keywords)

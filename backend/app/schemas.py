from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel


class CaseCategory(str, Enum):
    CRIMINAL_CIVIL_RIGHTS = "Criminal/Civil Rights"
    EMPLOYMENT = "Employment Law"
    PERSONAL_INJURY = "Personal Injury"
    GENERAL = "General Legal Matter"


class DocumentType(str, Enum):
    DEMAND_LETTER = "Demand Letter"
    LEGAL_COMPLAINT = "Legal Complaint"
    POST_CONVICTION_PETITION = "Post-Conviction Petition"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----------------------------------------------------------------------
# Damages
# ----------------------------------------------------------------------


class Damages(CamelModel):
    """Damage components in dollars; ``total`` is always their sum."""

    @classmethod
    def component_names(cls) -> list[str]:
        return list(cls.model_fields)

    @model_validator(mode="before")
    @classmethod
    def _check_total(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "total" not in data:
            return data
        amounts = []
        for name, field in cls.model_fields.items():
            key = field.alias if field.alias in data else name
            if key not in data:
                return data
            amounts.append(data[key])
        if all(isinstance(a, int) for a in amounts) and data["total"] != sum(amounts):
            raise ValueError(
                f"total {data['total']} does not match the sum of its "
                f"components ({sum(amounts)})"
            )
        return data

    @computed_field
    @property
    def total(self) -> int:
        return sum(getattr(self, name) for name in self.component_names())


class CriminalCivilRightsDamages(Damages):
    medical: int = Field(ge=0)
    pain: int = Field(ge=0)
    punitive: int = Field(ge=0)


class EmploymentDamages(Damages):
    back_pay: int = Field(ge=0)
    front_pay: int = Field(ge=0)
    emotional: int = Field(ge=0)
    punitive: int = Field(ge=0)


class PersonalInjuryDamages(Damages):
    medical: int = Field(ge=0)
    lost_wages: int = Field(ge=0)
    pain: int = Field(ge=0)


class GeneralDamages(Damages):
    estimated: int = Field(ge=0)


AnyDamages = Union[
    CriminalCivilRightsDamages,
    EmploymentDamages,
    PersonalInjuryDamages,
    GeneralDamages,
]


# ----------------------------------------------------------------------
# Assessment
# ----------------------------------------------------------------------


class CaseAssessment(CamelModel):
    issue: str
    category: CaseCategory = Field(alias="type")
    claims: list[str]
    damages: AnyDamages
    success_probability: int = Field(ge=0, le=100)
    documents: list[str]
    actions: list[str]


# ----------------------------------------------------------------------
# API payloads
# ----------------------------------------------------------------------


class AnalyzeCaseRequest(CamelModel):
    user_input: Optional[str] = None


class GenerateDocumentRequest(CamelModel):
    doc_type: Optional[str] = None
    # Parsed into a CaseAssessment inside the route so that malformed case
    # data surfaces as a generation failure rather than a 400.
    case_data: Optional[dict[str, Any]] = None


class GenerateDocumentResponse(CamelModel):
    document: str
    doc_type: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

from typing import Optional

USER_INPUT_REQUIRED = "User input is required"
DOCUMENT_FIELDS_REQUIRED = "Document type and case data are required"
ANALYSIS_FAILED = "Analysis failed"
DOCUMENT_GENERATION_FAILED = "Document generation failed"


class IntakeError(Exception):
    """Error rendered to API callers as ``{"error": ..., "details": ...}``."""

    status_code = 500

    def __init__(self, error: str, details: Optional[str] = None) -> None:
        super().__init__(error)
        self.error = error
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(IntakeError):
    """A required request field is missing or malformed."""

    status_code = 400


class InternalError(IntakeError):
    """The engine raised while serving an otherwise valid request."""

    status_code = 500

    @classmethod
    def wrap(cls, error: str, exc: Exception) -> "InternalError":
        return cls(error, details=str(exc))

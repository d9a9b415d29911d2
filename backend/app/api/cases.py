import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from ..engine.classifier import analyze_case
from ..engine.document_renderer import generate_document
from ..errors import (
    ANALYSIS_FAILED,
    DOCUMENT_FIELDS_REQUIRED,
    DOCUMENT_GENERATION_FAILED,
    USER_INPUT_REQUIRED,
    InternalError,
    ValidationError,
)
from ..schemas import (
    AnalyzeCaseRequest,
    CaseAssessment,
    ErrorResponse,
    GenerateDocumentRequest,
    GenerateDocumentResponse,
    HealthResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["cases"])

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

# Message returned when a route's body fails schema validation.
VALIDATION_MESSAGES = {
    f"{router.prefix}/analyze-case": USER_INPUT_REQUIRED,
    f"{router.prefix}/generate-document": DOCUMENT_FIELDS_REQUIRED,
}


@router.post(
    "/analyze-case", response_model=CaseAssessment, responses=ERROR_RESPONSES
)
def analyze(req: AnalyzeCaseRequest):
    if not req.user_input:
        raise ValidationError(USER_INPUT_REQUIRED)

    try:
        return analyze_case(req.user_input)
    except Exception as exc:
        logger.exception("Case analysis failed")
        raise InternalError.wrap(ANALYSIS_FAILED, exc) from exc


@router.post(
    "/generate-document",
    response_model=GenerateDocumentResponse,
    responses=ERROR_RESPONSES,
)
def generate(req: GenerateDocumentRequest):
    if not req.doc_type or req.case_data is None:
        raise ValidationError(DOCUMENT_FIELDS_REQUIRED)

    try:
        assessment = CaseAssessment.model_validate(req.case_data)
        document = generate_document(req.doc_type, assessment)
    except Exception as exc:
        logger.exception("Document generation failed for %r", req.doc_type)
        raise InternalError.wrap(DOCUMENT_GENERATION_FAILED, exc) from exc

    return GenerateDocumentResponse(document=document, doc_type=req.doc_type)


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="Legal AI Backend is running",
        timestamp=datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z"),
    )

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.cases import VALIDATION_MESSAGES
from .api.cases import router as cases_router
from .config import settings
from .errors import IntakeError, ValidationError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s running on port %s", settings.app_name, settings.port)
    logger.info("API endpoints:")
    for route in cases_router.routes:
        for method in sorted(route.methods):
            logger.info("   %-4s %s", method, route.path)
    yield


app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(IntakeError)
async def intake_error_handler(request: Request, exc: IntakeError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s body: %s", request.url.path, exc.errors())
    error = ValidationError(
        VALIDATION_MESSAGES.get(request.url.path, "Invalid request body")
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


app.include_router(cases_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)

"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashdeck.config import configure_logging, get_settings
from flashdeck.database import dispose_engine, initialize_database
from flashdeck.domain.common.exceptions import (
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
)
from flashdeck.domain.common.exceptions import ValidationError as DomainValidationError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.schemas import ErrorResponse
from flashdeck.infrastructure.learning.routers import cards, flashcard_sets

logger = structlog.get_logger(__name__)

settings = get_settings()

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

# Error kind reported for HTTP errors raised by the framework or auth layer
_HTTP_ERROR_KINDS = {
    status.HTTP_400_BAD_REQUEST: "InvalidInput",
    status.HTTP_401_UNAUTHORIZED: "Unauthenticated",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "NotFound",
    status.HTTP_405_METHOD_NOT_ALLOWED: "InvalidInput",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_422_UNPROCESSABLE_CONTENT: "InvalidInput",
    status.HTTP_503_SERVICE_UNAVAILABLE: "StoreUnavailable",
    status.HTTP_504_GATEWAY_TIMEOUT: "Timeout",
}


def _error_response(
    status_code: int,
    kind: str,
    message: str,
    headers: dict[str, str] | None = None,
    **extra: object,
) -> JSONResponse:
    body = ErrorResponse(kind=kind, message=message).model_dump()
    return JSONResponse(status_code=status_code, content={**body, **extra}, headers=headers)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FlashdeckError)
async def flashdeck_error_handler(request: Request, exc: FlashdeckError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.warning(
            "request_failed", path=request.url.path, kind=exc.kind, message=exc.message
        )
    return _error_response(exc.status_code, exc.kind, exc.message)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if isinstance(exc, DomainValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, "InvalidInput", exc.message)
    if isinstance(exc, EntityNotFoundError):
        return _error_response(status.HTTP_404_NOT_FOUND, "NotFound", exc.message)
    if isinstance(exc, InvariantViolationError):
        logger.error("invariant_violation", path=request.url.path, error=str(exc))
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal", INTERNAL_ERROR_MESSAGE
        )
    return _error_response(status.HTTP_400_BAD_REQUEST, "InvalidInput", exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    kind = _HTTP_ERROR_KINDS.get(exc.status_code, "Internal")
    return _error_response(
        exc.status_code, kind, str(exc.detail), headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_CONTENT,
        "InvalidInput",
        "Request validation failed",
        details=details,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", path=request.url.path, exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal", INTERNAL_ERROR_MESSAGE
    )


app.include_router(flashcard_sets.router, prefix=settings.API_V1_PREFIX)
app.include_router(cards.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Welcome to Flashdeck API"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    """API v1 root endpoint."""
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }

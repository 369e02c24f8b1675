"""
Entry point for the admin catalog HTTP API.

Intended usage:
    uvicorn admin_catalog.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette import status

from admin_catalog.config import Settings, configure_logging, get_settings
from admin_catalog.database import dispose_engine, initialize_database
from admin_catalog.domain.common.exceptions import DomainError, NotFoundError
from admin_catalog.infrastructure.category.routers import categories
from admin_catalog.infrastructure.common.schemas import ErrorResponse, HealthResponse
from admin_catalog.infrastructure.genre.routers import genres

logger = structlog.get_logger(__name__)


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Translate domain errors into HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse.from_error(exc).model_dump(),
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        logger.info(
            "domain_validation_failed",
            path=request.url.path,
            errors=[error.message for error in exc.errors],
        )
        return JSONResponse(
            status_code=422,
            content=ErrorResponse.from_error(exc).model_dump(),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        message = (
            "An unexpected error occurred. Please try again later."
            if settings.ENVIRONMENT == "production"
            else str(exc)
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(message=message).model_dump(),
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.ENVIRONMENT)
        initialize_database(settings)
        logger.info(
            "application_started",
            version=settings.VERSION,
            environment=settings.ENVIRONMENT,
            api_prefix=settings.API_V1_PREFIX,
        )
        yield
        dispose_engine()
        logger.info("application_stopped")

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="healthy")

    app.include_router(categories.router, prefix=settings.API_V1_PREFIX)
    app.include_router(genres.router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()

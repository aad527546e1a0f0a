from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
import traceback
from typing import Optional

from ordabok.core.config import Settings, get_settings
from ordabok.core.context import SessionChecker
from ordabok.core.database import Database
from ordabok.core.exceptions import (
    OrdabokException,
    DatabaseConnectionError,
    DatabaseError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    AuthorizationError
)
from ordabok.core.identity import AppwriteClient
from ordabok.core.logging_config import setup_logging

# Import API router
from ordabok.api.v1 import api_router

logger = logging.getLogger(__name__)


def status_for(exc: OrdabokException) -> int:
    """HTTP status for an application exception."""
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, AuthorizationError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, DatabaseConnectionError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    identity: Optional[SessionChecker] = None,
) -> FastAPI:
    """
    Build the application.

    The pool and the identity client are created once here and shared by
    every request through ``app.state``.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Ordabok API", version="1.0.0")
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)
    app.state.identity = identity or AppwriteClient.from_settings(settings)

    # Add exception handler for validation errors to log details
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Log validation errors with full details for debugging."""
        logger.error(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    # Add exception handler for custom application exceptions
    @app.exception_handler(OrdabokException)
    async def ordabok_exception_handler(request: Request, exc: OrdabokException):
        """Handle custom application exceptions."""
        status_code = status_for(exc)
        if isinstance(exc, DatabaseError):
            # Full diagnostic stays in the logs, callers only see the short code
            logger.error(f"Database error on {request.method} {request.url.path}: {exc.detail}")
            detail = exc.code
        else:
            logger.warning(
                f"Application exception on {request.method} {request.url.path}: "
                f"{type(exc).__name__}: {str(exc)}"
            )
            detail = str(exc)
        return JSONResponse(
            status_code=status_code,
            content={"detail": detail, "type": type(exc).__name__},
        )

    # Add global exception handler for unhandled errors
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

        if settings.is_development:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": str(exc),
                    "type": type(exc).__name__,
                    "traceback": traceback.format_exc()
                },
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An internal server error occurred. Please try again later.",
                "type": "InternalServerError"
            },
        )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Initialize database on startup."""
        app.state.database.init_db()

    @app.on_event("shutdown")
    async def shutdown_event():
        app.state.database.dispose()

    @app.get("/")
    async def root():
        return {
            "message": "Ordabok API",
            "status": "running",
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc"
            }
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()

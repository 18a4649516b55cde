"""
FastAPI Application Setup

Main entry point for the Submission Relay API.

Responsibility:
    - FastAPI app initialization
    - Relay configuration (validated once, stored on app.state)
    - Router registration (submissions)
    - CORS middleware configuration (the form posts from a browser)
    - Global exception handlers
    - Request logging middleware
    - Health check endpoint

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration

Contains:
    - create_app() factory function
    - Global exception handlers
    - Request logging middleware
    - Health check endpoint: GET /health
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import routers
from src.api.routers import submissions

# Import shared schemas
from src.api.schemas.common import (
    METHOD_NOT_ALLOWED,
    MISSING_ENV,
    SERVER_ERROR,
    RelayResponse,
)

# Import domain exceptions for global handling
from src.domain.shared.exceptions import MissingConfigurationError

# Import configuration
from src.infrastructure.telegram.config import RelayConfig

API_VERSION = "0.1.0"

# Configure logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
# httpx logs each request URL at INFO, and Bot API URLs embed the token
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Health status (always "ok" if endpoint responds)
        version: API version
        timestamp: Unix timestamp of health check
    """

    status: str = "ok"
    version: str = API_VERSION
    timestamp: float


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs all incoming requests with method, path, status code, and duration.

    Logging Format:
        INFO: "Incoming request: POST /api/telegram"
        INFO: "Request completed: POST /api/telegram - 200 - 0.812s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


async def missing_configuration_handler(
    request: Request, exc: MissingConfigurationError
):
    """
    Convert MissingConfigurationError to 500 {"ok": false, "error": "MISSING_ENV"}.

    Raised by the config dependency before any outbound call is made.
    """
    logger.error(
        f"Missing configuration: {', '.join(exc.missing) or 'unknown'} - "
        f"Request: {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=RelayResponse(ok=False, error=MISSING_ENV).body(),
    )


async def relay_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Shape 405 responses like the relay's own errors; keep FastAPI defaults otherwise.

    Starlette raises 405 with an Allow header when the path matches but the
    method does not; the header is preserved.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        logger.warning(f"Method not allowed: {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            content=RelayResponse(ok=False, error=METHOD_NOT_ALLOWED).body(),
            headers=getattr(exc, "headers", None),
        )

    return await http_exception_handler(request, exc)


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Catches all unhandled exceptions and converts to 500 SERVER_ERROR.
    Logs full stack trace for debugging.
    """
    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=RelayResponse(ok=False, error=SERVER_ERROR).body(),
    )


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app(config: Optional[RelayConfig] = None) -> FastAPI:
    """
    FastAPI application factory.

    Creates and configures FastAPI app with all middleware, routers,
    and exception handlers.

    Args:
        config: Relay configuration. When None it is loaded from the
            environment (BOT_TOKEN, CHAT_ID). A missing variable does not
            stop the app from starting; every relay request then answers
            500 MISSING_ENV.

    Returns:
        Configured FastAPI application instance

    Usage:
        >>> app = create_app()
        >>> # uvicorn src.api.main:app --reload
    """
    app = FastAPI(
        title="Submission Relay API",
        version=API_VERSION,
        description=(
            "Relays permit application form submissions, with optional "
            "photo and document attachments, to a Telegram chat."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Validate configuration once
    app.state.relay_config = None
    app.state.config_error = None
    if config is None:
        try:
            config = RelayConfig.from_env()
        except MissingConfigurationError as e:
            app.state.config_error = e
            logger.warning(f"{e.message}; relay requests will fail with {MISSING_ENV}")
    app.state.relay_config = config

    # Add CORS middleware (the form is served from another origin)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Add request logging middleware
    app.middleware("http")(request_logging_middleware)

    # Register global exception handlers
    app.add_exception_handler(MissingConfigurationError, missing_configuration_handler)
    app.add_exception_handler(StarletteHTTPException, relay_http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Register routers with /api prefix
    app.include_router(submissions.router, prefix="/api")

    # Health check endpoint
    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        description="Simple health check for monitoring and load balancers",
        tags=["health"],
    )
    async def health_check() -> HealthCheckResponse:
        """
        Health check endpoint.

        Returns:
            HealthCheckResponse with status="ok", version, and timestamp
        """
        return HealthCheckResponse(
            status="ok",
            version=API_VERSION,
            timestamp=time.time(),
        )

    logger.info("FastAPI application created successfully")
    logger.info("Registered routers: /api/telegram")

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Usage: uvicorn src.api.main:app --reload
app = create_app()

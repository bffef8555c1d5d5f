"""
Main FastAPI application.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import DEBUG, LOG_LEVEL, ENVIRONMENT, ContactFormSettings, load_contact_settings
from app.api.v1.api import api_router
from app.core.env_validator import print_environment_summary
from app.core.exceptions import AppException
from app.core.responses import json_response

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

APP_TITLE = "Contact Form Relay"
APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Contact Form Relay server...")
    logger.info(f"Environment: {ENVIRONMENT}")
    logger.info(f"Debug mode: {DEBUG}")

    # Print configuration summary (presence only, never values)
    print_environment_summary(app.state.contact_settings)

    yield

    # Shutdown
    logger.info("Shutting down Contact Form Relay server...")


def _allowed_origins(request: Request):
    return request.app.state.contact_settings.allowed_origins


def create_app(settings: Optional[ContactFormSettings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Contact form settings. Loaded from the environment when omitted.

    Returns:
        Configured FastAPI app

    Raises:
        ConfigurationError: If settings are omitted and the environment is incomplete
    """
    if settings is None:
        settings = load_contact_settings()

    app = FastAPI(
        title=APP_TITLE,
        description="Validates contact form submissions, verifies Turnstile tokens and relays them to a chat webhook",
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if DEBUG else None,
        redoc_url="/redoc" if DEBUG else None,
    )
    app.state.contact_settings = settings

    # Include API router
    app.include_router(api_router)

    # Root endpoint
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": APP_TITLE, "version": APP_VERSION}

    # Handle Starlette HTTPException (including 404 Not Found)
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions (including 404) with the configured CORS policy."""
        message = exc.detail if isinstance(exc.detail, str) else f"HTTP {exc.status_code} error"
        return json_response(
            {"error": message}, exc.status_code, request.headers.get("origin"), _allowed_origins(request)
        )

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application exceptions raised outside the contact handler."""
        logger.error(f"Application error: {exc.message}", extra={"details": exc.details})
        return json_response(
            exc.to_dict(), exc.status_code, request.headers.get("origin"), _allowed_origins(request)
        )

    # Global exception handler for uncaught exceptions
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return json_response(
            {"error": "Internal Server Error"},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            request.headers.get("origin"),
            _allowed_origins(request),
        )

    return app

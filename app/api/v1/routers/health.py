"""
Health check endpoints for monitoring and diagnostics.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from app.api.v1.routers.contact import get_contact_settings
from app.core.config import ENVIRONMENT, ContactFormSettings

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])

SERVICE_NAME = "Contact Form Relay"
SERVICE_VERSION = "1.0.0"


@router.get("", status_code=status.HTTP_200_OK)
@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: ContactFormSettings = Depends(get_contact_settings)) -> Dict[str, Any]:
    """
    Basic health check endpoint.
    Returns 200 OK if the service is running. Reports which settings are present, never their values.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "environment": ENVIRONMENT,
        "components": {
            "turnstile": {"status": "configured" if settings.turnstile_secret_key else "not_configured"},
            "webhook": {"status": "configured" if settings.webhook_url else "not_configured"},
            "cors": {"allowed_origins": len(settings.allowed_origins)},
        },
    }


@router.get("/live", status_code=status.HTTP_200_OK)
@router.get("/live/", status_code=status.HTTP_200_OK)
async def liveness_check() -> Dict[str, str]:
    """
    Liveness probe for container orchestration.
    """
    return {"status": "alive"}

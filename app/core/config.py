"""
Core configuration settings for the contact form relay.
"""

import os
from typing import List, Mapping, Optional
from urllib.parse import urlsplit

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from app.core.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

# Application settings
DEBUG = os.environ.get("DEBUG", "false").lower() in ("true", "1", "t")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")  # nosec B104 - Intentional: Server needs to bind to all interfaces
API_PORT = int(os.environ.get("API_PORT", "8000"))
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# Environment variable names for the contact form settings
TURNSTILE_SECRET_KEY_ENV = "TURNSTILE_SECRET_KEY"
WEBHOOK_URL_ENV = "DISCORD_WEBHOOK_URL"
ALLOWED_ORIGINS_ENV = "ALLOWED_ORIGINS"


def parse_allowed_origins(raw: Optional[str]) -> List[str]:
    """
    Split a comma-separated origin list.

    Entries are trimmed, a trailing slash is dropped and empty entries are ignored,
    so "https://a.example, https://b.example/," yields two origins.
    """
    if not raw:
        return []
    origins = []
    for entry in raw.split(","):
        entry = entry.strip().rstrip("/")
        if entry:
            origins.append(entry)
    return origins


class ContactFormSettings(BaseModel):
    """Settings the contact form handler needs at runtime."""

    turnstile_secret_key: str = Field(..., description="Turnstile secret key used for siteverify")
    webhook_url: str = Field(..., description="Chat webhook that receives submissions")
    allowed_origins: List[str] = Field(default_factory=list, description="Origins allowed to read responses")

    @field_validator("turnstile_secret_key")
    @classmethod
    def validate_secret_key(cls, v):
        """Reject blank secrets."""
        if not v or not v.strip():
            raise ValueError("Turnstile secret key must not be empty")
        return v.strip()

    @field_validator("webhook_url")
    @classmethod
    def validate_webhook_url(cls, v):
        """Webhook must be an absolute http(s) URL."""
        v = (v or "").strip()
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError("Webhook URL must be an absolute http(s) URL")
        return v

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_allowed_origins(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return parse_allowed_origins(v)
        return parse_allowed_origins(",".join(v))


def load_contact_settings(environ: Optional[Mapping[str, str]] = None) -> ContactFormSettings:
    """
    Build ContactFormSettings from environment variables.

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a required variable is missing or invalid
    """
    env = os.environ if environ is None else environ

    secret_key = env.get(TURNSTILE_SECRET_KEY_ENV, "")
    webhook_url = env.get(WEBHOOK_URL_ENV, "")

    missing = [
        name for name, value in ((TURNSTILE_SECRET_KEY_ENV, secret_key), (WEBHOOK_URL_ENV, webhook_url))
        if not value or not value.strip()
    ]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}",
            config_key=missing[0],
            details={"missing": missing},
        )

    try:
        return ContactFormSettings(
            turnstile_secret_key=secret_key,
            webhook_url=webhook_url,
            allowed_origins=env.get(ALLOWED_ORIGINS_ENV, ""),
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid contact form configuration: {e}") from e

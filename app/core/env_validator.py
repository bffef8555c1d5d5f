"""
Environment variable validator to ensure all required configurations are set.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Mapping, Optional, Tuple

from app.core.config import (
    ALLOWED_ORIGINS_ENV,
    ENVIRONMENT,
    TURNSTILE_SECRET_KEY_ENV,
    WEBHOOK_URL_ENV,
    ContactFormSettings,
    load_contact_settings,
    parse_allowed_origins,
)
from app.core.exceptions import ConfigurationError

# Configure logging
logger = logging.getLogger(__name__)

# Define required and optional environment variables
REQUIRED_ENV_VARS = [TURNSTILE_SECRET_KEY_ENV, WEBHOOK_URL_ENV]

# Without allowed origins every cross-origin browser request is blocked
OPTIONAL_ENV_VARS = [ALLOWED_ORIGINS_ENV]


def validate_environment_variables(
    strict: bool = True, environ: Optional[Mapping[str, str]] = None
) -> Tuple[bool, List[str]]:
    """
    Validate that all required environment variables are set.

    Args:
        strict: If True, fail on missing required vars. If False, just warn.
        environ: Mapping to read from (default: os.environ)

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    env = os.environ if environ is None else environ

    errors = []
    warnings = []

    # Check required variables
    for var_name in REQUIRED_ENV_VARS:
        value = env.get(var_name, "")
        if not value or value.strip() == "":
            errors.append(f"Required environment variable '{var_name}' is not set or empty")

    # Values that are present must also parse
    if not errors:
        try:
            load_contact_settings(env)
        except ConfigurationError as e:
            errors.append(e.message)

    # Check optional variables
    for var_name in OPTIONAL_ENV_VARS:
        value = env.get(var_name, "")
        if not value or value.strip() == "":
            warnings.append(f"Optional environment variable '{var_name}' is not set")

    # Log results
    if errors:
        logger.error("=" * 80)
        logger.error("ENVIRONMENT VARIABLE VALIDATION FAILED")
        logger.error("=" * 80)
        for error in errors:
            logger.error(f"❌ {error}")
        logger.error("=" * 80)
        logger.error("Please set the missing environment variables in your .env file")
        logger.error("=" * 80)

    if warnings:
        logger.warning("=" * 80)
        logger.warning("OPTIONAL ENVIRONMENT VARIABLES MISSING")
        logger.warning("=" * 80)
        for warning in warnings:
            logger.warning(f"⚠️  {warning}")
        logger.warning("=" * 80)
        logger.warning("Cross-origin requests will not be readable by browsers")
        logger.warning("=" * 80)

    if not errors and not warnings:
        logger.info("=" * 80)
        logger.info("✅ All environment variables are properly configured")
        logger.info("=" * 80)

    is_valid = len(errors) == 0

    if not is_valid and strict:
        logger.critical("Application cannot start with missing required environment variables")
        logger.critical("Exiting...")
        sys.exit(1)

    return is_valid, errors + warnings


def get_environment_info(
    settings: Optional[ContactFormSettings] = None, environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """
    Get information about the current configuration.

    Reports from settings when given, otherwise from the environment.
    """
    if settings is not None:
        return {
            "environment": ENVIRONMENT,
            "turnstile_configured": bool(settings.turnstile_secret_key),
            "webhook_configured": bool(settings.webhook_url),
            "allowed_origins_count": len(settings.allowed_origins),
        }

    env = os.environ if environ is None else environ
    return {
        "environment": ENVIRONMENT,
        "turnstile_configured": bool(env.get(TURNSTILE_SECRET_KEY_ENV, "").strip()),
        "webhook_configured": bool(env.get(WEBHOOK_URL_ENV, "").strip()),
        "allowed_origins_count": len(parse_allowed_origins(env.get(ALLOWED_ORIGINS_ENV, ""))),
    }


def print_environment_summary(settings: Optional[ContactFormSettings] = None):
    """Print a summary of environment configuration."""
    info = get_environment_info(settings)

    logger.info("=" * 80)
    logger.info("ENVIRONMENT CONFIGURATION SUMMARY")
    logger.info("=" * 80)
    logger.info(f"Environment: {info['environment']}")
    logger.info(f"Turnstile: {'✅' if info['turnstile_configured'] else '❌'}")
    logger.info(f"Webhook: {'✅' if info['webhook_configured'] else '❌'}")
    logger.info(f"Allowed origins: {info['allowed_origins_count']}")
    logger.info("=" * 80)

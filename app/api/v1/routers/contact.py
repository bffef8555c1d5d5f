"""
Contact form endpoint.

Response errors:
- 400 Bad Request: "Invalid content type", "Missing required fields",
  "Invalid name", "Invalid email address", "Invalid message content"
- 403 Forbidden: "Turnstile verification failed"
- 405 Method Not Allowed: "Method not allowed"
- 500 Internal Server Error: "Failed to send message", "Internal Server Error"
- 200 OK: "Form submitted successfully!"
"""

import logging
from typing import Awaitable, Callable, Optional

from fastapi import APIRouter, Depends, Request, Response, status

from app.api.v1.schemas.contact import ApiResponse, ContactSubmission, VerificationResult
from app.core.config import ContactFormSettings
from app.core.exceptions import (
    AppException,
    MethodNotAllowedError,
    NotificationError,
    TurnstileVerificationError,
    ValidationError,
)
from app.core.responses import json_response, preflight_response
from app.core.sanitizer import sanitize
from app.core.validators import validate_form_data
from app.services.turnstile import verify_turnstile_token
from app.services.webhook import send_to_webhook

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["Contact"])

TokenVerifier = Callable[[str, str], Awaitable[VerificationResult]]
Notifier = Callable[[str, ContactSubmission], Awaitable[bool]]

# Multipart field names sent by the form
NAME_FIELD = "name"
EMAIL_FIELD = "email"
MESSAGE_FIELD = "message"
COMPANY_FIELD = "intra_name"
TOKEN_FIELD = "cf-turnstile-response"

SUCCESS_MESSAGE = "Form submitted successfully!"

# Every method is routed here so that non-POST requests get the JSON 405 body
HANDLED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_contact_settings(request: Request) -> ContactFormSettings:
    """Settings the application was created with."""
    return request.app.state.contact_settings


def get_token_verifier() -> TokenVerifier:
    return verify_turnstile_token


def get_notifier() -> Notifier:
    return send_to_webhook


def _text_field(form, key: str) -> str:
    # Uploaded files are not text and count as missing
    value = form.get(key)
    return value if isinstance(value, str) else ""


def _mask_token(token: Optional[str]) -> str:
    if not token:
        return ""
    return f"{token[:8]}..." if len(token) > 8 else "***"


async def _read_submission(request: Request) -> ContactSubmission:
    """Parse, sanitize and check the multipart form fields."""
    form = await request.form()

    name = sanitize(_text_field(form, NAME_FIELD))
    email = sanitize(_text_field(form, EMAIL_FIELD))
    message = sanitize(_text_field(form, MESSAGE_FIELD))
    company_name = sanitize(_text_field(form, COMPANY_FIELD))
    token = _text_field(form, TOKEN_FIELD)

    if not name or not email or not message or not token:
        missing = [
            key
            for key, value in ((NAME_FIELD, name), (EMAIL_FIELD, email), (MESSAGE_FIELD, message), (TOKEN_FIELD, token))
            if not value
        ]
        raise ValidationError("Missing required fields", details={"missing": missing})

    validation_error = validate_form_data(name, email, message)
    if validation_error:
        raise ValidationError(validation_error)

    return ContactSubmission(
        name=name,
        email=email,
        message=message,
        company_name=company_name or None,
        turnstile_token=token,
    )


async def _process_submission(
    request: Request, settings: ContactFormSettings, verify_token: TokenVerifier, notify: Notifier
) -> None:
    submission = await _read_submission(request)

    verification = await verify_token(submission.turnstile_token, settings.turnstile_secret_key)
    if not verification.success:
        raise TurnstileVerificationError(
            error_codes=verification.error_codes,
            details={"token": _mask_token(submission.turnstile_token)},
        )

    if not await notify(settings.webhook_url, submission):
        raise NotificationError(details={"email": submission.email})


@router.api_route("", methods=HANDLED_METHODS, status_code=status.HTTP_200_OK, response_model=None)
async def submit_contact_form(
    request: Request,
    settings: ContactFormSettings = Depends(get_contact_settings),
    verify_token: TokenVerifier = Depends(get_token_verifier),
    notify: Notifier = Depends(get_notifier),
) -> Response:
    """
    Accept a contact form submission and forward it to the chat webhook.

    Expects multipart/form-data with name, email, message, optional intra_name
    and the Turnstile token in cf-turnstile-response.
    """
    origin = request.headers.get("origin")
    allowed_origins = settings.allowed_origins

    if request.method == "OPTIONS":
        return preflight_response(origin, allowed_origins)

    try:
        if request.method != "POST":
            raise MethodNotAllowedError(request.method)

        content_type = request.headers.get("content-type", "")
        if "multipart/form-data" not in content_type:
            raise ValidationError("Invalid content type", field="content-type", details={"content_type": content_type})

        try:
            await _process_submission(request, settings, verify_token, notify)
        except AppException:
            raise
        except Exception as e:
            logger.error(f"Error handling contact form request: {e}", exc_info=True)
            return json_response(
                ApiResponse(error="Internal Server Error").model_dump(),
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                origin,
                allowed_origins,
            )

    except AppException as exc:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(f"Contact form rejected: {exc.message}", extra={"details": exc.details})
        return json_response(exc.to_dict(), exc.status_code, origin, allowed_origins)

    return json_response(ApiResponse(message=SUCCESS_MESSAGE).model_dump(), status.HTTP_200_OK, origin, allowed_origins)

"""
Cloudflare Turnstile token verification.
"""

import logging
from typing import Optional

import httpx

from app.api.v1.schemas.contact import VerificationResult

# Configure logging
logger = logging.getLogger(__name__)

TURNSTILE_VERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"


async def verify_turnstile_token(
    token: str, secret_key: str, client: Optional[httpx.AsyncClient] = None
) -> VerificationResult:
    """
    Verify a Turnstile challenge token.

    The reply body decides the outcome, whatever the HTTP status of the call.
    Network and JSON decoding errors are not caught here.

    Args:
        token: Token the browser widget put in cf-turnstile-response
        secret_key: Turnstile secret key
        client: Optional httpx client to send the request with

    Returns:
        Parsed verification result
    """
    form = {"secret": secret_key, "response": token}

    if client is None:
        async with httpx.AsyncClient() as own_client:
            response = await own_client.post(TURNSTILE_VERIFY_URL, data=form)
    else:
        response = await client.post(TURNSTILE_VERIFY_URL, data=form)

    if response.status_code != 200:
        logger.warning(f"Turnstile siteverify answered with HTTP {response.status_code}")

    result = VerificationResult.model_validate(response.json())
    logger.debug(f"Turnstile verification result: success={result.success}, hostname={result.hostname}")
    return result

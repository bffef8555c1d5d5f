"""
Chat webhook notifier for contact form submissions.
"""

import logging
from typing import Optional

import httpx

from app.api.v1.schemas.contact import ContactSubmission

# Configure logging
logger = logging.getLogger(__name__)


def format_submission(submission: ContactSubmission) -> str:
    """
    Render a submission as a chat message.

    Fields are expected to be sanitized already and are inserted as-is.
    The company line only appears when a company name was given.
    """
    lines = [
        "**New contact form submission**",
        "",
        f"- **Name:** {submission.name}",
        f"- **Email:** {submission.email}",
    ]
    if submission.company_name:
        lines.append(f"- **Company:** {submission.company_name}")
    lines.append(f"- **Message:** {submission.message}")
    return "\n".join(lines)


async def send_to_webhook(
    webhook_url: str, submission: ContactSubmission, client: Optional[httpx.AsyncClient] = None
) -> bool:
    """
    Post a submission to the chat webhook.

    Args:
        webhook_url: Webhook endpoint
        submission: Sanitized submission
        client: Optional httpx client to send the request with

    Returns:
        True if the webhook answered with a 2xx status, False otherwise
    """
    payload = {"content": format_submission(submission)}

    if client is None:
        async with httpx.AsyncClient() as own_client:
            response = await own_client.post(webhook_url, json=payload)
    else:
        response = await client.post(webhook_url, json=payload)

    if not response.is_success:
        logger.error(
            f"Failed to send message to webhook (HTTP {response.status_code}): {response.text}",
            extra={"status_code": response.status_code},
        )
        return False

    logger.info("Contact form submission delivered to webhook")
    return True

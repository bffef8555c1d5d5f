"""
Shared validation functions for the contact form.
"""

import re
from typing import Optional

# Field limits
MAX_NAME_LENGTH = 50
MAX_MESSAGE_LENGTH = 500

# Deliberately loose: something@something.something without whitespace
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

INVALID_NAME = "Invalid name"
INVALID_EMAIL = "Invalid email address"
INVALID_MESSAGE = "Invalid message content"


def is_valid_email(email: str) -> bool:
    """Check an address against the permissive email pattern."""
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def validate_form_data(name: str, email: str, message: str) -> Optional[str]:
    """
    Validate contact form fields.

    Args:
        name: Sender name
        email: Sender email address
        message: Message body

    Returns:
        The first error message, or None when every field is valid
    """
    if not name or len(name) > MAX_NAME_LENGTH:
        return INVALID_NAME
    if not is_valid_email(email):
        return INVALID_EMAIL
    if not message or len(message) > MAX_MESSAGE_LENGTH:
        return INVALID_MESSAGE
    return None

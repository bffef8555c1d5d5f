"""
Sanitization of free-text form fields before they are forwarded to chat.
"""

import re
from typing import Optional

SCRIPT_REMOVED = "[script removed]"
MALICIOUS_TAG_REMOVED = "[malicious tag removed]"

_SCRIPT_BLOCK = re.compile(r"<script.*?>.*?</script>", re.IGNORECASE)
_EVENT_HANDLER_TAG = re.compile(r"<.*?on\w+.*?>", re.IGNORECASE)

_HTML_ESCAPES = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
        "&": "&amp;",
    }
)


def sanitize(text: Optional[str]) -> str:
    """
    Remove executable markup from text and escape the rest.

    Script blocks and tags carrying on* attributes are replaced by markers first;
    entity-escaping has to come afterwards or the tag patterns would never match.

    Args:
        text: Raw field value (None is treated as empty)

    Returns:
        Sanitized text
    """
    if not text:
        return ""
    text = _SCRIPT_BLOCK.sub(SCRIPT_REMOVED, text)
    text = _EVENT_HANDLER_TAG.sub(MALICIOUS_TAG_REMOVED, text)
    return text.translate(_HTML_ESCAPES)

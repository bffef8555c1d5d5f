"""
Cross-origin policy for the contact form endpoints.

Only origins from the configured allow-list receive CORS headers. Anything else
gets no headers at all and the browser refuses to expose the response.
"""

import logging
from typing import Dict, Iterable, Optional
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

ALLOW_METHODS = "GET, POST, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"

_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_origin(value: Optional[str]) -> Optional[str]:
    """
    Reduce a URL to its scheme://host[:port] origin.

    Default ports are dropped and scheme/host are lowercased. Returns None for
    values that have no origin (missing, "null", relative or malformed).
    """
    if not value:
        return None
    try:
        parts = urlsplit(value.strip())
        port = parts.port
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None

    scheme = parts.scheme.lower()
    host = parts.hostname.lower()
    if ":" in host:
        host = f"[{host}]"
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        return f"{scheme}://{host}:{port}"
    return f"{scheme}://{host}"


def is_origin_allowed(origin: Optional[str], allowed_origins: Iterable[str]) -> bool:
    """Check whether a request Origin matches an allow-list entry."""
    normalized = normalize_origin(origin)
    if normalized is None:
        return False
    return any(normalize_origin(entry) == normalized for entry in allowed_origins)


def cors_headers(origin: Optional[str], allowed_origins: Iterable[str]) -> Dict[str, str]:
    """
    Build CORS headers for a response.

    Args:
        origin: Value of the request's Origin header
        allowed_origins: Configured allow-list

    Returns:
        Header mapping echoing the origin, or an empty dict when it is not allowed
    """
    if not is_origin_allowed(origin, allowed_origins):
        if origin:
            logger.debug(f"Origin not allowed, omitting CORS headers: {origin}")
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Vary": "Origin",
    }

"""
Response builders shared by the contact form handler and the app-level exception handlers.
"""

from typing import Any, Dict, Iterable, Optional

from fastapi import Response, status
from fastapi.responses import JSONResponse

from app.core.cors import cors_headers


def json_response(
    body: Dict[str, Any], status_code: int, origin: Optional[str], allowed_origins: Iterable[str]
) -> JSONResponse:
    """
    Serialize body as JSON and attach CORS headers for the request origin.

    Keys whose value is None are left out, so {"message": ..., "error": None}
    is sent as {"message": ...}.
    """
    content = {key: value for key, value in body.items() if value is not None}
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers=cors_headers(origin, allowed_origins),
        media_type="application/json",
    )


def preflight_response(origin: Optional[str], allowed_origins: Iterable[str]) -> Response:
    """Empty 204 answer to a CORS preflight request."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=cors_headers(origin, allowed_origins))

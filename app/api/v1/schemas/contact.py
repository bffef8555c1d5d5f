"""
Contact form schemas for submissions, Turnstile replies and API responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ContactSubmission(BaseModel):
    """A sanitized contact form submission, alive for one request."""

    name: str = Field(..., description="Sender name")
    email: str = Field(..., description="Sender email address")
    message: str = Field(..., description="Message body")
    company_name: Optional[str] = Field(None, description="Company name (form field intra_name)")
    turnstile_token: str = Field(..., description="Turnstile challenge token (form field cf-turnstile-response)")


class VerificationResult(BaseModel):
    """Reply of the Turnstile siteverify endpoint."""

    success: bool = False
    error_codes: Optional[List[str]] = Field(None, alias="error-codes")
    challenge_ts: Optional[str] = None
    hostname: Optional[str] = None
    action: Optional[str] = None
    cdata: Optional[str] = None

    @field_validator("success", mode="before")
    @classmethod
    def null_success_is_failure(cls, v):
        """A null success flag counts as a failed verification."""
        return False if v is None else v

    class Config:
        populate_by_name = True


class ApiResponse(BaseModel):
    """Body of every JSON response: either message or error is set."""

    message: Optional[str] = None
    error: Optional[str] = None

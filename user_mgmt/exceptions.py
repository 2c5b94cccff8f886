"""Custom exceptions for the user management service."""


class UserMgmtError(Exception):
    """Base exception for all service errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(UserMgmtError):
    """Request data is missing or malformed (400)."""


class ConflictError(UserMgmtError):
    """Resource already exists (409)."""


class AuthenticationError(UserMgmtError):
    """Bad credentials or no session (401)."""


class UpstreamError(UserMgmtError):
    """User store or session service is unreachable or erroring."""

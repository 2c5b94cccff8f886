"""Authentication Pydantic schemas for API validation."""

from .auth import (
    Credentials,
    ForgotPasswordRequest,
    MessageResponse,
    RegistrationData,
    SessionPayload,
    UserRecord,
)

__all__ = [
    "Credentials",
    "RegistrationData",
    "ForgotPasswordRequest",
    "UserRecord",
    "SessionPayload",
    "MessageResponse",
]

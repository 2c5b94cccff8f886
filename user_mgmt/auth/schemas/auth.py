"""Request and response schemas for the authentication endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Credentials(BaseModel):
    """Login credentials."""

    username: str = Field(..., description="Unique username")
    password: str = Field(..., description="Plain text password, never persisted")

    @field_validator("username", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v


class RegistrationData(Credentials):
    """Registration request body."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")


class ForgotPasswordRequest(BaseModel):
    """Password reset request body."""

    email: str | None = None


class UserRecord(BaseModel):
    """User row as stored in the user store."""

    username: str
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None


class SessionPayload(BaseModel):
    """Data stored in the session service on login."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")

    @classmethod
    def from_user(cls, user: UserRecord) -> "SessionPayload":
        return cls(username=user.username, first_name=user.first_name, last_name=user.last_name)


class MessageResponse(BaseModel):
    """Generic success body."""

    message: str

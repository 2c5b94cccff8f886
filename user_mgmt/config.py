"""Configuration management using pydantic-settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_path: str = "./data/users.db"

    # Session service (external, reached over HTTP)
    session_service_url: str = "https://session-state.d1.compact.workers.dev"
    session_service_timeout: float = 5.0
    session_cookie_name: str = "cfw_session"
    session_max_age: int = 1800

    # CORS Configuration
    # A "*" entry echoes any http/https origin; list explicit origins to restrict
    cors_origins: list[str] = ["*"]
    cors_max_age: int = 86400

    # Password hashing
    # "sha256" keeps the salt:hexdigest format readable by existing records,
    # "bcrypt" stores new hashes with a slow KDF (both schemes verify)
    password_scheme: Literal["sha256", "bcrypt"] = "sha256"
    bcrypt_work_factor: int = 12

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()

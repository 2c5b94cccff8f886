"""Explicit service environment threaded through every request handler."""

from dataclasses import dataclass

from flask import current_app

from .config import Settings
from .db import UserStore, init_db
from .sessions import HttpSessionService, SessionService

EXTENSION_KEY = "user_mgmt"


@dataclass
class Environment:
    """External collaborators and configuration for one application instance."""

    settings: Settings
    users: UserStore
    sessions: SessionService


def build_environment(settings: Settings) -> Environment:
    """
    Create the default environment from settings.

    Initializes the user store schema and wires the HTTP session client.
    """
    init_db(settings.database_path)
    return Environment(
        settings=settings,
        users=UserStore(settings.database_path),
        sessions=HttpSessionService(
            settings.session_service_url,
            timeout=settings.session_service_timeout,
        ),
    )


def get_environment() -> Environment:
    """Return the Environment of the application handling the current request."""
    return current_app.extensions[EXTENSION_KEY]

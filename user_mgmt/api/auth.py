"""Authentication endpoints.

These endpoints turn credential operations into cookie-bound sessions:
- POST /register - Create a user record
- POST /login - Verify credentials, create a session, set the session cookie
- POST /logout - Delete the session (best effort) and clear the cookie
- GET /load-user - Return the session payload for the session cookie
- POST /forgot-password - Password reset placeholder

Handlers only orchestrate: password hashing lives in auth.password, cookie
formats in auth.cookies, persistence behind the Environment's user store and
session service. CORS headers are added by the application, not here.
"""

import logging

from flask import Blueprint, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from ..auth import cookies, password
from ..auth.schemas import (
    Credentials,
    ForgotPasswordRequest,
    MessageResponse,
    RegistrationData,
    SessionPayload,
)
from ..environment import get_environment
from ..exceptions import AuthenticationError, ConflictError, UserMgmtError
from .validation import parse_body

logger = logging.getLogger(__name__)

# Paths accept any verb; OPTIONS is answered before routing
ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

auth_bp = Blueprint("auth", __name__)


def _message(text: str, status: int = 200):
    return jsonify(MessageResponse(message=text).model_dump()), status


def _session_id_from_request() -> str | None:
    env = get_environment()
    return cookies.read_session_id(
        request.headers.get("Cookie"),
        env.settings.session_cookie_name,
    )


@auth_bp.route("/register", methods=ROUTE_METHODS)
def register():
    """
    Create a user account.

    Request Body (RegistrationData):
        - username: str (required)
        - password: str (required)
        - firstName: str | None
        - lastName: str | None

    Returns:
        201: User registered
        400: Missing required fields or malformed body
        409: Username already taken
        500: Store failure (generic message)
    """
    env = get_environment()
    data = parse_body(RegistrationData, "Missing required fields")

    if env.users.exists(data.username):
        logger.warning(f"Registration for existing username: {data.username}")
        raise ConflictError("User already exists", {"username": data.username})

    hashed = password.hash_password(
        data.password,
        scheme=env.settings.password_scheme,
        work_factor=env.settings.bcrypt_work_factor,
    )
    env.users.create(data.username, hashed, data.first_name, data.last_name)

    logger.info(f"User registered: {data.username}")
    return _message("User registered successfully", 201)


@auth_bp.route("/login", methods=ROUTE_METHODS)
def login():
    """
    Authenticate a user and start a session.

    On success the response carries the session cookie. Every failure,
    including malformed input or an unreachable store, answers 401.

    Returns:
        200: Login successful, Set-Cookie with the session id
        401: Invalid credentials or login failed
    """
    env = get_environment()
    try:
        data = parse_body(Credentials)

        user = env.users.find_by_username(data.username)
        if user is None or not password.verify_password(data.password, user.password_hash):
            logger.warning(f"Failed login attempt for username: {data.username}")
            raise AuthenticationError("Invalid credentials")

        payload = SessionPayload.from_user(user).model_dump(by_alias=True)
        session_id = env.sessions.create_session(payload)
    except AuthenticationError:
        raise
    except UserMgmtError as e:
        logger.warning(f"Login failed: {e.message}")
        raise AuthenticationError("Login failed")
    except Exception:
        logger.exception("Unexpected error during login")
        raise AuthenticationError("Login failed")

    logger.info(f"Successful login: {user.username}")

    response, status = _message("Login successful")
    response.headers["Set-Cookie"] = cookies.session_cookie(
        session_id,
        env.settings.session_cookie_name,
        env.settings.session_max_age,
    )
    return response, status


@auth_bp.route("/logout", methods=ROUTE_METHODS)
def logout():
    """
    End the current session.

    Idempotent: succeeds with or without a session cookie, and even when the
    session service cannot be reached.

    Returns:
        200: Logout successful, Set-Cookie clearing the session cookie
    """
    env = get_environment()
    session_id = _session_id_from_request()
    if session_id:
        env.sessions.delete_session(session_id)
        logger.info(f"Session ended: {session_id[:8]}")

    response, status = _message("Logout successful")
    response.headers["Set-Cookie"] = cookies.clear_session_cookie(env.settings.session_cookie_name)
    return response, status


@auth_bp.route("/load-user", methods=ROUTE_METHODS)
def load_user():
    """
    Return the session payload for the current session cookie.

    Returns:
        200: Session JSON exactly as stored by the session service
        401: No session cookie, or the session service does not know the id
    """
    env = get_environment()
    session_id = _session_id_from_request()
    if not session_id:
        raise AuthenticationError("User not logged in")

    session_data = env.sessions.fetch_session(session_id)
    if session_data is None:
        logger.info(f"Unknown or expired session: {session_id[:8]}")
        raise AuthenticationError("User not logged in")

    return jsonify(session_data), 200


@auth_bp.route("/forgot-password", methods=ROUTE_METHODS)
def forgot_password():
    """
    Password reset placeholder.

    Accepts an email field and always answers 200. No reset is performed and
    no email is sent.
    """
    body = request.get_json(force=True, silent=True)
    try:
        data = ForgotPasswordRequest.model_validate(body if isinstance(body, dict) else {})
    except PydanticValidationError:
        data = ForgotPasswordRequest()
    # TODO: issue a reset token and hand it to the mail service once one exists
    logger.info(f"Password reset requested (email present: {bool(data.email)})")
    return _message("Password reset initiated")

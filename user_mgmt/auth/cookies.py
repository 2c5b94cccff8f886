"""Session cookie encoding and parsing."""

SESSION_COOKIE = "cfw_session"
SESSION_MAX_AGE = 60 * 30


def session_cookie(session_id: str, name: str = SESSION_COOKIE, max_age: int = SESSION_MAX_AGE) -> str:
    """Build the Set-Cookie value issued on login."""
    return f"{name}={session_id}; Secure; Path=/; SameSite=None; Max-Age={max_age}"


def clear_session_cookie(name: str = SESSION_COOKIE) -> str:
    """Build the Set-Cookie value that expires the session cookie."""
    return f"{name}=; HttpOnly; Secure; SameSite=Strict; Max-Age=0"


def read_session_id(cookie_header: str | None, name: str = SESSION_COOKIE) -> str | None:
    """
    Extract the session id from a raw Cookie header.

    Returns None when the header is absent, the cookie is missing, or its
    value is empty (as left behind by a cleared cookie).
    """
    if not cookie_header:
        return None

    for part in cookie_header.split(";"):
        key, sep, value = part.strip().partition("=")
        if sep and key == name:
            return value or None
    return None

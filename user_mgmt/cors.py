"""CORS boundary.

Every response leaving the application carries the origin, method and
credentials headers, set once here in an after_request hook so handlers never
have to. OPTIONS requests are answered before routing, on any path.
"""

import logging
from urllib.parse import urlsplit

from flask import Flask, Response, request

logger = logging.getLogger(__name__)

ALLOW_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
FALLBACK_ALLOW = "GET, HEAD, POST, OPTIONS"


def validate_origin(origin: str | None, allowed: list[str] | None = None) -> str | None:
    """
    Validate an Origin header value.

    Args:
        origin: Raw Origin header, or None
        allowed: Allow-list of origins; None or a list containing "*" allows
            any http/https origin

    Returns:
        The origin unchanged if acceptable, otherwise None
    """
    if not origin:
        return None

    try:
        parts = urlsplit(origin)
    except ValueError:
        return None
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return None

    if allowed is not None and "*" not in allowed and origin not in allowed:
        logger.debug(f"Origin not in allow-list: {origin}")
        return None
    return origin


def preflight_response(headers, allowed: list[str] | None = None, max_age: int = 86400) -> Response:
    """
    Answer an OPTIONS request.

    A full CORS preflight needs Origin, Access-Control-Request-Method and
    Access-Control-Request-Headers. Anything less is treated as a plain
    OPTIONS request and gets only an Allow header.
    """
    origin = headers.get("Origin")
    requested_method = headers.get("Access-Control-Request-Method")
    requested_headers = headers.get("Access-Control-Request-Headers")

    if origin is None or requested_method is None or requested_headers is None:
        return Response(
            status=200,
            headers={"Allow": FALLBACK_ALLOW, "Content-Type": "text/plain"},
        )

    return Response(
        status=200,
        headers={
            "Access-Control-Allow-Origin": validate_origin(origin, allowed) or "*",
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": requested_headers,
            "Access-Control-Max-Age": str(max_age),
            "Access-Control-Allow-Credentials": "true",
            "Allow": ALLOW_METHODS,
            "Content-Type": "text/plain",
            "X-Content-Type-Options": "nosniff",
        },
    )


def apply_cors_headers(response: Response, origin: str | None, allowed: list[str] | None = None) -> Response:
    """Overwrite the CORS headers on a response."""
    response.headers["Access-Control-Allow-Origin"] = validate_origin(origin, allowed) or "*"
    response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
    response.headers["Access-Control-Allow-Credentials"] = "true"
    return response


def init_cors(app: Flask, allowed: list[str] | None = None, max_age: int = 86400) -> None:
    """Register the preflight and header-stamping hooks on an app."""

    @app.before_request
    def handle_preflight():
        if request.method == "OPTIONS":
            return preflight_response(request.headers, allowed, max_age)
        return None

    @app.after_request
    def stamp_cors_headers(response: Response) -> Response:
        return apply_cors_headers(response, request.headers.get("Origin"), allowed)

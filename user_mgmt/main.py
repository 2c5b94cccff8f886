"""Flask application entry point."""

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Settings, settings as default_settings
from .cors import init_cors
from .environment import EXTENSION_KEY, Environment, build_environment
from .exceptions import (
    AuthenticationError,
    ConflictError,
    UpstreamError,
    UserMgmtError,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Error handlers
def handle_validation_error(error: ValidationError):
    """Handle ValidationError exceptions."""
    logger.info(f"Validation failed: {error.message} {error.details}")
    return jsonify({"error": error.message}), 400


def handle_conflict(error: ConflictError):
    """Handle ConflictError exceptions."""
    return jsonify({"error": error.message}), 409


def handle_authentication_error(error: AuthenticationError):
    """Handle AuthenticationError exceptions."""
    return jsonify({"error": error.message}), 401


def handle_upstream_error(error: UpstreamError):
    """Handle UpstreamError exceptions without leaking upstream details."""
    logger.error(f"Upstream failure: {error.message}")
    return jsonify({"error": "Internal server error"}), 500


def handle_user_mgmt_error(error: UserMgmtError):
    """Handle any other service error."""
    logger.error(f"{error.__class__.__name__}: {error.message}")
    return jsonify({"error": "Internal server error"}), 500


def handle_http_exception(error: HTTPException):
    """Render routing errors (404, 405) as JSON."""
    return jsonify({"error": error.name}), error.code


def handle_internal_error(error: Exception):
    """Handle internal server errors."""
    logger.exception(f"Internal error: {error}")
    return jsonify({"error": "Internal server error"}), 500


def create_app(environment: Environment | None = None, config: Settings | None = None) -> Flask:
    """
    Create the Flask application.

    Args:
        environment: External collaborators to use. Built from settings
            (SQLite user store, HTTP session service) when omitted.
        config: Settings used to build the default environment

    Returns:
        Configured Flask app
    """
    if environment is None:
        environment = build_environment(config or default_settings)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = environment

    init_cors(
        app,
        allowed=environment.settings.cors_origins,
        max_age=environment.settings.cors_max_age,
    )

    app.register_error_handler(ValidationError, handle_validation_error)
    app.register_error_handler(ConflictError, handle_conflict)
    app.register_error_handler(AuthenticationError, handle_authentication_error)
    app.register_error_handler(UpstreamError, handle_upstream_error)
    app.register_error_handler(UserMgmtError, handle_user_mgmt_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_internal_error)

    # Health check endpoint
    @app.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok"})

    from .api.auth import auth_bp

    app.register_blueprint(auth_bp)

    logger.info(f"Application created (session service: {environment.settings.session_service_url})")
    return app


if __name__ == "__main__":
    create_app().run(debug=True)

"""Tests for Flask application initialization."""

import logging

from flask import Flask

from user_mgmt.db import UserStore
from user_mgmt.environment import EXTENSION_KEY, build_environment
from user_mgmt.main import create_app
from user_mgmt.sessions import HttpSessionService


class TestAppFactory:

    def test_app_is_flask_instance(self, app):
        assert isinstance(app, Flask)

    def test_environment_attached(self, app, environment):
        assert app.extensions[EXTENSION_KEY] is environment

    def test_routes_registered(self, app):
        rules = {rule.rule for rule in app.url_map.iter_rules()}
        assert {"/register", "/login", "/logout", "/load-user", "/forgot-password", "/health"} <= rules

    def test_default_environment_from_settings(self, test_settings):
        app = create_app(config=test_settings)
        env = app.extensions[EXTENSION_KEY]

        assert isinstance(env.users, UserStore)
        assert isinstance(env.sessions, HttpSessionService)
        assert env.sessions.base_url == "http://sessions.test"
        assert env.sessions.timeout == test_settings.session_service_timeout

    def test_build_environment_initializes_store(self, tmp_path):
        from user_mgmt.config import Settings

        db_file = tmp_path / "nested" / "users.db"
        env = build_environment(Settings(database_path=str(db_file)))

        assert db_file.exists()
        assert env.users.exists("anyone") is False


class TestLoggingConfiguration:

    def test_root_logger_configured(self):
        """Importing the app configures root logging handlers."""
        assert len(logging.getLogger().handlers) > 0

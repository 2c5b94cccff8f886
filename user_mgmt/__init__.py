"""Stateless user management service: registration, login and cookie sessions."""

__version__ = "0.1.0"

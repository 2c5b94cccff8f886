"""Authentication module for the user management service.

This module provides the credential and session building blocks:
- Schema validation for auth operations
- Salted password hashing and verification
- Session cookie encoding and parsing

Auth endpoints (top-level routes):
- POST /register - Create a user
- POST /login - Verify credentials and issue a session cookie
- POST /logout - Delete the session and clear the cookie
- GET /load-user - Return the current session payload
- POST /forgot-password - Password reset placeholder
"""

from . import cookies, password, schemas

__all__ = ["cookies", "password", "schemas"]

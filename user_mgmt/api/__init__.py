"""HTTP API for the user management service."""

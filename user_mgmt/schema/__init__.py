"""Schema module for the user store.

``schema.sql`` is the source of truth for the user table layout.
"""

from pathlib import Path

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

__all__ = ["SCHEMA_PATH"]

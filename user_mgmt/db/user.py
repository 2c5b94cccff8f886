"""User store operations."""

import logging
import sqlite3

from ..auth.schemas import UserRecord
from ..exceptions import ConflictError, ValidationError

logger = logging.getLogger(__name__)


def _row_to_user(row: sqlite3.Row) -> UserRecord:
    return UserRecord(
        username=row["Username"],
        password_hash=row["Password"],
        first_name=row["FirstName"],
        last_name=row["LastName"],
    )


class UserStore:
    """
    User records in SQLite, addressed by username.

    Connection Lifecycle:
    - One connection per operation, closed before the method returns
    - Writes commit immediately (no cross-call transaction)
    """

    def __init__(self, database_path: str):
        self.database_path = database_path

    def _connect(self) -> sqlite3.Connection:
        from . import _create_connection
        return _create_connection(self.database_path)

    def exists(self, username: str) -> bool:
        """Return True if a user with this username is stored."""
        conn = self._connect()
        try:
            cursor = conn.execute(
                "SELECT Username FROM User WHERE Username = ?",
                (username,)
            )
            return cursor.fetchone() is not None
        finally:
            conn.close()

    def create(
        self,
        username: str,
        password_hash: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> UserRecord:
        """
        Insert a new user record.

        Args:
            username: Unique username
            password_hash: Output of password.hash_password
            first_name: Optional first name
            last_name: Optional last name

        Returns:
            The stored UserRecord

        Raises:
            ValidationError: If username or password hash is empty
            ConflictError: If the primary key rejects the username as taken
        """
        if not username or not password_hash:
            raise ValidationError("Missing required fields")

        conn = self._connect()
        try:
            conn.execute(
                """INSERT INTO User (Username, Password, FirstName, LastName)
                   VALUES (?, ?, ?, ?)""",
                (username, password_hash, first_name, last_name)
            )
            conn.commit()
        except sqlite3.IntegrityError:
            # Lost a race with a concurrent registration
            logger.warning(f"Insert rejected by unique constraint: {username}")
            raise ConflictError("User already exists", {"username": username})
        finally:
            conn.close()

        return UserRecord(
            username=username,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )

    def find_by_username(self, username: str) -> UserRecord | None:
        """Get a user record by username, or None if not found."""
        conn = self._connect()
        try:
            cursor = conn.execute(
                "SELECT Username, Password, FirstName, LastName FROM User WHERE Username = ?",
                (username,)
            )
            row = cursor.fetchone()
            return _row_to_user(row) if row else None
        finally:
            conn.close()

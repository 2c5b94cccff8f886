"""Password hashing and verification.

Two storage formats are understood:

- ``<salt>:<hexdigest>``: a random 16-byte hex salt prepended to the password
  and digested once with SHA-256. This is the format of every record written
  by the previous deployment, so it stays the default.
- bcrypt (``$2b$...``): opt-in via ``password_scheme = "bcrypt"``. New hashes
  use the configured work factor; verification picks the scheme from the
  stored value, so both formats can coexist in one user table.
"""

import hashlib
import hmac
import secrets

import bcrypt

from ..exceptions import ValidationError

SALT_BYTES = 16
# bcrypt only reads the first 72 bytes; bcrypt>=5 rejects longer input
BCRYPT_MAX_BYTES = 72
_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def _digest(salt: str, password: str) -> str:
    return hashlib.sha256((salt + password).encode("utf-8")).hexdigest()


def hash_password(password: str, scheme: str = "sha256", work_factor: int = 12) -> str:
    """
    Hash a password with a fresh random salt.

    Args:
        password: Plain text password
        scheme: "sha256" (salt:hexdigest) or "bcrypt"
        work_factor: bcrypt cost, ignored for sha256

    Returns:
        Stored hash string
    """
    if scheme == "bcrypt":
        if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValidationError("Password too long", {"max_bytes": BCRYPT_MAX_BYTES})
        salt = bcrypt.gensalt(rounds=work_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    if scheme != "sha256":
        raise ValueError(f"Unknown password scheme: {scheme}")

    salt = secrets.token_hex(SALT_BYTES)
    return f"{salt}:{_digest(salt, password)}"


def verify_password(password: str, stored: str) -> bool:
    """
    Check a plain text password against a stored hash.

    Malformed stored values never raise; they simply fail verification.
    """
    if not isinstance(stored, str):
        return False

    if stored.startswith(_BCRYPT_PREFIXES):
        try:
            return bcrypt.checkpw(password.encode("utf-8"), stored.encode("utf-8"))
        except ValueError:
            return False

    salt, sep, expected = stored.partition(":")
    if not sep:
        return False
    return hmac.compare_digest(
        _digest(salt, password).encode("ascii"),
        expected.encode("utf-8", "surrogatepass"),
    )

"""Tests for password hashing and verification."""

import bcrypt
import pytest

from user_mgmt.auth import password
from user_mgmt.exceptions import ValidationError


class TestSaltedSha256:
    """Tests for the default salt:hexdigest scheme."""

    def test_hash_format(self):
        """Hash should be a hex salt and a SHA-256 hex digest joined by a colon."""
        hashed = password.hash_password("SecurePass123")
        salt, digest = hashed.split(":")
        assert len(salt) == 2 * password.SALT_BYTES
        assert len(digest) == 64
        int(salt, 16)
        int(digest, 16)

    def test_hash_is_non_deterministic(self):
        """Same password should produce different hashes (due to salt)."""
        hash1 = password.hash_password("SecurePass123")
        hash2 = password.hash_password("SecurePass123")
        assert hash1 != hash2
        assert password.verify_password("SecurePass123", hash1) is True
        assert password.verify_password("SecurePass123", hash2) is True

    @pytest.mark.parametrize("plain", ["p", "SecurePass123", "pass:with:colons", "SecurePass123🔒", " "])
    def test_verify_own_hash(self, plain):
        """A password always verifies against its own hash."""
        assert password.verify_password(plain, password.hash_password(plain)) is True

    def test_verify_wrong_password(self):
        """Verification should fail for incorrect password."""
        hashed = password.hash_password("SecurePass123")
        assert password.verify_password("WrongPass456", hashed) is False
        assert password.verify_password("", hashed) is False
        assert password.verify_password("securepass123", hashed) is False

    def test_verify_known_vector(self):
        """Digest covers salt followed by password."""
        import hashlib
        stored = "abc:" + hashlib.sha256(b"abcpw").hexdigest()
        assert password.verify_password("pw", stored) is True

    def test_verify_splits_on_first_colon(self):
        """Only the first colon separates salt from digest."""
        stored = password.hash_password("pw")
        assert password.verify_password("pw", stored + ":extra") is False


class TestMalformedStoredHash:
    """Malformed stored values fail verification without raising."""

    @pytest.mark.parametrize("stored", ["", "nocolon", "$2b$garbage", None, "salt:éé"])
    def test_malformed_is_false(self, stored):
        assert password.verify_password("pw", stored) is False


class TestBcryptScheme:
    """Tests for the opt-in bcrypt scheme."""

    def test_bcrypt_hash_verifies(self):
        """bcrypt hashes verify through the same entry point."""
        hashed = password.hash_password("SecurePass123", scheme="bcrypt", work_factor=4)
        assert hashed.startswith("$2")
        assert password.verify_password("SecurePass123", hashed) is True
        assert password.verify_password("WrongPass456", hashed) is False

    def test_existing_bcrypt_hash(self):
        """Hashes produced by bcrypt directly are accepted."""
        stored = bcrypt.hashpw(b"pw", bcrypt.gensalt(rounds=4)).decode()
        assert password.verify_password("pw", stored) is True

    def test_overlong_password_rejected(self):
        """bcrypt input is limited to 72 bytes."""
        with pytest.raises(ValidationError):
            password.hash_password("é" * 37, scheme="bcrypt", work_factor=4)

    def test_72_byte_password_accepted(self):
        hashed = password.hash_password("p" * 72, scheme="bcrypt", work_factor=4)
        assert password.verify_password("p" * 72, hashed) is True

    def test_unknown_scheme_rejected(self):
        with pytest.raises(ValueError):
            password.hash_password("pw", scheme="md5")

"""Unit tests for app.core.security: bcrypt hashing and session token encode/decode."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from api_support import make_settings
from app.core.security import (
    USER_ID_CLAIM,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    """hash_password/verify_password round trip and failure modes."""

    def test_verify_matches_own_hash(self) -> None:
        for password in ("password1", "a much longer pass phrase", "ünïcödé-パスワード"):
            with self.subTest(password=password):
                digest = hash_password(password, rounds=4)
                self.assertNotEqual(digest, password)
                self.assertTrue(verify_password(password, digest))

    def test_verify_rejects_other_password(self) -> None:
        digest = hash_password("password1", rounds=4)
        self.assertFalse(verify_password("password2", digest))
        self.assertFalse(verify_password("Password1", digest))

    def test_hash_is_salted(self) -> None:
        self.assertNotEqual(
            hash_password("same-password", rounds=4),
            hash_password("same-password", rounds=4),
        )

    def test_work_factor_in_digest(self) -> None:
        self.assertTrue(hash_password("password1", rounds=5).startswith("$2b$05$"))

    def test_malformed_digest_returns_false(self) -> None:
        for digest in ("", "not-a-bcrypt-hash", "$2b$04$short"):
            with self.subTest(digest=digest):
                self.assertFalse(verify_password("password1", digest))

    def test_non_string_digest_returns_false(self) -> None:
        self.assertFalse(verify_password("password1", None))  # type: ignore[arg-type]

    def test_shared_72_byte_prefix_does_not_match(self) -> None:
        digest = hash_password("a" * 72, rounds=4)
        self.assertTrue(verify_password("a" * 72, digest))
        self.assertFalse(verify_password("a" * 72 + "Y" * 10, digest))

    def test_hash_refuses_input_over_72_bytes(self) -> None:
        # "\u00e9" is two bytes in UTF-8, so 40 of them are 80 bytes.
        for password in ("a" * 73, "\u00e9" * 40):
            with self.subTest(password=password):
                with self.assertRaises(ValueError):
                    hash_password(password, rounds=4)


class TestSessionTokens(unittest.TestCase):
    """create_access_token/decode_access_token with injected settings."""

    def setUp(self) -> None:
        self.settings = make_settings()

    def test_round_trip_claims(self) -> None:
        now = datetime.now(UTC).replace(microsecond=0)
        token = create_access_token("user-123", self.settings, now=now)
        payload = decode_access_token(token, self.settings)
        self.assertEqual(payload[USER_ID_CLAIM], "user-123")
        self.assertEqual(payload["iat"], int(now.timestamp()))
        self.assertEqual(payload["exp"], int((now + timedelta(days=7)).timestamp()))

    def test_expiry_follows_settings(self) -> None:
        settings = make_settings(JWT_EXPIRE_DAYS=1)
        now = datetime.now(UTC).replace(microsecond=0)
        payload = decode_access_token(create_access_token("u", settings, now=now), settings)
        self.assertEqual(payload["exp"] - payload["iat"], 24 * 3600)

    def test_expired_token_rejected(self) -> None:
        token = create_access_token(
            "user-123", self.settings, now=datetime.now(UTC) - timedelta(days=8)
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token, self.settings)

    def test_wrong_key_rejected(self) -> None:
        token = create_access_token("user-123", make_settings(JWT_SECRET_KEY="other-key"))
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token, self.settings)

    def test_token_without_exp_rejected(self) -> None:
        token = jwt.encode({USER_ID_CLAIM: "user-123"}, "test-secret-key", algorithm="HS256")
        with self.assertRaises(jwt.MissingRequiredClaimError):
            decode_access_token(token, self.settings)

    def test_garbage_rejected(self) -> None:
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token("not.a.token", self.settings)


if __name__ == "__main__":
    unittest.main()

"""Unit tests for Settings validation and derived values."""

import logging
import unittest

from pydantic import ValidationError

from api_support import make_settings
from app.core.config import Settings
from app.core.logging import resolve_log_level


class TestSettingsValidation(unittest.TestCase):
    def test_test_settings_are_valid(self) -> None:
        settings = make_settings()
        self.assertEqual(settings.APP_ENV, "test")
        self.assertEqual(settings.JWT_EXPIRE_DAYS, 7)
        self.assertEqual(settings.jwt_expire_seconds, 7 * 24 * 3600)

    def test_rejects_non_postgres_url(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://root@localhost/db")

    def test_default_url_names_psycopg2_driver(self) -> None:
        default = Settings.model_fields["DATABASE_URL"].default
        self.assertTrue(default.startswith("postgresql+psycopg2://"))

    def test_postgres_urls_pinned_to_psycopg2(self) -> None:
        for url in (
            "postgresql://u:p@db:5432/taskboard",
            "postgres://u:p@db:5432/taskboard",
            "postgres+psycopg2://u:p@db:5432/taskboard",
            "postgresql+psycopg2://u:p@db:5432/taskboard",
        ):
            with self.subTest(url=url):
                self.assertEqual(
                    make_settings(DATABASE_URL=url).DATABASE_URL,
                    "postgresql+psycopg2://u:p@db:5432/taskboard",
                )
        self.assertEqual(make_settings(DATABASE_URL="sqlite://").DATABASE_URL, "sqlite://")

    def test_rejects_empty_secret(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_SECRET_KEY="   ")

    def test_rejects_out_of_range_values(self) -> None:
        for field, value in (
            ("JWT_EXPIRE_DAYS", 0),
            ("JWT_EXPIRE_DAYS", 31),
            ("BCRYPT_ROUNDS", 3),
            ("BCRYPT_ROUNDS", 17),
            ("PORT", 0),
            ("CORS_URL", "localhost:3000"),
            ("LOG_LEVEL", "verbose"),
        ):
            with self.subTest(field=field, value=value):
                with self.assertRaises(ValidationError):
                    make_settings(**{field: value})

    def test_unknown_app_env_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(APP_ENV="staging")

    def test_cookie_secure_only_in_production(self) -> None:
        self.assertFalse(make_settings(APP_ENV="development").cookie_secure)
        self.assertFalse(make_settings(APP_ENV="test").cookie_secure)
        self.assertTrue(make_settings(APP_ENV="production").cookie_secure)


class TestLogLevel(unittest.TestCase):
    def test_development_is_debug(self) -> None:
        self.assertEqual(resolve_log_level(make_settings(APP_ENV="development")), logging.DEBUG)

    def test_production_is_warning(self) -> None:
        self.assertEqual(resolve_log_level(make_settings(APP_ENV="production")), logging.WARNING)

    def test_explicit_level_wins(self) -> None:
        settings = make_settings(APP_ENV="production", LOG_LEVEL="info")
        self.assertEqual(settings.LOG_LEVEL, "INFO")
        self.assertEqual(resolve_log_level(settings), logging.INFO)


if __name__ == "__main__":
    unittest.main()

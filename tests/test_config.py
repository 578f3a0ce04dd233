"""Unit tests for app.core.config: required signing key, validators and AuthConfig."""

import os
import unittest
from unittest.mock import patch

from pydantic import SecretStr, ValidationError

from app.core.config import AuthConfig, Settings


def _settings(**env: str) -> Settings:
    with patch.dict(os.environ, env, clear=True):
        return Settings(_env_file=None)


class TestSigningKeyRequired(unittest.TestCase):
    """Without JWT_SECRET the settings (and therefore the app) cannot be built."""

    def test_missing_secret_fails(self) -> None:
        with self.assertRaises(ValidationError):
            _settings()

    def test_blank_secret_fails(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="   ")

    def test_secret_is_not_echoed(self) -> None:
        settings = _settings(JWT_SECRET="super-secret-value")
        self.assertNotIn("super-secret-value", repr(settings))
        self.assertEqual(settings.JWT_SECRET.get_secret_value(), "super-secret-value")


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = _settings(JWT_SECRET="k")
        self.assertEqual(settings.JWT_EXPIRE_DAYS, 30)
        self.assertEqual(settings.BCRYPT_ROUNDS, 10)
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")
        self.assertEqual(settings.API_PREFIX, "")
        self.assertTrue(settings.BOOTSTRAP_ADMIN_OVERRIDE)

    def test_bootstrap_email_is_normalized(self) -> None:
        settings = _settings(JWT_SECRET="k", BOOTSTRAP_ADMIN_EMAIL="  Owner@Example.com ")
        self.assertEqual(settings.BOOTSTRAP_ADMIN_EMAIL, "owner@example.com")

    def test_log_level_is_uppercased(self) -> None:
        self.assertEqual(_settings(JWT_SECRET="k", LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")


class TestSettingsValidation(unittest.TestCase):
    def test_rejects_non_postgres_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="k", DATABASE_URL="sqlite:///app.db")

    def test_database_url_is_pinned_to_psycopg2(self) -> None:
        for url in (
            "postgresql://u:p@db:5432/app",
            "postgres://u:p@db:5432/app",
            "postgres+psycopg2://u:p@db:5432/app",
            " postgresql+psycopg2://u:p@db:5432/app ",
        ):
            with self.subTest(url=url):
                self.assertEqual(
                    _settings(JWT_SECRET="k", DATABASE_URL=url).DATABASE_URL,
                    "postgresql+psycopg2://u:p@db:5432/app",
                )

    def test_default_database_url_uses_psycopg2(self) -> None:
        self.assertTrue(
            _settings(JWT_SECRET="k").DATABASE_URL.startswith("postgresql+psycopg2://")
        )

    def test_rejects_out_of_range_values(self) -> None:
        for env in (
            {"JWT_EXPIRE_DAYS": "0"},
            {"BCRYPT_ROUNDS": "3"},
            {"BCRYPT_ROUNDS": "20"},
            {"LOG_LEVEL": "chatty"},
            {"API_PREFIX": "api"},
            {"BOOTSTRAP_ADMIN_EMAIL": "nobody"},
        ):
            with self.subTest(env=env):
                with self.assertRaises(ValidationError):
                    _settings(JWT_SECRET="k", **env)


class TestAuthConfig(unittest.TestCase):
    def test_from_settings(self) -> None:
        settings = _settings(
            JWT_SECRET="k",
            JWT_EXPIRE_DAYS="7",
            BCRYPT_ROUNDS="12",
            BOOTSTRAP_ADMIN_EMAIL="owner@example.com",
            BOOTSTRAP_ADMIN_OVERRIDE="false",
        )
        config = AuthConfig.from_settings(settings)
        self.assertEqual(config.jwt_secret.get_secret_value(), "k")
        self.assertEqual(config.token_ttl_days, 7)
        self.assertEqual(config.bcrypt_rounds, 12)
        self.assertEqual(config.bootstrap_admin_email, "owner@example.com")
        self.assertFalse(config.bootstrap_admin_override)

    def test_is_immutable(self) -> None:
        config = AuthConfig(jwt_secret=SecretStr("k"))
        with self.assertRaises(ValidationError):
            config.jwt_secret = SecretStr("other")

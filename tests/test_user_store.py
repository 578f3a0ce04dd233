"""Unit tests for app.services.user_store and app.services.accounts against SQLite."""

import unittest

from pydantic import SecretStr
from sqlalchemy import Text, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import AuthConfig
from app.core.errors import AuthenticationError, ConflictError, ValidationError
from app.models import Base, Resume, User
from app.services.accounts import authenticate, create_user_as_admin, register_user
from app.services.user_store import UserStore


def _config() -> AuthConfig:
    return AuthConfig(
        jwt_secret=SecretStr("store-tests-key-0123456789abcdef0123456789"),
        bcrypt_rounds=4,
        bootstrap_admin_email="boss@example.com",
    )


class StoreTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(self.engine)
        self.session = sessionmaker(bind=self.engine)()
        self.store = UserStore(self.session)

    def tearDown(self) -> None:
        self.session.close()
        self.engine.dispose()


class TestUserStore(StoreTestCase):
    def test_insert_and_find(self) -> None:
        user = self.store.insert("Alice@Example.com ", "hash", full_name="Alice")
        self.assertEqual(user.email, "alice@example.com")
        self.assertEqual(user.role, "user")
        self.assertEqual(user.plan, "free")
        self.assertIsNotNone(user.created_at)
        self.assertEqual(self.store.find_by_id(user.id).email, "alice@example.com")
        self.assertEqual(self.store.find_by_email(" ALICE@example.com").id, user.id)

    def test_find_missing(self) -> None:
        self.assertIsNone(self.store.find_by_id(123))
        self.assertIsNone(self.store.find_by_email("nobody@example.com"))

    def test_insert_duplicate_email(self) -> None:
        self.store.insert("alice@example.com", "hash")
        with self.assertRaises(ConflictError):
            self.store.insert("ALICE@example.com", "hash")

    def test_update(self) -> None:
        user = self.store.insert("alice@example.com", "hash")
        updated = self.store.update(user.id, plan="pro", role="viewer", email="A2@example.com")
        self.assertEqual(updated.plan, "pro")
        self.assertEqual(updated.role, "viewer")
        self.assertEqual(updated.email, "a2@example.com")

    def test_update_missing_returns_none(self) -> None:
        self.assertIsNone(self.store.update(999, plan="pro"))

    def test_update_to_own_email_is_not_a_conflict(self) -> None:
        user = self.store.insert("alice@example.com", "hash")
        self.assertEqual(self.store.update(user.id, email="alice@example.com").id, user.id)

    def test_update_email_conflict(self) -> None:
        self.store.insert("alice@example.com", "hash")
        bob = self.store.insert("bob@example.com", "hash")
        with self.assertRaises(ConflictError):
            self.store.update(bob.id, email="alice@example.com")

    def test_update_rejects_immutable_columns(self) -> None:
        user = self.store.insert("alice@example.com", "hash")
        with self.assertRaises(ValueError):
            self.store.update(user.id, id=5)

    def test_list_all_newest_first(self) -> None:
        a = self.store.insert("a@example.com", "hash")
        b = self.store.insert("b@example.com", "hash")
        self.assertEqual([u.id for u in self.store.list_all()], [b.id, a.id])

    def test_delete(self) -> None:
        user = self.store.insert("alice@example.com", "hash")
        self.assertTrue(self.store.delete(user.id))
        self.assertFalse(self.store.delete(user.id))
        self.assertIsNone(self.store.find_by_id(user.id))


class TestAccounts(StoreTestCase):
    def test_register_hashes_password(self) -> None:
        user = register_user(self.store, _config(), "alice@example.com", "pw123")
        self.assertNotEqual(user.password_hash, "pw123")
        self.assertEqual(authenticate(self.store, "alice@example.com", "pw123").id, user.id)

    def test_register_requires_fields(self) -> None:
        with self.assertRaises(ValidationError):
            register_user(self.store, _config(), "", "pw")
        with self.assertRaises(ValidationError):
            register_user(self.store, _config(), "a@example.com", "")

    def test_register_duplicate(self) -> None:
        register_user(self.store, _config(), "alice@example.com", "pw")
        with self.assertRaises(ConflictError) as ctx:
            register_user(self.store, _config(), " Alice@example.com", "pw")
        self.assertEqual(ctx.exception.message, "email already registered")

    def test_register_bootstrap_email(self) -> None:
        user = register_user(self.store, _config(), "Boss@example.com", "pw")
        self.assertEqual(user.role, "super_admin")

    def test_authenticate_rejects_bad_credentials(self) -> None:
        register_user(self.store, _config(), "alice@example.com", "pw123")
        with self.assertRaises(AuthenticationError):
            authenticate(self.store, "alice@example.com", "wrong")
        with self.assertRaises(AuthenticationError):
            authenticate(self.store, "bob@example.com", "pw123")

    def test_admin_create_bootstrap_email_ignores_requested_role(self) -> None:
        created = create_user_as_admin(self.store, _config(), "boss@example.com", role="viewer")
        self.assertEqual(created.user.role, "super_admin")
        self.assertIsNotNone(created.generated_password)

    def test_admin_create_with_password(self) -> None:
        created = create_user_as_admin(
            self.store, _config(), "c@example.com", password="given", plan="  "
        )
        self.assertIsNone(created.generated_password)
        self.assertEqual(created.user.plan, "free")
        self.assertEqual(authenticate(self.store, "c@example.com", "given").id, created.user.id)


class TestFreeTextColumns(unittest.TestCase):
    """User-supplied text is stored in unbounded TEXT columns, so PostgreSQL never truncates or rejects it."""

    def test_columns_are_text(self) -> None:
        for column in (
            User.__table__.c.email,
            User.__table__.c.full_name,
            User.__table__.c.plan,
            User.__table__.c.password_hash,
            Resume.__table__.c.title,
            Resume.__table__.c.content,
        ):
            with self.subTest(column=column.name):
                self.assertIsInstance(column.type, Text)
                self.assertIsNone(column.type.length)


if __name__ == "__main__":
    unittest.main()

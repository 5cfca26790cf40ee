"""Unit tests for videobelajar.services.users."""

import unittest

from videobelajar.core.security import is_hashed, verify_password
from videobelajar.models import User
from videobelajar.schemas import UserCreate, UserUpdate
from videobelajar.services import users as user_service
from videobelajar.services.errors import (
    DuplicateEmailError,
    ForbiddenError,
    NoChangesError,
    NotFoundError,
)
from tests.support import TestingSessionLocal, add_user, reset_database


class UserServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        reset_database()
        self.db = TestingSessionLocal()

    def tearDown(self) -> None:
        self.db.close()


class TestCreateUser(UserServiceTestCase):
    def test_defaults(self) -> None:
        user = user_service.create_user(
            self.db,
            UserCreate(name="Siti Aminah", email="siti@example.com", password="rahasia123"),
        )
        self.assertEqual(user.role, "student")
        self.assertTrue(user.avatar.startswith("https://cdn.jsdelivr.net/"))
        self.assertTrue(is_hashed(user.password))
        self.assertFalse(user.email_verified)

    def test_duplicate_email(self) -> None:
        add_user(self.db, email="siti@example.com")
        with self.assertRaises(DuplicateEmailError) as ctx:
            user_service.create_user(
                self.db,
                UserCreate(name="Siti Lain", email="SITI@example.com", password="rahasia123"),
            )
        self.assertEqual(ctx.exception.message, "Email sudah terdaftar")


class TestUpdateUser(UserServiceTestCase):
    def test_partial_update(self) -> None:
        user = add_user(self.db)
        updated = user_service.update_user(self.db, user.id, UserUpdate(phone="081234567890"))
        self.assertEqual(updated.phone, "081234567890")
        self.assertEqual(updated.name, "Siti Aminah")

    def test_email_held_by_another_user(self) -> None:
        add_user(self.db, email="budi@example.com", name="Budi")
        user = add_user(self.db)
        with self.assertRaises(DuplicateEmailError) as ctx:
            user_service.update_user(self.db, user.id, UserUpdate(email="budi@example.com"))
        self.assertEqual(ctx.exception.message, "Email sudah digunakan oleh user lain")

    def test_keeping_own_email_is_allowed(self) -> None:
        user = add_user(self.db)
        updated = user_service.update_user(self.db, user.id, UserUpdate(email="siti@example.com", name="Siti A"))
        self.assertEqual(updated.name, "Siti A")

    def test_no_fields(self) -> None:
        user = add_user(self.db)
        with self.assertRaises(NoChangesError):
            user_service.update_user(self.db, user.id, UserUpdate())

    def test_missing_user(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            user_service.update_user(self.db, 404, UserUpdate(name="Siapa"))
        self.assertEqual(ctx.exception.message, "User tidak ditemukan")


class TestDeleteAndReset(UserServiceTestCase):
    def test_admin_cannot_be_deleted(self) -> None:
        admin = add_user(self.db, email="root@example.com", role="admin")
        with self.assertRaises(ForbiddenError) as ctx:
            user_service.delete_user(self.db, admin.id)
        self.assertEqual(ctx.exception.message, "Admin user tidak dapat dihapus")
        self.assertIsNotNone(self.db.get(User, admin.id))

    def test_delete_student(self) -> None:
        user = add_user(self.db)
        user_service.delete_user(self.db, user.id)
        with self.assertRaises(NotFoundError):
            user_service.get_user(self.db, user.id)

    def test_reset_password(self) -> None:
        user = add_user(self.db)
        updated = user_service.reset_password(self.db, user.id, "baru12345")
        self.assertTrue(verify_password("baru12345", updated.password))
        self.assertFalse(verify_password("rahasia123", updated.password))

    def test_list_newest_first(self) -> None:
        first = add_user(self.db, email="a@example.com")
        second = add_user(self.db, email="b@example.com")
        self.assertEqual([u.id for u in user_service.list_users(self.db)], [second.id, first.id])

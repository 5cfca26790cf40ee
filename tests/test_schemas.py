"""Unit tests for request schemas and validation error formatting."""

import importlib.util
import unittest
import warnings
from types import SimpleNamespace

from pydantic import ValidationError
from pydantic.warnings import PydanticDeprecatedSince20

from videobelajar.core.errors import format_validation_errors
from videobelajar.schemas import (
    AuthUser,
    CourseCreate,
    CourseUpdate,
    RegisterRequest,
    ResetPasswordRequest,
    UserCreate,
    UserUpdate,
)
from videobelajar.schemas import auth as auth_schemas
from videobelajar.schemas.common import validate_link, validate_phone
from tests.support import COURSE_BODY


def _messages(exc: ValidationError) -> dict[str, str]:
    return {e["field"]: e["msg"] for e in format_validation_errors(exc.errors())}


class TestRegisterRequest(unittest.TestCase):
    def test_normalizes_email_and_trims_name(self) -> None:
        body = RegisterRequest(name="  Siti  ", email=" Siti@Example.COM ", password="rahasia")
        self.assertEqual(body.name, "Siti")
        self.assertEqual(body.email, "siti@example.com")

    def test_collects_field_messages(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            RegisterRequest(name="S", email="not-an-email", password="123", gender="Lainnya")
        messages = _messages(ctx.exception)
        self.assertEqual(messages["name"], "Name must be at least 2 characters long")
        self.assertEqual(messages["email"], "Please provide a valid email")
        self.assertEqual(messages["password"], "Password must be at least 6 characters long")
        self.assertEqual(messages["gender"], "Gender must be either Laki-laki or Perempuan")

    def test_phone_and_gender_optional(self) -> None:
        body = RegisterRequest(name="Siti", email="siti@example.com", password="rahasia", phone="", gender="")
        self.assertIsNone(body.phone)
        self.assertIsNone(body.gender)


class TestPhone(unittest.TestCase):
    def test_accepts_indonesian_mobile_formats(self) -> None:
        self.assertEqual(validate_phone("081234567890"), "081234567890")
        self.assertEqual(validate_phone("+62 812-3456-7890"), "+6281234567890")
        self.assertEqual(validate_phone("6281234567"), "6281234567")

    def test_rejects_landline(self) -> None:
        with self.assertRaises(ValueError):
            validate_phone("0215551234")


class TestLinks(unittest.TestCase):
    def test_urls_and_absolute_paths(self) -> None:
        self.assertEqual(validate_link("https://example.com/a.png", "bad"), "https://example.com/a.png")
        self.assertEqual(validate_link("/images/cards/card1.png", "bad"), "/images/cards/card1.png")
        self.assertIsNone(validate_link(None, "bad"))

    def test_rejects_other_values(self) -> None:
        for value in ("card1.png", "ftp://example.com/x", "//cdn.example.com/x"):
            with self.assertRaises(ValueError):
                validate_link(value, "bad")


class TestUserSchemas(unittest.TestCase):
    def test_role_must_be_known(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            UserCreate(name="Siti", email="siti@example.com", password="rahasia", role="owner")
        self.assertEqual(_messages(ctx.exception)["role"], "Role must be admin, user, or student")

    def test_update_changes_only_supplied_fields(self) -> None:
        self.assertEqual(UserUpdate().changes(), {})
        self.assertEqual(UserUpdate(phone="081234567890").changes(), {"phone": "081234567890"})

    def test_update_rejects_null_name(self) -> None:
        with self.assertRaises(ValidationError):
            UserUpdate(name=None)

    def test_reset_password_alias(self) -> None:
        self.assertEqual(ResetPasswordRequest.model_validate({"newPassword": "baru123"}).new_password, "baru123")
        with self.assertRaises(ValidationError) as ctx:
            ResetPasswordRequest.model_validate({"newPassword": "123"})
        self.assertEqual(
            _messages(ctx.exception)["newPassword"],
            "New password must be at least 6 characters long",
        )


class TestAuthUser(unittest.TestCase):
    def test_reads_orm_attributes(self) -> None:
        row = SimpleNamespace(
            id=7, name="Siti", email="siti@example.com", phone=None, gender=None, role="student", avatar=None
        )
        user = AuthUser.model_validate(row)
        self.assertEqual(user.id, 7)
        self.assertEqual(user.role, "student")

    def test_schema_module_defines_without_deprecation_warnings(self) -> None:
        spec = importlib.util.spec_from_file_location("auth_schemas_copy", auth_schemas.__file__)
        module = importlib.util.module_from_spec(spec)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            spec.loader.exec_module(module)
        deprecated = [w for w in caught if issubclass(w.category, PydanticDeprecatedSince20)]
        self.assertEqual(deprecated, [])


class TestCourseSchemas(unittest.TestCase):
    def test_defaults_and_trimming(self) -> None:
        body = dict(COURSE_BODY, title="  Belajar SQL  ")
        del body["rating"], body["review_count"]
        course = CourseCreate(**body)
        self.assertEqual(course.title, "Belajar SQL")
        self.assertEqual(course.rating, 0)
        self.assertEqual(course.review_count, 0)

    def test_rule_messages(self) -> None:
        body = dict(
            COURSE_BODY,
            title="ab",
            description="pendek",
            rating=6,
            review_count=-1,
            category="Musik",
            photos="bukan-url",
        )
        with self.assertRaises(ValidationError) as ctx:
            CourseCreate(**body)
        messages = _messages(ctx.exception)
        self.assertEqual(messages["title"], "Title must be at least 3 characters long")
        self.assertEqual(messages["description"], "Description must be at least 10 characters long")
        self.assertEqual(messages["rating"], "Rating must be between 0 and 5")
        self.assertEqual(messages["review_count"], "Review count must be a non-negative integer")
        self.assertEqual(
            messages["category"],
            "Category must be one of: Pemasaran, Desain, Pengembangan Diri, Bisnis",
        )
        self.assertEqual(messages["photos"], "Photos must be a valid URL")

    def test_partial_update(self) -> None:
        update = CourseUpdate(price="200K", photos=None)
        self.assertEqual(update.changes(), {"price": "200K", "photos": None})

    def test_partial_update_rejects_null_title(self) -> None:
        with self.assertRaises(ValidationError):
            CourseUpdate(title=None)

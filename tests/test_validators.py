import unittest
import sys
import os

# Add the parent directory to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.translator import load_translations
from models.user import UserCreate
from registration.exceptions import InvalidInput
from registration.validators import (
    parse_age,
    parse_user_id,
    validate_email,
    validate_registration,
)


class TestValidateRegistration(unittest.TestCase):
    """Test the validate_registration function."""

    @classmethod
    def setUpClass(cls):
        load_translations()

    def _validate(self, **fields):
        data = {"full_name": "Ali Reza", "email": "ali@example.com", "age": 30}
        data.update(fields)
        return validate_registration(UserCreate(**data))

    def test_normalizes_valid_input(self):
        """Name and email are trimmed, email lowercased and age coerced."""
        user = self._validate(full_name="  Ali Reza ", email=" Ali@Example.com ", age="30")
        self.assertEqual(user.full_name, "Ali Reza")
        self.assertEqual(user.email, "ali@example.com")
        self.assertEqual(user.age, 30)

    def test_age_bounds(self):
        """Ages 1 and 150 pass, anything outside fails."""
        self.assertEqual(self._validate(age=1).age, 1)
        self.assertEqual(self._validate(age=150).age, 150)
        for age in (0, 151, -5, 150.5, 0.5):
            with self.subTest(age=age):
                with self.assertRaises(InvalidInput) as ctx:
                    self._validate(age=age)
                self.assertEqual(ctx.exception.message, "The age provided is not valid")

    def test_fractional_age_is_truncated(self):
        self.assertEqual(self._validate(age=30.9).age, 30)
        self.assertEqual(self._validate(age=" 42.5 ").age, 42)

    def test_missing_or_non_numeric_age(self):
        for age in (None, "", "thirty", "nan", "inf"):
            with self.subTest(age=age):
                with self.assertRaises(InvalidInput):
                    self._validate(age=age)

    def test_short_names(self):
        for name in ("A", "  ", " B ", None):
            with self.subTest(name=name):
                with self.assertRaises(InvalidInput) as ctx:
                    self._validate(full_name=name)
                self.assertEqual(ctx.exception.message, "The name provided is too short")

    def test_malformed_emails(self):
        for email in ("bademail", "a@b", "a b@c.d", "@b.c", "a@@b.c", "", None):
            with self.subTest(email=email):
                with self.assertRaises(InvalidInput) as ctx:
                    self._validate(email=email)
                self.assertEqual(ctx.exception.message, "Please enter a valid email address")

    def test_age_is_checked_first(self):
        """With every field invalid, the age error is reported."""
        with self.assertRaises(InvalidInput) as ctx:
            validate_registration(UserCreate(full_name="A", email="bad", age=0))
        self.assertEqual(ctx.exception.message, "The age provided is not valid")

    def test_name_is_checked_before_email(self):
        with self.assertRaises(InvalidInput) as ctx:
            validate_registration(UserCreate(full_name="A", email="bad", age=20))
        self.assertEqual(ctx.exception.message, "The name provided is too short")

    def test_localized_message(self):
        with self.assertRaises(InvalidInput) as ctx:
            validate_email("bademail", lang="fa")
        self.assertEqual(ctx.exception.message, "لطفاً یک ایمیل معتبر وارد کنید")


class TestParseAge(unittest.TestCase):
    """Test the parse_age function."""

    def test_numbers_and_numeric_strings(self):
        self.assertEqual(parse_age(30), 30.0)
        self.assertEqual(parse_age("30"), 30.0)
        self.assertEqual(parse_age(" 7.5 "), 7.5)

    def test_rejected_values(self):
        self.assertIsNone(parse_age(True))
        self.assertIsNone(parse_age([30]))
        self.assertIsNone(parse_age("abc"))
        self.assertIsNone(parse_age(float("nan")))

    def test_only_plain_decimal_strings(self):
        self.assertIsNone(parse_age("\u06f3\u06f0"))
        self.assertIsNone(parse_age("1_0"))
        self.assertIsNone(parse_age("nan"))
        self.assertEqual(parse_age("3e1"), 30.0)
        self.assertEqual(parse_age("30."), 30.0)


class TestParseUserId(unittest.TestCase):
    """Test the parse_user_id function."""

    def test_numeric_identifiers(self):
        self.assertEqual(parse_user_id("12"), 12)
        self.assertEqual(parse_user_id("999999"), 999999)
        self.assertEqual(parse_user_id("-3"), -3)

    def test_leading_digits_are_used(self):
        self.assertEqual(parse_user_id("7abc"), 7)
        self.assertEqual(parse_user_id(" 8"), 8)

    def test_non_numeric_identifiers(self):
        self.assertIsNone(parse_user_id("abc"))
        self.assertIsNone(parse_user_id(""))
        self.assertIsNone(parse_user_id("x12"))

    def test_non_ascii_digits_are_not_numbers(self):
        self.assertIsNone(parse_user_id("\u06f1\u06f2"))
        self.assertIsNone(parse_user_id("\u0661"))


if __name__ == '__main__':
    unittest.main()

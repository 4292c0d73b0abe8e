from django.core.exceptions import ValidationError
from django.test import TestCase

from apps.users.factories import UserFactory
from apps.users.validators import validate_time_zone


class TestUserModel(TestCase):
    """Tests for custom User model methods and fields."""

    def test_get_display_name_returns_full_name(self):
        user = UserFactory(first_name="Alice", last_name="Smith")
        self.assertEqual(user.get_display_name(), "Alice Smith")

    def test_get_display_name_falls_back_to_email(self):
        user = UserFactory(first_name="", last_name="")
        self.assertEqual(user.get_display_name(), user.email)

    def test_str_uses_display_name(self):
        user = UserFactory(first_name="Alice", last_name="Smith")
        self.assertEqual(str(user), "Alice Smith")

    def test_timezone_defaults_to_empty(self):
        user = UserFactory()
        user.refresh_from_db()
        self.assertEqual(user.timezone, "")

    def test_full_clean_accepts_known_timezone(self):
        user = UserFactory(timezone="Europe/Oslo")
        user.full_clean(exclude=["password"])  # should not raise

    def test_full_clean_rejects_unknown_timezone(self):
        user = UserFactory(timezone="Europe/Nowhere")
        with self.assertRaises(ValidationError) as ctx:
            user.full_clean(exclude=["password"])
        self.assertIn("timezone", ctx.exception.message_dict)


class TestValidateTimeZone(TestCase):
    def test_empty_value_passes(self):
        validate_time_zone("")  # should not raise

    def test_known_value_passes(self):
        validate_time_zone("America/New_York")  # should not raise

    def test_unknown_value_raises(self):
        with self.assertRaises(ValidationError):
            validate_time_zone("???")

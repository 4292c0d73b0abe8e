from django.test import TestCase
from django.urls import reverse

from apps.timezones.zones import TimeZoneSource
from apps.users.factories import UserFactory

PROFILE_URL = reverse("users:user_profile")


class TestProfileView(TestCase):
    """Tests for ProfileView GET/POST logic."""

    def setUp(self):
        self.user = UserFactory(password="pass", timezone="Asia/Tokyo")

    def _post_data(self, **overrides):
        data = {
            "profile-email": self.user.email,
            "profile-first_name": self.user.first_name,
            "profile-last_name": self.user.last_name,
            "profile-timezone": self.user.timezone,
        }
        data.update({f"profile-{key}": value for key, value in overrides.items()})
        return data

    def test_get_returns_200_for_authenticated_user(self):
        self.client.force_login(self.user)
        response = self.client.get(PROFILE_URL)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["resolved_time_zone"].name, "Asia/Tokyo")
        self.assertContains(response, "Asia/Tokyo")

    def test_unauthenticated_redirects_to_login(self):
        response = self.client.get(PROFILE_URL)
        self.assertEqual(response.status_code, 302)
        self.assertIn("/admin/login/", response["Location"])

    def test_post_updates_timezone(self):
        self.client.force_login(self.user)
        response = self.client.post(PROFILE_URL, self._post_data(timezone="Europe/Oslo", first_name="Updated"))

        self.assertEqual(response.status_code, 200)
        self.user.refresh_from_db()
        self.assertEqual(self.user.timezone, "Europe/Oslo")
        self.assertEqual(self.user.first_name, "Updated")
        messages = list(response.context["messages"])
        self.assertTrue(any("successfully saved" in str(m) for m in messages))

    def test_post_renders_with_new_timezone(self):
        self.client.force_login(self.user)
        response = self.client.post(PROFILE_URL, self._post_data(timezone="Europe/Oslo"))

        resolved = response.context["resolved_time_zone"]
        self.assertEqual(resolved.name, "Europe/Oslo")
        self.assertEqual(resolved.source, TimeZoneSource.PROFILE)
        self.assertEqual(str(response.context["current_tz"]), "Europe/Oslo")

    def test_post_drops_session_override(self):
        self.client.force_login(self.user)
        self.client.get(PROFILE_URL, {"timezone": "America/New_York"})
        self.assertEqual(self.client.session["timezone"], "America/New_York")

        self.client.post(PROFILE_URL, self._post_data(timezone="Europe/Oslo"))

        self.assertNotIn("timezone", self.client.session)
        response = self.client.get(PROFILE_URL)
        self.assertEqual(response.context["resolved_time_zone"].name, "Europe/Oslo")

    def test_post_clearing_timezone_falls_back_to_default(self):
        self.client.force_login(self.user)
        response = self.client.post(PROFILE_URL, self._post_data(timezone=""))

        self.user.refresh_from_db()
        self.assertEqual(self.user.timezone, "")
        self.assertEqual(response.context["resolved_time_zone"].source, TimeZoneSource.DEFAULT)

    def test_post_invalid_timezone_keeps_previous_value(self):
        self.client.force_login(self.user)
        response = self.client.post(PROFILE_URL, self._post_data(timezone="Europe/Nowhere"))

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context["form"].errors)
        self.user.refresh_from_db()
        self.assertEqual(self.user.timezone, "Asia/Tokyo")

    def test_post_with_timezone_in_url_drops_session_override(self):
        self.client.force_login(self.user)

        response = self.client.post(
            PROFILE_URL + "?timezone=America/New_York", self._post_data(timezone="Europe/Oslo")
        )

        self.assertEqual(response.context["resolved_time_zone"].name, "Europe/Oslo")
        self.assertNotIn("timezone", self.client.session)
        response = self.client.get(PROFILE_URL)
        self.assertEqual(response.context["resolved_time_zone"].name, "Europe/Oslo")
        self.assertEqual(response.context["resolved_time_zone"].source, TimeZoneSource.PROFILE)

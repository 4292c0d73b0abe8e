from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.users.validators import validate_time_zone


class User(AbstractUser):
    """
    Add additional fields to the user model here.
    """

    timezone = models.CharField(
        _("time zone"),
        max_length=100,
        blank=True,
        default="",
        validators=[validate_time_zone],
        help_text=_("Used to display dates when no other time zone was picked for the session."),
    )

    def __str__(self):
        return self.get_display_name()

    def get_display_name(self) -> str:
        if self.get_full_name().strip():
            return self.get_full_name()
        return self.email or self.username

from django import forms
from django.contrib.auth.forms import UserChangeForm as BaseUserChangeForm
from django.utils.translation import gettext_lazy as _

from apps.timezones.zones import known_time_zones

from .models import User


class UserChangeForm(BaseUserChangeForm):
    email = forms.EmailField(label=_("Email"), required=True)
    timezone = forms.ChoiceField(label=_("Time Zone"), required=False)
    password = None

    class Meta:
        model = User
        fields = ("email", "first_name", "last_name", "timezone")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        timezone = self.fields.get("timezone")
        timezone.choices = [("", _("Not Set"))] + sorted((tz, tz) for tz in known_time_zones())

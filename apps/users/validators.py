from django.core.exceptions import ValidationError
from django.utils.translation import gettext as _

from apps.timezones.zones import is_known_time_zone


def validate_time_zone(value):
    if value and not is_known_time_zone(value):
        raise ValidationError(
            _("{value} is not a known time zone.").format(value=value),
            code="invalid_time_zone",
        )

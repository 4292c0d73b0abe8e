import functools
from dataclasses import dataclass
from zoneinfo import ZoneInfo, available_timezones

from django.db import models
from django.utils.translation import gettext_lazy as _


class InvalidTimeZoneError(ValueError):
    pass


class TimeZoneSource(models.TextChoices):
    PARAMETER = "parameter", _("Request parameter")
    SESSION = "session", _("Session")
    COOKIE = "cookie", _("Cookie")
    PROFILE = "profile", _("User settings")
    DEFAULT = "default", _("Default value")


@dataclass(frozen=True)
class ResolvedTimeZone:
    """The time zone picked for the current request and where it came from."""

    name: str
    zone: ZoneInfo
    source: TimeZoneSource
    remember_in_cookie: bool = False

    def __str__(self):
        return self.name


@functools.cache
def known_time_zones() -> frozenset[str]:
    """All identifiers the runtime tz database knows about."""
    return frozenset(available_timezones())


def is_known_time_zone(name: str) -> bool:
    return name in known_time_zones()


def parse_time_zone(name: str) -> ZoneInfo:
    """
    Return the ZoneInfo for `name` or raise InvalidTimeZoneError.

    Only identifiers listed by the tz database are accepted, so directory names
    ("America") or paths never reach the ZoneInfo loader.
    """
    if not isinstance(name, str) or not is_known_time_zone(name):
        raise InvalidTimeZoneError(f"{name!r} is not a known time zone")
    return ZoneInfo(name)

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.timezones.context import set_resolved_time_zone, unset_resolved_time_zone
from apps.timezones.interceptors import RequestInterceptor
from apps.timezones.zones import InvalidTimeZoneError, ResolvedTimeZone, TimeZoneSource, parse_time_zone

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
ONE_YEAR = 60 * 60 * 24 * 365


def _is_authenticated(request) -> bool:
    user = getattr(request, "user", None)
    return bool(user and user.is_authenticated)


class TimeZoneResolver(RequestInterceptor):
    """
    Pick the time zone used to format dates while handling a request.

    Authenticated users: request parameter, then session, then the profile
    setting, then the default. Anonymous users: request parameter, then cookie,
    then the default. The first source holding a known identifier wins.

    A time zone passed as a parameter is remembered: in the session for
    authenticated users, in a long-lived cookie for anonymous ones.
    """

    def __init__(
        self,
        parameter_name="timezone",
        session_key="timezone",
        cookie_name="timezone",
        default_time_zone="GMT",
        cookie_age=ONE_YEAR,
        cookie_path="/",
        cookie_domain=None,
        cookie_secure=False,
        cookie_httponly=False,
        cookie_samesite="Lax",
    ):
        try:
            default_zone = parse_time_zone(default_time_zone)
        except InvalidTimeZoneError as e:
            raise ImproperlyConfigured(f"Default time zone {default_time_zone!r} is not a known time zone") from e

        self.default = ResolvedTimeZone(default_time_zone, default_zone, TimeZoneSource.DEFAULT)
        self.parameter_name = parameter_name
        self.session_key = session_key
        self.cookie_name = cookie_name
        self.cookie_age = cookie_age
        self.cookie_path = cookie_path
        self.cookie_domain = cookie_domain
        self.cookie_secure = cookie_secure
        self.cookie_httponly = cookie_httponly
        self.cookie_samesite = cookie_samesite

    @classmethod
    def from_settings(cls) -> "TimeZoneResolver":
        return cls(
            parameter_name=getattr(settings, "TIMEZONE_PARAMETER_NAME", "timezone"),
            session_key=getattr(settings, "TIMEZONE_SESSION_KEY", "timezone"),
            cookie_name=getattr(settings, "TIMEZONE_COOKIE_NAME", "timezone"),
            default_time_zone=getattr(settings, "TIMEZONE_DEFAULT", "GMT"),
            cookie_age=getattr(settings, "TIMEZONE_COOKIE_AGE", ONE_YEAR),
            cookie_path=getattr(settings, "TIMEZONE_COOKIE_PATH", "/"),
            cookie_domain=getattr(settings, "TIMEZONE_COOKIE_DOMAIN", None),
            cookie_secure=getattr(settings, "TIMEZONE_COOKIE_SECURE", False),
            cookie_httponly=getattr(settings, "TIMEZONE_COOKIE_HTTPONLY", False),
            cookie_samesite=getattr(settings, "TIMEZONE_COOKIE_SAMESITE", "Lax"),
        )

    # --- Interceptor hooks ---

    def before_request(self, request):
        resolved = self.resolve(request)
        request.time_zone = resolved
        request._time_zone_context_token = set_resolved_time_zone(resolved)

    def after_request(self, request, response):
        try:
            resolved = getattr(request, "time_zone", None)
            if response is not None and resolved is not None and resolved.remember_in_cookie:
                logger.debug("Setting time zone to %r in cookie", resolved.name)
                self.store_in_cookie(response, resolved.name)
        finally:
            unset_resolved_time_zone(request.__dict__.pop("_time_zone_context_token", None))

    # --- Resolution ---

    def resolve(self, request, use_parameter=True) -> ResolvedTimeZone:
        if _is_authenticated(request):
            return self._resolve_for_user(request, use_parameter)
        return self._resolve_for_anonymous(request, use_parameter)

    def _resolve_for_user(self, request, use_parameter=True) -> ResolvedTimeZone:
        resolved = None
        if use_parameter:
            resolved = self._parse(self.get_parameter(request), TimeZoneSource.PARAMETER)
        if resolved is not None:
            self._log_resolved(resolved)
            logger.debug("Setting time zone to %r in session", resolved.name)
            self.store_in_session(request, resolved.name)
            return resolved

        resolved = self._parse(self.get_from_session(request), TimeZoneSource.SESSION)
        if resolved is not None:
            self._log_resolved(resolved)
            return resolved

        resolved = self._parse(getattr(request.user, "timezone", None), TimeZoneSource.PROFILE)
        if resolved is not None:
            self._log_resolved(resolved)
            return resolved

        self._log_resolved(self.default)
        return self.default

    def _resolve_for_anonymous(self, request, use_parameter=True) -> ResolvedTimeZone:
        resolved = None
        if use_parameter:
            resolved = self._parse(self.get_parameter(request), TimeZoneSource.PARAMETER, remember_in_cookie=True)
        if resolved is not None:
            self._log_resolved(resolved)
            return resolved

        resolved = self._parse(request.COOKIES.get(self.cookie_name), TimeZoneSource.COOKIE)
        if resolved is not None:
            self._log_resolved(resolved)
            return resolved

        self._log_resolved(self.default)
        return self.default

    def _parse(self, value, source, **kwargs) -> ResolvedTimeZone | None:
        if isinstance(value, str):
            value = value.strip()
        if not value:
            return None
        try:
            zone = parse_time_zone(value)
        except InvalidTimeZoneError:
            logger.warning("Provided time zone %r from %s is invalid, ignoring it", value, source.value)
            return None
        return ResolvedTimeZone(value, zone, source, **kwargs)

    def _log_resolved(self, resolved):
        logger.debug("Setting time zone to %r from %s", resolved.name, resolved.source.value)

    # --- Sources ---

    def get_parameter(self, request) -> str | None:
        value = request.GET.get(self.parameter_name)
        # Only urlencoded bodies are read, so views can still stream other bodies.
        if value is None and request.method == "POST" and request.content_type == FORM_CONTENT_TYPE:
            value = request.POST.get(self.parameter_name)
        return value

    def get_from_session(self, request):
        session = getattr(request, "session", None)
        if session is None:
            return None
        return session.get(self.session_key)

    def store_in_session(self, request, name: str):
        session = getattr(request, "session", None)
        if session is None:
            logger.warning("No session available, time zone %r not stored", name)
            return
        session[self.session_key] = name

    def store_in_cookie(self, response, name: str | None):
        if name is None:
            response.delete_cookie(
                self.cookie_name,
                path=self.cookie_path,
                domain=self.cookie_domain,
                samesite=self.cookie_samesite,
            )
            return
        response.set_cookie(
            self.cookie_name,
            name,
            max_age=self.cookie_age,
            path=self.cookie_path,
            domain=self.cookie_domain,
            secure=self.cookie_secure,
            httponly=self.cookie_httponly,
            samesite=self.cookie_samesite,
        )

    # --- Helpers for views ---

    def forget_session_choice(self, request):
        """Drop the time zone a parameter stored in the session, if any."""
        session = getattr(request, "session", None)
        if session is not None:
            session.pop(self.session_key, None)

    def refresh(self, request) -> ResolvedTimeZone:
        """
        Resolve again mid-request, e.g. after the user changed their settings.

        The request parameter is skipped so it cannot write a stale choice back
        into the session. `after_request` restores the previous context; when
        `before_request` did not run, the token kept here is the one it resets.
        """
        request.time_zone = self.resolve(request, use_parameter=False)
        token = set_resolved_time_zone(request.time_zone)
        request.__dict__.setdefault("_time_zone_context_token", token)
        return request.time_zone

from apps.timezones.interceptors import InterceptorMiddleware
from apps.timezones.resolver import TimeZoneResolver


class TimeZoneMiddleware(InterceptorMiddleware):
    """
    Activate the time zone resolved for each request and reset it afterwards.

    Must come after SessionMiddleware and AuthenticationMiddleware.
    """

    def get_interceptor(self):
        return TimeZoneResolver.from_settings()

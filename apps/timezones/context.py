from contextlib import contextmanager
from contextvars import ContextVar, Token

from django.utils import timezone

import sentry_sdk

from apps.timezones.zones import ResolvedTimeZone

_context: ContextVar[ResolvedTimeZone | None] = ContextVar("time_zone", default=None)


def get_resolved_time_zone() -> ResolvedTimeZone | None:
    """
    Get the time zone set in the current thread/context via `set_resolved_time_zone`.
    Returns None if no time zone is set.
    """
    return _context.get()


def set_resolved_time_zone(resolved: ResolvedTimeZone | None) -> Token:
    """
    Set the time zone used for formatting in the current thread/context.
    Used in middleware once the time zone for a request is resolved.
    """
    token = _context.set(resolved)
    _activate(resolved)
    return token


def unset_resolved_time_zone(token: Token | None = None):
    """
    Reset the time zone context. If a token is provided, restore the previous value.
    """
    if token is None:
        _context.set(None)
    else:
        _context.reset(token)
    _activate(get_resolved_time_zone())


@contextmanager
def resolved_time_zone(resolved: ResolvedTimeZone | None):
    """Context manager for setting the time zone outside requests."""
    token = set_resolved_time_zone(resolved)
    try:
        yield resolved
    finally:
        unset_resolved_time_zone(token)


def _activate(resolved: ResolvedTimeZone | None):
    scope = sentry_sdk.get_current_scope()
    if resolved is None:
        timezone.deactivate()
        scope.remove_tag("timezone")
    else:
        timezone.activate(resolved.zone)
        scope.set_tag("timezone", resolved.name)

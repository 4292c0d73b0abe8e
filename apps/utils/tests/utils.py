from urllib.parse import urlencode

from django.contrib.auth.models import AnonymousUser
from django.contrib.sessions.backends.file import SessionStore
from django.test import RequestFactory

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def create_test_request(
    path="/",
    user=None,
    method="get",
    data=None,
    cookies=None,
    with_session=True,
    multipart=False,
):
    """
    Create a request for testing middleware and views.

    Args:
        path: URL path for the request (default: "/")
        user: User instance or None for AnonymousUser
        method: HTTP method - "get" or "post" (default: "get")
        data: Query parameters for GET, body fields for POST
        cookies: Mapping of cookie names to values sent with the request
        with_session: If True, attach a SessionStore
        multipart: If True, POST bodies are multipart instead of urlencoded

    Returns:
        A request object suitable for passing to middleware and views.
    """
    factory = RequestFactory()
    for name, value in (cookies or {}).items():
        factory.cookies[name] = value

    if method.lower() == "post":
        if multipart:
            request = factory.post(path, data or {})
        else:
            request = factory.post(path, urlencode(data or {}), content_type=FORM_CONTENT_TYPE)
    else:
        request = factory.get(path, data or {})

    request.user = user or AnonymousUser()
    if with_session:
        request.session = SessionStore()

    return request

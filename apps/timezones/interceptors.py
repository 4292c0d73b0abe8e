from abc import ABC, abstractmethod

from django.http import HttpRequest, HttpResponse


class RequestInterceptor(ABC):
    """
    Hooks run around the handling of a single request.

    `before_request` runs before the view. `after_request` runs once the
    response is produced, and also when handling raised, in which case
    `response` is None.
    """

    @abstractmethod
    def before_request(self, request: HttpRequest) -> None: ...

    @abstractmethod
    def after_request(self, request: HttpRequest, response: HttpResponse | None) -> None: ...


class InterceptorMiddleware(ABC):
    """Binds a RequestInterceptor into Django's middleware chain."""

    def __init__(self, get_response):
        self.get_response = get_response
        self.interceptor = self.get_interceptor()

    @abstractmethod
    def get_interceptor(self) -> RequestInterceptor: ...

    def __call__(self, request):
        response = None
        try:
            self.interceptor.before_request(request)
            response = self.get_response(request)
            return response
        finally:
            self.interceptor.after_request(request, response)

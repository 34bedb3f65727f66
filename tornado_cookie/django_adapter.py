from django.conf import settings

from .config import DEFAULT_MAX_AGE_DAYS, DEFAULT_SIGNED_VALUE_MIN_VERSION, check_cookie_secret
from .cookies import TornadoCookie


def _secure_cookies_for(request) -> TornadoCookie:
    secret = settings.TORNADO_COOKIE_SECRET
    check_cookie_secret(secret, settings.DEBUG)
    return TornadoCookie(
        request.COOKIES,
        secret,
        days=getattr(settings, "TORNADO_COOKIE_DAYS", DEFAULT_MAX_AGE_DAYS),
        min_version=getattr(settings, "TORNADO_COOKIE_MIN_VERSION", DEFAULT_SIGNED_VALUE_MIN_VERSION),
        log_values=getattr(settings, "TORNADO_COOKIE_LOG_VALUES", False),
    )


class SecureCookieMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.secure_cookies = _secure_cookies_for(request)
        return self.get_response(request)


def get_secure_cookie(request, name: str) -> str | None:
    secure_cookies = getattr(request, "secure_cookies", None)
    if secure_cookies is None:
        secure_cookies = _secure_cookies_for(request)
    return secure_cookies.get_secure_cookie(name)

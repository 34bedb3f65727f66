from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from .config import DEFAULT_MAX_AGE_DAYS, DEFAULT_SIGNED_VALUE_MIN_VERSION, check_cookie_secret
from .cookies import TornadoCookie


class TornadoCookieASGIMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, cookie_secret: str, days: int = DEFAULT_MAX_AGE_DAYS, min_version: int = DEFAULT_SIGNED_VALUE_MIN_VERSION, log_values: bool = False, debug: bool = True):
        super().__init__(app)
        check_cookie_secret(cookie_secret, debug)
        self.cookie_secret = cookie_secret
        self.days = days
        self.min_version = min_version
        self.log_values = log_values

    async def dispatch(self, request: Request, call_next):
        request.state.secure_cookies = TornadoCookie(
            dict(request.cookies), self.cookie_secret, days=self.days, min_version=self.min_version, log_values=self.log_values
        )
        return await call_next(request)


def get_secure_cookie(request: Request, name: str) -> str | None:
    secure_cookies = getattr(request.state, "secure_cookies", None)
    if secure_cookies is None:
        raise RuntimeError("TornadoCookieASGIMiddleware is not installed on this application.")
    return secure_cookies.get_secure_cookie(name)

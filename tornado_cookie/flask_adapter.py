from flask import g, request

from .config import DEFAULT_MAX_AGE_DAYS, DEFAULT_SIGNED_VALUE_MIN_VERSION, check_cookie_secret
from .cookies import TornadoCookie


def register_tornado_cookie(app, *, cookie_secret: str, days: int = DEFAULT_MAX_AGE_DAYS, min_version: int = DEFAULT_SIGNED_VALUE_MIN_VERSION, log_values: bool = False):
    check_cookie_secret(cookie_secret, app.debug or app.testing)

    @app.before_request
    def _load_secure_cookies():
        g.secure_cookies = TornadoCookie(
            dict(request.cookies), cookie_secret, days=days, min_version=min_version, log_values=log_values
        )


def get_secure_cookie(name: str) -> str | None:
    secure_cookies = g.get("secure_cookies")
    if secure_cookies is None:
        raise RuntimeError("register_tornado_cookie() has not been called for this app.")
    return secure_cookies.get_secure_cookie(name)

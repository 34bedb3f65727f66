import logging
from collections.abc import Mapping

from .config import DEFAULT_MAX_AGE_DAYS, DEFAULT_SIGNED_VALUE_MIN_VERSION
from .result import Failure, VerificationResult
from .signed_value import decode_signed_value

logger = logging.getLogger(__name__)


def parse_cookie(cookie: str) -> dict[str, str]:
    obj = {}
    for chunk in cookie.split("; "):
        i = chunk.find("=")
        if i == -1:
            continue
        value = chunk[i + 1:]
        # Tornado quotes values containing "=" padding
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        obj[chunk[:i]] = value
    return obj


class TornadoCookie:
    """Read-only view over a request's cookies that verifies Tornado secure cookies.

    ``cookie`` is either a raw ``Cookie`` header or an already parsed mapping.
    The secret must be the ``cookie_secret`` of the Tornado application that
    issued the cookies.
    """

    def __init__(
        self,
        cookie: str | Mapping[str, str],
        secret: str | bytes,
        days: int = DEFAULT_MAX_AGE_DAYS,
        min_version: int = DEFAULT_SIGNED_VALUE_MIN_VERSION,
        log_values: bool = False,
    ):
        if not isinstance(secret, (str, bytes)):
            raise ValueError("A cookie secret (str or bytes) is required.")
        if days <= 0:
            raise ValueError(f"days must be a positive number of days, got {days!r}")
        if min_version < 1:
            raise ValueError(f"min_version must be at least 1, got {min_version!r}")
        if isinstance(cookie, str):
            self.cookies = parse_cookie(cookie)
        else:
            self.cookies = cookie
        self.secret = secret
        self.days = days
        self.min_version = min_version
        self.log_values = log_values

    def __repr__(self) -> str:
        return f"TornadoCookie(names={sorted(self.cookies)!r}, days={self.days}, min_version={self.min_version})"

    def verify(self, name: str, *, now: int | None = None) -> VerificationResult | None:
        value = self.cookies.get(name)
        if value is None:
            return None
        result = decode_signed_value(name, value, self.secret, self.days, self.min_version, now=now)
        if isinstance(result, Failure):
            logger.warning("[cookie] Rejected secure cookie %s: %s", name, result.kind.value)
            if self.log_values:
                logger.debug("[cookie] Rejected value for %s: %r", name, value)
        return result

    def get_secure_cookie(self, name: str, *, now: int | None = None) -> str | None:
        result = self.verify(name, now=now)
        if result is None or not result.ok:
            return None
        return result.value

from .cookies import TornadoCookie, parse_cookie
from .result import Failure, FailureKind, Payload, VerificationResult
from .signed_value import SignedValueVersion, decode_signed_value, decode_signed_value_v1, decode_signed_value_v2, detect_version

__all__ = [
    "TornadoCookie",
    "parse_cookie",
    "Failure",
    "FailureKind",
    "Payload",
    "VerificationResult",
    "SignedValueVersion",
    "decode_signed_value",
    "decode_signed_value_v1",
    "decode_signed_value_v2",
    "detect_version",
]

try:
    from .django_adapter import SecureCookieMiddleware
    __all__ += ["SecureCookieMiddleware"]
except Exception:
    pass

try:
    from .fastapi_adapter import TornadoCookieASGIMiddleware
    __all__ += ["TornadoCookieASGIMiddleware"]
except Exception:
    pass

try:
    from .flask_adapter import register_tornado_cookie
    __all__ += ["register_tornado_cookie"]
except Exception:
    pass

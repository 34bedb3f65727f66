import hashlib
import hmac


def utf8(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected str or bytes, got {type(value).__name__}")
    return value.encode("utf-8")


def create_signature_v1(parts, secret: str | bytes) -> bytes:
    hash = hmac.new(utf8(secret), digestmod=hashlib.sha1)
    for part in parts:
        hash.update(utf8(part))
    return utf8(hash.hexdigest())


def create_signature_v2(s: str | bytes, secret: str | bytes) -> bytes:
    hash = hmac.new(utf8(secret), digestmod=hashlib.sha256)
    hash.update(utf8(s))
    return utf8(hash.hexdigest())


def time_independent_equals(a: str | bytes, b: str | bytes) -> bool:
    a = utf8(a)
    b = utf8(b)
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a, b)

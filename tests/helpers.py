"""Test-only encoders that produce values exactly as Tornado's set_secure_cookie does."""
import base64
import hashlib
import hmac
import time


def _utf8(s) -> bytes:
    return s if isinstance(s, bytes) else str(s).encode("utf-8")


def encode_v1_raw(name: str, payload_b64: str, secret: str, timestamp=None) -> str:
    timestamp = str(int(time.time()) if timestamp is None else timestamp)
    h = hmac.new(_utf8(secret), digestmod=hashlib.sha1)
    for part in (name, payload_b64, timestamp):
        h.update(_utf8(part))
    return "|".join([payload_b64, timestamp, h.hexdigest()])


def encode_v1(name: str, value: str, secret: str, timestamp=None) -> str:
    payload_b64 = base64.b64encode(_utf8(value)).decode("ascii")
    return encode_v1_raw(name, payload_b64, secret, timestamp)


def format_field(s) -> bytes:
    s = _utf8(s)
    return _utf8("%d:" % len(s)) + s


def encode_v2(name: str, value: str, secret: str, timestamp=None, key_version: int = 0) -> str:
    timestamp = int(time.time()) if timestamp is None else timestamp
    to_sign = b"|".join([
        b"2",
        format_field(key_version),
        format_field(timestamp),
        format_field(name),
        format_field(base64.b64encode(_utf8(value))),
        b"",
    ])
    signature = hmac.new(_utf8(secret), to_sign, hashlib.sha256).hexdigest()
    return (to_sign + signature.encode("ascii")).decode("utf-8")


def flip(value: str, i: int) -> str:
    replacement = "A" if value[i] != "A" else "B"
    return value[:i] + replacement + value[i + 1:]

"""Decoding of signed values issued by Tornado's ``set_secure_cookie``.

Two formats exist. Version 1 is ``payload|timestamp|signature`` signed with
HMAC-SHA1 over the cookie name, payload and timestamp. Version 2 starts with
``2|`` followed by four length-prefixed fields (key version, timestamp, name,
payload) and a trailing HMAC-SHA256 hex signature over everything before it.

Every decoder returns a :class:`~tornado_cookie.result.Payload` or a
:class:`~tornado_cookie.result.Failure`; malformed input never raises.
"""
import base64
import re
import time
from enum import Enum

from .config import DEFAULT_MAX_AGE_DAYS, DEFAULT_SIGNED_VALUE_MIN_VERSION, MAX_FUTURE_SKEW_DAYS, MAX_SIGNED_VALUE_VERSION
from .crypto import create_signature_v1, create_signature_v2, time_independent_equals, utf8
from .fields import MalformedFieldError, consume_field_v2
from .result import Failure, FailureKind, Payload, VerificationResult

SECONDS_PER_DAY = 86400

_signed_value_version_re = re.compile(rb"^([1-9][0-9]*)\|")
_timestamp_re = re.compile(rb"[0-9]+")


def _parse_timestamp(s: bytes) -> int | None:
    if not _timestamp_re.fullmatch(s):
        return None
    try:
        return int(s)
    except ValueError:
        # more digits than int() accepts
        return None


def _decode_payload(s: bytes) -> VerificationResult:
    try:
        return Payload(base64.b64decode(s, validate=True).decode("utf-8"))
    except ValueError:
        return Failure(FailureKind.MALFORMED_PAYLOAD)


def decode_signed_value_v1(
    name: str | bytes,
    value: str | bytes,
    secret: str | bytes,
    days: int = DEFAULT_MAX_AGE_DAYS,
    *,
    now: int | None = None,
) -> VerificationResult:
    name = utf8(name)
    value = utf8(value)
    parts = value.split(b"|")
    if len(parts) != 3:
        return Failure(FailureKind.MALFORMED_VALUE)
    payload, timestamp_str, passed_sig = parts

    expected_sig = create_signature_v1([name, payload, timestamp_str], secret)
    if not time_independent_equals(passed_sig, expected_sig):
        return Failure(FailureKind.SIGNATURE_MISMATCH)

    timestamp = _parse_timestamp(timestamp_str)
    if timestamp is None:
        return Failure(FailureKind.MALFORMED_VALUE)
    # "01234" and "1234" would otherwise both verify as the same timestamp
    if timestamp_str.startswith(b"0"):
        return Failure(FailureKind.TAMPERED_TIMESTAMP)

    if now is None:
        now = int(time.time())
    if timestamp < now - days * SECONDS_PER_DAY:
        return Failure(FailureKind.EXPIRED)
    if timestamp > now + MAX_FUTURE_SKEW_DAYS * SECONDS_PER_DAY:
        return Failure(FailureKind.FUTURE_TIMESTAMP)

    return _decode_payload(payload)


def decode_signed_value_v2(
    name: str | bytes,
    value: str | bytes,
    secret: str | bytes,
    days: int = DEFAULT_MAX_AGE_DAYS,
    *,
    now: int | None = None,
) -> VerificationResult:
    name = utf8(name)
    value = utf8(value)
    prefix_end = value.find(b"|")
    if prefix_end == -1:
        return Failure(FailureKind.MALFORMED_VALUE)
    rest = value[prefix_end + 1:]

    try:
        _key_version, rest = consume_field_v2(rest)
        timestamp_str, rest = consume_field_v2(rest)
        name_field, rest = consume_field_v2(rest)
        value_field, passed_sig = consume_field_v2(rest)
    except MalformedFieldError:
        return Failure(FailureKind.MALFORMED_FIELD)

    signed_string = value[:len(value) - len(passed_sig)]
    expected_sig = create_signature_v2(signed_string, secret)
    if not time_independent_equals(passed_sig, expected_sig):
        return Failure(FailureKind.SIGNATURE_MISMATCH)

    if name_field != name:
        return Failure(FailureKind.NAME_MISMATCH)

    timestamp = _parse_timestamp(timestamp_str)
    if timestamp is None:
        return Failure(FailureKind.MALFORMED_VALUE)
    if now is None:
        now = int(time.time())
    # No upper bound here, unlike v1.
    if timestamp < now - days * SECONDS_PER_DAY:
        return Failure(FailureKind.EXPIRED)

    return _decode_payload(value_field)


class SignedValueVersion(Enum):
    V1 = 1
    V2 = 2

    def decode(self, name, value, secret, days: int = DEFAULT_MAX_AGE_DAYS, *, now: int | None = None) -> VerificationResult:
        return _DECODERS[self](name, value, secret, days, now=now)


_DECODERS = {
    SignedValueVersion.V1: decode_signed_value_v1,
    SignedValueVersion.V2: decode_signed_value_v2,
}


def detect_version(value: str | bytes) -> int:
    """Return the version announced by a ``<digits>|`` prefix, or 1.

    A prefix above the supported maximum is not rejected: the value is treated
    as version 1, which is how the issuing framework reads it too.
    """
    m = _signed_value_version_re.match(utf8(value))
    if m is None:
        return 1
    digits = m.group(1)
    if len(digits) > len(str(MAX_SIGNED_VALUE_VERSION)):
        return 1
    version = int(digits)
    if version > MAX_SIGNED_VALUE_VERSION:
        return 1
    return version


def decode_signed_value(
    name: str | bytes,
    value: str | bytes,
    secret: str | bytes,
    days: int = DEFAULT_MAX_AGE_DAYS,
    min_version: int = DEFAULT_SIGNED_VALUE_MIN_VERSION,
    *,
    now: int | None = None,
) -> VerificationResult:
    version = detect_version(value)
    if version < min_version:
        return Failure(FailureKind.UNSUPPORTED_VERSION)
    try:
        variant = SignedValueVersion(version)
    except ValueError:
        return Failure(FailureKind.UNSUPPORTED_VERSION)
    return variant.decode(name, value, secret, days, now=now)

import re

from .config import MAX_FIELD_LENGTH_DIGITS

_length_re = re.compile(rb"[0-9]+")


class MalformedFieldError(ValueError):
    pass


def consume_field_v2(s: bytes) -> tuple[bytes, bytes]:
    """Consume one ``<length>:<content>|`` unit from the front of ``s``.

    Returns ``(content, rest)``. The declared length must fit inside ``s`` and be
    followed by exactly ``|``; anything else raises :class:`MalformedFieldError`.
    """
    colon = s.find(b":")
    if colon == -1:
        raise MalformedFieldError("missing length prefix")
    length = s[:colon]
    if len(length) > MAX_FIELD_LENGTH_DIGITS or not _length_re.fullmatch(length):
        raise MalformedFieldError("invalid length prefix")
    n = int(length)
    rest = s[colon + 1:]
    if n >= len(rest):
        raise MalformedFieldError("field runs past end of value")
    if rest[n:n + 1] != b"|":
        raise MalformedFieldError("field not terminated by '|'")
    return rest[:n], rest[n + 1:]

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Reasons a signed value was rejected. Only used for diagnostics."""

    MALFORMED_VALUE = "MalformedValue"
    MALFORMED_FIELD = "MalformedField"
    SIGNATURE_MISMATCH = "SignatureMismatch"
    NAME_MISMATCH = "NameMismatch"
    EXPIRED = "Expired"
    FUTURE_TIMESTAMP = "FutureTimestamp"
    TAMPERED_TIMESTAMP = "TamperedTimestamp"
    MALFORMED_PAYLOAD = "MalformedPayload"
    UNSUPPORTED_VERSION = "UnsupportedVersion"


@dataclass(frozen=True)
class Payload:
    value: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind

    @property
    def ok(self) -> bool:
        return False


VerificationResult = Payload | Failure

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_constants = json.loads((Path(__file__).resolve().parent / "constants.json").read_text())
DEFAULT_MAX_AGE_DAYS = _constants["DEFAULT_MAX_AGE_DAYS"]
MAX_FUTURE_SKEW_DAYS = _constants["MAX_FUTURE_SKEW_DAYS"]
DEFAULT_SIGNED_VALUE_MIN_VERSION = _constants["DEFAULT_SIGNED_VALUE_MIN_VERSION"]
MAX_SIGNED_VALUE_VERSION = _constants["MAX_SIGNED_VALUE_VERSION"]
MAX_FIELD_LENGTH_DIGITS = _constants["MAX_FIELD_LENGTH_DIGITS"]
INSECURE_DEFAULT_SECRET = _constants["INSECURE_DEFAULT_SECRET"]


@dataclass
class CookieSettings:
    secret: str
    days: int = DEFAULT_MAX_AGE_DAYS
    min_version: int = DEFAULT_SIGNED_VALUE_MIN_VERSION
    log_values: bool = False
    debug: bool = True


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() not in ("false", "0", "no", "")


def load_settings(env_file: str | None = None) -> CookieSettings:
    """Build settings from the environment, after loading ``.env`` if present."""
    load_dotenv(env_file)
    return CookieSettings(
        secret=os.environ.get("COOKIE_SECRET", INSECURE_DEFAULT_SECRET),
        days=int(os.environ.get("COOKIE_MAX_AGE_DAYS", DEFAULT_MAX_AGE_DAYS)),
        min_version=int(os.environ.get("COOKIE_MIN_VERSION", DEFAULT_SIGNED_VALUE_MIN_VERSION)),
        log_values=_env_flag("COOKIE_LOG_VALUES", "false"),
        debug=_env_flag("DEBUG", "true"),
    )


def check_cookie_secret(secret, debug: bool) -> None:
    if secret == INSECURE_DEFAULT_SECRET:
        import logging
        logger = logging.getLogger("tornado_cookie")
        if debug:
            logger.warning("Using default COOKIE_SECRET. Set the secret shared with the issuing server before deploying to production.")
        else:
            raise RuntimeError("COOKIE_SECRET is set to the insecure default. Set the secret shared with the issuing server.")

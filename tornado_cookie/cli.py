"""
Verify a Tornado secure cookie outside of any web framework.

Usage:
    verify-cookie <name> --value '2|1:0|10:1700000000|4:user|4:Ym9i|<sig>'
    verify-cookie <name> --header 'user="2|1:0|...|<sig>"; other=1'

The secret is read from --secret or COOKIE_SECRET (a .env file is honoured).
"""

import argparse
import logging
import sys

from .config import check_cookie_secret, load_settings
from .cookies import TornadoCookie


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="verify-cookie", description="Verify and decode a Tornado secure cookie.")
    ap.add_argument("name", help="Cookie name the value was issued under")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--value", help="Raw signed cookie value")
    source.add_argument("--header", help="Full Cookie header (k1=v1; k2=v2)")
    ap.add_argument("--secret", help="Shared cookie secret (default: $COOKIE_SECRET)")
    ap.add_argument("--days", type=int, help="Maximum cookie age in days")
    ap.add_argument("--min-version", type=int, help="Oldest signed value version to accept")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log rejection details")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.ERROR, format="%(levelname)s %(name)s: %(message)s")

    conf = load_settings()
    secret = args.secret if args.secret is not None else conf.secret
    try:
        check_cookie_secret(secret, conf.debug)
    except RuntimeError as exc:
        print(f"Error: {exc}")
        return 1
    cookie = args.header if args.header is not None else {args.name: args.value}
    verifier = TornadoCookie(
        cookie,
        secret,
        days=args.days if args.days is not None else conf.days,
        min_version=args.min_version if args.min_version is not None else conf.min_version,
        log_values=args.verbose or conf.log_values,
    )

    result = verifier.verify(args.name)
    if result is None:
        print(f"NOT FOUND — no cookie named {args.name!r}")
        return 1
    if not result.ok:
        print(f"NOT VERIFIED — {result.kind.value}")
        return 1
    print(result.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line conversion between UI and DB number strings.

Usage:
    strictnum to-db "1.234,56" --precision 10 --scale 2
    strictnum from-db 1234.5 --scale 2 --thousands-sep " "
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from strictnum.core.config import AppSettings
from strictnum.core.exceptions import NumberFormatError
from strictnum.core.logging import configure_logging
from strictnum.services.format_number import NumberFormatter
from strictnum.services.txt import create_text_service

EXIT_INVALID = 2


def build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    defaults = settings.format
    parser = argparse.ArgumentParser(prog="strictnum", description="Strict decimal string conversion")
    sub = parser.add_subparsers(dest="command", required=True)

    to_db = sub.add_parser("to-db", help="UI string (1.234,56) to DB string (1234.56)")
    to_db.add_argument("value", help="UI formatted number")
    to_db.add_argument("--precision", type=int, default=defaults.precision, help="DECIMAL precision")
    to_db.add_argument("--scale", type=int, default=defaults.scale, help="DECIMAL scale")

    from_db = sub.add_parser("from-db", help="DB string (1234.56) to UI string (1.234,56)")
    from_db.add_argument("value", help="DB dot-decimal number")
    from_db.add_argument("--scale", type=int, default=defaults.scale, help="Fraction digits to render")
    from_db.add_argument("--thousands-sep", default=defaults.thousands_sep, help='"", "." or " "')
    from_db.add_argument("--decimal-sep", default=defaults.decimal_sep, help='"," or "."')
    return parser


def main(argv: Sequence[str] | None = None, settings: AppSettings | None = None) -> int:
    if settings is None:
        settings = AppSettings()
    args = build_parser(settings).parse_args(argv)

    configure_logging(settings.log)
    formatter = NumberFormatter(create_text_service(settings))

    try:
        if args.command == "to-db":
            result = formatter.to_db(args.value, args.precision, args.scale)
        else:
            result = formatter.from_db(args.value, args.scale, args.thousands_sep, args.decimal_sep)
    except NumberFormatError as exc:
        print(f"error: {exc.kind.value}: {exc.message}", file=sys.stderr)
        return EXIT_INVALID

    if result:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Small command-line front end for utilkit.date.

Examples:
  python3 scripts/datecalc.py parse 2023-06-15T10:30:45.123Z
  python3 scripts/datecalc.py format custom 2023-06-15 --pattern "DD/MM/YYYY HH:MM"
  python3 scripts/datecalc.py diff 2021-04-09 2021-04-01 --unit days
  python3 scripts/datecalc.py shift 2022-04-09 --months 1 --days -1 --utc

A date argument may be an ISO-8601 string, any string dateutil understands, or
epoch milliseconds. Omitting it means now.
"""

from __future__ import annotations

import argparse
import re

from utilkit.date import (
    DateOptions,
    InvalidUnitError,
    date_difference,
    format_date,
    manipulate_date,
    parse_date,
)

_INT_RE = re.compile(r"^-?\d+$")

SHIFT_FIELDS = ("milliseconds", "seconds", "minutes", "hours", "days", "months", "years")


def date_arg(s: str | None) -> str | int | None:
    if s is None:
        return None
    return int(s) if _INT_RE.match(s) else s


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser()
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("parse", help="Print the ISO-8601 form and epoch ms of a date.")
    p.add_argument("date", nargs="?")

    f = sub.add_parser("format", help="Render a date in one of the format styles.")
    f.add_argument("style")
    f.add_argument("date", nargs="?")
    f.add_argument("--pattern", default=None)

    d = sub.add_parser("diff", help="Absolute difference between two dates.")
    d.add_argument("first")
    d.add_argument("second")
    d.add_argument("--unit", default=None)

    s = sub.add_parser("shift", help="Add field offsets to a date.")
    s.add_argument("date", nargs="?")
    for name in SHIFT_FIELDS:
        s.add_argument(f"--{name}", type=int, default=0)
    s.add_argument("--utc", action="store_true")

    args = ap.parse_args(argv)

    if args.cmd == "parse":
        v = parse_date(date_arg(args.date))
        if not v.is_valid:
            raise SystemExit(f"Invalid date: {args.date}")
        print(f"{format_date('iso', v)} {v.ms}")
        return

    if args.cmd == "format":
        print(format_date(args.style, date_arg(args.date), args.pattern))
        return

    if args.cmd == "diff":
        try:
            print(date_difference(date_arg(args.first), date_arg(args.second), args.unit))
        except InvalidUnitError as e:
            raise SystemExit(str(e))
        return

    opts = DateOptions(utc=bool(args.utc), **{name: getattr(args, name) for name in SHIFT_FIELDS})
    print(format_date("iso", manipulate_date(opts, date_arg(args.date))))


if __name__ == "__main__":
    main()

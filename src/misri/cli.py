from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect
import json

from misri.core.errors import InvalidDateError, MisriError
from misri.logs import configure_logging


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")


def _parse_ymd(s: str):
    """YYYY-MM-DD in the historical calendar (Julian before 1582-10-15)."""
    from misri.core.types import CalendarDate

    if not _DATE_RE.match(s):
        raise InvalidDateError(f"expected YYYY-MM-DD, got {s!r}")
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return CalendarDate(sign * y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_info(info, *, weekday: bool, debug: bool) -> None:
    from misri.formatting import format_day

    print(f"{info.civil_date}  {format_day(info, weekday=weekday)}")
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"  {k}: {v}")
    if debug and info.debug:
        print(json.dumps(info.debug, indent=2, sort_keys=True))


def cmd_day(argv: list[str]) -> int:
    import misri

    p = argparse.ArgumentParser(prog="misri day", description="Civil date -> Misri date")
    p.add_argument("date", help="YYYY-MM-DD (Julian before 1582-10-15)")
    p.add_argument("--engine", default="misri")
    p.add_argument("--weekday", action="store_true", help="prefix the weekday name")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = misri.day_info(_parse_ymd(args.date), engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    _print_info(info, weekday=args.weekday, debug=args.debug)
    return 0


def cmd_today(argv: list[str]) -> int:
    import misri

    p = argparse.ArgumentParser(prog="misri today", description="Today's Misri date (host clock)")
    p.add_argument("--engine", default="misri")
    p.add_argument("--weekday", action="store_true", help="prefix the weekday name")
    args = p.parse_args(argv)

    _print_info(misri.today(engine=args.engine), weekday=args.weekday, debug=False)
    return 0


def cmd_to_greg(argv: list[str]) -> int:
    import misri

    p = argparse.ArgumentParser(prog="misri to-greg", description="Misri date -> civil date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1=Muharram .. 12=Dhu al-Hijjah")
    p.add_argument("day", type=int)
    p.add_argument("--engine", default="misri")
    args = p.parse_args(argv)

    t = misri.lunar_date(args.year, args.month, args.day, engine=args.engine)
    civil = misri.to_gregorian(t, engine=args.engine)
    print(f"{misri.format_lunar(t)}  {civil}")
    return 0


def cmd_jdn(argv: list[str]) -> int:
    import misri

    p = argparse.ArgumentParser(prog="misri jdn", description="Civil date -> Julian Day Number")
    p.add_argument("date", help="YYYY-MM-DD (Julian before 1582-10-15)")
    args = p.parse_args(argv)

    print(misri.to_jdn(_parse_ymd(args.date)))
    return 0


def cmd_from_jdn(argv: list[str]) -> int:
    import misri

    p = argparse.ArgumentParser(prog="misri from-jdn", description="Julian Day Number -> civil and Misri dates")
    p.add_argument("jdn", type=int)
    p.add_argument("--engine", default="misri")
    args = p.parse_args(argv)

    civil = misri.from_jdn(args.jdn)
    print(f"{civil}  {misri.format_date(civil, engine=args.engine)}")
    return 0


def cmd_engines(argv: list[str]) -> int:
    import misri

    p = argparse.ArgumentParser(prog="misri engines", description="List engines and their parameters")
    p.parse_args(argv)
    for name in misri.list_engines():
        print(name)
        print(json.dumps(misri.engine_info(name), indent=2))
    return 0


def _dispatch(argv: list[str]) -> int:
    # --log-level may sit anywhere on the line, including before a bare date
    pre = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    pre.add_argument("--log-level", default=None)
    known, argv = pre.parse_known_args(argv)
    configure_logging(level=known.log_level)

    # Backward compatibility: `misri YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="misri", description="Misri (tabular lunar) calendar toolkit CLI.")
    p.add_argument("--log-level", default=None, help="logging level (default: $LOG_LEVEL or WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Civil date -> Misri date", add_help=False)
    sub.add_parser("today", help="Today's Misri date", add_help=False)
    sub.add_parser("to-greg", help="Misri date -> civil date", add_help=False)
    sub.add_parser("jdn", help="Civil date -> Julian Day Number", add_help=False)
    sub.add_parser("from-jdn", help="Julian Day Number -> civil and Misri dates", add_help=False)
    sub.add_parser("engines", help="List engines", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/civil month calendars (diagnostics)", add_help=False)
    sub.add_parser("new-years", help="Print 1 Muharram table (diagnostics)", add_help=False)
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "today": cmd_today,
        "to-greg": cmd_to_greg,
        "jdn": cmd_jdn,
        "from-jdn": cmd_from_jdn,
        "engines": cmd_engines,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_module_main("misri.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("misri.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "misri.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except MisriError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

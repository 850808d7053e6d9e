from __future__ import annotations

from datetime import date
import argparse

import misri
from misri.formatting import WEEKDAY_NAMES


def dow_header(first_weekday: int = 0) -> str:
    names = [WEEKDAY_NAMES[(first_weekday + i) % 7][:2] for i in range(7)]
    return "     ".join(names)


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]], first_weekday: int = 0) -> None:
    header = dow_header(first_weekday)
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def _lunar_cell(info) -> tuple[str, str]:
    if info is None:
        return cell("", "")
    c = info.civil_date
    return cell(f"{info.lunar.day:2d}", f"{c.month:02d}-{c.day:02d}")


def _civil_cell(info) -> tuple[str, str]:
    if info is None:
        return cell("", "")
    t = info.lunar
    return cell(f"{info.civil_date.day:2d}", f"{t.month:02d}-{t.day:02d}")


def lunar_month_calendar(engine: str, Y: int, M: int, first_weekday: int = 0) -> None:
    grid = misri.lunar_month_grid(Y, M, engine=engine, first_weekday=first_weekday)
    infos = [c for wk in grid for c in wk if c is not None]

    d0, d1 = infos[0].civil_date, infos[-1].civil_date
    title = f"{engine} lunar month  {infos[0].lunar.month_name} {Y}   ({d0} .. {d1})"
    weeks = [[_lunar_cell(c) for c in wk] for wk in grid]
    print_grid(title, weeks, first_weekday)


def gregorian_month_calendar(engine: str, gy: int, gm: int, first_weekday: int = 0) -> None:
    grid = misri.month_grid(gy, gm, engine=engine, first_weekday=first_weekday)
    title = f"{engine} civil month  {gy}-{gm:02d}"
    weeks = [[_civil_cell(c) for c in wk] for wk in grid]
    print_grid(title, weeks, first_weekday)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a civil-month calendar with paired labels."
    )
    p.add_argument("--engine", default="misri")
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 1446 9)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Civil month to print: GY GM (e.g. 2025 3)")
    p.add_argument("--first-weekday", type=int, default=0,
                   help="First column, 0=Sun..6=Sat (default: 0)")
    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        # current civil month, and the lunar month of today
        t = date.today()
        info = misri.day_info(t, engine=args.engine)
        lunar_month_calendar(args.engine, info.lunar.year, info.lunar.month, args.first_weekday)
        gregorian_month_calendar(args.engine, t.year, t.month, args.first_weekday)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(args.engine, Y, M, args.first_weekday)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy, gm, args.first_weekday)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse

import misri


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the civil date of 1 Muharram for a range of lunar years."
    )
    p.add_argument("--engine", default="misri")
    p.add_argument("--from-year", type=int, default=1440)
    p.add_argument("--to-year", type=int, default=1460)
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "1 Muharram", "JDN", "Days"]
    colw = [6, 12, 9, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    leap = 0
    for Y in range(Y0, Y1 + 1):
        ny = misri.new_year_day(Y, engine=args.engine)
        n = ny["year_length"]
        leap += n > 354
        row = [str(Y), ny["date"].isoformat(), str(ny["jdn"]), str(n)]
        print("  ".join(v.ljust(w) for v, w in zip(row, colw)))

    print(f"\n{leap} leap years out of {Y1 - Y0 + 1}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

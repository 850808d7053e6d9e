from __future__ import annotations

import argparse
import random
from typing import List

import misri
from misri.core.time import gregorian_to_jdn
from misri.core.types import CalendarDate


def parse_date(s: str) -> CalendarDate:
    y, m, d = s.split("-")
    return CalendarDate(int(y), int(m), int(d))


def parse_engines(s: str) -> List[str]:
    # "misri,custom" -> ["misri", "custom"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(engine: str, N: int, j0: int, j1: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = misri.from_jdn(random.randint(j0, j1))

        info = misri.day_info(d0, engine=engine)
        back = misri.to_gregorian(info.lunar, engine=engine)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("engine:", engine)
            print("d0:", d0)
            print("lunar:", info.lunar)
            print("back:", back)
            print("explain:", misri.explain(d0, engine=engine))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: civil -> lunar -> civil.")
    p.add_argument("--engines", type=str, default="misri", help="Comma-separated engine list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per engine.")
    p.add_argument("--start", type=str, default="0700-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    j0 = gregorian_to_jdn(start.year, start.month, start.day)
    j1 = gregorian_to_jdn(end.year, end.month, end.day)

    if j1 < j0:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for eng in parse_engines(args.engines):
        print(f"Testing {eng} ...")
        total_fail += roundtrip_test(eng, N=args.N, j0=j0, j1=j1, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

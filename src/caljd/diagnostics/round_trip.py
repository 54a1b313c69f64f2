from __future__ import annotations

import argparse
import random
from typing import List, Tuple

import caljd
from caljd import CivilDate, CivilDateTime


def parse_calendars(s: str) -> List[str]:
    # "julian,360day" -> ["julian", "360day"]
    return [x.strip() for x in s.split(",") if x.strip()]


def random_date(calendar: str, start_year: int, end_year: int) -> CivilDate:
    while True:
        y = random.randint(start_year, end_year)
        m = random.randint(1, 12)
        d = random.randint(1, caljd.days_in_month(y, m, calendar))
        if calendar in ("julian", "lilian") and (y, m) == (1582, 10) and 5 <= d <= 14:
            continue
        return CivilDate(d, m, y)


def random_time() -> Tuple[int, int, int]:
    return random.randint(0, 23), random.randint(0, 59), random.randint(0, 59)


def roundtrip_test(
    calendar: str,
    N: int,
    start_year: int,
    end_year: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(calendar, start_year, end_year)

        n = caljd.to_day_number(d0, calendar)
        back = caljd.from_day_number(n, calendar)
        if back != d0:
            failures += 1
            print("\nFAIL (integer)")
            print("calendar:", calendar)
            print("d0:", d0)
            print("n:", n)
            print("back:", back)
            if failures >= max_failures:
                return failures

        dt0 = CivilDateTime.from_date(d0, *random_time())
        x = caljd.to_fractional_day(dt0, calendar)
        back_dt = caljd.from_fractional_day(x, calendar)
        if back_dt != dt0:
            failures += 1
            print("\nFAIL (fractional)")
            print("calendar:", calendar)
            print("dt0:", dt0)
            print("x:", repr(x))
            print("back:", back_dt)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: date -> day number -> date.")
    p.add_argument("--calendars", type=str, default="julian,lilian,360day,365day",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start-year", type=int, default=-4712, help="First year (astronomical).")
    p.add_argument("--end-year", type=int, default=9999, help="Last year.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    total = 0
    for calendar in parse_calendars(args.calendars):
        f = roundtrip_test(calendar, args.N, args.start_year, args.end_year, args.seed,
                           max_failures=args.max_failures)
        print(f"{calendar}: {args.N} trials, {f} failures")
        total += f
    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())

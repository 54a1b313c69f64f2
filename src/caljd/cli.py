from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from caljd.core.errors import CaljdError
from caljd.core.types import CivilDateTime


_DATETIME_RE = re.compile(
    r"^(?P<year>-?\d{1,7})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[ T](?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?$"
)


def _parse_datetime(s: str) -> CivilDateTime:
    m = _DATETIME_RE.match(s.strip())
    if m is None:
        raise SystemExit(f"Cannot parse date {s!r}; expected YYYY-MM-DD[ hh:mm[:ss]]")
    time = [int(m.group(k)) if m.group(k) is not None else None for k in ("hour", "minute", "second")]
    return CivilDateTime(int(m.group("day")), int(m.group("month")), int(m.group("year")), *time)


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


def _calendar_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", default="julian",
                   help="julian, lilian, 360day or 365day; anything else means julian")


def cmd_julday(argv: list[str]) -> int:
    import caljd

    p = argparse.ArgumentParser(prog="caljd julday", description="Civil date -> integer day number")
    p.add_argument("date", help="YYYY-MM-DD")
    _calendar_arg(p)
    args = p.parse_args(argv)

    print(caljd.to_day_number(_parse_datetime(args.date), args.calendar))
    return 0


def cmd_caldat(argv: list[str]) -> int:
    import caljd

    p = argparse.ArgumentParser(prog="caljd caldat", description="Integer day number -> civil date")
    p.add_argument("n", type=int, help="day number")
    _calendar_arg(p)
    args = p.parse_args(argv)

    print(caljd.from_day_number(args.n, args.calendar))
    return 0


def cmd_date2dec(argv: list[str]) -> int:
    import caljd

    p = argparse.ArgumentParser(prog="caljd date2dec", description="Civil date and time -> fractional day")
    p.add_argument("datetime", help="YYYY-MM-DD[ hh:mm[:ss]]")
    _calendar_arg(p)
    p.add_argument("--units", default=None, help='Print as offset, e.g. "days since 1970-01-01 00:00:00"')
    args = p.parse_args(argv)

    dt = _parse_datetime(args.datetime)
    if args.units is not None:
        print(f"{caljd.to_units_offset(dt, args.units, args.calendar):.10f}")
    else:
        print(f"{caljd.to_fractional_day(dt, args.calendar):.10f}")
    return 0


def cmd_dec2date(argv: list[str]) -> int:
    import caljd

    p = argparse.ArgumentParser(prog="caljd dec2date", description="Fractional day -> civil date and time")
    p.add_argument("x", type=float, help="fractional day, or offset if --units is given")
    _calendar_arg(p)
    p.add_argument("--units", default=None, help='e.g. "hours since 2000-01-01 00:00:00"')
    args = p.parse_args(argv)

    print(caljd.from_fractional_day(args.x, args.calendar, units=args.units))
    return 0


COMMANDS = {
    "julday": cmd_julday,
    "caldat": cmd_caldat,
    "date2dec": cmd_date2dec,
    "dec2date": cmd_dec2date,
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="caljd", description="Calendar date <-> Julian day toolkit CLI.")
    p.add_argument("--log-level", default="WARNING",
                   choices=("DEBUG", "INFO", "WARNING", "ERROR"), help="Logging level")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("julday", help="Civil date -> integer day number")
    sub.add_parser("caldat", help="Integer day number -> civil date")
    sub.add_parser("date2dec", help="Civil date and time -> fractional day")
    sub.add_parser("dec2date", help="Fractional day -> civil date and time")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "epsilon"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "caljd.diagnostics.round_trip",
            "epsilon": "caljd.diagnostics.epsilon_residuals",
        }
        return _run_module_main(tool_map[args.tool], rest)

    try:
        return COMMANDS[args.cmd](rest)
    except CaljdError as e:
        print(f"caljd {args.cmd}: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

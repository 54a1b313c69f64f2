#!/usr/bin/env python3
"""
Encoding residuals of fractional days, with and without the epsilon nudge.

For random dates and second-resolution times the encoded fractional day is
compared against the exact rational value, and the decode is checked
against the input. The residuals are plotted against the day number.
"""
from __future__ import annotations

import argparse
import random
from fractions import Fraction
from typing import List, Optional, Tuple

import numpy as np

import caljd
from caljd import CivilDateTime


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljd[diagnostics]"') from e


def residuals(calendar: str, jdns: np.ndarray, seed: int, *, nudge: bool) -> Tuple[np.ndarray, int]:
    """Residual (seconds) of the encoded value per sample, and the number of failed decodes."""
    eng = caljd.get_engine(calendar)
    rng = random.Random(seed)
    out = np.empty(jdns.shape, dtype=float)
    mismatches = 0
    for i, n in enumerate(jdns):
        d = eng.from_jdn(int(n))
        h, mi, s = rng.randint(0, 23), rng.randint(0, 59), rng.randint(0, 59)
        dt = CivilDateTime.from_date(d, h, mi, s)

        x = eng.to_fractional(dt, nudge=nudge)
        exact = Fraction(eng.to_jdn(d)) + Fraction(3600 * h + 60 * mi + s, 86400) - Fraction(eng.noon_offset)
        out[i] = float((Fraction(x) - exact) * 86400)

        if eng.from_fractional(x) != dt:
            mismatches += 1
    return out, mismatches


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Fractional-day encoding residuals with and without the epsilon nudge.")
    p.add_argument("--calendar", default="julian")
    p.add_argument("--start", type=int, default=0, help="First day number.")
    p.add_argument("--end", type=int, default=5373484, help="Last day number.")
    p.add_argument("--N", type=int, default=5000, help="Number of samples.")
    p.add_argument("--seed", type=int, default=7)
    p.add_argument("--out", default="epsilon_residuals.png")
    p.add_argument("--no-plot", action="store_true", help="Only print mismatch counts.")
    args = p.parse_args(argv)

    if args.end <= args.start:
        raise SystemExit("--end must be > --start")

    rng = np.random.default_rng(args.seed)
    jdns = np.sort(rng.integers(args.start, args.end, size=args.N))

    raw, raw_bad = residuals(args.calendar, jdns, args.seed, nudge=False)
    nudged, nudged_bad = residuals(args.calendar, jdns, args.seed, nudge=True)

    print(f"calendar: {args.calendar}  samples: {args.N}")
    print(f"  without nudge: max |residual| = {np.max(np.abs(raw)):.3e} s, failed decodes = {raw_bad}")
    print(f"  with nudge   : max |residual| = {np.max(np.abs(nudged)):.3e} s, failed decodes = {nudged_bad}")

    if args.no_plot:
        return 1 if nudged_bad else 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.scatter(jdns, raw, s=4, c="0.6", label="without nudge")
    ax.scatter(jdns, nudged, s=4, c="0.1", label="with nudge")
    ax.axhline(0.0, color="0.3", lw=0.8)
    ax.set_xlabel(f"day number ({args.calendar})")
    ax.set_ylabel("encoded - exact (seconds)")
    ax.set_title("Fractional-day encoding residuals")
    ax.legend(frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 1 if nudged_bad else 0


if __name__ == "__main__":
    raise SystemExit(main())

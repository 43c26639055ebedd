#!/usr/bin/env python3
"""
Convert tick counts between timebases with the exact u64 mul-div kernel.

Rates are given as `N` or `N/D` ticks per second.

Examples:
  python3 tools/rescale_table.py --from 48000 --to 1000000000 1024 48000
  python3 tools/rescale_table.py --from 1000000000 --to 30000/1001 1000000000
  python3 tools/rescale_table.py --self-check --strategy wide128
"""

from __future__ import annotations

import argparse
import logging
import sys

from mediaclock.config import default_config
from mediaclock.core.errors import RescaleError
from mediaclock.core.timebase import Timebase, scale_factor
from mediaclock.kernels.python.mul_div64_v1 import RescaleStrategy, rescale_div_mod_detailed
from mediaclock.kernels.spec import check_vectors


def _parse_value(text: str) -> int:
    try:
        return int(text.strip(), 0)
    except ValueError:
        raise RescaleError(f"invalid tick count {text!r}") from None


def rescale_lines(*, values: list[str], src: Timebase, dst: Timebase, strategy: RescaleStrategy) -> list[str]:
    out: list[str] = []
    for text in values:
        value = _parse_value(text)
        mul, div = scale_factor(src, dst)
        res = rescale_div_mod_detailed(value, mul, div, strategy=strategy)
        line = f"{value} -> {res.quotient}"
        if res.wrapped:
            line += " (wrapped)"
        out.append(line)
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Rescale tick counts between timebases (exact floor, u64).")
    p.add_argument("--from", dest="src", help="Source rate, N or N/D ticks per second")
    p.add_argument("--to", dest="dst", help="Destination rate, N or N/D ticks per second")
    p.add_argument(
        "--strategy",
        choices=[s.value for s in RescaleStrategy],
        default=None,
        help="Kernel strategy (default: MEDIACLOCK_RESCALE_STRATEGY or decompose)",
    )
    p.add_argument("--self-check", action="store_true", help="Replay the kernel vector corpus and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("values", nargs="*", help="Tick counts in the source timebase")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")
    strategy = RescaleStrategy(args.strategy) if args.strategy else default_config().strategy

    if args.self_check:
        problems = check_vectors(strategy)
        for msg in problems:
            print(f"rescale_table self-check: {msg}", file=sys.stderr)
        if problems:
            return 1
        print(f"ok ({strategy.value})")
        return 0

    if not args.src or not args.dst:
        print("rescale_table error: --from and --to are required", file=sys.stderr)
        return 2

    try:
        src = Timebase.parse(args.src)
        dst = Timebase.parse(args.dst)
        lines = rescale_lines(values=list(args.values), src=src, dst=dst, strategy=strategy)
    except (RescaleError, TypeError, ValueError) as exc:
        print(f"rescale_table error: {exc}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

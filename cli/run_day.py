#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_day.py
----------
Run one day's solution:
- Picks the day from the registry in puzzles.DAYS
- Reads data/dayNN.txt (or dayNN_test.txt with --test)
- Prints "Day N.P: answer (elapsed)" for each selected part

Example:
    python -m cli.run_day 12 --test --part both --debug
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from puzzles import DATA_DIR, DayParams, DayPart, get_day


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run a daily puzzle solution.")
    ap.add_argument("day", type=int, help="Day number, e.g. 12")
    ap.add_argument("--part", type=str, default="both",
                    help="Which part to run: 1, 2 or both")
    ap.add_argument("--test", action="store_true", help="Use the sample input (dayNN_test.txt)")
    ap.add_argument("--debug", action="store_true", help="Print/save extra diagnostic output")
    ap.add_argument("--data-dir", type=str, default=DATA_DIR, help="Directory holding the input files")
    ap.add_argument("--out-dir", type=str, default="out", help="Directory for debug figures")
    ap.add_argument("--workers", type=int, default=1,
                    help="Worker processes for multi-start searches (0 = all cores)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        solve = get_day(args.day)
        params = DayParams(
            number=args.day,
            part=DayPart.parse(args.part),
            test=args.test,
            debug=args.debug,
            data_dir=args.data_dir,
            workers=args.workers,
        )
        solve(params, out_dir=args.out_dir)
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
aoc.py
------
Per-day run parameters: which part(s) to run, sample vs. real input, debug
output. Input files live in DATA_DIR as dayNN.txt / dayNN_test.txt.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

DATA_DIR = "data"


class DayPart(Enum):
    ONE = "1"
    TWO = "2"
    BOTH = "*"

    @classmethod
    def parse(cls, token: str) -> "DayPart":
        key = str(token).strip().lower()
        if key in {"1", "one"}:
            return cls.ONE
        if key in {"2", "two"}:
            return cls.TWO
        if key in {"*", "both", "all"}:
            return cls.BOTH
        raise ValueError(f"Bad part '{token}', expected 1, 2 or both")

    def __str__(self) -> str:
        return self.value


def _format_elapsed(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"


@dataclass
class DayParams:
    number: int
    part: DayPart = DayPart.BOTH
    test: bool = False
    debug: bool = False
    data_dir: str = DATA_DIR
    workers: int = 1

    def input_path(self) -> str:
        suffix = "_test" if self.test else ""
        return os.path.join(self.data_dir, f"day{self.number:02d}{suffix}.txt")

    def read_input(self) -> str:
        path = self.input_path()
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Failed to read {path!r} from {os.getcwd()!r}") from e

    def runs(self, part: DayPart) -> bool:
        return part is DayPart.BOTH or self.part is DayPart.BOTH or part is self.part

    def _run(self, fn: Callable[[], T], part: DayPart) -> Optional[T]:
        if not self.runs(part):
            return None
        t0 = time.perf_counter()
        result = fn()
        elapsed = time.perf_counter() - t0
        print(f"Day {self.number}.{part}: {result} ({_format_elapsed(elapsed)})")
        return result

    def part_1(self, fn: Callable[[], T]) -> Optional[T]:
        return self._run(fn, DayPart.ONE)

    def part_2(self, fn: Callable[[], T]) -> Optional[T]:
        return self._run(fn, DayPart.TWO)

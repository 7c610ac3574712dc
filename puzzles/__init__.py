# -*- coding: utf-8 -*-
"""
Daily puzzle solutions with a unified entry point:
  DAYS[number](params: DayParams) -> {part: answer}
"""

from __future__ import annotations
from typing import Callable, Dict

from .aoc import DATA_DIR, DayParams, DayPart
from .day12 import HeightMap, Point, day12

# Mapping used by the CLI
DAYS: Dict[int, Callable] = {
    12: day12,
}


def get_day(number: int) -> Callable:
    """Look up the solution entry point for a day."""
    if number not in DAYS:
        raise ValueError(f"Unknown day {number}. Available: {sorted(DAYS)}")
    return DAYS[number]


__all__ = [
    "DATA_DIR",
    "DayParams",
    "DayPart",
    "HeightMap",
    "Point",
    "day12",
    "DAYS",
    "get_day",
]

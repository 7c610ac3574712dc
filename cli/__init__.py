# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_day : run one day's solution (part 1, part 2 or both; sample or real input)
"""
__all__ = [
    "run_day",
]

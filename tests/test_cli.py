#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from cli.run_day import main
from puzzles import DayParams, DayPart, get_day

DATA_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "data"))


def test_run_sample_input(capsys):
    assert main(["12", "--test", "--data-dir", DATA_DIR]) == 0
    out = capsys.readouterr().out
    assert "Day 12.1: 31" in out
    assert "Day 12.2: 29" in out


def test_run_single_part(capsys):
    assert main(["12", "--test", "--part", "1", "--data-dir", DATA_DIR]) == 0
    out = capsys.readouterr().out
    assert "Day 12.1: 31" in out
    assert "Day 12.2" not in out


def test_debug_writes_figure(tmp_path, capsys):
    out_dir = tmp_path / "out"
    assert main(["12", "--test", "--debug", "--data-dir", DATA_DIR, "--out-dir", str(out_dir)]) == 0
    assert (out_dir / "day12_test.png").exists()
    assert "Saved:" in capsys.readouterr().out


def test_missing_input_is_reported(tmp_path, capsys):
    assert main(["12", "--data-dir", str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert "[ERROR]" in err and "day12.txt" in err


def test_unknown_day_and_bad_part(capsys):
    assert main(["99"]) == 1
    assert "Unknown day" in capsys.readouterr().err
    assert main(["12", "--part", "3"]) == 1


def test_params_paths_and_part_selection():
    p = DayParams(number=7, test=True, data_dir="inputs")
    assert p.input_path() == os.path.join("inputs", "day07_test.txt")
    assert DayPart.parse("both") is DayPart.BOTH
    only_two = DayParams(number=7, part=DayPart.TWO)
    assert not only_two.runs(DayPart.ONE)
    assert only_two.runs(DayPart.TWO)
    assert only_two.part_1(lambda: 1) is None
    with pytest.raises(ValueError):
        get_day(0)

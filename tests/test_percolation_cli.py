"""Tests for the percolation-stats command-line client."""

from __future__ import annotations

import sys

import pytest
from loguru import logger

import percolation_cli


@pytest.fixture(autouse=True)
def restore_loguru():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_parser_defaults():
    args = percolation_cli.get_parser().parse_args(["20", "100"])
    assert args.n == 20
    assert args.trials == 100
    assert args.Lmax is None
    assert args.Lstep == percolation_cli.DEFAULT_LSTEP
    assert args.log_level == "INFO"
    assert not args.quiet


def test_single_run_prints_report_and_time(capsys):
    assert percolation_cli.main(["5", "10", "--seed", "1", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "mean                    = " in out
    assert "stddev                  = " in out
    assert "95% confidence interval = [" in out
    assert out.rstrip().endswith("seconds")


def test_sweep_prints_extrapolation(capsys):
    assert percolation_cli.main(["4", "8", "--Lmax", "12", "--Lstep", "4", "--seed", "2", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "pc(infinity) = " in out
    assert "R^2 = " in out


def test_sweep_with_one_size_skips_extrapolation(capsys):
    assert percolation_cli.main(["4", "3", "--Lmax", "4", "--quiet"]) == 0
    assert "pc(infinity)" not in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["0", "10"], ["10", "0"], ["-3", "5"], ["5", "5", "--Lmax", "2"]])
def test_invalid_arguments_exit_with_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        percolation_cli.main(argv + ["--quiet"])
    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_quiet_overrides_log_level(capsys):
    percolation_cli.configure_logging(True, "DEBUG")
    logger.debug("hidden debug")
    logger.warning("shown warning")
    err = capsys.readouterr().err
    assert "hidden debug" not in err
    assert "shown warning" in err


def test_log_level_is_applied(capsys):
    percolation_cli.configure_logging(False, "DEBUG")
    logger.debug("visible debug")
    assert "visible debug" in capsys.readouterr().err

# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI smoke tests.

We run the actual CLI entrypoint in a subprocess, the way a user would. That
catches broken imports and entrypoint wiring that unit tests miss, and it is
the only place the stdout/stderr split is visible end to end.
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest

from quadbench.cli.commands import handle_run
from quadbench.cli.main import build_parser


def _run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    """Run `quadbench` with the given arguments and capture output."""
    return subprocess.run(
        [sys.executable, "-m", "quadbench.cli.main", *args],
        capture_output=True,
        text=True,
        timeout=60,
    )


def _data_lines(stdout: str) -> list[list[str]]:
    return [line.split("\t") for line in stdout.splitlines() if not line.startswith("\t")]


def _headers(stdout: str) -> list[str]:
    return [line.strip() for line in stdout.splitlines() if line.startswith("\t")]


class TestHelpTexts:
    @pytest.mark.parametrize("subcommand", ["run", "solve", "info"])
    def test_subcommand_help_exits_zero(self, subcommand: str) -> None:
        result = _run_cli(subcommand, "--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_root_help_exits_zero(self) -> None:
        result = _run_cli("--help")
        assert result.returncode == 0


class TestRun:
    def test_sweep_prints_one_line_per_run(self, small_sweep_config_file: Path) -> None:
        result = _run_cli("run", "--config", str(small_sweep_config_file))
        assert result.returncode == 0

        assert _headers(result.stdout) == [
            "--------No exception-----------",
            "--------Normal-----------",
            "--------Full exception-----------",
        ]
        rows = _data_lines(result.stdout)
        assert [int(row[0]) for row in rows] == [64, 128, 256] * 3
        for row in rows:
            assert len(row) == 3
            assert float(row[1]) >= 0.0
            float(row[2])

    def test_conventions_report_identical_checksums(self, small_sweep_config_file: Path) -> None:
        result = _run_cli("run", "--config", str(small_sweep_config_file))
        rows = _data_lines(result.stdout)
        checksums = [row[2] for row in rows]
        assert checksums[0:3] == checksums[3:6] == checksums[6:9]

    def test_logs_stay_off_stdout(self, small_sweep_config_file: Path) -> None:
        result = _run_cli("run", "--config", str(small_sweep_config_file), "--log-level", "DEBUG")
        assert result.returncode == 0
        assert "{" not in result.stdout
        for line in result.stderr.strip().splitlines():
            json.loads(line)

    def test_both_modes_cross_check(self, small_sweep_config_file: Path) -> None:
        result = _run_cli(
            "run", "--config", str(small_sweep_config_file), "--mode", "both", "--workers", "2"
        )
        assert result.returncode == 0
        headers = _headers(result.stdout)
        assert len(headers) == 6
        assert headers[0] == "--------No exception (sequential)-----------"
        assert headers[-1] == "--------Full exception (parallel)-----------"

    def test_report_directory_is_written(self, tmp_path: Path) -> None:
        output_dir = tmp_path / "report"
        config_file = tmp_path / "with_output.yaml"
        config_file.write_text(
            "global:\n"
            "  config_version: \"1.0.0\"\n"
            "sweep:\n"
            "  start_size: 32\n"
            "  max_multiplier: 2\n"
            f"  output_directory: \"{output_dir.as_posix()}\"\n",
            encoding="utf-8",
        )
        result = _run_cli("run", "--config", str(config_file))
        assert result.returncode == 0

        payload = json.loads((output_dir / "results.json").read_text(encoding="utf-8"))
        assert len(payload["runs"]) == 6
        assert (output_dir / "config_snapshot.yaml").is_file()

    def test_invalid_worker_override_is_a_user_error(self, small_sweep_config_file: Path) -> None:
        result = _run_cli("run", "--config", str(small_sweep_config_file), "--workers", "0")
        assert result.returncode == 1  # USER_ERROR

    def test_unknown_mode_is_rejected_by_argparse(self) -> None:
        result = _run_cli("run", "--mode", "sideways")
        assert result.returncode == 2


class TestSolve:
    def test_two_roots(self) -> None:
        result = _run_cli("solve", "1", "-3", "2")
        assert result.returncode == 0
        assert result.stdout.strip().split("\t") == ["2.0", "1.0"]

    @pytest.mark.parametrize("convention", ["no_exception", "normal", "full_exception"])
    def test_degenerate_equation_prints_no_roots(self, convention: str) -> None:
        result = _run_cli("solve", "0", "0", "0", "--convention", convention)
        assert result.returncode == 0
        assert result.stdout.strip() == ""

    def test_full_exception_logs_the_channel_used(self) -> None:
        result = _run_cli("solve", "0", "4", "1", "--convention", "full_exception")
        assert result.returncode == 0
        assert result.stdout.strip() == "-0.25"
        entries = [json.loads(line) for line in result.stderr.strip().splitlines()]
        solved = [e for e in entries if e["msg"] == "Equation solved"]
        assert solved[0]["signalled"] == "RootsComputed"
        assert solved[0]["contribution"] == -0.25


class TestGlobalOptionPlacement:
    """--config and --log-level work on either side of the subcommand."""

    def test_config_before_subcommand_is_kept(self) -> None:
        args = build_parser().parse_args(["--config", "sweep.yaml", "run"])
        assert args.config == "sweep.yaml"
        assert args.log_level is None
        assert args.func is handle_run

    def test_config_after_subcommand_is_kept(self) -> None:
        args = build_parser().parse_args(["run", "--config", "sweep.yaml"])
        assert args.config == "sweep.yaml"

    def test_value_after_subcommand_wins(self) -> None:
        args = build_parser().parse_args(
            ["--log-level", "ERROR", "solve", "1", "2", "3", "--log-level", "DEBUG"]
        )
        assert args.log_level == "DEBUG"

    def test_no_arguments_means_default_sweep(self) -> None:
        args = build_parser().parse_args([])
        assert args.config is None
        assert args.log_level is None
        assert args.mode is None
        assert args.func is handle_run

    def test_missing_config_before_subcommand_is_a_config_error(self) -> None:
        result = _run_cli("--config", "/nonexistent/path.yaml", "solve", "1", "-3", "2")
        assert result.returncode == 2  # CONFIG_ERROR
        assert result.stdout == ""

    def test_config_before_run_drives_the_sweep(self, small_sweep_config_file: Path) -> None:
        result = _run_cli("--config", str(small_sweep_config_file), "run")
        assert result.returncode == 0
        rows = _data_lines(result.stdout)
        assert [int(row[0]) for row in rows] == [64, 128, 256] * 3

    def test_log_level_before_subcommand_filters_logs(self) -> None:
        result = _run_cli("--log-level", "ERROR", "solve", "1", "-3", "2")
        assert result.returncode == 0
        assert result.stdout.strip().split("\t") == ["2.0", "1.0"]
        assert result.stderr.strip() == ""


class TestConfigLoading:
    def test_rejected_fields_are_logged(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad_workers.yaml"
        config_file.write_text(
            "global:\n  config_version: \"1.0.0\"\nsweep:\n  workers: 0\n",
            encoding="utf-8",
        )
        result = _run_cli("run", "--config", str(config_file))
        assert result.returncode == 2
        entries = [json.loads(line) for line in result.stderr.strip().splitlines()]
        rejected = [e for e in entries if e["msg"] == "Configuration rejected"]
        assert rejected[0]["fields"] == ["sweep.workers"]
        assert rejected[0]["path"] == str(config_file)

    def test_nonexistent_config_returns_config_error(self) -> None:
        result = _run_cli("run", "--config", "/nonexistent/path.yaml")
        assert result.returncode == 2  # CONFIG_ERROR

    def test_invalid_config_returns_config_error(self, invalid_config_file: Path) -> None:
        result = _run_cli("run", "--config", str(invalid_config_file))
        assert result.returncode == 2

    def test_info_runs_without_config(self) -> None:
        result = _run_cli("info")
        assert result.returncode == 0
        entry = json.loads(result.stderr.strip().splitlines()[-1])
        assert entry["msg"] == "System information"
        assert "quadbench_version" in entry

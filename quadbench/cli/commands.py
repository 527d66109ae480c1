# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the quadbench CLI.

Each function here corresponds to one CLI subcommand and returns an exit code.
Diagnostics go through the structured logger on stderr; stdout carries only
the benchmark lines (or, for `solve`, the roots).
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from quadbench.benchmark.models import ExecutionMode, RunResult
from quadbench.benchmark.reporting import format_run_line, format_section_header, write_report
from quadbench.benchmark.sweep import run_sweep
from quadbench.benchmark.validation import compare_modes
from quadbench.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS, USER_ERROR, VALIDATION_ERROR
from quadbench.config.exceptions import ConfigError, ConfigValidationError
from quadbench.config.loader import default_config, load_config
from quadbench.config.schema import QuadBenchConfig, SweepConfig
from quadbench.logging.logger import get_logger
from quadbench.runtime.bootstrap import bootstrap
from quadbench.solver.conventions import (
    CallingConvention,
    call_solver,
    solve,
    solve_full_exception,
    solve_no_exception,
)
from quadbench.solver.exceptions import InvalidParametersError, RootsComputed

_MODE_CHOICES: dict[str, list[ExecutionMode]] = {
    "sequential": [ExecutionMode.SEQUENTIAL],
    "parallel": [ExecutionMode.PARALLEL],
    "both": [ExecutionMode.SEQUENTIAL, ExecutionMode.PARALLEL],
}


def _emit(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def _load_and_bootstrap(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[QuadBenchConfig, logging.Logger]:
    """
    The shared setup every command needs: load config (or defaults), bootstrap.

    Raises:
        ConfigError: If the config file cannot be loaded. It has already been
            logged; the caller only turns it into CONFIG_ERROR.
    """
    log_level = getattr(args, "log_level", None) or "INFO"
    logger = get_logger(f"quadbench.cli.{command_name}", log_level=log_level)

    config_path = getattr(args, "config", None)
    if config_path is not None:
        try:
            config = load_config(Path(config_path))
        except ConfigValidationError as err:
            logger.error(
                "Configuration rejected",
                extra={
                    "command": command_name,
                    "path": str(err.path),
                    "fields": list(err.fields),
                    "error": str(err),
                },
            )
            raise
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"command": command_name, "path": str(err.path), "error": str(err)},
            )
            raise
    else:
        logger.debug(
            "No config provided, running with defaults",
            extra={"command": command_name},
        )
        config = default_config()

    global_config = config.global_config
    if getattr(args, "log_level", None) is not None:
        global_config = global_config.model_copy(update={"log_level": args.log_level})

    bootstrap(global_config)
    logger = get_logger(f"quadbench.cli.{command_name}", log_level=global_config.log_level)
    return config, logger


def _apply_overrides(sweep: SweepConfig, args: argparse.Namespace) -> SweepConfig:
    """
    Fold --mode and --workers into the sweep config.

    Raises:
        pydantic.ValidationError: If an override is out of range.
    """
    overrides: dict[str, object] = {}
    mode = getattr(args, "mode", None)
    if mode is not None:
        overrides["modes"] = _MODE_CHOICES[mode]
    workers = getattr(args, "workers", None)
    if workers is not None:
        overrides["workers"] = workers

    if not overrides:
        return sweep
    return SweepConfig.model_validate({**sweep.model_dump(), **overrides})


def handle_run(args: argparse.Namespace) -> int:
    """Run the full sweep and print one line per (convention, n)."""
    try:
        config, logger = _load_and_bootstrap(args, "run")
    except ConfigError:
        return CONFIG_ERROR

    try:
        sweep = _apply_overrides(config.sweep, args)
    except ValidationError as err:
        logger.error("Invalid command-line override", extra={"error": str(err)})
        return USER_ERROR

    show_mode = len(sweep.modes) > 1

    def on_section(convention: CallingConvention, mode: ExecutionMode) -> None:
        _emit(format_section_header(convention, mode, show_mode=show_mode))

    def on_result(result: RunResult) -> None:
        _emit(format_run_line(result))

    try:
        results = run_sweep(sweep, on_section=on_section, on_result=on_result)

        mismatches = []
        if ExecutionMode.SEQUENTIAL in sweep.modes and ExecutionMode.PARALLEL in sweep.modes:
            mismatches = compare_modes(results, eps=sweep.epsilon)

        if sweep.output_directory is not None:
            snapshot = config.model_copy(update={"sweep": sweep}).model_dump(
                mode="json", by_alias=True
            )
            write_report(
                results,
                Path(sweep.output_directory),
                config_snapshot=snapshot,
                mismatches=mismatches,
            )

    except Exception as err:
        logger.error("Sweep failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR

    if mismatches:
        logger.error(
            "Parallel and sequential checksums disagree",
            extra={"mismatches": len(mismatches)},
        )
        return VALIDATION_ERROR

    return SUCCESS


def handle_solve(args: argparse.Namespace) -> int:
    """
    Solve a single equation under one convention.

    Prints the roots tab-separated on one line (an empty line when there are
    none) and logs which path the convention took to get them there.
    """
    try:
        config, logger = _load_and_bootstrap(args, "solve")
    except ConfigError:
        return CONFIG_ERROR

    convention = CallingConvention(args.convention)
    eps = config.sweep.epsilon
    a, b, c = args.a, args.b, args.c

    signalled = "none"
    roots: tuple[float, ...] = ()
    if convention is CallingConvention.NO_EXCEPTION:
        roots = solve_no_exception(a, b, c, eps)
    elif convention is CallingConvention.NORMAL:
        try:
            roots = solve(a, b, c, eps)
        except InvalidParametersError:
            signalled = "InvalidParametersError"
    else:
        try:
            solve_full_exception(a, b, c, eps)
        except RootsComputed as result:
            signalled = "RootsComputed"
            roots = result.roots
        except InvalidParametersError:
            signalled = "InvalidParametersError"

    contribution = call_solver(convention, a, b, c, eps)
    logger.info(
        "Equation solved",
        extra={
            "a": a,
            "b": b,
            "c": c,
            "convention": convention.value,
            "signalled": signalled,
            "roots": list(roots),
            "contribution": contribution,
        },
    )
    _emit("\t".join(repr(root) for root in roots))
    return SUCCESS


def handle_info(args: argparse.Namespace) -> int:
    """Display version and environment information."""
    log_level = getattr(args, "log_level", None) or "INFO"
    logger = get_logger("quadbench.cli.info", log_level=log_level)

    from quadbench import __version__
    from quadbench.runtime.environment import get_system_info

    system_info = get_system_info()

    logger.info(
        "System information",
        extra={
            "quadbench_version": __version__,
            "python_version": system_info.python_version,
            "implementation": system_info.implementation,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "hostname": system_info.hostname,
            "cpu_count": system_info.cpu_count,
            "config": getattr(args, "config", None),
        },
    )
    return SUCCESS

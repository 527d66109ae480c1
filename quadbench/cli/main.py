# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for quadbench.

Running `quadbench` with no arguments runs the full reference sweep, exactly
like `quadbench run`. The global options (--config, --log-level) are inherited
by every subcommand through argparse's parent parser mechanism.

Usage:
    quadbench
    quadbench run --mode both --workers 8
    quadbench run --config configs/sweep.yaml
    quadbench solve 1 -3 2 --convention full_exception
    quadbench info
"""

import argparse
import sys

from quadbench.cli.commands import handle_info, handle_run, handle_solve
from quadbench.solver.conventions import CallingConvention


def _build_global_parser(suppress_defaults: bool = False) -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    Separate parent (add_help=False) so help text doesn't collide between the
    parent and the subcommand parsers.

    The root parser gets the options with a None default. The subcommand
    copies are built with suppress_defaults=True: an option the user did not
    repeat after the subcommand then leaves the namespace alone, instead of
    resetting a value given before it (`quadbench --config x.yaml run`).
    """
    default = argparse.SUPPRESS if suppress_defaults else None
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=default,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=default,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (overrides config).",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    run_parser = subparsers.add_parser(
        "run", parents=[parent], help="Run the benchmark sweep (the default)."
    )
    run_parser.add_argument(
        "--mode",
        type=str,
        default=None,
        choices=["sequential", "parallel", "both"],
        help="Execution mode; 'both' also cross-checks the checksums.",
    )
    run_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Thread pool size for parallel mode (default: one per CPU).",
    )
    run_parser.set_defaults(func=handle_run)

    solve_parser = subparsers.add_parser(
        "solve", parents=[parent], help="Solve a single equation a*x^2 + b*x + c = 0."
    )
    solve_parser.add_argument("a", type=float, help="Quadratic coefficient.")
    solve_parser.add_argument("b", type=float, help="Linear coefficient.")
    solve_parser.add_argument("c", type=float, help="Constant term.")
    solve_parser.add_argument(
        "--convention",
        type=str,
        default=CallingConvention.NORMAL.value,
        choices=[c.value for c in CallingConvention],
        help="Calling convention to solve under.",
    )
    solve_parser.set_defaults(func=handle_solve)

    info_parser = subparsers.add_parser(
        "info", parents=[parent], help="Display version and environment info."
    )
    info_parser.set_defaults(func=handle_info)


def build_parser() -> argparse.ArgumentParser:
    """The root parser with global options and all subcommands registered."""
    root_parser = argparse.ArgumentParser(
        prog="quadbench",
        description="quadbench: cost of error-signalling conventions on a quadratic solver sweep.",
        parents=[_build_global_parser()],
    )
    root_parser.set_defaults(func=handle_run, mode=None, workers=None)
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, _build_global_parser(suppress_defaults=True))
    return root_parser


def main() -> None:
    """
    Main CLI entrypoint. This is what pyproject.toml's [project.scripts] points to.

      1. Build the argument parser with global options and all subcommands
      2. Parse the command line
      3. Call the handler for the chosen subcommand (run when none is given)
      4. Exit with the handler's return code
    """
    args = build_parser().parse_args()

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

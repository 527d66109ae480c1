# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Cross-checking parallel checksums against sequential ones.

A parallel run adds the same contributions as a sequential run, just grouped
and ordered differently. Each summation order is off from the exact sum by at
most about n * eps * sum(|x|), so two orders can be at most twice that apart.
Anything beyond that bound is a lost or duplicated update, not rounding.
"""

import sys

from quadbench.benchmark.models import ExecutionMode, ModeMismatch, RunResult
from quadbench.logging.logger import get_logger
from quadbench.solver.conventions import CallingConvention, contribution_function
from quadbench.solver.equation import DEFAULT_EPSILON
from quadbench.workload.generator import generate

logger = get_logger(__name__)


def contribution_magnitude(
    n: int,
    convention: CallingConvention,
    eps: float = DEFAULT_EPSILON,
) -> float:
    """Sum of |contribution| over [0, n). Computed outside any timed region."""
    contribute = contribution_function(convention)
    magnitude = 0.0
    for index in range(n):
        a, b, c = generate(index)
        magnitude += abs(contribute(a, b, c, eps))
    return magnitude


def checksum_tolerance(n: int, magnitude: float) -> float:
    return 2 * n * sys.float_info.epsilon * magnitude


def checksums_agree(first: float, second: float, n: int, magnitude: float) -> bool:
    return abs(first - second) <= checksum_tolerance(n, magnitude)


def compare_modes(results: list[RunResult], eps: float = DEFAULT_EPSILON) -> list[ModeMismatch]:
    """
    Pair every parallel result with the sequential one for the same
    (n, convention) and report the pairs that disagree.

    Results without a counterpart in the other mode are ignored.
    """
    sequential: dict[tuple[int, CallingConvention], RunResult] = {
        (r.n, r.convention): r for r in results if r.mode is ExecutionMode.SEQUENTIAL
    }

    mismatches: list[ModeMismatch] = []
    for result in results:
        if result.mode is not ExecutionMode.PARALLEL:
            continue
        baseline = sequential.get((result.n, result.convention))
        if baseline is None:
            continue

        magnitude = contribution_magnitude(result.n, result.convention, eps)
        if not checksums_agree(baseline.checksum, result.checksum, result.n, magnitude):
            mismatch = ModeMismatch(
                n=result.n,
                convention=result.convention,
                sequential_checksum=baseline.checksum,
                parallel_checksum=result.checksum,
                tolerance=checksum_tolerance(result.n, magnitude),
            )
            logger.warning(
                "Parallel checksum outside reassociation bound",
                extra={
                    "n": mismatch.n,
                    "convention": mismatch.convention.value,
                    "sequential": mismatch.sequential_checksum,
                    "parallel": mismatch.parallel_checksum,
                    "tolerance": mismatch.tolerance,
                },
            )
            mismatches.append(mismatch)

    return mismatches

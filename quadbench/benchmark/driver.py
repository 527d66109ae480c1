# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark driver: one timed pass over n generated equations.

For every index in [0, n) the driver generates coefficients, solves them under
the chosen calling convention and adds the root sum into a running total. The
wall-clock time of the whole pass and the final total (the checksum) make up
the RunResult.

Two execution modes:
  - sequential: one thread, strict index order, a plain local float.
  - parallel: [0, n) is cut into contiguous chunks that run on a fixed-size
    thread pool. Each chunk sums its own indices locally and then merges that
    partial sum into a SharedAccumulator under its lock. chunk_size=1 gives
    one merge per index.

Float addition is not associative, so a parallel checksum can differ from the
sequential one in the last few bits. quadbench.benchmark.validation bounds how
far apart they are allowed to be.
"""

import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Final, Optional

from quadbench.benchmark.accumulator import SharedAccumulator
from quadbench.benchmark.models import ExecutionMode, RunResult
from quadbench.logging.logger import get_logger
from quadbench.solver.conventions import CallingConvention, ContributionFn, contribution_function
from quadbench.solver.equation import DEFAULT_EPSILON
from quadbench.workload.generator import generate

logger = get_logger(__name__)

DEFAULT_CHUNK_SIZE: Final[int] = 1024


def default_workers() -> int:
    """Pool size when none is configured: one thread per CPU."""
    return os.cpu_count() or 1


def partition(n: int, chunk_size: int) -> list[range]:
    """Split [0, n) into contiguous ranges of at most chunk_size indices."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    return [range(start, min(start + chunk_size, n)) for start in range(0, n, chunk_size)]


def _sum_range(contribute: ContributionFn, indices: range, eps: float) -> float:
    total = 0.0
    for index in indices:
        a, b, c = generate(index)
        total += contribute(a, b, c, eps)
    return total


def _merge_chunk(
    accumulator: SharedAccumulator,
    contribute: ContributionFn,
    indices: range,
    eps: float,
) -> None:
    # The whole chunk is summed before the shared total is touched.
    accumulator.add(_sum_range(contribute, indices, eps))


def run_sequential(
    n: int,
    convention: CallingConvention,
    eps: float = DEFAULT_EPSILON,
) -> RunResult:
    contribute = contribution_function(convention)

    begin = time.perf_counter()
    total = _sum_range(contribute, range(n), eps)
    end = time.perf_counter()

    return RunResult(
        n=n,
        elapsed_ms=(end - begin) * 1000,
        checksum=total,
        convention=CallingConvention(convention),
        mode=ExecutionMode.SEQUENTIAL,
        workers=1,
    )


def run_parallel(
    n: int,
    convention: CallingConvention,
    workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    eps: float = DEFAULT_EPSILON,
) -> RunResult:
    """
    Timed pass with the work spread over a thread pool.

    The pool is started before the clock and shut down after it stops, so
    thread start-up is not billed to the convention being measured.
    """
    pool_size = workers if workers is not None else default_workers()
    if pool_size < 1:
        raise ValueError(f"workers must be >= 1, got {pool_size}")

    contribute = contribution_function(convention)
    chunks = partition(n, chunk_size)
    accumulator = SharedAccumulator()

    with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="quadbench") as pool:
        begin = time.perf_counter()
        futures = [
            pool.submit(_merge_chunk, accumulator, contribute, chunk, eps) for chunk in chunks
        ]
        for future in futures:
            future.result()
        end = time.perf_counter()

    if accumulator.merges != len(chunks):
        raise RuntimeError(
            f"parallel pass merged {accumulator.merges} partial sums for {len(chunks)} chunks"
        )
    logger.debug(
        "Parallel pass merged",
        extra={"n": n, "chunks": len(chunks), "merges": accumulator.merges, "workers": pool_size},
    )

    return RunResult(
        n=n,
        elapsed_ms=(end - begin) * 1000,
        checksum=accumulator.total,
        convention=CallingConvention(convention),
        mode=ExecutionMode.PARALLEL,
        workers=pool_size,
    )


def run(
    n: int,
    convention: CallingConvention,
    mode: ExecutionMode = ExecutionMode.SEQUENTIAL,
    workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    eps: float = DEFAULT_EPSILON,
) -> RunResult:
    """
    Time one pass over n equations and return (n, elapsed ms, checksum).

    Raises:
        ValueError: If n is negative, or workers/chunk_size are below 1.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    if ExecutionMode(mode) is ExecutionMode.PARALLEL:
        result = run_parallel(n, convention, workers=workers, chunk_size=chunk_size, eps=eps)
    else:
        result = run_sequential(n, convention, eps=eps)

    logger.debug(
        "Run complete",
        extra={
            "n": result.n,
            "convention": result.convention.value,
            "mode": result.mode.value,
            "workers": result.workers,
            "elapsed_ms": result.elapsed_ms,
            "checksum": result.checksum,
        },
    )
    return result

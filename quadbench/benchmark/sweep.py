# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The geometric sweep over input sizes.

For every mode, for every convention, for n = start, start*factor, ... while
n <= start * max_multiplier, run one timed pass. Results are handed to an
optional callback as they complete so the CLI can stream one line per run
instead of waiting for the whole sweep.
"""

from typing import Callable, Optional

from quadbench.benchmark.driver import run
from quadbench.benchmark.models import ExecutionMode, RunResult
from quadbench.config.schema import SweepConfig
from quadbench.logging.logger import get_logger
from quadbench.solver.conventions import CallingConvention

logger = get_logger(__name__)

SectionCallback = Callable[[CallingConvention, ExecutionMode], None]
ResultCallback = Callable[[RunResult], None]


def sweep_sizes(start: int = 4096, factor: int = 2, max_multiplier: int = 512) -> list[int]:
    """
    Input sizes of the sweep, smallest first.

    Raises:
        ValueError: If start < 1, factor < 2 or max_multiplier < 1.
    """
    if start < 1:
        raise ValueError(f"start must be >= 1, got {start}")
    if factor < 2:
        raise ValueError(f"factor must be >= 2, got {factor}")
    if max_multiplier < 1:
        raise ValueError(f"max_multiplier must be >= 1, got {max_multiplier}")

    limit = start * max_multiplier
    sizes: list[int] = []
    n = start
    while n <= limit:
        sizes.append(n)
        n *= factor
    return sizes


def run_sweep(
    config: SweepConfig,
    on_section: Optional[SectionCallback] = None,
    on_result: Optional[ResultCallback] = None,
) -> list[RunResult]:
    """Run every (mode, convention, n) combination the config asks for, in order."""
    sizes = sweep_sizes(config.start_size, config.growth_factor, config.max_multiplier)

    logger.info(
        "Sweep started",
        extra={
            "sizes": len(sizes),
            "smallest": sizes[0],
            "largest": sizes[-1],
            "conventions": [c.value for c in config.conventions],
            "modes": [m.value for m in config.modes],
        },
    )

    results: list[RunResult] = []
    for mode in config.modes:
        for convention in config.conventions:
            if on_section is not None:
                on_section(convention, mode)

            for n in sizes:
                result = run(
                    n,
                    convention,
                    mode=mode,
                    workers=config.workers,
                    chunk_size=config.chunk_size,
                    eps=config.epsilon,
                )
                results.append(result)
                if on_result is not None:
                    on_result(result)

    logger.info("Sweep finished", extra={"runs": len(results)})
    return results

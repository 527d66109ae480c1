# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for benchmark runs.

RunResult is frozen: a measurement is recorded once and never edited.
"""

from dataclasses import dataclass
from enum import Enum

from quadbench.solver.conventions import CallingConvention


class ExecutionMode(str, Enum):
    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class RunResult:
    """One timed pass over n equations under one convention and mode."""

    n: int
    elapsed_ms: float
    checksum: float
    convention: CallingConvention
    mode: ExecutionMode = ExecutionMode.SEQUENTIAL
    workers: int = 1


@dataclass(frozen=True)
class ModeMismatch:
    """A parallel checksum that strayed past the reassociation bound."""

    n: int
    convention: CallingConvention
    sequential_checksum: float
    parallel_checksum: float
    tolerance: float

# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for quadbench.

Every config section gets its own frozen pydantic model. Frozen means once you
create it, you cannot mutate it, so a sweep can never change its own bounds
halfway through.

The models use pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from quadbench.benchmark.models import ExecutionMode
from quadbench.solver.conventions import CallingConvention
from quadbench.solver.equation import DEFAULT_EPSILON


class GlobalConfig(BaseModel):
    """Cross-cutting settings: project identity and observability."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    project_name: str = Field(
        default="quadbench", description="Human-readable project identifier"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )


class SweepConfig(BaseModel):
    """
    Everything the sweep needs: which sizes, which conventions, which modes.

    The defaults reproduce the reference run: n = 4096, 8192, ... up to
    4096 * 512, all three conventions, sequential only.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    start_size: int = Field(
        default=4096,
        ge=1,
        description="Smallest input size in the sweep",
    )
    growth_factor: int = Field(
        default=2,
        ge=2,
        description="Each step multiplies n by this",
    )
    max_multiplier: int = Field(
        default=512,
        ge=1,
        description="The sweep stops once n exceeds start_size * max_multiplier",
    )
    conventions: list[CallingConvention] = Field(
        default_factory=lambda: [
            CallingConvention.NO_EXCEPTION,
            CallingConvention.NORMAL,
            CallingConvention.FULL_EXCEPTION,
        ],
        min_length=1,
        description="Calling conventions to measure, in output order",
    )
    modes: list[ExecutionMode] = Field(
        default_factory=lambda: [ExecutionMode.SEQUENTIAL],
        min_length=1,
        description="Execution modes to run; both modes enables checksum cross-checks",
    )
    workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Thread pool size for parallel mode; None means one per CPU",
    )
    chunk_size: int = Field(
        default=1024,
        ge=1,
        description="Indices summed locally before each merge into the shared total",
    )
    epsilon: float = Field(
        default=DEFAULT_EPSILON,
        gt=0.0,
        description="Absolute tolerance for the solver's ~0 comparisons",
    )
    output_directory: Optional[str] = Field(
        default=None,
        description="If set, results.json, report.txt and a config snapshot land here",
    )


class QuadBenchConfig(BaseModel):
    """
    Top-level config container.

    A YAML file needs at least a `global:` section; a missing `sweep:` section
    means the reference sweep.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    sweep: SweepConfig = Field(default_factory=SweepConfig)

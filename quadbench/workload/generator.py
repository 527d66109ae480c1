# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Deterministic coefficient generator.

Each index maps to one (a, b, c) triple through plain modular arithmetic, so
the workload needs no random state and every execution mode sees exactly the
same equations for the same index. That is what makes checksums comparable
between sequential and parallel runs.
"""

from typing import NamedTuple


class Coefficients(NamedTuple):
    """One quadratic equation a*x^2 + b*x + c = 0."""

    a: float
    b: float
    c: float


def generate(index: int) -> Coefficients:
    """
    Coefficients for the given workload index.

    a sweeps [-1000/33, 999/33] with period 2000, b sweeps [-100/22, 99/22]
    with period 200, c sweeps [-10/11, 9/11] with period 20.

    Raises:
        ValueError: If index is negative.
    """
    if index < 0:
        raise ValueError(f"Workload index must be non-negative, got {index}")

    return Coefficients(
        a=((index % 2000) - 1000.0) / 33.0,
        b=((index % 200) - 100.0) / 22.0,
        c=((index % 20) - 10.0) / 11.0,
    )

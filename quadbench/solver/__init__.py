# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Quadratic solver and the calling conventions wrapped around it.

  - equation: the root finder and its epsilon comparison
  - conventions: the three error-signalling wrappers and the dispatcher
  - exceptions: the failure shapes those wrappers raise
"""

from quadbench.solver.conventions import CallingConvention, call_solver, contribution_function
from quadbench.solver.equation import DEFAULT_EPSILON, solve_roots, sum_roots
from quadbench.solver.exceptions import CalcError, InvalidParametersError, RootsComputed

__all__ = [
    "CalcError",
    "CallingConvention",
    "DEFAULT_EPSILON",
    "InvalidParametersError",
    "RootsComputed",
    "call_solver",
    "contribution_function",
    "solve_roots",
    "sum_roots",
]

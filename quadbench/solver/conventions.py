# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The three calling conventions the benchmark compares.

Every convention solves the same equation with the same arithmetic. They only
differ in how the fully degenerate input (a, b and c all ~0) travels back to
the caller, and, for FULL_EXCEPTION, in how a normal result does:

  NO_EXCEPTION    the degenerate case is just an empty root tuple
  NORMAL          the degenerate case raises InvalidParametersError
  FULL_EXCEPTION  the degenerate case raises InvalidParametersError and every
                  successful result is raised as RootsComputed

Each convention has a "contribution" function that turns one equation into the
scalar the benchmark accumulates (sum of roots, or 0.0). The driver looks the
function up once per run so the lookup itself is not part of the timing.
"""

from enum import Enum
from typing import Callable

from quadbench.solver.equation import DEFAULT_EPSILON, is_degenerate, solve_roots, sum_roots
from quadbench.solver.exceptions import InvalidParametersError, RootsComputed

ContributionFn = Callable[[float, float, float, float], float]


class CallingConvention(str, Enum):
    NO_EXCEPTION = "no_exception"
    NORMAL = "normal"
    FULL_EXCEPTION = "full_exception"

    @property
    def title(self) -> str:
        """Section name used in the sweep output."""
        return _TITLES[self]


_TITLES: dict[CallingConvention, str] = {
    CallingConvention.NO_EXCEPTION: "No exception",
    CallingConvention.NORMAL: "Normal",
    CallingConvention.FULL_EXCEPTION: "Full exception",
}


def solve_no_exception(
    a: float, b: float, c: float, eps: float = DEFAULT_EPSILON
) -> tuple[float, ...]:
    if is_degenerate(a, b, c, eps):
        return ()
    return solve_roots(a, b, c, eps)


def solve(a: float, b: float, c: float, eps: float = DEFAULT_EPSILON) -> tuple[float, ...]:
    """
    Solve, raising on input that is not an equation.

    Raises:
        InvalidParametersError: a, b and c are all ~0.
    """
    if is_degenerate(a, b, c, eps):
        raise InvalidParametersError()
    return solve_roots(a, b, c, eps)


def solve_full_exception(a: float, b: float, c: float, eps: float = DEFAULT_EPSILON) -> None:
    """
    Solve, and report the answer by raising it. Never returns normally.

    Raises:
        InvalidParametersError: a, b and c are all ~0.
        RootsComputed: every other input; the roots ride on the exception.
    """
    if is_degenerate(a, b, c, eps):
        raise InvalidParametersError()
    raise RootsComputed(solve_roots(a, b, c, eps))


def roots_sum_no_exception(a: float, b: float, c: float, eps: float = DEFAULT_EPSILON) -> float:
    return sum_roots(solve_no_exception(a, b, c, eps))


def roots_sum(a: float, b: float, c: float, eps: float = DEFAULT_EPSILON) -> float:
    try:
        roots = solve(a, b, c, eps)
    except InvalidParametersError:
        return 0.0
    return sum_roots(roots)


def roots_sum_full_exception(a: float, b: float, c: float, eps: float = DEFAULT_EPSILON) -> float:
    try:
        solve_full_exception(a, b, c, eps)
    except RootsComputed as result:
        return sum_roots(result.roots)
    except InvalidParametersError:
        return 0.0
    return 0.0


_CONTRIBUTIONS: dict[CallingConvention, ContributionFn] = {
    CallingConvention.NO_EXCEPTION: roots_sum_no_exception,
    CallingConvention.NORMAL: roots_sum,
    CallingConvention.FULL_EXCEPTION: roots_sum_full_exception,
}


def contribution_function(convention: CallingConvention) -> ContributionFn:
    """The roots-sum function that implements the given convention."""
    return _CONTRIBUTIONS[CallingConvention(convention)]


def call_solver(
    convention: CallingConvention,
    a: float,
    b: float,
    c: float,
    eps: float = DEFAULT_EPSILON,
) -> float:
    """Solve one equation under the given convention and return its root sum."""
    return contribution_function(convention)(a, b, c, eps)

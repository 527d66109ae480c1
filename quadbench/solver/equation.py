# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Quadratic root finder.

Pure arithmetic, no error signalling. The calling-convention wrappers in
quadbench.solver.conventions decide how the degenerate input is reported;
this module only knows how many real roots an equation has and what they are.

Equality uses a fixed absolute epsilon (1e-5). That is not scale-invariant,
but the reference checksums were produced with exactly this comparison, so it
stays.
"""

import math
from typing import Final

DEFAULT_EPSILON: Final[float] = 1e-5


def is_equal(x: float, y: float, eps: float = DEFAULT_EPSILON) -> bool:
    """True when |x - y| is strictly below eps."""
    return abs(x - y) < eps


def sum_roots(roots: tuple[float, ...]) -> float:
    """Sum roots left to right starting from 0.0; an empty set sums to 0.0."""
    total = 0.0
    for root in roots:
        total += root
    return total


def is_degenerate(a: float, b: float, c: float, eps: float = DEFAULT_EPSILON) -> bool:
    """True when every coefficient vanishes, i.e. 0 = 0 with nothing to solve."""
    return is_equal(a, 0.0, eps) and is_equal(b, 0.0, eps) and is_equal(c, 0.0, eps)


def discriminant(a: float, b: float, c: float) -> float:
    return b**2 - 4 * a * c


def solve_roots(a: float, b: float, c: float, eps: float = DEFAULT_EPSILON) -> tuple[float, ...]:
    """
    Real roots of a*x^2 + b*x + c = 0.

    Returns:
        () when a and b both vanish or the discriminant is negative,
        a single root for a linear equation or a (near-)zero discriminant,
        two roots otherwise, the "+sqrt" one first.
    """
    if is_equal(a, 0.0, eps) and is_equal(b, 0.0, eps):
        return ()

    if is_equal(a, 0.0, eps):
        return (-c / b,)

    disc = discriminant(a, b, c)

    if is_equal(disc, 0.0, eps):
        return (-b / (2 * a),)

    if disc < 0.0:
        return ()

    sqrt_disc = math.sqrt(disc)
    return (
        (-b + sqrt_disc) / (2 * a),
        (-b - sqrt_disc) / (2 * a),
    )

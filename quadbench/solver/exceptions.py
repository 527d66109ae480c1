# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Failure shapes raised by the solver wrappers.

Both share the CalcError base so a caller can catch "anything the solver
signalled" in one clause, or match on the concrete subclass when it needs to
tell an invalid equation apart from a result smuggled through the exception
channel.
"""


class CalcError(Exception):
    """Base for everything the solver wrappers raise."""


class InvalidParametersError(CalcError):
    """Raised when a, b and c all vanish and there is no equation to solve."""

    def __init__(self, message: str = "Invalid parameters") -> None:
        super().__init__(message)


class RootsComputed(CalcError):
    """
    Carries a successful result out through the exception channel.

    Only the full-exception convention raises this. It is not an error at all,
    it is the return value wearing an exception's clothes, and it exists so the
    benchmark can measure what that costs.
    """

    def __init__(self, roots: tuple[float, ...]) -> None:
        super().__init__(f"{len(roots)} root(s) computed")
        self.roots = roots

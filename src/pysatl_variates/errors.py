"""
Error Taxonomy
==============

Exceptions raised by generators, samplers and parametrizations.

All validation errors are raised before any entropy is consumed. The classes
also derive from the matching builtin (``ValueError`` / ``RuntimeError``) so
that callers catching the builtins keep working.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class VariateError(Exception):
    """Base class for all errors raised by pysatl_variates."""


class InvalidParameter(VariateError, ValueError):
    """A distribution parameter violates its documented domain."""


class InvalidRange(InvalidParameter):
    """Bounds of a uniform draw are reversed (``high < low``)."""


class InvalidLength(VariateError, ValueError):
    """Requested sample length is negative or exceeds the source length."""


class EmptySource(VariateError, ValueError):
    """Sampling was requested from an empty source sequence."""


class SamplingExhausted(VariateError, RuntimeError):
    """
    A rejection-sampling loop exceeded its retry cap.

    Parameters
    ----------
    distribution : str
        Name of the distribution being sampled.
    iterations : int
        Number of proposals drawn before giving up.
    """

    def __init__(self, distribution: str, iterations: int) -> None:
        super().__init__(
            f"{distribution} rejection sampler gave up after {iterations} proposals; "
            "parameters may yield a near-zero acceptance probability"
        )
        self.distribution = distribution
        self.iterations = iterations


__all__ = [
    "VariateError",
    "InvalidParameter",
    "InvalidRange",
    "InvalidLength",
    "EmptySource",
    "SamplingExhausted",
]

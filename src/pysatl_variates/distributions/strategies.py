"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its default
implementation:

- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`GeneratorSamplingStrategy`: delegates to a bulk generator from
  :mod:`pysatl_variates.generators` and packs the result into an
  :class:`~pysatl_variates.distributions.sampling.ArraySample`.

Notes
-----
- Strategies are stateless; all randomness comes from the ``source`` option
  (or the calling thread's default source).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol

from pysatl_variates.errors import InvalidLength
from pysatl_variates.types import EuclideanDistributionType

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

type BulkGenerator = Callable[..., Sequence[float] | Sequence[int]]


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class GeneratorSamplingStrategy(SamplingStrategy):
    """
    Sampling strategy backed by a bulk variate generator.

    The generator is called as ``bulk(*base_parameters, n, **options)``,
    where the base parameters are passed positionally in declaration order.

    Parameters
    ----------
    bulk : Callable
        Bulk generator such as :func:`pysatl_variates.generators.normal_sample`.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``; integer-valued for discrete
        distributions.
    """

    def __init__(self, bulk: BulkGenerator) -> None:
        self.bulk = bulk

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        """
        Generate a sample of ``n`` variates.

        Parameters
        ----------
        n : int
            Number of observations to draw.
        distr : Distribution
            The distribution to sample from.
        **options : Any
            Forwarded to the generator, e.g. ``source`` or ``max_iterations``.

        Raises
        ------
        InvalidLength
            If ``n`` is negative.
        """
        if n < 0:
            raise InvalidLength(f"Number of samples must be non-negative, got {n}")

        values = self.bulk(*distr.base_parameters.values(), n, **options)

        distr_type = distr.distribution_type
        dtype = distr_type.dtype if isinstance(distr_type, EuclideanDistributionType) else float
        return ArraySample.from_values(values, dtype=dtype)

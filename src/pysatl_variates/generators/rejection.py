"""
Continuous Generators (rejection-based)
=======================================

Accept/reject samplers for the Beta and Gamma distributions.

Both loops are capped: a single variate may draw at most ``max_iterations``
proposals (default taken from :func:`pysatl_variates.config.get_config`)
before :class:`~pysatl_variates.errors.SamplingExhausted` is raised.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from pysatl_variates.errors import SamplingExhausted
from pysatl_variates.random import resolve_source

from ._validation import require, require_finite, require_length, resolve_max_iterations
from .continuous import _exponential, _open_unit, _pow

if TYPE_CHECKING:
    from pysatl_variates.random import UniformSource

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Gamma
# ---------------------------------------------------------------------------


def _check_gamma(shape: float, rate: float) -> None:
    require(shape > 0, "shape > 0")
    require_finite(shape, "shape")
    require(rate > 0, "rate > 0")
    require_finite(rate, "rate")


def _gamma_acceptance(shape: float, x: float) -> float:
    """Density ratio of the target to the exponential envelope, scaled to ``(0, 1]``."""
    if shape == 1:
        return 1.0
    if x == 0:
        return 0.0
    return math.exp((shape - 1) * (math.log(x) + 1 - x))


def _gamma(shape: float, rate: float, max_iterations: int, rng: UniformSource) -> float:
    if shape < 1:
        # Gamma(shape) = Gamma(shape + 1) * U^(1/shape)
        boosted = _gamma(shape + 1, rate, max_iterations, rng)
        return boosted * _pow(_open_unit(rng), 1.0 / shape)

    lam = rate / shape
    for attempt in range(1, max_iterations + 1):
        u = rng.uniform_double(0.0, 1.0)
        temp = _exponential(lam, rng)
        if _gamma_acceptance(shape, lam * temp) >= u:
            logger.debug("Gamma(%s, %s) accepted after %d proposals", shape, rate, attempt)
            return temp
    raise SamplingExhausted("Gamma", max_iterations)


def gamma(
    shape: float,
    rate: float,
    *,
    max_iterations: int | None = None,
    source: UniformSource | None = None,
) -> float:
    """
    Draw a Gamma variate by rejection against an exponential envelope.

    The envelope is ``Exponential(lambda)`` with ``lambda = rate / shape``,
    which has the same mean as the target. A proposal ``temp`` is accepted
    when ``(lambda*temp)^(shape-1) * exp((shape-1)(1 - lambda*temp)) >= U``.
    Shapes below 1 are reduced to ``shape + 1`` and scaled by
    ``U^(1/shape)``.

    Parameters
    ----------
    shape : float
        Shape, ``shape > 0``.
    rate : float
        Rate, ``rate > 0``.
    max_iterations : int, optional
        Proposal cap per variate. Defaults to the configured value.
    source : UniformSource, optional
        Source of uniform randomness.

    Raises
    ------
    InvalidParameter
        If ``shape <= 0`` or ``rate <= 0``.
    SamplingExhausted
        If no proposal is accepted within ``max_iterations``.
    """
    _check_gamma(shape, rate)
    cap = resolve_max_iterations(max_iterations)
    return _gamma(shape, rate, cap, resolve_source(source))


def gamma_sample(
    shape: float,
    rate: float,
    n: int,
    *,
    max_iterations: int | None = None,
    source: UniformSource | None = None,
) -> list[float]:
    """Draw ``n`` independent Gamma variates."""
    _check_gamma(shape, rate)
    n = require_length(n)
    cap = resolve_max_iterations(max_iterations)
    rng = resolve_source(source)
    return [_gamma(shape, rate, cap, rng) for _ in range(n)]


# ---------------------------------------------------------------------------
# Beta
# ---------------------------------------------------------------------------


def _check_beta(shape1: float, shape2: float) -> None:
    require(shape1 > 0, "shape1 > 0")
    require_finite(shape1, "shape1")
    require(shape2 > 0, "shape2 > 0")
    require_finite(shape2, "shape2")


def beta_envelope_bound(shape1: float, shape2: float) -> float:
    """
    Height of the unnormalized Beta density at its mode.

    ``((a-1)/(a+b-2))^(a-1) * ((b-1)/(a+b-2))^(b-1)``; only meaningful for
    ``shape1 > 1`` and ``shape2 > 1``.
    """
    total = shape1 + shape2 - 2
    return _pow((shape1 - 1) / total, shape1 - 1) * _pow((shape2 - 1) / total, shape2 - 1)


def _beta_envelope(shape1: float, shape2: float, max_iterations: int, rng: UniformSource) -> float:
    mode = (shape1 - 1) / (shape1 + shape2 - 2)
    for attempt in range(1, max_iterations + 1):
        u1 = rng.uniform_double(0.0, 1.0)
        u2 = rng.uniform_double(0.0, 1.0)
        if u1 == 0:
            continue
        # density(u1) / bound, evaluated in log space so large shapes do not underflow
        log_ratio = (shape1 - 1) * math.log(u1 / mode) + (shape2 - 1) * math.log(
            (1 - u1) / (1 - mode)
        )
        if u2 <= math.exp(log_ratio):
            logger.debug("Beta(%s, %s) accepted after %d proposals", shape1, shape2, attempt)
            return u1
    raise SamplingExhausted("Beta", max_iterations)


def _beta_from_gammas(
    shape1: float, shape2: float, max_iterations: int, rng: UniformSource
) -> float:
    for _ in range(max_iterations):
        g1 = _gamma(shape1, 1.0, max_iterations, rng)
        g2 = _gamma(shape2, 1.0, max_iterations, rng)
        total = g1 + g2
        # both draws may underflow to zero for tiny shapes
        if total > 0:
            return g1 / total
    raise SamplingExhausted("Beta", max_iterations)


def _beta(shape1: float, shape2: float, max_iterations: int, rng: UniformSource) -> float:
    if shape1 > 1 and shape2 > 1:
        return _beta_envelope(shape1, shape2, max_iterations, rng)
    return _beta_from_gammas(shape1, shape2, max_iterations, rng)


def beta(
    shape1: float,
    shape2: float,
    *,
    max_iterations: int | None = None,
    source: UniformSource | None = None,
) -> float:
    """
    Draw a Beta variate.

    For ``shape1 > 1`` and ``shape2 > 1`` the density is bounded by its mode
    height (:func:`beta_envelope_bound`) and a uniform proposal ``u1`` is
    accepted when ``U * bound`` falls under
    ``u1^(shape1-1) * (1-u1)^(shape2-1)``. Otherwise the density is
    unbounded at an endpoint and the variate is built as
    ``G1 / (G1 + G2)`` from two Gamma variates.

    Raises
    ------
    InvalidParameter
        If ``shape1 <= 0`` or ``shape2 <= 0``.
    SamplingExhausted
        If no proposal is accepted within ``max_iterations``.
    """
    _check_beta(shape1, shape2)
    cap = resolve_max_iterations(max_iterations)
    return _beta(shape1, shape2, cap, resolve_source(source))


def beta_sample(
    shape1: float,
    shape2: float,
    n: int,
    *,
    max_iterations: int | None = None,
    source: UniformSource | None = None,
) -> list[float]:
    """Draw ``n`` independent Beta variates."""
    _check_beta(shape1, shape2)
    n = require_length(n)
    cap = resolve_max_iterations(max_iterations)
    rng = resolve_source(source)
    return [_beta(shape1, shape2, cap, rng) for _ in range(n)]


__all__ = [
    "beta",
    "beta_envelope_bound",
    "beta_sample",
    "gamma",
    "gamma_sample",
]

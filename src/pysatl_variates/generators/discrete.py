"""
Discrete Generators
===================

Integer-valued variates built on a :class:`~pysatl_variates.random.UniformSource`:

- :func:`bernoulli`, :func:`binomial_sample`, :func:`coin_toss`: Bernoulli trials;
- :func:`discrete_uniform`: integers from a closed interval;
- :func:`geometric`: trials to first success (inverse transform);
- :func:`poisson`: cumulative PMF walk (Knuth).

Every public function validates its parameters before drawing and accepts an
optional keyword ``source``; the calling thread's default source is used when
it is omitted.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import numbers
import warnings
from typing import TYPE_CHECKING

from pysatl_variates.config import get_config
from pysatl_variates.random import resolve_source

from ._validation import require, require_finite, require_length

if TYPE_CHECKING:
    from pysatl_variates.random import UniformSource

# exp(-lam) underflows to zero near lam ~ 745; larger rates are split into
# independent chunks whose counts add up to a Poisson(lam) count.
_POISSON_CHUNK = 500.0


class PoissonPerformanceWarning(UserWarning):
    """The Poisson walk is linear in the rate and gets slow for large rates."""


# ---------------------------------------------------------------------------
# Bernoulli trials
# ---------------------------------------------------------------------------


def _check_probability(p: float) -> None:
    require(0.0 <= p <= 1.0, "p in [0, 1]")


def bernoulli(p: float, *, source: UniformSource | None = None) -> int:
    """
    Perform a single Bernoulli trial.

    Parameters
    ----------
    p : float
        Probability of success, in ``[0, 1]``.
    source : UniformSource, optional
        Source of uniform randomness.

    Returns
    -------
    int
        ``1`` on success, ``0`` on failure.

    Raises
    ------
    InvalidParameter
        If ``p`` lies outside ``[0, 1]``.
    """
    _check_probability(p)
    return 1 if resolve_source(source).uniform_double(0.0, 1.0) < p else 0


def binomial_sample(p: float, n: int, *, source: UniformSource | None = None) -> list[int]:
    """
    Perform ``n`` independent Bernoulli trials with success probability ``p``.

    Returns
    -------
    list[int]
        Sequence of ``1`` (success) and ``0`` (failure) of length ``n``.

    Raises
    ------
    InvalidParameter
        If ``p`` lies outside ``[0, 1]``.
    InvalidLength
        If ``n < 0``.
    """
    _check_probability(p)
    n = require_length(n)
    rng = resolve_source(source)
    return [1 if rng.uniform_double(0.0, 1.0) < p else 0 for _ in range(n)]


def coin_toss(n: int, *, source: UniformSource | None = None) -> list[int]:
    """Simulate ``n`` tosses of a fair coin (1 for heads, 0 for tails)."""
    return binomial_sample(0.5, n, source=source)


# ---------------------------------------------------------------------------
# Discrete uniform
# ---------------------------------------------------------------------------


def _is_integral(value: float) -> bool:
    return isinstance(value, numbers.Integral) or (isinstance(value, float) and value.is_integer())


def _check_bounds(min_: int, max_: int) -> tuple[int, int]:
    require(_is_integral(min_) and _is_integral(max_), "min_ and max_ are integers")
    require(max_ >= min_, "max_ >= min_")
    return int(min_), int(max_)


def discrete_uniform(min_: int, max_: int, *, source: UniformSource | None = None) -> int:
    """
    Draw an integer uniformly from ``[min_, max_]`` (both inclusive).

    Raises
    ------
    InvalidParameter
        If ``max_ < min_``.
    """
    min_, max_ = _check_bounds(min_, max_)
    return resolve_source(source).uniform_int(min_, max_)


def discrete_uniform_sample(
    min_: int, max_: int, n: int, *, source: UniformSource | None = None
) -> list[int]:
    """Draw ``n`` independent integers uniformly from ``[min_, max_]``."""
    min_, max_ = _check_bounds(min_, max_)
    n = require_length(n)
    rng = resolve_source(source)
    return [rng.uniform_int(min_, max_) for _ in range(n)]


# ---------------------------------------------------------------------------
# Geometric
# ---------------------------------------------------------------------------


def _check_geometric(p: float) -> None:
    require(0.0 < p < 1.0, "p in (0, 1)")


def _geometric(p: float, rng: UniformSource) -> int:
    # 1 - U lies in (0, 1], keeping the logarithm finite
    u = 1.0 - rng.uniform_double(0.0, 1.0)
    trials = math.ceil(math.log(u) / math.log1p(-p))
    return max(1, int(trials))


def geometric(p: float, *, source: UniformSource | None = None) -> int:
    """
    Draw the number of Bernoulli trials needed to get the first success.

    Uses inverse transform sampling: ``ceil(ln(U) / ln(1 - p))``.

    Parameters
    ----------
    p : float
        Probability of success, in the open interval ``(0, 1)``.

    Returns
    -------
    int
        Number of trials, at least 1.

    Raises
    ------
    InvalidParameter
        If ``p`` is not in ``(0, 1)``. At ``p = 1`` the denominator
        ``ln(1 - p)`` is undefined.
    """
    _check_geometric(p)
    return _geometric(p, resolve_source(source))


def geometric_sample(p: float, n: int, *, source: UniformSource | None = None) -> list[int]:
    """Draw ``n`` independent geometric variates."""
    _check_geometric(p)
    n = require_length(n)
    rng = resolve_source(source)
    return [_geometric(p, rng) for _ in range(n)]


# ---------------------------------------------------------------------------
# Poisson
# ---------------------------------------------------------------------------


def _check_poisson(lam: float) -> None:
    require(lam > 0, "lam > 0")
    require_finite(lam, "lam")
    threshold = get_config().poisson_warning_threshold
    if lam > threshold:
        warnings.warn(
            f"Poisson rate {lam} exceeds {threshold}; the cumulative PMF walk "
            "takes O(lam) steps per variate.",
            PoissonPerformanceWarning,
            stacklevel=3,
        )


def _poisson_walk(lam: float, rng: UniformSource) -> int:
    k = 0
    prob = math.exp(-lam)
    cdf = prob
    u = rng.uniform_double(0.0, 1.0)
    while u > cdf:
        k += 1
        prob *= lam / k
        if prob == 0.0:
            # cdf has saturated below u through rounding
            break
        cdf += prob
    return k


def _poisson(lam: float, rng: UniformSource) -> int:
    count = 0
    while lam > _POISSON_CHUNK:
        count += _poisson_walk(_POISSON_CHUNK, rng)
        lam -= _POISSON_CHUNK
    return count + _poisson_walk(lam, rng)


def poisson(lam: float, *, source: UniformSource | None = None) -> int:
    """
    Draw a Poisson variate by walking the cumulative PMF.

    A uniform ``U`` is drawn and the terms ``P(0) = e^-lam``,
    ``P(k) = P(k - 1) * lam / k`` are accumulated until the cumulative
    probability reaches ``U``.

    Parameters
    ----------
    lam : float
        Rate of the distribution, ``lam > 0``.

    Returns
    -------
    int
        Non-negative count.

    Raises
    ------
    InvalidParameter
        If ``lam <= 0`` or is not finite.

    Notes
    -----
    The expected number of steps grows linearly with ``lam``. This is a
    performance caveat only; a :class:`PoissonPerformanceWarning` is issued
    when ``lam`` exceeds the configured threshold.
    """
    _check_poisson(lam)
    return _poisson(lam, resolve_source(source))


def poisson_sample(lam: float, n: int, *, source: UniformSource | None = None) -> list[int]:
    """Draw ``n`` independent Poisson variates."""
    _check_poisson(lam)
    n = require_length(n)
    rng = resolve_source(source)
    return [_poisson(lam, rng) for _ in range(n)]


__all__ = [
    "PoissonPerformanceWarning",
    "bernoulli",
    "binomial_sample",
    "coin_toss",
    "discrete_uniform",
    "discrete_uniform_sample",
    "geometric",
    "geometric_sample",
    "poisson",
    "poisson_sample",
]

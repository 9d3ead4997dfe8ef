"""
Continuous Generators (transform-based)
=======================================

Closed-form transforms of uniform variates:

- :func:`continuous_uniform`: thin wrapper over the uniform source;
- :func:`exponential`, :func:`pareto`, :func:`weibull`: inverse transform;
- :func:`normal`, :func:`normal_sample`: Box-Muller transform;
- :func:`log_normal`: exponentiated normal;
- :func:`stable`: Chambers-Mallows-Stuck method.

Notes
-----
- Uniform draws feeding a logarithm or a negative power use ``1 - U`` so the
  argument lies in ``(0, 1]``.
- Powers are evaluated in IEEE arithmetic: heavy tails overflow to ``inf``
  instead of raising ``OverflowError``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.random import resolve_source

from ._validation import require, require_finite, require_length

if TYPE_CHECKING:
    from pysatl_variates.random import UniformSource

_HALF_PI = math.pi / 2
_TWO_OVER_PI = 2 / math.pi


def _pow(base: float, exponent: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(base), exponent))


def _exp(x: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.exp(np.float64(x)))


def _open_unit(rng: UniformSource) -> float:
    """Uniform variate on ``(0, 1]``."""
    return 1.0 - rng.uniform_double(0.0, 1.0)


# ---------------------------------------------------------------------------
# Uniform
# ---------------------------------------------------------------------------


def _check_uniform(min_: float, max_: float) -> None:
    require_finite(min_, "min_")
    require_finite(max_, "max_")
    require(max_ >= min_, "max_ >= min_")


def continuous_uniform(min_: float, max_: float, *, source: UniformSource | None = None) -> float:
    """
    Draw a float uniformly from ``[min_, max_)``.

    ``continuous_uniform(a, a)`` returns ``a``.

    Raises
    ------
    InvalidParameter
        If ``max_ < min_`` or a bound is not finite.
    """
    _check_uniform(min_, max_)
    return resolve_source(source).uniform_double(min_, max_)


def continuous_uniform_sample(
    min_: float, max_: float, n: int, *, source: UniformSource | None = None
) -> list[float]:
    """Draw ``n`` independent floats uniformly from ``[min_, max_)``."""
    _check_uniform(min_, max_)
    n = require_length(n)
    rng = resolve_source(source)
    return [rng.uniform_double(min_, max_) for _ in range(n)]


# ---------------------------------------------------------------------------
# Exponential
# ---------------------------------------------------------------------------


def _check_rate(rate: float) -> None:
    require(rate > 0, "rate > 0")
    require_finite(rate, "rate")


def _exponential(rate: float, rng: UniformSource) -> float:
    return -math.log(_open_unit(rng)) / rate


def exponential(rate: float, *, source: UniformSource | None = None) -> float:
    """
    Draw an exponential variate by inverse transform: ``-ln(U) / rate``.

    Parameters
    ----------
    rate : float
        Rate parameter, ``rate > 0``.

    Returns
    -------
    float
        Non-negative variate.

    Raises
    ------
    InvalidParameter
        If ``rate <= 0`` or is not finite.
    """
    _check_rate(rate)
    return _exponential(rate, resolve_source(source))


def exponential_sample(
    rate: float, n: int, *, source: UniformSource | None = None
) -> list[float]:
    """Draw ``n`` independent exponential variates."""
    _check_rate(rate)
    n = require_length(n)
    rng = resolve_source(source)
    return [_exponential(rate, rng) for _ in range(n)]


# ---------------------------------------------------------------------------
# Normal and log-normal
# ---------------------------------------------------------------------------


def _check_normal(mean: float, std: float) -> None:
    require_finite(mean, "mean")
    require(std > 0, "std > 0")
    require_finite(std, "std")


def _box_muller(rng: UniformSource) -> tuple[float, float]:
    """Return ``(r, theta)`` for one pair of uniforms."""
    r = math.sqrt(-2.0 * math.log(_open_unit(rng)))
    theta = 2.0 * math.pi * rng.uniform_double(0.0, 1.0)
    return r, theta


def _normal(mean: float, std: float, rng: UniformSource) -> float:
    r, theta = _box_muller(rng)
    return std * r * math.cos(theta) + mean


def _normal_sample(mean: float, std: float, n: int, rng: UniformSource) -> list[float]:
    result: list[float] = []
    for _ in range(n // 2):
        r, theta = _box_muller(rng)
        result.append(std * r * math.cos(theta) + mean)
        result.append(std * r * math.sin(theta) + mean)
    if n % 2 == 1:
        result.append(_normal(mean, std, rng))
    return result


def normal(mean: float, std: float, *, source: UniformSource | None = None) -> float:
    """
    Draw a normal variate with the Box-Muller transform.

    Parameters
    ----------
    mean : float
        Mean of the distribution.
    std : float
        Standard deviation, ``std > 0``.

    Raises
    ------
    InvalidParameter
        If ``std <= 0`` or a parameter is not finite.
    """
    _check_normal(mean, std)
    return _normal(mean, std, resolve_source(source))


def normal_sample(
    mean: float, std: float, n: int, *, source: UniformSource | None = None
) -> list[float]:
    """
    Draw ``n`` independent normal variates.

    Each uniform pair yields two variates, ``r*cos(theta)`` followed by
    ``r*sin(theta)``, which halves the number of logarithm and square-root
    evaluations. For odd ``n`` the final slot is filled by :func:`normal`.

    Raises
    ------
    InvalidParameter
        If ``std <= 0`` or a parameter is not finite.
    InvalidLength
        If ``n < 0``.
    """
    _check_normal(mean, std)
    n = require_length(n)
    return _normal_sample(mean, std, n, resolve_source(source))


def _check_log_normal(location: float, shape: float) -> None:
    require_finite(location, "location")
    require(shape > 0, "shape > 0")
    require_finite(shape, "shape")


def log_normal(location: float, shape: float, *, source: UniformSource | None = None) -> float:
    """
    Draw a log-normal variate as ``exp(normal(location, shape))``.

    Raises
    ------
    InvalidParameter
        If ``shape <= 0`` or a parameter is not finite.
    """
    _check_log_normal(location, shape)
    return _exp(_normal(location, shape, resolve_source(source)))


def log_normal_sample(
    location: float, shape: float, n: int, *, source: UniformSource | None = None
) -> list[float]:
    """Draw ``n`` log-normal variates by exponentiating :func:`normal_sample`."""
    _check_log_normal(location, shape)
    n = require_length(n)
    return [_exp(x) for x in _normal_sample(location, shape, n, resolve_source(source))]


# ---------------------------------------------------------------------------
# Pareto and Weibull
# ---------------------------------------------------------------------------


def _check_scale_shape(scale: float, shape: float) -> None:
    require(scale > 0, "scale > 0")
    require_finite(scale, "scale")
    require(shape > 0, "shape > 0")
    require_finite(shape, "shape")


def _pareto(scale: float, shape: float, rng: UniformSource) -> float:
    return scale * _pow(_open_unit(rng), -1.0 / shape)


def pareto(scale: float, shape: float, *, source: UniformSource | None = None) -> float:
    """
    Draw a Pareto variate: ``scale * U^(-1/shape)``.

    Returns
    -------
    float
        Variate ``>= scale``.

    Raises
    ------
    InvalidParameter
        If ``scale <= 0`` or ``shape <= 0``.
    """
    _check_scale_shape(scale, shape)
    return _pareto(scale, shape, resolve_source(source))


def pareto_sample(
    scale: float, shape: float, n: int, *, source: UniformSource | None = None
) -> list[float]:
    """Draw ``n`` independent Pareto variates."""
    _check_scale_shape(scale, shape)
    n = require_length(n)
    rng = resolve_source(source)
    return [_pareto(scale, shape, rng) for _ in range(n)]


def _weibull(scale: float, shape: float, rng: UniformSource) -> float:
    return _pow(-math.log(_open_unit(rng)), 1.0 / shape) / scale


def weibull(scale: float, shape: float, *, source: UniformSource | None = None) -> float:
    """
    Draw a Weibull variate: ``(1/scale) * (-ln(U))^(1/shape)``.

    Here ``scale`` acts as an inverse scale (a rate), matching the transform.

    Raises
    ------
    InvalidParameter
        If ``scale <= 0`` or ``shape <= 0``.
    """
    _check_scale_shape(scale, shape)
    return _weibull(scale, shape, resolve_source(source))


def weibull_sample(
    scale: float, shape: float, n: int, *, source: UniformSource | None = None
) -> list[float]:
    """Draw ``n`` independent Weibull variates."""
    _check_scale_shape(scale, shape)
    n = require_length(n)
    rng = resolve_source(source)
    return [_weibull(scale, shape, rng) for _ in range(n)]


# ---------------------------------------------------------------------------
# Stable
# ---------------------------------------------------------------------------


def _check_stable(stability: float, skewness: float, scale: float, location: float) -> None:
    require(0 < stability <= 2, "stability in (0, 2]")
    require(-1 <= skewness <= 1, "skewness in [-1, 1]")
    require(scale > 0, "scale > 0")
    require_finite(scale, "scale")
    require_finite(location, "location")


def _stable_constants(stability: float, skewness: float, scale: float) -> tuple[float, float]:
    """Return the shift ``c`` and the factor ``d`` used when ``stability != 1``."""
    zeta = math.atan(skewness * math.tan(_HALF_PI * stability))
    c = zeta / stability
    d = scale * _pow(math.cos(zeta), -1.0 / stability)
    return c, d


def _stable(
    stability: float,
    skewness: float,
    scale: float,
    location: float,
    constants: tuple[float, float] | None,
    rng: UniformSource,
) -> float:
    v = rng.uniform_double(-_HALF_PI, _HALF_PI)
    w = _exponential(1.0, rng)

    with np.errstate(all="ignore"):
        if constants is not None:
            c, d = constants
            head = d * np.sin(stability * (v + c)) / np.power(np.cos(v), 1.0 / stability)
            tail = np.power(
                np.cos(v - stability * (v + c)) / np.float64(w), (1.0 - stability) / stability
            )
            return float(head * tail + location)

        shift = location + _TWO_OVER_PI * skewness * scale * math.log(scale)
        slope = _HALF_PI + skewness * v
        b = np.log((_HALF_PI * w * np.cos(v)) / slope)
        return float(scale * _TWO_OVER_PI * (slope * np.tan(v) - skewness * b) + shift)


def stable(
    stability: float,
    skewness: float,
    scale: float,
    location: float,
    *,
    source: UniformSource | None = None,
) -> float:
    """
    Draw a stable variate with the Chambers-Mallows-Stuck method.

    Parameters
    ----------
    stability : float
        Stability index, in ``(0, 2]``.
    skewness : float
        Skewness, in ``[-1, 1]``.
    scale : float
        Scale, ``scale > 0``.
    location : float
        Location.

    Returns
    -------
    float
        The variate. May be ``inf`` or ``nan`` for very small ``stability``
        because of the distribution's extremely heavy tails.

    Raises
    ------
    InvalidParameter
        If a parameter is outside its domain.
    """
    _check_stable(stability, skewness, scale, location)
    constants = None if stability == 1 else _stable_constants(stability, skewness, scale)
    return _stable(stability, skewness, scale, location, constants, resolve_source(source))


def stable_sample(
    stability: float,
    skewness: float,
    scale: float,
    location: float,
    n: int,
    *,
    source: UniformSource | None = None,
) -> list[float]:
    """Draw ``n`` independent stable variates, computing the CMS constants once."""
    _check_stable(stability, skewness, scale, location)
    n = require_length(n)
    constants = None if stability == 1 else _stable_constants(stability, skewness, scale)
    rng = resolve_source(source)
    return [_stable(stability, skewness, scale, location, constants, rng) for _ in range(n)]


__all__ = [
    "continuous_uniform",
    "continuous_uniform_sample",
    "exponential",
    "exponential_sample",
    "normal",
    "normal_sample",
    "log_normal",
    "log_normal_sample",
    "pareto",
    "pareto_sample",
    "weibull",
    "weibull_sample",
    "stable",
    "stable_sample",
]

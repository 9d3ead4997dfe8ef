"""
Uniform Sources
===============

This module defines the single capability every generator is built on:

- :class:`UniformSource`: protocol with ``uniform_int`` / ``uniform_double``.
- :class:`NumpyUniformSource`: default implementation backed by
  :func:`numpy.random.default_rng`.
- :func:`default_source`: per-thread default instance.

Notes
-----
- Sources are not thread-safe. The default source is kept in thread-local
  storage so concurrent callers never share a generator.
- A source built without a seed draws from OS entropy and is not
  reproducible; pass an integer seed for deterministic streams.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import threading
from typing import Protocol, runtime_checkable

import numpy as np

from pysatl_variates.errors import InvalidParameter, InvalidRange

logger = logging.getLogger(__name__)


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for uniform randomness providers."""

    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from the closed interval ``[low, high]``."""
        ...

    def uniform_double(self, low: float, high: float) -> float:
        """Return a float drawn uniformly from ``[low, high)``."""
        ...


class NumpyUniformSource:
    """
    Uniform source backed by a NumPy ``Generator``.

    Parameters
    ----------
    seed : int or None, default None
        Seed for :func:`numpy.random.default_rng`. ``None`` uses fresh OS
        entropy.

    Notes
    -----
    Integer draws go through ``Generator.integers(..., endpoint=True)``,
    which uses bounded rejection and therefore has no modulo bias.
    """

    __slots__ = ("_rng", "seed")

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform_int(self, low: int, high: int) -> int:
        """
        Draw an integer uniformly from ``[low, high]``.

        Raises
        ------
        InvalidRange
            If ``high < low``.
        """
        if high < low:
            raise InvalidRange(f"Constraint \"high >= low\" does not hold: [{low}, {high}]")
        if low == high:
            return int(low)
        return int(self._rng.integers(low, high, endpoint=True))

    def uniform_double(self, low: float, high: float) -> float:
        """
        Draw a float uniformly from ``[low, high)``.

        A degenerate interval ``low == high`` returns ``low``.

        Raises
        ------
        InvalidRange
            If ``high < low``.
        InvalidParameter
            If a bound is not finite.
        """
        if not (math.isfinite(low) and math.isfinite(high)):
            raise InvalidParameter(f"Uniform bounds must be finite, got [{low}, {high})")
        if high < low:
            raise InvalidRange(f"Constraint \"high >= low\" does not hold: [{low}, {high})")
        if low == high:
            return float(low)
        value = float(self._rng.uniform(low, high))
        # low + (high - low) * u may round up to high
        if value >= high:
            value = float(np.nextafter(high, low))
        return value


_local = threading.local()


def default_source() -> UniformSource:
    """
    Return the calling thread's default uniform source.

    The instance is created lazily on first use and seeded from OS entropy.
    """
    source: UniformSource | None = getattr(_local, "source", None)
    if source is None:
        source = NumpyUniformSource()
        _local.source = source
        logger.debug("Created default uniform source for thread %s", threading.get_ident())
    return source


def set_default_source(source: UniformSource | None) -> None:
    """
    Replace the calling thread's default source.

    Parameters
    ----------
    source : UniformSource or None
        New default. ``None`` discards the current instance so a fresh
        entropy-seeded one is created on next use.
    """
    _local.source = source


def resolve_source(source: UniformSource | None) -> UniformSource:
    """Return ``source`` or the thread default when it is ``None``."""
    return default_source() if source is None else source

"""
Array Sampling
==============

Randomized subsets and orderings of arbitrary finite sequences:

- :func:`sample_with_replacement`: independent uniform indices;
- :func:`sample_without_replacement`: partial Fisher-Yates shuffle;
- :func:`sample_with_probabilities`: cumulative-weight search over a
  probability vector that must sum to 1;
- :func:`sample_with_weights`: the same search over unnormalized weights.

Notes
-----
- The caller's sequence is never mutated.
- The weighted search is a linear scan by default (``O(k)`` per draw).
  ``search="bisect"`` builds the cumulative array once and binary-searches
  it (``O(log k)`` per draw) with an identical output distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import bisect
import math
from itertools import accumulate
from typing import TYPE_CHECKING, Literal

from pysatl_variates.config import get_config
from pysatl_variates.errors import InvalidLength
from pysatl_variates.random import resolve_source

from ._validation import require, require_items, require_length
from .discrete import discrete_uniform

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_variates.random import UniformSource

type SearchMethod = Literal["scan", "bisect"]


def sample_with_replacement[T](
    items: Sequence[T], n: int, *, source: UniformSource | None = None
) -> list[T]:
    """
    Draw ``n`` elements from ``items`` uniformly and independently.

    Parameters
    ----------
    items : Sequence
        Non-empty source sequence of any element type.
    n : int
        Sample length, ``n >= 0``.

    Returns
    -------
    list
        ``n`` elements copied from ``items``; empty when ``n == 0``.

    Raises
    ------
    EmptySource
        If ``items`` is empty.
    InvalidLength
        If ``n < 0``.
    """
    size = require_items(items)
    n = require_length(n)
    rng = resolve_source(source)
    return [items[discrete_uniform(0, size - 1, source=rng)] for _ in range(n)]


def sample_without_replacement[T](
    items: Sequence[T], n: int, *, source: UniformSource | None = None
) -> list[T]:
    """
    Draw ``n`` distinct positions of ``items`` in random order.

    Runs the Fisher-Yates shuffle on a copy of ``items``: at step ``i`` an
    index ``k`` is drawn uniformly from ``[i, len(items) - 1]`` and positions
    ``i`` and ``k`` are swapped. Only the first ``n`` steps are needed to fix
    the returned prefix, so the shuffle stops there.

    Every ordered ``n``-subset of positions is equally likely, and no source
    position appears twice in the output.

    Raises
    ------
    EmptySource
        If ``items`` is empty.
    InvalidLength
        If ``n < 0`` or ``n > len(items)``.
    """
    size = require_items(items)
    n = require_length(n)
    if n > size:
        raise InvalidLength(
            f"Cannot draw {n} elements without replacement from a sequence of {size}"
        )
    rng = resolve_source(source)
    pool = list(items)
    for i in range(min(n, size - 1)):
        k = discrete_uniform(i, size - 1, source=rng)
        pool[i], pool[k] = pool[k], pool[i]
    return pool[:n]


def _check_weights(items: Sequence[object], weights: Sequence[float]) -> list[float]:
    require_items(items)
    require(len(weights) == len(items), "len(weights) == len(items)")
    values = [float(w) for w in weights]
    require(all(math.isfinite(w) and w >= 0 for w in values), "weights >= 0 and finite")
    return values


def _draw_weighted[T](
    items: Sequence[T],
    weights: list[float],
    n: int,
    search: SearchMethod,
    rng: UniformSource,
) -> list[T]:
    cumulative = list(accumulate(weights))
    total = cumulative[-1]
    last = len(weights) - 1

    if search == "bisect":
        return [
            items[min(bisect.bisect_right(cumulative, rng.uniform_double(0.0, total)), last)]
            for _ in range(n)
        ]

    result: list[T] = []
    for _ in range(n):
        r = rng.uniform_double(0.0, total)
        k = 0
        running = weights[0]
        # ">=" skips zero-weight elements sitting on a boundary
        while k < last and r >= running:
            k += 1
            running += weights[k]
        result.append(items[k])
    return result


def _check_search(search: str) -> None:
    require(search in ("scan", "bisect"), "search in {'scan', 'bisect'}")


def sample_with_weights[T](
    items: Sequence[T],
    weights: Sequence[float],
    n: int,
    *,
    search: SearchMethod = "scan",
    source: UniformSource | None = None,
) -> list[T]:
    """
    Draw ``n`` elements with probabilities proportional to ``weights``.

    A uniform ``r`` on ``[0, sum(weights))`` is drawn and the running sum of
    weights is walked until it exceeds ``r``; the element at that index is
    returned. Weights need not sum to 1.

    Parameters
    ----------
    items : Sequence
        Non-empty source sequence.
    weights : Sequence[float]
        One non-negative finite weight per element; at least one positive.
    n : int
        Sample length, ``n >= 0``.
    search : {"scan", "bisect"}, default "scan"
        Linear walk or binary search over the cumulative weights.

    Raises
    ------
    EmptySource
        If ``items`` is empty.
    InvalidParameter
        If lengths differ, a weight is negative or not finite, or all
        weights are zero.
    InvalidLength
        If ``n < 0``.
    """
    values = _check_weights(items, weights)
    require(sum(values) > 0, "sum(weights) > 0")
    _check_search(search)
    n = require_length(n)
    return _draw_weighted(items, values, n, search, resolve_source(source))


def sample_with_probabilities[T](
    items: Sequence[T],
    probabilities: Sequence[float],
    n: int,
    *,
    tolerance: float | None = None,
    search: SearchMethod = "scan",
    source: UniformSource | None = None,
) -> list[T]:
    """
    Draw ``n`` elements according to a probability vector.

    Identical to :func:`sample_with_weights` but ``probabilities`` must sum
    to 1 within ``tolerance``.

    Parameters
    ----------
    tolerance : float, optional
        Allowed absolute deviation of the sum from 1. Defaults to the
        configured ``weight_tolerance`` (``1e-7``).

    Raises
    ------
    InvalidParameter
        If ``abs(sum(probabilities) - 1) > tolerance`` or any of the checks
        of :func:`sample_with_weights` fails.
    """
    values = _check_weights(items, probabilities)
    if tolerance is None:
        tolerance = get_config().weight_tolerance
    require(abs(math.fsum(values) - 1.0) <= tolerance, f"sum(probabilities) == 1 +/- {tolerance}")
    _check_search(search)
    n = require_length(n)
    return _draw_weighted(items, values, n, search, resolve_source(source))


__all__ = [
    "sample_with_replacement",
    "sample_without_replacement",
    "sample_with_weights",
    "sample_with_probabilities",
]

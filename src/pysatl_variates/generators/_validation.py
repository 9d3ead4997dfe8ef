"""
Parameter validation helpers shared by the generators.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import operator
from typing import TYPE_CHECKING

from pysatl_variates.config import get_config
from pysatl_variates.errors import EmptySource, InvalidLength, InvalidParameter

if TYPE_CHECKING:
    from collections.abc import Sized


def require(condition: bool, description: str) -> None:
    """
    Raise :class:`InvalidParameter` unless ``condition`` holds.

    Parameters
    ----------
    condition : bool
        Result of the domain check. NaN comparisons evaluate to ``False`` and
        are therefore rejected.
    description : str
        Human-readable description of the constraint.
    """
    if not condition:
        raise InvalidParameter(f'Constraint "{description}" does not hold')


def require_finite(value: float, name: str) -> None:
    require(math.isfinite(value), f"{name} is finite")


def require_length(n: int) -> int:
    """
    Check that ``n`` is a non-negative integer sample length.

    Raises
    ------
    InvalidLength
        If ``n`` is negative or not an integer.
    """
    try:
        length = operator.index(n)
    except TypeError as exc:
        raise InvalidLength(f"Sample length must be an integer, got {n!r}") from exc
    if length < 0:
        raise InvalidLength(f"Sample length must be non-negative, got {length}")
    return length


def require_items(items: Sized) -> int:
    """Return ``len(items)``, raising :class:`EmptySource` if it is zero."""
    size = len(items)
    if size == 0:
        raise EmptySource("Cannot sample from an empty sequence")
    return size


def resolve_max_iterations(max_iterations: int | None) -> int:
    """Return the per-call cap or the configured default."""
    if max_iterations is None:
        return get_config().max_iterations
    if max_iterations < 1:
        raise InvalidParameter(f"max_iterations must be a positive integer, got {max_iterations}")
    return max_iterations
